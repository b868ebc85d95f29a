from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from django.views.decorators.cache import cache_page
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),

    # JWT Authentication
    path("api/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    # API Documentation
    path('docs', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
    path('redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
    path('api/schema/', cache_page(60 * 60)(SpectacularAPIView.as_view()), name='schema'),

    # API Endpoints:
    path("api/departments/", include("hris.apps.departments.api.urls")),
    path("api/employees/", include("hris.apps.employees.api.urls")),
    path("api/leaves/", include("hris.apps.leaves.api.urls")),
    path("api/absences/", include("hris.apps.absences.api.urls")),
    path("api/resume-to-work/", include("hris.apps.resume_to_work.api.urls")),
    path("api/notifications/", include("hris.apps.notifications.api.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
