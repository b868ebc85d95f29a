from django.urls import path, include
from rest_framework.routers import SimpleRouter

from hris.apps.absences.api.views import AbsenceViewSet

router = SimpleRouter()
router.register(r"", AbsenceViewSet, basename="absence")

urlpatterns = [
    path("", include(router.urls)),
]
