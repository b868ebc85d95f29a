from django.urls import path, include
from rest_framework.routers import SimpleRouter

from hris.apps.leaves.api.views import LeaveViewSet

router = SimpleRouter()
router.register(r"", LeaveViewSet, basename="leave")

urlpatterns = [
    path("", include(router.urls)),
]
