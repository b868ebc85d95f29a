from django.urls import path, include
from rest_framework.routers import SimpleRouter

from hris.apps.resume_to_work.api.views import ResumeToWorkViewSet

router = SimpleRouter()
router.register(r"", ResumeToWorkViewSet, basename="resume-to-work")

urlpatterns = [
    path("", include(router.urls)),
]
