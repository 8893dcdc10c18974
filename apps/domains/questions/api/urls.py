from django.urls import include, path
from rest_framework.routers import DefaultRouter

from apps.domains.questions.api.views import QuestionViewSet, SubmissionViewSet

router = DefaultRouter()
router.register("questions", QuestionViewSet, basename="questions")
router.register("submissions", SubmissionViewSet, basename="submissions")

urlpatterns = [
    path("", include(router.urls)),
]
