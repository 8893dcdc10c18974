from django.urls import path

from apps.domains.reports.api.views import QuestionReportView

urlpatterns = [
    path("questions/<int:question_id>/reports/", QuestionReportView.as_view(), name="question-reports"),
]
