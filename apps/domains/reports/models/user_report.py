from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


class UserReportType(models.TextChoices):
    DUPLICATE_ALLOW_REQUEST = "duplicate_allow_request", "Duplicate allow request"
    INAPPROPRIATE_PDF_FOR_COMMUNITY = "inappropriate_pdf_for_community", "Inappropriate PDF for community"
    WRONG_INFO_GIVEN_ABOUT_QUESTION = "wrong_info_given_about_question", "Wrong info given about question"
    OTHER = "other", "Other"


class UserReportQuerySet(models.QuerySet):
    def unreviewed(self):
        return self.filter(reviewed=False)


class UserReport(TimestampModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reports",
    )
    question = models.ForeignKey(
        "questions.Question",
        on_delete=models.CASCADE,
        related_name="reports",
    )
    type = models.CharField(max_length=64, choices=UserReportType.choices)
    details = models.TextField(blank=True, default="")
    reviewed = models.BooleanField(default=False, db_index=True)

    objects = UserReportQuerySet.as_manager()

    class Meta:
        app_label = "reports"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.get_type_display()} #{self.question_id} by {self.user_id}"

    def mark_reviewed(self):
        self.reviewed = True
        self.save(update_fields=["reviewed", "updated_at"])
