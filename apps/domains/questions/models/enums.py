from django.db import models


class QuestionStatus(models.TextChoices):
    PUBLISHED = "published", "Published"
    PENDING_REVIEW = "pending_review", "Pending review"
    REJECTED = "rejected", "Rejected"
    DUPLICATE = "duplicate", "Duplicate"


class UnderReviewReason(models.TextChoices):
    DUPLICATE = "duplicate", "Possible duplicate"
    NEW_USER = "new_user", "New user"
    NEW_FILTER_OPTION = "new_filter_option", "New filter option"
    MULTIPLE_USER_REPORTS = "multiple_user_reports", "Multiple user reports"
