from django.db import models
from django.db.models import Max

from apps.api.common.models import TimestampModel
from apps.domains.questions.models.enums import QuestionStatus, UnderReviewReason

QUESTION_FIELDS = ("department_id", "course_id", "semester_id", "exam_type_id")


class QuestionQuerySet(models.QuerySet):
    def published(self):
        return self.filter(status=QuestionStatus.PUBLISHED)

    def filtered(self, *, department_id=None, course_id=None, semester_id=None, exam_type_id=None):
        qs = self
        if department_id:
            qs = qs.filter(department_id=department_id)
        if course_id:
            qs = qs.filter(course_id=course_id)
        if semester_id:
            qs = qs.filter(semester_id=semester_id)
        if exam_type_id:
            qs = qs.filter(exam_type_id=exam_type_id)
        return qs

    def with_relations(self):
        return self.select_related("department", "course", "semester", "exam_type")

    def with_max_views(self):
        return self.annotate(max_views=Max("submissions__views"))


class Question(TimestampModel):
    """
    One exam paper slot: (department, course, semester, exam type).
    Uploaded PDFs hang off it as submissions.
    """

    department = models.ForeignKey(
        "catalog.Department",
        on_delete=models.CASCADE,
        related_name="questions",
    )
    course = models.ForeignKey(
        "catalog.Course",
        on_delete=models.CASCADE,
        related_name="questions",
    )
    semester = models.ForeignKey(
        "catalog.Semester",
        on_delete=models.CASCADE,
        related_name="questions",
    )
    exam_type = models.ForeignKey(
        "catalog.ExamType",
        on_delete=models.CASCADE,
        related_name="questions",
    )

    status = models.CharField(
        max_length=32,
        choices=QuestionStatus.choices,
        default=QuestionStatus.PENDING_REVIEW,
        db_index=True,
    )
    under_review_reason = models.CharField(
        max_length=32,
        choices=UnderReviewReason.choices,
        blank=True,
        null=True,
    )
    duplicate_reason = models.TextField(blank=True, default="")
    rejection_reason = models.TextField(blank=True, default="")

    objects = QuestionQuerySet.as_manager()

    class Meta:
        app_label = "questions"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["department", "course", "semester", "exam_type"],
                name="uniq_question_attributes",
            ),
        ]

    def __str__(self):
        return self.title

    @property
    def title(self) -> str:
        return f"{self.course.name} ({self.department.short_name}) {self.exam_type.name} {self.semester.name}"

    @property
    def is_published(self) -> bool:
        return self.status == QuestionStatus.PUBLISHED

    def attributes(self) -> dict:
        return {field: getattr(self, field) for field in QUESTION_FIELDS}

    def best_submission(self):
        return (
            self.submissions.with_vote_counts()
            .prefetch_related("media")
            .order_by("-score", "created_at", "id")
            .first()
        )

    @property
    def pdf_url(self):
        """pdf_url of the highest scored submission (None without submissions)."""
        submission = self.best_submission()
        return submission.pdf_url if submission else None

    # --------------------------------------------------
    # moderation
    # --------------------------------------------------

    def publish(self):
        self.status = QuestionStatus.PUBLISHED
        self.under_review_reason = None
        self.save(update_fields=["status", "under_review_reason", "updated_at"])

    def reject(self, reason: str = ""):
        self.status = QuestionStatus.REJECTED
        self.under_review_reason = None
        self.rejection_reason = reason or self.rejection_reason
        self.save(update_fields=["status", "under_review_reason", "rejection_reason", "updated_at"])

    def mark_duplicate(self, reason: str = ""):
        self.status = QuestionStatus.DUPLICATE
        self.under_review_reason = None
        self.duplicate_reason = reason or self.duplicate_reason
        self.save(update_fields=["status", "under_review_reason", "duplicate_reason", "updated_at"])

    def send_to_review(self, reason: str):
        self.status = QuestionStatus.PENDING_REVIEW
        self.under_review_reason = reason
        self.save(update_fields=["status", "under_review_reason", "updated_at"])
