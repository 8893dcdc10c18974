from django.db import models

from apps.api.common.models import TimestampModel


class CourseQuerySet(models.QuerySet):
    def active(self):
        """Courses with at least one published question."""
        from apps.domains.questions.models import QuestionStatus

        return self.filter(questions__status=QuestionStatus.PUBLISHED).distinct()


class Course(TimestampModel):
    department = models.ForeignKey(
        "catalog.Department",
        on_delete=models.CASCADE,
        related_name="courses",
    )
    name = models.CharField(max_length=255)

    objects = CourseQuerySet.as_manager()

    class Meta:
        app_label = "catalog"
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["department", "name"],
                name="uniq_course_name_per_department",
            ),
        ]

    def __str__(self):
        return self.name
