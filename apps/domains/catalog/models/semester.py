from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.catalog.services.semester_names import semester_sort_key


class SemesterQuerySet(models.QuerySet):
    def latest_first(self) -> list:
        """
        Most recent first: two-digit year desc, then Spring < Summer < Fall < Short.
        Evaluates the queryset.
        """
        return sorted(self, key=lambda s: semester_sort_key(s.name), reverse=True)


class Semester(TimestampModel):
    name = models.CharField(max_length=255, unique=True)

    objects = SemesterQuerySet.as_manager()

    class Meta:
        app_label = "catalog"
        ordering = ["name"]

    def __str__(self):
        return self.name
