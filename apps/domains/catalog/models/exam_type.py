from django.db import models

from apps.api.common.models import TimestampModel


class ExamType(TimestampModel):
    name = models.CharField(max_length=255, unique=True)

    class Meta:
        app_label = "catalog"
        ordering = ["name"]

    def __str__(self):
        return self.name
