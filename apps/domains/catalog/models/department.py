from django.db import models

from apps.api.common.models import TimestampModel


class Department(TimestampModel):
    name = models.CharField(max_length=255, unique=True)
    short_name = models.CharField(max_length=32, unique=True)

    class Meta:
        app_label = "catalog"
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.short_name})"
