# PATH: apps/support/media/models.py
from __future__ import annotations

from datetime import datetime
from pathlib import PurePosixPath

from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.utils import timezone

from apps.api.common.models import TimestampModel
from apps.support.media.disks import get_disk


class MediaFile(TimestampModel):
    """
    A stored file attached to any model through a named collection.

    Originals live at ``<id>/<file_name>``; generated conversions at
    ``<id>/conversions/<stem>-<conversion>.<ext>`` on the same disk.
    """

    class Disk(models.TextChoices):
        R2 = "r2", "Cloudflare R2"
        LOCAL = "local", "Local"

    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.PositiveBigIntegerField()
    content_object = GenericForeignKey("content_type", "object_id")

    collection_name = models.CharField(max_length=64, default="default")
    disk = models.CharField(max_length=16, choices=Disk.choices, default=Disk.R2)

    file_key = models.CharField(max_length=512, blank=True, default="")
    file_name = models.CharField(max_length=255)
    name = models.CharField(max_length=255, blank=True, default="")
    mime_type = models.CharField(max_length=128, blank=True, default="")
    size = models.PositiveBigIntegerField(default=0)

    generated_conversions = models.JSONField(default=dict, blank=True)

    class Meta:
        app_label = "media"
        db_table = "media"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["content_type", "object_id", "collection_name"], name="media_owner_collection_idx"),
        ]

    def __str__(self):
        return f"{self.collection_name}:{self.file_name}"

    # --------------------------------------------------
    # conversions
    # --------------------------------------------------

    @property
    def extension(self) -> str:
        return PurePosixPath(self.file_name).suffix.lstrip(".").lower()

    def has_generated_conversion(self, conversion: str) -> bool:
        return bool((self.generated_conversions or {}).get(conversion))

    def mark_conversion_generated(self, conversion: str, generated: bool = True) -> None:
        conversions = dict(self.generated_conversions or {})
        conversions[conversion] = generated
        self.generated_conversions = conversions
        self.save(update_fields=["generated_conversions", "updated_at"])

    # --------------------------------------------------
    # paths / urls
    # --------------------------------------------------

    def get_path(self, conversion: str = "") -> str:
        if not conversion:
            return self.file_key
        stem = PurePosixPath(self.file_name).stem
        ext = self.extension or "pdf"
        return f"{self.pk}/conversions/{stem}-{conversion}.{ext}"

    def get_disk(self):
        return get_disk(self.disk)

    def get_full_url(self, conversion: str = "") -> str:
        return self.get_disk().url(self.get_path(conversion))

    def get_temporary_url(self, expires_at: datetime, conversion: str = "") -> str:
        """
        Signed URL valid until ``expires_at``.
        Raises TemporaryUrlNotSupported on disks that cannot sign.
        """
        expires_in = max(1, int((expires_at - timezone.now()).total_seconds()))
        return self.get_disk().temporary_url(self.get_path(conversion), expires_in=expires_in)
