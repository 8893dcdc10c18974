# PATH: apps/support/media/services/library.py
"""
Attach uploaded files to model instances.

store_media() writes the upload to the configured disk, records a MediaFile
and queues conversions the owner declares for the collection.
"""
from __future__ import annotations

import logging
from pathlib import PurePosixPath

from django.conf import settings
from django.contrib.contenttypes.models import ContentType
from django.db import transaction
from django.utils.text import get_valid_filename

from apps.support.media.models import MediaFile

logger = logging.getLogger(__name__)


def _sanitize_file_name(name: str) -> str:
    base = PurePosixPath(name or "file").name
    return get_valid_filename(base) or "file"


def media_for(instance, collection: str | None = None):
    qs = MediaFile.objects.filter(
        content_type=ContentType.objects.get_for_model(instance),
        object_id=instance.pk,
    )
    if collection is not None:
        qs = qs.filter(collection_name=collection)
    return qs


def clear_collection(instance, collection: str) -> int:
    """Delete every file of a collection. Stored objects go in post_delete."""
    removed = 0
    for media in media_for(instance, collection):
        media.delete()
        removed += 1
    return removed


def store_media(
    instance,
    uploaded_file,
    *,
    collection: str,
    single_file: bool = False,
    disk: str | None = None,
) -> MediaFile:
    """
    Store ``uploaded_file`` on ``instance`` under ``collection``.

    - single_file: replace the previous file of the collection
    - conversions declared in ``instance.media_conversions[collection]``
      are queued after the surrounding transaction commits
    """
    disk = disk or settings.MEDIA_DISK
    file_name = _sanitize_file_name(getattr(uploaded_file, "name", ""))
    mime_type = getattr(uploaded_file, "content_type", None) or ""

    with transaction.atomic():
        if single_file:
            clear_collection(instance, collection)

        media = MediaFile.objects.create(
            content_type=ContentType.objects.get_for_model(instance),
            object_id=instance.pk,
            collection_name=collection,
            disk=disk,
            file_name=file_name,
            name=PurePosixPath(file_name).stem,
            mime_type=mime_type,
            size=getattr(uploaded_file, "size", 0) or 0,
        )
        media.file_key = f"{media.pk}/{file_name}"
        media.save(update_fields=["file_key"])

        uploaded_file.seek(0)
        media.get_disk().put(media.file_key, uploaded_file, content_type=mime_type or None)

        logger.info(
            "media stored id=%s collection=%s disk=%s size=%s",
            media.pk, collection, disk, media.size,
        )

        conversions = (getattr(instance, "media_conversions", None) or {}).get(collection) or ()
        if conversions:
            from apps.support.media.tasks import generate_pdf_conversions

            media_id = media.pk
            transaction.on_commit(lambda: generate_pdf_conversions.delay(media_id))

    return media
