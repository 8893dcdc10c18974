# PATH: apps/support/media/signals.py
import logging

from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from apps.support.media.models import MediaFile

logger = logging.getLogger(__name__)


def _delete_stored_files(disk_name: str, keys: list[str]) -> None:
    from apps.support.media.disks import get_disk

    disk = get_disk(disk_name)
    for key in keys:
        try:
            disk.delete(key)
        except Exception:
            # an orphaned object must not fail the request that deleted the row
            logger.exception("media object delete failed key=%s", key)


@receiver(post_delete, sender=MediaFile)
def delete_media_objects(sender, instance: MediaFile, **kwargs):
    keys = [instance.file_key] if instance.file_key else []
    keys += [instance.get_path(name) for name, done in (instance.generated_conversions or {}).items() if done]
    if not keys:
        return
    disk_name = instance.disk
    transaction.on_commit(lambda: _delete_stored_files(disk_name, keys))
