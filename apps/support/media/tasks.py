# apps/support/media/tasks.py
from __future__ import annotations

import logging

from celery import shared_task

from apps.support.media.models import MediaFile
from apps.support.media.services.conversions import generate_conversions

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3, default_retry_delay=30)
def generate_pdf_conversions(self, media_id: int, force: bool = False) -> bool:
    """
    Compress + watermark one PDF media (Celery)

    - missing media (deleted before the worker ran) is a no-op
    - storage errors are retried
    """
    media = MediaFile.objects.filter(id=int(media_id)).first()
    if not media:
        logger.info("media %s gone before conversion", media_id)
        return False

    try:
        return generate_conversions(media, force=force)
    except Exception as e:
        logger.warning("media %s conversion failed: %s", media_id, e)
        raise self.retry(exc=e)
