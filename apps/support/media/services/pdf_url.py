# PATH: apps/support/media/services/pdf_url.py
from __future__ import annotations

import logging
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from apps.support.media.conversions.pdf_watermark import WATERMARKED

logger = logging.getLogger(__name__)


def resolve_pdf_url(media) -> str | None:
    """
    Public URL for a stored PDF.

    1. watermarked conversion generated -> its full URL
    2. otherwise a temporary signed URL of the original
    3. signing failed -> full URL of the original
    no media -> None
    """
    if media is None:
        return None

    if media.has_generated_conversion(WATERMARKED):
        return media.get_full_url(WATERMARKED)

    expires_at = timezone.now() + timedelta(seconds=settings.PDF_TEMPORARY_URL_TTL_SECONDS)
    try:
        return media.get_temporary_url(expires_at)
    except Exception as exc:
        logger.info("temporary url unavailable media_id=%s: %s", media.pk, exc)
        return media.get_full_url()
