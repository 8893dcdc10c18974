# PATH: apps/support/media/services/conversions.py
"""
PDF conversion pipeline for one MediaFile.

download original -> (optional) Ghostscript compression -> watermark
-> upload conversion -> mark generated
"""
from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from apps.support.media.conversions.pdf_watermark import WATERMARKED, PdfWatermarkGenerator
from apps.support.media.services.compression import compress_pdf

logger = logging.getLogger(__name__)


def _replace_original(media, compressed_path: str) -> None:
    disk = media.get_disk()
    with open(compressed_path, "rb") as fh:
        disk.put(media.file_key, fh, content_type=media.mime_type or "application/pdf")
    media.size = Path(compressed_path).stat().st_size
    media.save(update_fields=["size", "updated_at"])


def generate_conversions(media, *, force: bool = False) -> bool:
    """
    Returns True when the watermarked conversion was (re)generated.
    Errors from storage propagate; watermark errors yield False.
    """
    generator = PdfWatermarkGenerator()
    if not generator.can_convert(media):
        logger.info("media %s is not a pdf, no conversions", media.pk)
        return False

    if media.has_generated_conversion(WATERMARKED) and not force:
        return False

    disk = media.get_disk()
    if not disk.exists(media.file_key):
        logger.warning("media %s original missing on disk %s key=%s", media.pk, disk.name, media.file_key)
        return False

    with tempfile.TemporaryDirectory(prefix="media-conv-") as tmp:
        src = Path(tmp) / (media.file_name or f"{media.pk}.pdf")
        src.write_bytes(disk.read(media.file_key))
        logger.info("media %s downloaded (%s bytes)", media.pk, src.stat().st_size)

        compressed = compress_pdf(str(src), media_id=media.pk)
        if compressed:
            _replace_original(media, compressed)
            src = Path(compressed)

        output = generator.convert(str(src), WATERMARKED)
        if not output:
            logger.warning("media %s watermark not generated", media.pk)
            return False

        with open(output, "rb") as fh:
            disk.put(media.get_path(WATERMARKED), fh, content_type="application/pdf")

    media.mark_conversion_generated(WATERMARKED)
    logger.info("media %s conversion %s uploaded", media.pk, WATERMARKED)
    return True


def clear_conversions(media) -> int:
    """Delete generated conversion objects and reset the flags."""
    disk = media.get_disk()
    removed = 0
    for name, generated in (media.generated_conversions or {}).items():
        if not generated:
            continue
        disk.delete(media.get_path(name))
        removed += 1
    media.generated_conversions = {}
    media.save(update_fields=["generated_conversions", "updated_at"])
    return removed
