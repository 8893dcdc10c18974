# PATH: apps/support/media/conversions/pdf_watermark.py
"""
Watermarked PDF conversion.

Every page gets a white header band on top carrying
``For more questions: <site> | uploader: <name>``. Oversized pages are
scaled down to the closest standard paper size first.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from django.conf import settings
from PyPDF2 import PageObject, PdfReader, PdfWriter, Transformation
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

WATERMARKED = "watermarked"

# points (1 inch = 72pt), smallest first
STANDARD_PAGE_SIZES = {
    "A4": (595.28, 841.89),
    "Letter": (612.0, 792.0),
    "Legal": (612.0, 1008.0),
    "A3": (841.89, 1190.55),
}

NORMALIZE_MAX_WIDTH = 650
NORMALIZE_MAX_HEIGHT = 900


@dataclass(frozen=True)
class PageSize:
    width: float
    height: float
    orientation: str  # "P" | "L"


def determine_font_size(width: float) -> float:
    return max(9.0, min(14.0, round(width * 0.028, 2)))


def determine_header_height(height: float) -> float:
    return max(8.0, min(18.0, round(height * 0.03, 2)))


def normalize_page_size(width: float, height: float) -> PageSize:
    is_landscape = width > height
    orientation = "L" if is_landscape else "P"

    short_side, long_side = (height, width) if is_landscape else (width, height)
    aspect_ratio = short_side / long_side
    current_area = width * height

    best = None
    min_difference = float("inf")
    for std_w, std_h in STANDARD_PAGE_SIZES.values():
        ratio_difference = abs(aspect_ratio - std_w / std_h)
        if std_w * std_h <= current_area:
            difference = ratio_difference * 10
        elif best is None:
            # larger than the page: only when nothing smaller matched yet
            difference = ratio_difference * 10 + 1
        else:
            continue
        if difference < min_difference:
            min_difference = difference
            best = (std_w, std_h)

    should_normalize = short_side > NORMALIZE_MAX_WIDTH or long_side > NORMALIZE_MAX_HEIGHT
    if should_normalize and best:
        std_w, std_h = best
        if is_landscape:
            return PageSize(std_h, std_w, orientation)
        return PageSize(std_w, std_h, orientation)

    return PageSize(width, height, orientation)


def resolve_uploader_name(owner) -> str | None:
    if owner is None:
        return None
    user = getattr(owner, "user", None)
    name = getattr(user, "name", None) if user is not None else None
    if isinstance(name, str) and name:
        return name
    name = getattr(owner, "name", None)
    if isinstance(name, str) and name:
        return name
    return None


def build_watermark_text(uploader_name: str | None = None) -> str:
    text = f"For more questions: {settings.WATERMARK_SITE_URL}"
    if uploader_name:
        text = f"{text} | uploader: {uploader_name}"
    return text


def _header_overlay(width: float, page_height: float, header_height: float, text: str) -> PageObject:
    """
    Single page (width x page_height + header_height) holding the header band only.
    """
    buf = BytesIO()
    total_height = page_height + header_height
    c = canvas.Canvas(buf, pagesize=(width, total_height))

    c.setFillColorRGB(1, 1, 1)
    c.rect(0, page_height, width, header_height, stroke=0, fill=1)

    c.setStrokeColorRGB(210 / 255, 210 / 255, 210 / 255)
    c.line(0, page_height, width, page_height)

    font_size = determine_font_size(width)
    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", font_size)
    # vertically centred on the cap height
    baseline = page_height + max(0.0, (header_height - font_size * 0.7) / 2)
    c.drawString(6, baseline, text)

    c.showPage()
    c.save()
    buf.seek(0)
    return PdfReader(buf).pages[0]


class PdfWatermarkGenerator:
    """Generates the ``watermarked`` conversion of PDF media."""

    def __init__(self):
        self.media = None

    @staticmethod
    def supported_extensions() -> tuple[str, ...]:
        return ("pdf",)

    @staticmethod
    def supported_mime_types() -> tuple[str, ...]:
        return ("application/pdf",)

    def can_convert(self, media) -> bool:
        self.media = media
        if media is None:
            return False
        return (
            media.extension in self.supported_extensions()
            or (media.mime_type or "").lower() in self.supported_mime_types()
        )

    def convert(self, file: str, conversion: str | None = None) -> str | None:
        """
        Write ``<stem>-watermarked.pdf`` next to ``file`` and return its path.
        Returns None for other conversions, encrypted PDFs and on error.
        """
        if conversion != WATERMARKED:
            logger.info("conversion %r not handled by %s", conversion, type(self).__name__)
            return None
        try:
            return self.create_watermarked_pdf(file)
        except Exception:
            logger.exception("watermark failed media_id=%s file=%s", self._media_id, Path(file).name)
            return None

    @property
    def _media_id(self):
        return getattr(self.media, "pk", None)

    def watermark_text(self) -> str:
        owner = getattr(self.media, "content_object", None) if self.media is not None else None
        return build_watermark_text(resolve_uploader_name(owner))

    def create_watermarked_pdf(self, file: str) -> str | None:
        reader = PdfReader(file)
        if reader.is_encrypted:
            logger.warning("pdf is encrypted, skipping watermark media_id=%s", self._media_id)
            return None

        text = self.watermark_text()
        writer = PdfWriter()

        for page in reader.pages:
            if page.get("/Rotate"):
                page.transfer_rotation_to_content()

            box = page.mediabox
            src_w, src_h = float(box.width), float(box.height)
            size = normalize_page_size(src_w, src_h)
            header_height = determine_header_height(size.height)

            scale = min(size.width / src_w, size.height / src_h)
            offset_x = (size.width - src_w * scale) / 2
            offset_y = (size.height - src_h * scale) / 2

            page.add_transformation(
                Transformation()
                .translate(-float(box.left), -float(box.bottom))
                .scale(scale, scale)
                .translate(offset_x, offset_y)
            )
            new_page = PageObject.create_blank_page(width=size.width, height=size.height + header_height)
            new_page.merge_page(page)
            new_page.merge_page(_header_overlay(size.width, size.height, header_height, text))
            writer.add_page(new_page)

        src = Path(file)
        out = src.with_name(f"{src.stem}-{WATERMARKED}.pdf")
        with open(out, "wb") as f:
            writer.write(f)

        logger.info("watermarked pdf written media_id=%s pages=%s", self._media_id, len(reader.pages))
        return str(out)
