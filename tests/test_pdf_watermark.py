from types import SimpleNamespace

import pytest
from PyPDF2 import PdfReader, PdfWriter

from apps.support.media.conversions.pdf_watermark import (
    STANDARD_PAGE_SIZES,
    WATERMARKED,
    PdfWatermarkGenerator,
    build_watermark_text,
    determine_font_size,
    determine_header_height,
    normalize_page_size,
    resolve_uploader_name,
)
from tests.conftest import make_pdf_bytes

A4 = STANDARD_PAGE_SIZES["A4"]
A3 = STANDARD_PAGE_SIZES["A3"]


def media_for_owner(name="Alice"):
    owner = SimpleNamespace(user=SimpleNamespace(name=name))
    return SimpleNamespace(pk=7, extension="pdf", mime_type="application/pdf", content_object=owner)


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "paper.pdf"
    path.write_bytes(make_pdf_bytes(pages=2))
    return path


class TestGeneratorCapabilities:
    def test_supported_types(self):
        assert PdfWatermarkGenerator.supported_extensions() == ("pdf",)
        assert PdfWatermarkGenerator.supported_mime_types() == ("application/pdf",)

    @pytest.mark.parametrize("extension, mime_type, expected", [
        ("pdf", "", True),
        ("bin", "application/pdf", True),
        ("png", "image/png", False),
    ])
    def test_can_convert(self, extension, mime_type, expected):
        media = SimpleNamespace(extension=extension, mime_type=mime_type)

        assert PdfWatermarkGenerator().can_convert(media) is expected

    def test_can_convert_without_media(self):
        assert PdfWatermarkGenerator().can_convert(None) is False


class TestSizing:
    def test_font_size_is_clamped(self):
        assert determine_font_size(100) == 9.0
        assert determine_font_size(400) == 11.2
        assert determine_font_size(2000) == 14.0

    def test_header_height_is_clamped(self):
        assert determine_header_height(100) == 8.0
        assert determine_header_height(400) == 12.0
        assert determine_header_height(A4[1]) == 18.0

    def test_regular_pages_are_kept(self):
        size = normalize_page_size(*A4)

        assert (size.width, size.height, size.orientation) == (A4[0], A4[1], "P")

    def test_oversized_portrait_page_shrinks_to_closest_ratio(self):
        # 1000x1400 sits nearer the A3 ratio than the A4 one
        size = normalize_page_size(1000, 1400)

        assert (size.width, size.height, size.orientation) == (A3[0], A3[1], "P")

    def test_oversized_landscape_keeps_orientation(self):
        size = normalize_page_size(1400, 1000)

        assert (size.width, size.height, size.orientation) == (A3[1], A3[0], "L")

    def test_oversized_letter_ratio_maps_to_letter(self):
        size = normalize_page_size(1300, 1680)

        assert (size.width, size.height) == STANDARD_PAGE_SIZES["Letter"]


class TestWatermarkText:
    def test_with_uploader(self, settings):
        settings.WATERMARK_SITE_URL = "https://qbank.test"

        assert build_watermark_text("Alice") == "For more questions: https://qbank.test | uploader: Alice"

    def test_without_uploader(self, settings):
        settings.WATERMARK_SITE_URL = "https://qbank.test"

        assert build_watermark_text(None) == "For more questions: https://qbank.test"

    def test_uploader_name_falls_back_to_owner_name(self):
        assert resolve_uploader_name(SimpleNamespace(user=SimpleNamespace(name="Alice"))) == "Alice"
        assert resolve_uploader_name(SimpleNamespace(user=None, name="Bob")) == "Bob"
        assert resolve_uploader_name(SimpleNamespace(user=SimpleNamespace(name=""))) is None
        assert resolve_uploader_name(None) is None


class TestConvert:
    def test_only_watermarked_conversion(self, pdf_file):
        assert PdfWatermarkGenerator().convert(str(pdf_file), "thumbnail") is None

    def test_adds_header_band_to_every_page(self, pdf_file, settings):
        settings.WATERMARK_SITE_URL = "https://qbank.test"
        generator = PdfWatermarkGenerator()
        generator.can_convert(media_for_owner("Alice"))

        output = generator.convert(str(pdf_file), WATERMARKED)

        assert output.endswith("paper-watermarked.pdf")
        reader = PdfReader(output)
        assert len(reader.pages) == 2
        page = reader.pages[0]
        assert float(page.mediabox.width) == pytest.approx(A4[0], abs=0.01)
        assert float(page.mediabox.height) == pytest.approx(A4[1] + 18.0, abs=0.01)
        text = page.extract_text()
        assert "For more questions: https://qbank.test" in text
        assert "uploader: Alice" in text
        assert "page 1" in text
        assert "page 2" in reader.pages[1].extract_text()

    def test_oversized_pages_are_normalised(self, tmp_path):
        path = tmp_path / "scan.pdf"
        path.write_bytes(make_pdf_bytes(size=(1000, 1400)))

        output = PdfWatermarkGenerator().convert(str(path), WATERMARKED)

        page = PdfReader(output).pages[0]
        assert float(page.mediabox.width) == pytest.approx(A3[0], abs=0.01)
        assert float(page.mediabox.height) == pytest.approx(A3[1] + 18.0, abs=0.01)

    def test_encrypted_pdf_is_skipped(self, pdf_file, tmp_path):
        writer = PdfWriter()
        for page in PdfReader(str(pdf_file)).pages:
            writer.add_page(page)
        writer.encrypt("secret")
        locked = tmp_path / "locked.pdf"
        with open(locked, "wb") as fh:
            writer.write(fh)

        assert PdfWatermarkGenerator().convert(str(locked), WATERMARKED) is None

    def test_broken_pdf_yields_none(self, tmp_path):
        broken = tmp_path / "broken.pdf"
        broken.write_bytes(b"%PDF-1.4 this is not really a pdf")

        assert PdfWatermarkGenerator().convert(str(broken), WATERMARKED) is None
