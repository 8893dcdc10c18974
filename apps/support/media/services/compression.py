# PATH: apps/support/media/services/compression.py
#
# PURPOSE:
# - shrink an uploaded PDF with Ghostscript before watermarking
# - best-effort: any failure keeps the original file

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)


class CompressionError(RuntimeError):
    pass


def _config() -> dict:
    return getattr(settings, "PDF_COMPRESSION", {}) or {}


def build_ghostscript_command(*, input_path: str, output_path: str, gs_bin: str = "gs") -> list[str]:
    gs = _config().get("ghostscript", {}) or {}
    return [
        gs_bin,
        "-sDEVICE=pdfwrite",
        f"-dCompatibilityLevel={gs.get('compatibility_level', '1.4')}",
        f"-dPDFSETTINGS={gs.get('pdf_settings', '/prepress')}",
        "-dNOPAUSE",
        "-dQUIET",
        "-dBATCH",
        "-dDownsampleColorImages=true",
        f"-dColorImageResolution={gs.get('color_image_resolution', 150)}",
        "-dDownsampleGrayImages=true",
        f"-dGrayImageResolution={gs.get('grayscale_image_resolution', 150)}",
        "-dDownsampleMonoImages=true",
        f"-dMonoImageResolution={gs.get('monochrome_image_resolution', 300)}",
        f"-sOutputFile={output_path}",
        input_path,
    ]


def run_ghostscript(*, input_path: str, output_path: str, timeout: int) -> None:
    gs_bin = shutil.which("gs")
    if not gs_bin:
        raise CompressionError("ghostscript (gs) not found on PATH")

    cmd = build_ghostscript_command(input_path=input_path, output_path=output_path, gs_bin=gs_bin)
    process = subprocess.run(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=timeout,
        check=False,
    )
    if process.returncode != 0:
        raise CompressionError({
            "cmd": cmd,
            "stderr": process.stderr,
        })


def compress_pdf(input_path: str, *, media_id=None) -> str | None:
    """
    Returns the compressed file path when it is at least
    ``min_reduction_threshold`` smaller than the input, else None.
    """
    cfg = _config()
    if not cfg.get("enabled", False):
        return None

    src = Path(input_path)
    original_size = src.stat().st_size
    max_size = int(cfg.get("max_file_size", 50 * 1024 * 1024))
    if original_size > max_size:
        logger.info("pdf compression skipped (too large) media_id=%s size=%s", media_id, original_size)
        return None

    out = src.with_name(f"{src.stem}-compressed.pdf")
    timeout = int((cfg.get("ghostscript") or {}).get("timeout", 120))
    try:
        run_ghostscript(input_path=str(src), output_path=str(out), timeout=timeout)
    except (CompressionError, subprocess.TimeoutExpired, OSError) as exc:
        logger.warning("pdf compression failed media_id=%s: %s", media_id, exc)
        out.unlink(missing_ok=True)
        return None

    if not out.exists():
        return None

    compressed_size = out.stat().st_size
    reduction = (original_size - compressed_size) / original_size if original_size else 0.0
    threshold = float(cfg.get("min_reduction_threshold", 0.1))
    if reduction < threshold:
        logger.info(
            "pdf compression discarded media_id=%s reduction=%.1f%%",
            media_id, reduction * 100,
        )
        out.unlink(missing_ok=True)
        return None

    logger.info(
        "pdf compressed media_id=%s original_kb=%.2f compressed_kb=%.2f reduction=%.1f%%",
        media_id, original_size / 1024, compressed_size / 1024, reduction * 100,
    )
    return str(out)
