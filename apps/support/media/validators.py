# PATH: apps/support/media/validators.py
"""
Upload checks shared by serializers.
Size limits come from settings (PDF_MAX_UPLOAD_BYTES, AVATAR_MAX_UPLOAD_BYTES).
"""
from pathlib import PurePosixPath

from django.conf import settings
from rest_framework import serializers

PDF_MIME_TYPES = ("application/pdf",)
AVATAR_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "webp")
AVATAR_MIME_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")


def _extension(upload) -> str:
    return PurePosixPath(getattr(upload, "name", "") or "").suffix.lstrip(".").lower()


def _head(upload, n: int = 5) -> bytes:
    upload.seek(0)
    data = upload.read(n)
    upload.seek(0)
    return data


def validate_pdf_upload(upload):
    if _extension(upload) != "pdf" or not _head(upload).startswith(b"%PDF"):
        raise serializers.ValidationError("The file must be a PDF.")
    if upload.size > settings.PDF_MAX_UPLOAD_BYTES:
        raise serializers.ValidationError("The PDF file must not exceed 10MB.")
    upload.content_type = PDF_MIME_TYPES[0]
    return upload


def validate_avatar_upload(upload):
    content_type = (getattr(upload, "content_type", "") or "").lower()
    if _extension(upload) not in AVATAR_EXTENSIONS or content_type not in AVATAR_MIME_TYPES:
        raise serializers.ValidationError("The avatar must be a JPEG, PNG, GIF, or WebP image.")
    if upload.size > settings.AVATAR_MAX_UPLOAD_BYTES:
        raise serializers.ValidationError("The avatar must not exceed 2MB.")
    return upload
