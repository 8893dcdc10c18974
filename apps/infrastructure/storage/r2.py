# ==============================================================================
# PATH: apps/infrastructure/storage/r2.py
#
# PURPOSE:
# - Cloudflare R2 (S3 API) access layer for the media library
# - single bucket: R2_BUCKET
# - upload / download / delete / head / presign / public url
# ==============================================================================

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError
from django.conf import settings


def _get_s3_client():
    return boto3.client(
        "s3",
        endpoint_url=settings.R2_ENDPOINT,
        aws_access_key_id=settings.R2_ACCESS_KEY,
        aws_secret_access_key=settings.R2_SECRET_KEY,
        region_name="auto",
    )


def _bucket():
    return settings.R2_BUCKET


# ---------------------------------------------------------------------
# Upload / download
# ---------------------------------------------------------------------

def upload_fileobj_to_r2(
    *,
    fileobj,
    key: str,
    content_type: str | None = None,
) -> None:
    """
    Django UploadedFile (or any binary file object) -> R2
    """
    s3 = _get_s3_client()
    s3.upload_fileobj(
        Fileobj=fileobj,
        Bucket=_bucket(),
        Key=key,
        ExtraArgs={
            "ContentType": content_type or "application/octet-stream"
        },
    )


def download_bytes_from_r2(*, key: str) -> bytes:
    s3 = _get_s3_client()
    resp = s3.get_object(Bucket=_bucket(), Key=key)
    return resp["Body"].read()


def delete_object_r2(*, key: str) -> None:
    s3 = _get_s3_client()
    s3.delete_object(Bucket=_bucket(), Key=key)


def head_object_r2(*, key: str) -> tuple[bool, int]:
    """Object existence and size in bytes."""
    s3 = _get_s3_client()
    try:
        resp = s3.head_object(Bucket=_bucket(), Key=key)
        return True, int(resp.get("ContentLength") or 0)
    except ClientError as err:
        code = (err.response.get("Error") or {}).get("Code", "")
        if code in ("404", "NoSuchKey", "NotFound"):
            return False, 0
        raise


# ---------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------

def generate_presigned_get_url(
    *,
    key: str,
    expires_in: int = 3600,
) -> str:
    """
    R2 object presigned GET URL
    """
    s3 = _get_s3_client()
    return s3.generate_presigned_url(
        ClientMethod="get_object",
        Params={
            "Bucket": _bucket(),
            "Key": key,
        },
        ExpiresIn=expires_in,
    )


def get_object_public_url(*, key: str) -> str:
    """
    Public URL for an object.
    Uses R2_PUBLIC_BASE_URL when set, else the endpoint/bucket path.
    """
    base = (getattr(settings, "R2_PUBLIC_BASE_URL", "") or "").strip().rstrip("/")
    if not base:
        endpoint = (settings.R2_ENDPOINT or "").rstrip("/")
        base = f"{endpoint}/{_bucket()}"
    return f"{base}/{key}" if key else base
