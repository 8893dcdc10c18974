# PATH: apps/support/media/disks.py
#
# Storage backends the media library writes to.
# - r2: Cloudflare R2 bucket (apps.infrastructure.storage.r2)
# - local: Django default_storage (development / tests)

from __future__ import annotations

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from apps.infrastructure.storage import r2


class TemporaryUrlNotSupported(RuntimeError):
    pass


class R2Disk:
    name = "r2"

    def put(self, key: str, fileobj, content_type: str | None = None) -> None:
        r2.upload_fileobj_to_r2(fileobj=fileobj, key=key, content_type=content_type)

    def read(self, key: str) -> bytes:
        return r2.download_bytes_from_r2(key=key)

    def delete(self, key: str) -> None:
        r2.delete_object_r2(key=key)

    def exists(self, key: str) -> bool:
        found, _ = r2.head_object_r2(key=key)
        return found

    def url(self, key: str) -> str:
        return r2.get_object_public_url(key=key)

    def temporary_url(self, key: str, expires_in: int) -> str:
        return r2.generate_presigned_get_url(key=key, expires_in=expires_in)


class LocalDisk:
    name = "local"

    def put(self, key: str, fileobj, content_type: str | None = None) -> None:
        if default_storage.exists(key):
            default_storage.delete(key)
        fileobj.seek(0)
        default_storage.save(key, ContentFile(fileobj.read()))

    def read(self, key: str) -> bytes:
        with default_storage.open(key, "rb") as fh:
            return fh.read()

    def delete(self, key: str) -> None:
        if default_storage.exists(key):
            default_storage.delete(key)

    def exists(self, key: str) -> bool:
        return default_storage.exists(key)

    def url(self, key: str) -> str:
        base = (settings.API_BASE_URL or "").rstrip("/")
        return f"{base}{default_storage.url(key)}"

    def temporary_url(self, key: str, expires_in: int) -> str:
        raise TemporaryUrlNotSupported("The local disk does not support creating temporary URLs.")


_DISKS = {
    R2Disk.name: R2Disk,
    LocalDisk.name: LocalDisk,
}


def get_disk(name: str | None = None):
    name = name or settings.MEDIA_DISK
    try:
        return _DISKS[name]()
    except KeyError:
        raise ValueError(f"Unknown media disk: {name}") from None
