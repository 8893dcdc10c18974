# PATH: apps/support/media/mixins.py
from __future__ import annotations


class HasMedia:
    """
    Media helpers for models that declare
    ``media = GenericRelation("media.MediaFile")``.

    ``media_conversions`` maps a collection to the conversion names
    generated after upload, e.g. {"pdf": ("watermarked",)}.
    """

    media_conversions: dict = {}

    def get_media(self, collection: str) -> list:
        # all() so a prefetch_related("media") cache is honoured
        return [m for m in self.media.all() if m.collection_name == collection]

    def get_first_media(self, collection: str):
        items = self.get_media(collection)
        return items[0] if items else None

    def add_media(self, uploaded_file, collection: str, *, single_file: bool = False):
        from apps.support.media.services.library import store_media

        media = store_media(self, uploaded_file, collection=collection, single_file=single_file)
        if hasattr(self, "_prefetched_objects_cache"):
            self._prefetched_objects_cache.pop("media", None)
        return media

    def clear_media_collection(self, collection: str) -> int:
        from apps.support.media.services.library import clear_collection

        removed = clear_collection(self, collection)
        if hasattr(self, "_prefetched_objects_cache"):
            self._prefetched_objects_cache.pop("media", None)
        return removed
