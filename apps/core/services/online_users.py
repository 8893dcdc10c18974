# PATH: apps/core/services/online_users.py
"""
Online presence kept in the cache.

Each visitor gets a marker key living ONLINE_USER_TTL_SECONDS; an index key
lists the markers seen in the last day so they can be counted.
"""
from __future__ import annotations

from django.conf import settings
from django.core.cache import cache

USER_INDEX_KEY = "online-user-ids"
GUEST_INDEX_KEY = "online-guest-ids"
INDEX_TTL = 24 * 60 * 60


class OnlineUsersService:

    def __init__(self, ttl: int | None = None):
        self.ttl = ttl or getattr(settings, "ONLINE_USER_TTL_SECONDS", 300)

    def online_count(self) -> int:
        return len(self._live(USER_INDEX_KEY)) + len(self._live(GUEST_INDEX_KEY))

    def online_user_count(self) -> int:
        return len(self._live(USER_INDEX_KEY))

    def track_user(self, user_id: int) -> None:
        self._track(USER_INDEX_KEY, f"user-online-{user_id}")

    def track_guest(self, session_id: str) -> None:
        self._track(GUEST_INDEX_KEY, f"guest-online-{session_id}")

    def _track(self, index_key: str, marker: str) -> None:
        cache.set(marker, True, self.ttl)
        markers = cache.get(index_key) or []
        if marker not in markers:
            markers.append(marker)
        # drop expired markers so the index does not grow forever
        live = set(cache.get_many(markers).keys())
        cache.set(index_key, [m for m in markers if m in live], INDEX_TTL)

    def _live(self, index_key: str) -> list[str]:
        markers = cache.get(index_key) or []
        if not markers:
            return []
        found = cache.get_many(markers)
        return [m for m in markers if m in found]
