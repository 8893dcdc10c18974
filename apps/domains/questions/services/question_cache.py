# PATH: apps/domains/questions/services/question_cache.py
"""
Cache for the public question endpoints.

- index pages: key = md5(version + filters + paging), TTL QUESTION_INDEX_CACHE_TTL
- detail: key = questions:show:<id>, TTL QUESTION_SHOW_CACHE_TTL
Any write bumps the index version, so every cached page is abandoned at once.
"""
from __future__ import annotations

import hashlib
import json
from typing import Callable

from django.conf import settings
from django.core.cache import cache

INDEX_PREFIX = "questions:index:"
SHOW_PREFIX = "questions:show:"
INDEX_VERSION_KEY = "questions:index:version"


class QuestionCacheService:

    def __init__(self):
        self.index_ttl = getattr(settings, "QUESTION_INDEX_CACHE_TTL", 120)
        self.show_ttl = getattr(settings, "QUESTION_SHOW_CACHE_TTL", 300)

    def get_index(self, params: dict, builder: Callable[[], dict]) -> dict:
        return cache.get_or_set(self.build_index_cache_key(params), builder, self.index_ttl)

    def get_show(self, question_id: int, builder: Callable[[], dict]) -> dict:
        return cache.get_or_set(f"{SHOW_PREFIX}{question_id}", builder, self.show_ttl)

    def clear_question_cache(self, question_id: int | None) -> None:
        if question_id:
            cache.delete(f"{SHOW_PREFIX}{question_id}")
        self.clear_index_cache()

    def clear_index_cache(self) -> None:
        try:
            cache.incr(INDEX_VERSION_KEY)
        except ValueError:
            # first bump: the key did not exist yet (implicit version 1)
            cache.set(INDEX_VERSION_KEY, 2, None)

    def build_index_cache_key(self, params: dict) -> str:
        version = cache.get(INDEX_VERSION_KEY, 1)
        raw = json.dumps({"v": version, **params}, sort_keys=True, default=str)
        return INDEX_PREFIX + hashlib.md5(raw.encode("utf-8")).hexdigest()
