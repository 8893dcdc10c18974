# PATH: apps/domains/catalog/services/options.py
"""
Filter / form options (departments, courses, semesters, exam types).
Cached for an hour; writes call clear_options_cache().
"""
from django.core.cache import cache

from apps.domains.catalog.models import Course, Department, ExamType, Semester

OPTIONS_CACHE_KEY = "catalog:options"
OPTIONS_CACHE_TTL = 60 * 60


def _build_options() -> dict:
    return {
        "departments": list(Department.objects.order_by("name").values("id", "name", "short_name")),
        "courses": list(Course.objects.order_by("name").values("id", "department_id", "name")),
        "semesters": [{"id": s.id, "name": s.name} for s in Semester.objects.all().latest_first()],
        "exam_types": list(ExamType.objects.order_by("name").values("id", "name")),
    }


def get_options() -> dict:
    return cache.get_or_set(OPTIONS_CACHE_KEY, _build_options, OPTIONS_CACHE_TTL)


def clear_options_cache() -> None:
    cache.delete(OPTIONS_CACHE_KEY)
