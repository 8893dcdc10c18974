# PATH: apps/domains/catalog/services/semester_names.py
import re

SEMESTER_NAME_PATTERN = re.compile(r"^(Fall|Spring|Summer|Short) \d{2}$")

SEASON_RANK = {
    "spring": 1,
    "summer": 2,
    "fall": 3,
    "short": 4,
}
UNKNOWN_SEASON_RANK = 5


def normalize_semester_name(value: str) -> str:
    """Collapse whitespace, trim, upper-case the first letter."""
    value = re.sub(r"\s+", " ", value or "").strip()
    return value[:1].upper() + value[1:]


def semester_sort_key(name: str) -> tuple[int, int]:
    """
    (year, season rank) for "Fall 23" style names.
    A non-numeric year sorts as 0.
    """
    name = (name or "").strip()
    tail = name[-2:]
    year = int(tail) if tail.isdigit() else 0
    season = name.split(" ", 1)[0].lower() if name else ""
    return year, SEASON_RANK.get(season, UNKNOWN_SEASON_RANK)
