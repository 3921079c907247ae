"""
Helpers for the YYYY-MM dates used in experience, education and project entries.
"""
from __future__ import annotations

import logging
import re
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

PRESENT = "present"
_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{2})$")
_YEAR_SHORT_MONTH = re.compile(r"^(\d{4})-(\d)$")
_PRESENT_ALIASES = {"current", "now", "ongoing"}
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _parse(value: str) -> Tuple[int, int]:
    m = _YEAR_MONTH.match(value)
    if not m:
        raise ValueError(f"not a YYYY-MM date: {value!r}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {value!r}")
    return year, month


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"


def is_valid_date_format(value: str, today: Optional[date] = None) -> bool:
    """YYYY-MM with a real month and a year between 1900 and ten years from now, or 'present'."""
    if value == PRESENT:
        return True
    today = today or date.today()
    try:
        year, _ = _parse(value)
    except ValueError:
        return False
    return 1900 <= year <= today.year + 10


def normalize_date_string(value: str) -> str:
    cleaned = value.strip().lower()
    if cleaned == PRESENT or cleaned in _PRESENT_ALIASES:
        return PRESENT
    if _YEAR_MONTH.match(cleaned):
        return cleaned
    if m := _YEAR_SHORT_MONTH.match(cleaned):
        return f"{m.group(1)}-{int(m.group(2)):02d}"
    logger.warning("Unable to normalize date format: %s", value)
    return value


def format_date(value: str) -> str:
    """'2021-03' → 'Mar 2021'; unparseable input is returned unchanged."""
    if value == PRESENT:
        return "Present"
    try:
        year, month = _parse(value)
    except ValueError:
        logger.warning("Invalid date format: %s", value)
        return value
    return f"{_MONTHS[month - 1]} {year}"


def calculate_duration(start: str, end: Optional[str] = None, today: Optional[date] = None) -> str:
    today = today or date.today()
    try:
        sy, sm = _parse(start)
        ey, em = _parse(end) if end and end != PRESENT else (today.year, today.month)
    except ValueError:
        logger.warning("Error calculating duration for dates: %s - %s", start, end)
        return "Duration unknown"

    months = (ey - sy) * 12 + (em - sm)
    if months < 1:
        return "Less than 1 month"
    years, rest = divmod(months, 12)
    if years == 0:
        return _plural(months, "month")
    if rest == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(rest, 'month')}"


def format_date_range(start: str, end: Optional[str] = None, today: Optional[date] = None) -> Dict[str, str]:
    return {
        "start": format_date(start),
        "end": format_date(end) if end else "Present",
        "duration": calculate_duration(start, end, today),
    }


def sort_by_start_date(entries: Iterable[dict], key: str = "startDate") -> List[dict]:
    """Most recent first; entries without a parseable start date go last."""
    def sort_key(entry: dict):
        try:
            year, month = _parse(str(entry.get(key, "")))
        except ValueError:
            return (1, 0)
        return (0, -(year * 12 + month))
    return sorted(entries, key=sort_key)
