"""
Pure normalization helpers for untrusted request parameters.

Every function here degrades malformed input to a default instead of
raising, so listing screens always get an answer.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Iterable, Optional, TypeVar

from domain.enums import SortDirection

E = TypeVar("E", bound=Enum)


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim free text; empty becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_page(value: Optional[str]) -> int:
    """Parse a 1-based page number. Anything unusable becomes 1."""
    number = _parse_int(value)
    if number is None or number < 1:
        return 1
    return number


def parse_page_size(value: Optional[str], default: int, maximum: int) -> int:
    """
    Parse a page size.

    Args:
        value: Raw query string value
        default: Used when the value is missing or not an integer
        maximum: Upper clamp bound (lower bound is 1)

    Returns:
        Page size within [1, maximum]
    """
    number = _parse_int(value)
    if number is None:
        return default
    return min(max(number, 1), maximum)


def parse_sort_direction(value: Optional[str]) -> SortDirection:
    if value is not None and value.strip().lower() == SortDirection.ASC.value:
        return SortDirection.ASC
    return SortDirection.DESC


def parse_choice(value: Optional[str], allowed: Iterable[str], default: str) -> str:
    """Return value if it is in the allow-list (exact match), else default."""
    if value is not None and value in set(allowed):
        return value
    return default


def parse_enum(value: Optional[str], enum_type: type[E], upper: bool = False) -> Optional[E]:
    """Map a raw string onto an enum member, None when it does not match."""
    text = clean_text(value)
    if text is None:
        return None
    if upper:
        text = text.upper()
    try:
        return enum_type(text)
    except ValueError:
        return None


def parse_tri_state(value: Optional[str]) -> Optional[bool]:
    """'true' -> True, 'false' -> False, anything else -> None (no filter)."""
    text = clean_text(value)
    if text is None:
        return None
    text = text.lower()
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime.

    Date-only values mean midnight. Aware datetimes are converted to naive
    UTC to match stored timestamps. Invalid input yields None.
    """
    text = clean_text(value)
    if text is None:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            day = date.fromisoformat(text)
        except ValueError:
            return None
        return datetime(day.year, day.month, day.day)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _parse_int(value: Optional[str]) -> Optional[int]:
    text = clean_text(value)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None
