from __future__ import annotations

import datetime as dt


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def parse_positive_int(value: object) -> int | None:
    parsed = parse_int(value, 0)
    return parsed if parsed > 0 else None


def parse_sort_date(value: str) -> dt.date:
    """Parse a post date for ordering; anything unreadable sorts as the oldest."""
    value = (value or "").strip()
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return dt.datetime.fromisoformat(value).date()
    except ValueError:
        return dt.date.min


def format_display_date(value: str) -> str:
    parsed = parse_sort_date(value)
    if parsed == dt.date.min:
        return value
    return parsed.strftime("%B %d, %Y")
