"""
Utility functions for Mood Co-Worker.
"""

from datetime import datetime, timezone
from typing import Any, Optional


def parse_entry_date(value: Any) -> Optional[datetime]:
    """
    Parse an entry timestamp into an aware local datetime.

    Accepts:
      - ISO 8601 strings, with or without a trailing "Z"
      - epoch milliseconds (int or float)
    Returns None when the value cannot be read.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).astimezone()
        except (OverflowError, OSError, ValueError):
            return None

    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None

    if dt.tzinfo is None:
        # Naive timestamp - assume local
        dt = dt.astimezone()
    return dt.astimezone()


def format_entry_date(value: Any) -> str:
    """
    Format an entry timestamp as a local calendar date.

    Examples:
        "2024-03-01T22:30:00Z" -> "2024-03-02" (in UTC+2)
        "not a date"            -> "not a date"
    """
    dt = parse_entry_date(value)
    if dt is None:
        return str(value) if value is not None else "unknown date"
    return dt.strftime("%Y-%m-%d")


def format_mood(mood: float) -> str:
    """Show whole moods without a decimal: 7.0 -> "7", 6.5 -> "6.5"."""
    if float(mood).is_integer():
        return str(int(mood))
    return f"{mood:g}"


def now_iso() -> str:
    """Current local time as an ISO 8601 string."""
    return datetime.now().astimezone().isoformat(timespec="seconds")
