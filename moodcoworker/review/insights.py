"""
Co-worker insight.

Count, average and latest entry over whatever entries are loaded.
Nothing here is persisted; it is recomputed on demand.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from moodcoworker.core.models import EntrySummary, MoodEntry
from moodcoworker.core.utils import format_entry_date, format_mood

ONE_DECIMAL = Decimal("0.1")


def average_mood(entries: Sequence[MoodEntry]) -> Optional[Decimal]:
    """
    Mean mood rounded to one decimal, or None for no entries.

    Ties round up: 8.25 -> 8.3.
    """
    if not entries:
        return None
    mean = sum(e.mood for e in entries) / len(entries)
    return Decimal(mean).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def latest_entry(entries: Sequence[MoodEntry]) -> Optional[MoodEntry]:
    """
    Last entry as the server ordered them.

    The list is assumed ascending by date and is not re-sorted.
    """
    return entries[-1] if entries else None


def summarize(entries: Sequence[MoodEntry]) -> EntrySummary:
    return EntrySummary(
        count=len(entries),
        average_mood=average_mood(entries),
        latest_entry=latest_entry(entries),
    )


def format_insight(summary: EntrySummary) -> Optional[str]:
    """
    Insight sentence, or None when there is nothing to say.
    """
    if summary.count == 0:
        return None

    text = (
        f"You've logged {summary.count} mood entries so far. "
        f"Your average mood is {summary.average_display}/10"
    )

    latest = summary.latest_entry
    if latest is not None:
        text += (
            f", and your latest entry on {format_entry_date(latest.date)} "
            f"was {format_mood(latest.mood)}/10"
        )

    return text + "."
