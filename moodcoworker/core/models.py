"""
Data models for Mood Co-Worker.

Models: MoodEntry, EntrySummary.

Entries are created by the server; the client only keeps a read-only copy.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MoodEntry:
    """
    A single mood journal record.

    date is kept exactly as the server sent it (ISO string or epoch millis).
    Fields the client does not know about land in extra.
    """

    date: Any
    mood: float
    note: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict:
        """Convert to the wire shape (entry fields only)."""
        data = {"date": self.date, "mood": self.mood}
        if self.note is not None:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "MoodEntry":
        """Create from a server payload item."""
        if not isinstance(data, dict):
            raise ValueError(f"Entry must be an object, got {type(data).__name__}")
        if "mood" not in data:
            raise ValueError("Entry is missing 'mood'")

        mood = data["mood"]
        if isinstance(mood, bool) or not isinstance(mood, (int, float)):
            # Some backends serialize numbers as strings
            try:
                mood = float(mood)
            except (TypeError, ValueError):
                raise ValueError(f"Entry mood is not a number: {data['mood']!r}")

        extra = {k: v for k, v in data.items() if k not in ("date", "mood", "note")}
        return cls(
            date=data.get("date"),
            mood=mood,
            note=data.get("note"),
            extra=extra,
        )


@dataclass(frozen=True)
class EntrySummary:
    """
    Client-side insight over the loaded entries.

    average_mood is None exactly when count is 0.
    """

    count: int
    average_mood: Optional[Decimal]
    latest_entry: Optional[MoodEntry]

    @property
    def average_display(self) -> Optional[str]:
        """Average with exactly one decimal, e.g. "8.0"."""
        if self.average_mood is None:
            return None
        return f"{self.average_mood:.1f}"
