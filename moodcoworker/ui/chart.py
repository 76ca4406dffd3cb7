"""
Mood chart.

A sparkline across the 1-10 mood scale plus a table of recent entries.
"""

from typing import List, Sequence

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from moodcoworker.core.models import MoodEntry
from moodcoworker.core.utils import format_entry_date, format_mood

BLOCKS = "▁▂▃▄▅▆▇█"


def sparkline(values: Sequence[float], vmin: float = 1.0, vmax: float = 10.0) -> str:
    if not values:
        return ""
    span = max(1e-9, vmax - vmin)
    out: List[str] = []
    for v in values:
        idx = int(round((v - vmin) / span * (len(BLOCKS) - 1)))
        idx = max(0, min(len(BLOCKS) - 1, idx))
        out.append(BLOCKS[idx])
    return "".join(out)


def _mood_style(mood: float) -> str:
    if mood >= 7:
        return "green"
    if mood >= 4:
        return "yellow"
    return "red"


class MoodChart:
    """Renders the entries sequence. Entries are shown in the order given."""

    def __init__(self, entries: Sequence[MoodEntry], recent: int = 10):
        self.entries = list(entries)
        self.recent = recent

    def render(self) -> RenderableType:
        if not self.entries:
            return Text("No entries yet.", style="dim")

        trend = Text()
        trend.append("Trend  ", style="bold")
        trend.append(sparkline([e.mood for e in self.entries]), style="cyan")

        table = Table(show_header=True, title=f"Last {min(self.recent, len(self.entries))} entries")
        table.add_column("Date", style="dim")
        table.add_column("Mood", justify="right")
        table.add_column("Note")

        for entry in self.entries[-self.recent:]:
            style = _mood_style(entry.mood)
            table.add_row(
                format_entry_date(entry.date),
                f"[{style}]{format_mood(entry.mood)}/10[/{style}]",
                (entry.note or "")[:50],
            )

        return Group(trend, table)

    def __rich__(self) -> RenderableType:
        return self.render()
