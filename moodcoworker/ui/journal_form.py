"""
Journal entry form.
"""

from typing import Any, Callable, Optional

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from moodcoworker.core.utils import now_iso

MOOD_MIN = 1
MOOD_MAX = 10


class JournalForm:
    """
    Collects a mood and a note, and calls on_add with an entry dict.
    """

    def __init__(self, on_add: Callable[[dict], Any]):
        self.on_add = on_add

    @staticmethod
    def build_entry(mood: float, note: Optional[str] = None, date: Optional[str] = None) -> dict:
        """Entry-shaped dict; date defaults to now."""
        data = {"date": date or now_iso(), "mood": mood}
        if note:
            data["note"] = note
        return data

    def submit(self, mood: float, note: Optional[str] = None, date: Optional[str] = None) -> Any:
        return self.on_add(self.build_entry(mood, note, date))

    def prompt(self, console: Optional[Console] = None) -> Any:
        console = console or Console()
        console.print("\n[bold]How are you feeling today?[/bold]\n")

        mood = IntPrompt.ask(
            f"Mood ({MOOD_MIN}-{MOOD_MAX})",
            choices=[str(n) for n in range(MOOD_MIN, MOOD_MAX + 1)],
            show_choices=False,
            console=console,
        )
        note = Prompt.ask("Note (optional)", default="", show_default=False, console=console)

        return self.submit(mood, note.strip() or None)
