"""
Composed view of the shell state.
"""

from typing import List

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from moodcoworker.review.insights import format_insight
from moodcoworker.shell import MoodShell
from moodcoworker.ui.chart import MoodChart

TITLE = "Digital Mood Co-Worker"
TAGLINE = "Your AI-powered mood partner that helps you track emotional trends and reflect on your day."


def render_insight(shell: MoodShell) -> RenderableType:
    """Insight panel; only meaningful when entries are loaded."""
    text = format_insight(shell.summary)
    return Panel(text, title="Co-worker insight", border_style="blue")


def render_view(shell: MoodShell) -> RenderableType:
    """
    Auth hint when logged out; insight + chart when logged in.
    """
    parts: List[RenderableType] = [
        Text(TITLE, style="bold"),
        Text(TAGLINE, style="dim"),
        Text(""),
    ]

    if not shell.is_authenticated:
        parts.append(Text("Login", style="bold"))
        parts.append(Text("Run `login` or `signup` to get started."))
        return Group(*parts)

    if shell.entries:
        parts.append(render_insight(shell))

    parts.append(MoodChart(shell.entries).render())
    return Group(*parts)
