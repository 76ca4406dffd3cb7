"""
Terminal presentation components.

Auth panel, journal form, mood chart and the composed view.
"""

from moodcoworker.ui.auth_panel import AuthMode, AuthPanel
from moodcoworker.ui.chart import MoodChart
from moodcoworker.ui.journal_form import JournalForm
from moodcoworker.ui.view import render_view

__all__ = ["AuthMode", "AuthPanel", "MoodChart", "JournalForm", "render_view"]
