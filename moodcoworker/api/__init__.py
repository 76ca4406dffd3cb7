"""
HTTP client for the mood journal API.
"""

from moodcoworker.api.client import MoodApiClient

__all__ = ["MoodApiClient"]
