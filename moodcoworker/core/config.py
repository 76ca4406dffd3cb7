"""
Configuration management for Mood Co-Worker.

Loads settings from environment variables (and a .env file, when the CLI
calls load_dotenv before building the config).
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_API_URL = "http://localhost:4000/api"
DEFAULT_TIMEOUT_SECONDS = 10.0


def default_session_path() -> Path:
    """Where the session token lives when nothing else is configured."""
    return Path.home() / ".config" / "moodcoworker" / "session.json"


@dataclass
class Config:
    """Application configuration."""

    # Remote API
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS

    # Durable client storage for the session token
    session_path: Optional[Path] = None

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        # Paths are joined with "/", so a trailing slash would double up
        self.api_url = self.api_url.rstrip("/")
        if self.session_path is None:
            self.session_path = default_session_path()

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        timeout_raw = os.getenv("MOOD_API_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            raise ValueError(f"MOOD_API_TIMEOUT must be a number of seconds, got {timeout_raw!r}")

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {log_level!r}")

        session_raw = os.getenv("MOOD_SESSION_PATH")
        session_path = Path(session_raw).expanduser() if session_raw else None

        return cls(
            api_url=os.getenv("MOOD_API_URL") or DEFAULT_API_URL,
            request_timeout=timeout,
            session_path=session_path,
            log_level=log_level,
        )

    def get_summary(self) -> str:
        """Get a summary of current settings."""
        return f"""API: {self.api_url}
Timeout: {self.request_timeout:g}s
Session file: {self.session_path}
Log level: {self.log_level}
"""
