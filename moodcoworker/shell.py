"""
Application shell.

Owns the session and the loaded entries, runs every API call, and
exposes the derived insight. All state flows one way: API response
-> shell state -> view.

Write policy is refresh-after-write: a successful add re-reads the
whole collection rather than inserting locally.
"""

import logging
from typing import Callable, List, Optional

from moodcoworker.api.client import MoodApiClient
from moodcoworker.core.config import Config
from moodcoworker.core.errors import ActionResult, ErrorCode, MoodApiError
from moodcoworker.core.models import EntrySummary, MoodEntry
from moodcoworker.core.session import Session, TokenStore
from moodcoworker.review.insights import summarize

logger = logging.getLogger(__name__)

Alert = Callable[[str], None]

LOGIN_FAILED = "Login failed"
SIGNUP_FAILED = "Signup failed"


def _log_alert(message: str) -> None:
    logger.warning(message)


class MoodShell:
    """
    Session + entries state with the operations that change it.

    API and storage failures never raise out of here. Auth failures go to the
    alert callback; fetch and submit failures are logged. Every
    operation returns an ActionResult either way.
    """

    def __init__(
        self,
        client: MoodApiClient,
        session: Session,
        alert: Optional[Alert] = None,
    ):
        self.client = client
        self.session = session
        self.alert = alert or _log_alert
        self.entries: List[MoodEntry] = []

    @classmethod
    def from_config(cls, config: Config, alert: Optional[Alert] = None) -> "MoodShell":
        """Build a shell with the token restored from durable storage."""
        session = Session.restore(TokenStore(config.session_path))
        return cls(MoodApiClient(config), session, alert=alert)

    @property
    def token(self) -> Optional[str]:
        return self.session.token

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def summary(self) -> EntrySummary:
        return summarize(self.entries)

    def start(self) -> ActionResult:
        """
        Load entries for a restored session, if there is one.
        """
        if not self.is_authenticated:
            return ActionResult.failure(
                MoodApiError(ErrorCode.NOT_AUTHENTICATED, "No stored session")
            )
        return self.fetch_entries()

    def fetch_entries(self) -> ActionResult:
        """
        Replace the local entries with the server's list.

        On failure the previous entries stay as they were.
        """
        try:
            entries = self.client.list_entries(self.token)
        except MoodApiError as e:
            logger.error(f"Failed to fetch entries: {e}")
            return ActionResult.failure(e)

        self.entries = entries
        logger.debug(f"Loaded {len(entries)} entries")
        return ActionResult.success()

    def _on_token(self, token: str) -> ActionResult:
        """
        Keep the new token and read the journal with it.

        If the token cannot be written to disk the session still works
        for this run; the result carries a STORAGE_ERROR warning.
        """
        warning = None
        try:
            self.session.store_token(token)
        except OSError as e:
            logger.error(f"Could not save session to {self.session.store.path}: {e}")
            warning = MoodApiError(ErrorCode.STORAGE_ERROR, f"Session not saved: {e}")

        # A new token always means a fresh read of the journal
        self.fetch_entries()
        return ActionResult.success(warning=warning)

    def handle_login(self, email: Optional[str], password: Optional[str]) -> ActionResult:
        try:
            token = self.client.login(email, password)
        except MoodApiError as e:
            logger.info(f"Login rejected: {e}")
            self.alert(LOGIN_FAILED)
            return ActionResult.failure(e)

        return self._on_token(token)

    def handle_signup(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> ActionResult:
        try:
            token = self.client.signup(name, email, password)
        except MoodApiError as e:
            logger.info(f"Signup rejected: {e}")
            self.alert(SIGNUP_FAILED)
            return ActionResult.failure(e)

        return self._on_token(token)

    def add_entry(self, data: dict) -> ActionResult:
        """
        Submit an entry, then re-read the collection.

        Success means the entry was saved; the follow-up fetch may
        still fail on its own and is only logged.
        """
        try:
            self.client.create_entry(self.token, data)
        except MoodApiError as e:
            logger.error(f"Failed to save entry: {e}")
            return ActionResult.failure(e)

        self.fetch_entries()
        return ActionResult.success()

    def logout(self) -> ActionResult:
        """
        Drop the token everywhere and forget the loaded entries.

        Memory is always cleared; a failure to update the session file
        is returned as a STORAGE_ERROR.
        """
        self.entries = []
        try:
            self.session.clear()
        except OSError as e:
            self.session.token = None
            logger.error(f"Could not clear session file {self.session.store.path}: {e}")
            return ActionResult.failure(MoodApiError(ErrorCode.STORAGE_ERROR, f"Session file not cleared: {e}"))

        return ActionResult.success()
