"""
Session management.

The token lives in two places: the Session object passed to every
authenticated call, and a small JSON file that survives restarts.
Writes to the file only happen through Session.store/Session.clear.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class TokenStore:
    """
    Durable key-value storage for the session token.

    One JSON object per file. A missing, empty or corrupt file reads as
    "no token"; it is never an error.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}

        try:
            text = self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Session file {self.path} is unreadable, ignoring it: {e}")
            return {}

        if not text:
            return {}

        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.warning(f"Session file {self.path} is corrupt, ignoring it")
            return {}

        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        """
        Atomic save: temp file in the same directory, fsync, os.replace.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")

        with open(tmp, "w", encoding="utf-8") as f:
            f.write(json.dumps(data, indent=2, sort_keys=True) + "\n")
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp, self.path)

        try:
            os.chmod(self.path, 0o600)
        except OSError:
            logger.debug(f"Could not chmod {self.path}")

    def load(self) -> Optional[str]:
        """Read the stored token, or None."""
        token = self._read().get(TOKEN_KEY)
        if isinstance(token, str) and token:
            return token
        return None

    def save(self, token: str) -> None:
        """Persist the token under the fixed key."""
        data = self._read()
        data[TOKEN_KEY] = token
        self._write(data)

    def delete(self) -> None:
        """Remove the stored token, keeping any other keys."""
        data = self._read()
        if TOKEN_KEY not in data:
            return
        del data[TOKEN_KEY]
        self._write(data)


class Session:
    """
    In-memory session state, synchronized explicitly with a TokenStore.
    """

    def __init__(self, store: TokenStore, token: Optional[str] = None):
        self.store = store
        self.token = token

    @classmethod
    def restore(cls, store: TokenStore) -> "Session":
        """Build a session from whatever token is on disk."""
        token = store.load()
        if token:
            logger.debug(f"Restored session from {store.path}")
        return cls(store, token=token)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def store_token(self, token: str) -> None:
        """Set the token in memory and persist it."""
        self.token = token
        self.store.save(token)
        logger.info("Session token stored")

    def clear(self) -> None:
        """Forget the token in memory and on disk."""
        self.token = None
        self.store.delete()
        logger.info("Session cleared")
