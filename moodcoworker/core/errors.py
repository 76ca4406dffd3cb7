"""
Error types for Mood Co-Worker.

The API client raises MoodApiError. The shell catches it at the
operation boundary and hands callers an ActionResult instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests


class ErrorCode(str, Enum):
    """What went wrong talking to the API."""

    # Client errors (4xx)
    UNAUTHORIZED = "UNAUTHORIZED"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"

    # Server errors (5xx)
    SERVER_ERROR = "SERVER_ERROR"

    # Transport
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"

    # Response or local state
    INVALID_RESPONSE = "INVALID_RESPONSE"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    STORAGE_ERROR = "STORAGE_ERROR"


class MoodApiError(Exception):
    """A failed call to the mood journal API."""

    def __init__(self, code: ErrorCode, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"[{self.code.value} {self.status_code}] {self.message}"
        return f"[{self.code.value}] {self.message}"

    @classmethod
    def from_request_exception(cls, exc: requests.RequestException) -> "MoodApiError":
        """
        Map a requests exception onto an ErrorCode.

        HTTPError carries a response; everything else is a transport problem.
        """
        if isinstance(exc, requests.Timeout):
            return cls(ErrorCode.TIMEOUT, f"Request timed out: {exc}")

        response = getattr(exc, "response", None)
        if response is None:
            return cls(ErrorCode.NETWORK_ERROR, f"Request failed: {exc}")

        status = response.status_code
        if status == 401 or status == 403:
            code = ErrorCode.UNAUTHORIZED
        elif status == 404:
            code = ErrorCode.NOT_FOUND
        elif status >= 500:
            code = ErrorCode.SERVER_ERROR
        else:
            code = ErrorCode.BAD_REQUEST

        return cls(code, f"HTTP {status} from {response.url}", status_code=status)


@dataclass
class ActionResult:
    """
    Outcome of a shell operation.

    ok is False whenever error is set. warning is for a problem that
    did not stop the operation, e.g. a token that could not be saved.
    """

    ok: bool
    error: Optional[MoodApiError] = None
    warning: Optional[MoodApiError] = None

    @classmethod
    def success(cls, warning: Optional[MoodApiError] = None) -> "ActionResult":
        return cls(ok=True, warning=warning)

    @classmethod
    def failure(cls, error: MoodApiError) -> "ActionResult":
        return cls(ok=False, error=error)

    def __bool__(self) -> bool:
        return self.ok
