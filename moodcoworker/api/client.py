"""
Mood journal API client.

Thin wrapper over the remote REST API:

    POST /auth/login    {email, password}        -> {token}
    POST /auth/signup   {name, email, password}  -> {token}
    GET  /entries       (Bearer)                 -> [{date, mood, note?}]
    POST /entries       (Bearer) entry fields    -> ignored

Every failure is raised as MoodApiError.
"""

import logging
from typing import Any, List, Optional

import requests

from moodcoworker.core.config import Config
from moodcoworker.core.errors import ErrorCode, MoodApiError
from moodcoworker.core.models import MoodEntry

logger = logging.getLogger(__name__)


class MoodApiClient:
    """
    Talks to the mood journal API.

    Holds no session state; the token is passed into each call.
    """

    def __init__(self, config: Config):
        self.config = config
        self.base_url = config.api_url
        self.timeout = config.request_timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def _auth_headers(token: Optional[str]) -> dict:
        if not token:
            raise MoodApiError(ErrorCode.NOT_AUTHENTICATED, "No session token, log in first")
        return {"Authorization": f"Bearer {token}"}

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        logger.debug(f"{method} {url}")

        try:
            if method == "GET":
                response = requests.get(url, timeout=self.timeout, **kwargs)
            else:
                response = requests.post(url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.RequestException as e:
            raise MoodApiError.from_request_exception(e) from e

        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise MoodApiError(ErrorCode.INVALID_RESPONSE, "Response body is not JSON") from e

    def _exchange_credentials(self, path: str, payload: dict) -> str:
        response = self._request("POST", path, json=payload)
        data = self._json(response)

        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise MoodApiError(ErrorCode.INVALID_RESPONSE, f"No token in {path} response")

        return token

    def login(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Exchange email/password for a session token.
        """
        return self._exchange_credentials(
            "/auth/login",
            {"email": email, "password": password},
        )

    def signup(self, name: Optional[str], email: Optional[str], password: Optional[str]) -> str:
        """
        Create an account and return its session token.
        """
        return self._exchange_credentials(
            "/auth/signup",
            {"name": name, "email": email, "password": password},
        )

    def list_entries(self, token: Optional[str]) -> List[MoodEntry]:
        """
        Read the whole entries collection, in server order.
        """
        headers = self._auth_headers(token)
        response = self._request("GET", "/entries", headers=headers)
        data = self._json(response)

        if not isinstance(data, list):
            raise MoodApiError(ErrorCode.INVALID_RESPONSE, "Entries response is not a list")

        try:
            return [MoodEntry.from_dict(item) for item in data]
        except ValueError as e:
            raise MoodApiError(ErrorCode.INVALID_RESPONSE, f"Bad entry in response: {e}") from e

    def create_entry(self, token: Optional[str], data: dict) -> None:
        """
        Submit a new entry. The response body is ignored.
        """
        headers = self._auth_headers(token)
        self._request("POST", "/entries", json=data, headers=headers)
