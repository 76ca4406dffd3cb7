"""
Unit tests for the mood journal API client.

HTTP calls are patched at the requests module level.
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moodcoworker.api.client import MoodApiClient
from moodcoworker.core.config import Config
from moodcoworker.core.errors import ErrorCode, MoodApiError

API = "http://mood.test/api"


def _response(status=200, body=None, url=API):
    response = requests.Response()
    response.status_code = status
    response.url = url
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


@pytest.fixture
def client(tmp_path):
    return MoodApiClient(Config(api_url=API, request_timeout=3, session_path=tmp_path / "s.json"))


class TestAuth:
    """Credential exchange."""

    @patch("moodcoworker.api.client.requests.post")
    def test_login_returns_token(self, mock_post, client):
        mock_post.return_value = _response(body={"token": "tok-1"})

        assert client.login("a@b.c", "pw") == "tok-1"
        mock_post.assert_called_once_with(
            f"{API}/auth/login",
            timeout=3,
            json={"email": "a@b.c", "password": "pw"},
        )

    @patch("moodcoworker.api.client.requests.post")
    def test_signup_sends_name(self, mock_post, client):
        mock_post.return_value = _response(body={"token": "tok-2"})

        assert client.signup("Ann", "a@b.c", "pw") == "tok-2"
        assert mock_post.call_args.args[0] == f"{API}/auth/signup"
        assert mock_post.call_args.kwargs["json"] == {"name": "Ann", "email": "a@b.c", "password": "pw"}

    @patch("moodcoworker.api.client.requests.post")
    def test_rejected_credentials(self, mock_post, client):
        mock_post.return_value = _response(status=401, body={"message": "nope"})

        with pytest.raises(MoodApiError) as exc_info:
            client.login("a@b.c", "bad")

        assert exc_info.value.code == ErrorCode.UNAUTHORIZED
        assert exc_info.value.status_code == 401

    @patch("moodcoworker.api.client.requests.post")
    def test_missing_token_is_invalid(self, mock_post, client):
        mock_post.return_value = _response(body={"ok": True})

        with pytest.raises(MoodApiError) as exc_info:
            client.login("a@b.c", "pw")

        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    @patch("moodcoworker.api.client.requests.post")
    def test_network_error(self, mock_post, client):
        mock_post.side_effect = requests.ConnectionError("refused")

        with pytest.raises(MoodApiError) as exc_info:
            client.login("a@b.c", "pw")

        assert exc_info.value.code == ErrorCode.NETWORK_ERROR

    @patch("moodcoworker.api.client.requests.post")
    def test_timeout(self, mock_post, client):
        mock_post.side_effect = requests.Timeout("slow")

        with pytest.raises(MoodApiError) as exc_info:
            client.signup("Ann", "a@b.c", "pw")

        assert exc_info.value.code == ErrorCode.TIMEOUT


class TestEntries:
    """Authenticated reads and writes."""

    @patch("moodcoworker.api.client.requests.get")
    def test_list_sends_bearer(self, mock_get, client):
        mock_get.return_value = _response(body=[
            {"date": "2024-03-01", "mood": 8},
            {"date": "2024-03-02", "mood": 6, "note": "tired"},
        ])

        entries = client.list_entries("tok")

        assert [e.mood for e in entries] == [8, 6]
        assert entries[1].note == "tired"
        mock_get.assert_called_once_with(
            f"{API}/entries",
            timeout=3,
            headers={"Authorization": "Bearer tok"},
        )

    @patch("moodcoworker.api.client.requests.get")
    def test_list_keeps_server_order(self, mock_get, client):
        mock_get.return_value = _response(body=[
            {"date": "2024-03-05", "mood": 1},
            {"date": "2024-03-01", "mood": 2},
        ])

        assert [e.mood for e in client.list_entries("tok")] == [1, 2]

    @patch("moodcoworker.api.client.requests.get")
    def test_list_not_a_list(self, mock_get, client):
        mock_get.return_value = _response(body={"entries": []})

        with pytest.raises(MoodApiError) as exc_info:
            client.list_entries("tok")

        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    @patch("moodcoworker.api.client.requests.get")
    def test_list_server_error(self, mock_get, client):
        mock_get.return_value = _response(status=500, body={"error": "boom"})

        with pytest.raises(MoodApiError) as exc_info:
            client.list_entries("tok")

        assert exc_info.value.code == ErrorCode.SERVER_ERROR

    @patch("moodcoworker.api.client.requests.get")
    def test_list_without_token_makes_no_request(self, mock_get, client):
        with pytest.raises(MoodApiError) as exc_info:
            client.list_entries(None)

        assert exc_info.value.code == ErrorCode.NOT_AUTHENTICATED
        mock_get.assert_not_called()

    @patch("moodcoworker.api.client.requests.post")
    def test_create_entry(self, mock_post, client):
        mock_post.return_value = _response(status=201, body={"_id": "x"})
        data = {"date": "2024-03-01T09:00:00+00:00", "mood": 7, "note": "fine"}

        assert client.create_entry("tok", data) is None
        mock_post.assert_called_once_with(
            f"{API}/entries",
            timeout=3,
            json=data,
            headers={"Authorization": "Bearer tok"},
        )

    @patch("moodcoworker.api.client.requests.post")
    def test_create_entry_ignores_empty_body(self, mock_post, client):
        mock_post.return_value = _response(status=204)
        client.create_entry("tok", {"mood": 5})

    @patch("moodcoworker.api.client.requests.post")
    def test_create_entry_bad_request(self, mock_post, client):
        mock_post.return_value = _response(status=422, body={"error": "mood"})

        with pytest.raises(MoodApiError) as exc_info:
            client.create_entry("tok", {"mood": 50})

        assert exc_info.value.code == ErrorCode.BAD_REQUEST
