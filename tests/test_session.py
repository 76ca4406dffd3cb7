"""
Unit tests for durable token storage and the session object.
"""

import json
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moodcoworker.core.session import TOKEN_KEY, Session, TokenStore


class TestTokenStore:
    """JSON file under a fixed key."""

    def test_missing_file_reads_none(self, tmp_path):
        store = TokenStore(tmp_path / "nested" / "session.json")
        assert store.load() is None

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "session.json"
        store = TokenStore(path)

        store.save("abc123")

        assert store.load() == "abc123"
        assert json.loads(path.read_text()) == {TOKEN_KEY: "abc123"}
        assert not path.with_name("session.json.tmp").exists()

    def test_corrupt_file_reads_none(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")
        assert TokenStore(path).load() is None

    def test_non_utf8_file_reads_none(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_bytes(b'{"token": "\xff\xfe"}')
        assert TokenStore(path).load() is None

    def test_non_utf8_file_replaced_on_save(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_bytes(b'{"token": "\xff\xfe"}')
        store = TokenStore(path)

        store.save("fresh")

        assert store.load() == "fresh"

    def test_directory_in_place_of_file_reads_none(self, tmp_path):
        path = tmp_path / "session.json"
        path.mkdir()
        assert TokenStore(path).load() is None

    def test_empty_file_reads_none(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("")
        assert TokenStore(path).load() is None

    def test_delete_keeps_other_keys(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({TOKEN_KEY: "abc", "theme": "dark"}))

        TokenStore(path).delete()

        assert json.loads(path.read_text()) == {"theme": "dark"}

    def test_delete_without_file(self, tmp_path):
        path = tmp_path / "session.json"
        TokenStore(path).delete()
        assert not path.exists()


class TestSession:
    """Memory and disk stay in step through explicit calls."""

    def test_restore_without_token(self, tmp_path):
        session = Session.restore(TokenStore(tmp_path / "session.json"))
        assert session.token is None
        assert session.is_authenticated is False

    def test_store_token_persists(self, tmp_path):
        store = TokenStore(tmp_path / "session.json")
        session = Session(store)

        session.store_token("tok")

        assert session.token == "tok"
        assert Session.restore(store).token == "tok"

    def test_clear(self, tmp_path):
        store = TokenStore(tmp_path / "session.json")
        store.save("tok")
        session = Session.restore(store)

        session.clear()

        assert session.token is None
        assert store.load() is None
