# Area: Store Tests
"""Tests for the shared SQLite helpers."""

import os
import tempfile

import pytest
from xox_coordinator._store.database import BaseRepository, init_database


class TestBaseRepository:
    """Tests for BaseRepository read and write helpers."""

    @pytest.fixture
    def repo(self):
        """Create repository over a temporary database."""
        fd, path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        init_database(path)
        yield BaseRepository(path)
        os.unlink(path)

    def test_insert_reports_new_id(self, repo):
        result = repo._write("INSERT INTO users (user_id, mark) VALUES (?, ?)", ("alice", "X"))
        assert result.rowcount == 1
        assert result.lastrowid is not None

    def test_unmatched_update_touches_no_rows(self, repo):
        """Test that a conditional UPDATE with no match reports rowcount 0."""
        result = repo._write("UPDATE users SET mark = ? WHERE user_id = ?", ("O", "nobody"))
        assert result.rowcount == 0

    def test_fetch_one(self, repo):
        repo._write("INSERT INTO users (user_id, mark) VALUES (?, ?)", ("alice", "X"))
        row = repo._fetch_one("SELECT user_id, mark FROM users WHERE user_id = ?", ("alice",))
        assert row == {"user_id": "alice", "mark": "X"}
        assert repo._fetch_one("SELECT * FROM users WHERE user_id = ?", ("bob",)) is None
