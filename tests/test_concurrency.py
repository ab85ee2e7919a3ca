# Area: Coordinator Tests
"""Tests for concurrent joins racing for the last seat."""

import os
import tempfile
import threading

import pytest
from xox_coordinator._shared.notifier import ChannelNotifier, channel_key
from xox_coordinator._store.database import init_database
from xox_coordinator._store.memory import InMemorySessionStore, InMemoryUserStore
from xox_coordinator._store.repo_sessions import SqliteSessionStore
from xox_coordinator._store.repo_users import SqliteUserStore
from xox_coordinator.coordinator import SessionCoordinator


class GatedReads:
    """Holds the first ``parties`` reads until all of them arrived."""

    def __init__(self, parties: int = 2):
        self.barrier = threading.Barrier(parties, timeout=5)
        self.remaining = parties
        self.lock = threading.Lock()

    def wait(self):
        with self.lock:
            gated = self.remaining > 0
            self.remaining -= 1
        if gated:
            self.barrier.wait()


class GatedMemoryStore(InMemorySessionStore):
    def __init__(self):
        super().__init__()
        self.gate = None

    def get(self, session_id):
        session = super().get(session_id)
        if self.gate:
            self.gate.wait()
        return session


class GatedSqliteStore(SqliteSessionStore):
    gate = None

    def get(self, session_id):
        session = super().get(session_id)
        if self.gate:
            self.gate.wait()
        return session


@pytest.fixture
def sqlite_path():
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    init_database(path)
    yield path
    os.unlink(path)


@pytest.fixture(params=["memory", "sqlite"])
def stores(request):
    if request.param == "memory":
        return GatedMemoryStore(), InMemoryUserStore()
    path = request.getfixturevalue("sqlite_path")
    return GatedSqliteStore(path), SqliteUserStore(path)


class TestConcurrentJoin:
    """Two users read the same open seat before either writes."""

    def test_exactly_one_join_wins(self, stores):
        sessions, users = stores
        notifier = ChannelNotifier()
        coordinator = SessionCoordinator(sessions, users, notifier)
        session_id = coordinator.start("alice", mark="X").session.session_id

        sessions.gate = GatedReads(parties=2)
        results = {}

        def join(user_id, mark):
            results[user_id] = coordinator.join(session_id, user_id, mark=mark)

        with notifier.subscribe(channel_key(session_id)) as queue:
            threads = [
                threading.Thread(target=join, args=("bob", "O")),
                threading.Thread(target=join, args=("carol", "C")),
            ]
            for t in threads:
                t.start()
            for t in threads:
                t.join(timeout=10)

            winners = [u for u, r in results.items() if r.ok]
            losers = [r for r in results.values() if not r.ok]
            assert len(winners) == 1
            assert [r.error.code for r in losers] == ["SLOTS_FULL"]

            assert queue.get(timeout=1)
            assert queue.empty()

        view = coordinator.view(session_id).session
        assert view.player2.user_id == winners[0]
        assert view.version == 2
