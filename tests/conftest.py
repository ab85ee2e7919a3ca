# Area: Test Fixtures
"""Shared fixtures for coordinator tests."""

import pytest
from xox_coordinator._shared.notifier import ChannelNotifier
from xox_coordinator._store.memory import InMemorySessionStore, InMemoryUserStore
from xox_coordinator.coordinator import SessionCoordinator


@pytest.fixture
def notifier():
    return ChannelNotifier()


@pytest.fixture
def coordinator(notifier):
    """Coordinator over fresh in-memory stores."""
    return SessionCoordinator(InMemorySessionStore(), InMemoryUserStore(), notifier)


@pytest.fixture
def seated(coordinator):
    """Session id with alice (X) and bob (O) seated."""
    session_id = coordinator.start("alice", mark="X").session.session_id
    coordinator.join(session_id, "bob", mark="O")
    return session_id
