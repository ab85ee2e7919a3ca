# Area: Store
"""
xox_coordinator._store.memory — In-Memory Stores
================================================

Process-local stores keyed by id. Sessions are kept as flat records so
callers never share a live Session object; each compare-and-swap runs
under a lock.
"""

import itertools
import logging
import threading
from typing import Any, Dict, Optional

from ..errors import StoreConflictError
from .._game.session import Session
from .base import User

logger = logging.getLogger("xox_coordinator.store.memory")


class InMemorySessionStore:
    """SessionStore backed by a dict of records."""

    def __init__(self):
        self._records: Dict[int, Dict[str, Any]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get(self, session_id: int) -> Optional[Session]:
        with self._lock:
            record = self._records.get(session_id)
            record = dict(record) if record is not None else None
        return Session.from_record(record) if record is not None else None

    def put(self, session: Session) -> Session:
        record = session.to_record()
        with self._lock:
            if session.id is None:
                record["id"] = next(self._ids)
                record["version"] = 1
            else:
                stored = self._records.get(session.id)
                stored_version = stored["version"] if stored else 0
                if stored_version != session.version:
                    logger.warning(
                        f"Version conflict on session {session.id}: "
                        f"stored={stored_version} expected={session.version}"
                    )
                    raise StoreConflictError(session.id, session.version)
                record["version"] = session.version + 1
            self._records[record["id"]] = record
        return Session.from_record(dict(record))


class InMemoryUserStore:
    """UserStore backed by a dict."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def put(self, user: User) -> User:
        with self._lock:
            self._users[user.user_id] = user
        return user
