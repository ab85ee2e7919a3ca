# Area: Store
"""
xox_coordinator._store — Session and User Persistence
=====================================================

Store contracts plus in-memory and SQLite implementations.
"""

from .base import SessionStore, User, UserStore
from .database import init_database
from .memory import InMemorySessionStore, InMemoryUserStore
from .repo_sessions import SqliteSessionStore
from .repo_users import SqliteUserStore

__all__ = [
    "SessionStore",
    "UserStore",
    "User",
    "init_database",
    "InMemorySessionStore",
    "InMemoryUserStore",
    "SqliteSessionStore",
    "SqliteUserStore",
]
