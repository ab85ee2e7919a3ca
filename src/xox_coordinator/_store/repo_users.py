# Area: Store
"""
xox_coordinator._store.repo_users — Users Repository
====================================================

Repository for the users table. Implements the UserStore contract.
"""

from typing import Optional

from .base import User
from .database import BaseRepository


class SqliteUserStore(BaseRepository):
    """Repository for users table."""

    def get(self, user_id: str) -> Optional[User]:
        """
        Get a user by ID.

        Args:
            user_id: User identifier to look up

        Returns:
            The User or None if not found
        """
        query = "SELECT user_id, mark FROM users WHERE user_id = ?"
        row = self._fetch_one(query, (user_id,))
        return User(user_id=row["user_id"], mark=row["mark"]) if row else None

    def put(self, user: User) -> User:
        """Insert the user, or replace the stored mark."""
        query = """
            INSERT INTO users (user_id, mark) VALUES (?, ?)
            ON CONFLICT(user_id) DO UPDATE SET mark = excluded.mark
        """
        self._write(query, (user.user_id, user.mark))
        return user
