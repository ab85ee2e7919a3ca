# Area: Store
"""
xox_coordinator._store.repo_sessions — Sessions Repository
==========================================================

Repository for the sessions table. Implements the SessionStore
contract; updates are conditional on the version that was read, so a
lost race is detected by the row count of the UPDATE.
"""

import logging
from typing import Optional

from ..errors import StoreConflictError
from .._game.session import Session
from .database import BaseRepository

logger = logging.getLogger("xox_coordinator.store.sessions")


class SqliteSessionStore(BaseRepository):
    """Repository for sessions table."""

    def get(self, session_id: int) -> Optional[Session]:
        """
        Get a session by ID.

        Args:
            session_id: Session identifier to look up

        Returns:
            Session rebuilt from its row, or None if not found
        """
        query = "SELECT * FROM sessions WHERE id = ?"
        row = self._fetch_one(query, (session_id,))
        return Session.from_record(row) if row else None

    def put(self, session: Session) -> Session:
        """
        Insert a new session or update an existing one.

        Raises:
            StoreConflictError: If the stored version is not session.version
        """
        record = session.to_record()
        if session.id is None:
            query = """
                INSERT INTO sessions
                (player1_id, player2_id, board, active_slot, state, version)
                VALUES (?, ?, ?, ?, ?, 1)
            """
            new_id = self._write(query, (
                record["player1_id"],
                record["player2_id"],
                record["board"],
                record["active_slot"],
                record["state"],
            )).lastrowid
            record["id"], record["version"] = new_id, 1
            logger.debug(f"Inserted session {new_id}")
            return Session.from_record(record)

        query = """
            UPDATE sessions
            SET player1_id = ?, player2_id = ?, board = ?, active_slot = ?,
                state = ?, version = version + 1, updated_at = CURRENT_TIMESTAMP
            WHERE id = ? AND version = ?
        """
        rowcount = self._write(query, (
            record["player1_id"],
            record["player2_id"],
            record["board"],
            record["active_slot"],
            record["state"],
            session.id,
            session.version,
        )).rowcount
        if rowcount != 1:
            logger.warning(
                f"Version conflict on session {session.id} (expected {session.version})"
            )
            raise StoreConflictError(session.id, session.version)
        record["version"] = session.version + 1
        return Session.from_record(record)
