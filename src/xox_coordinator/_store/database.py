# Area: Store
"""
xox_coordinator._store.database — SQLite Connections
====================================================

Schema setup and the connection handling shared by the SQLite stores.
Each statement runs on its own short-lived connection, so a store can
be shared between threads. Writes report how many rows they touched:
the session store relies on that count to detect a stale version.
"""

import sqlite3
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, NamedTuple, Optional

logger = logging.getLogger("xox_coordinator.store.database")

# Path to schema file
SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Seconds a writer waits for a competing transaction before failing
BUSY_TIMEOUT = 5.0


class WriteResult(NamedTuple):
    """Rows touched by a committed write and the id it inserted, if any."""

    rowcount: int
    lastrowid: Optional[int]


def get_connection(db_path: str = "xox.db") -> sqlite3.Connection:
    """Open a connection whose rows can be read by column name."""
    conn = sqlite3.connect(db_path, timeout=BUSY_TIMEOUT)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def connection(db_path: str) -> Iterator[sqlite3.Connection]:
    conn = get_connection(db_path)
    try:
        yield conn
    finally:
        conn.close()


def init_database(db_path: str = "xox.db") -> None:
    """
    Create the tables if they do not exist yet.

    Args:
        db_path: Path to the SQLite database file
    """
    schema = SCHEMA_PATH.read_text()
    with connection(db_path) as conn:
        conn.executescript(schema)
        conn.commit()
    logger.info(f"Database initialized at {db_path}")


class BaseRepository:
    """Shared read and write helpers for the SQLite stores."""

    def __init__(self, db_path: str = "xox.db"):
        self.db_path = db_path

    def _fetch_one(self, query: str, params: tuple = ()) -> Optional[dict]:
        """Run a SELECT and return its first row as a dict, or None."""
        with connection(self.db_path) as conn:
            row = conn.execute(query, params).fetchone()
        return dict(row) if row is not None else None

    def _write(self, query: str, params: tuple = ()) -> WriteResult:
        """
        Run one INSERT or UPDATE in its own transaction.

        Returns:
            WriteResult; a conditional UPDATE that matched nothing has
            rowcount 0
        """
        with connection(self.db_path) as conn:
            cursor = conn.execute(query, params)
            conn.commit()
            return WriteResult(cursor.rowcount, cursor.lastrowid)
