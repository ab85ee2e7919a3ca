# Area: Store
"""
xox_coordinator._store.base — Store Contracts
=============================================

Interfaces the coordinator needs from persistence. Sessions are
written with compare-and-swap on their ``version``: a write based on a
stale read raises StoreConflictError instead of silently overwriting
a concurrent update.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from ..errors import validate_mark
from .._game.session import Session


@dataclass(frozen=True)
class User:
    """A player identity and the mark they play with."""

    user_id: str
    mark: str

    def __post_init__(self):
        validate_mark(self.mark)


class SessionStore(Protocol):
    """Protocol for session persistence."""

    def get(self, session_id: int) -> Optional[Session]:
        """Return a fresh copy of the stored session, or None."""
        ...

    def put(self, session: Session) -> Session:
        """
        Persist ``session``.

        Inserts when ``session.id`` is None (assigning id and version 1);
        otherwise updates only if the stored version still equals
        ``session.version``, bumping it by one.

        Raises:
            StoreConflictError: If the stored version moved on
        """
        ...


class UserStore(Protocol):
    """Protocol for user identity storage."""

    def get(self, user_id: str) -> Optional[User]:
        ...

    def put(self, user: User) -> User:
        ...
