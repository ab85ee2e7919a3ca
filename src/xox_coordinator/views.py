"""
xox_coordinator.views — Serialized session views
================================================

Pydantic models for what clients see: the session snapshot broadcast
on every change and the result of each action.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from ._game.enums import SessionState, Slot
from ._game.session import Session
from ._store.base import User
from .errors import XoxError


class PlayerView(BaseModel):
    """A seated player."""
    model_config = ConfigDict(frozen=True)

    user_id: str
    mark: str


class SessionView(BaseModel):
    """Snapshot of one session as sent to clients."""
    model_config = ConfigDict(frozen=True)

    session_id: int
    player1: Optional[PlayerView] = None
    player2: Optional[PlayerView] = None
    board: List[List[str]]
    state: SessionState
    active_slot: Slot
    active_user_id: Optional[str] = None
    version: int

    @classmethod
    def from_session(cls, session: Session, users: Mapping[str, User]) -> "SessionView":
        """
        Build the view of ``session``.

        Args:
            session: A stored session (id assigned)
            users: Seated users keyed by id; a missing entry renders
                the player with an empty mark
        """
        return cls(
            session_id=session.id,
            player1=_player_view(session.player1.user_id, users),
            player2=_player_view(session.player2.user_id, users),
            board=session.board.rows(),
            state=session.state,
            active_slot=session.active_slot,
            active_user_id=session.active_user_id,
            version=session.version,
        )

    def to_payload(self) -> str:
        """JSON payload for the notifier."""
        return self.model_dump_json()


def _player_view(user_id: Optional[str], users: Mapping[str, User]) -> Optional[PlayerView]:
    if user_id is None:
        return None
    user = users.get(user_id)
    return PlayerView(user_id=user_id, mark=user.mark if user else "")


class ErrorView(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    status: int
    message: str

    @classmethod
    def from_error(cls, error: XoxError) -> "ErrorView":
        return cls(code=error.code, status=error.status, message=error.message)


class ActionResult(BaseModel):
    """Outcome of one action: a session view or an error, never both."""
    model_config = ConfigDict(frozen=True)

    session: Optional[SessionView] = None
    error: Optional[ErrorView] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, view: SessionView) -> "ActionResult":
        return cls(session=view)

    @classmethod
    def failure(cls, error: XoxError) -> "ActionResult":
        return cls(error=ErrorView.from_error(error))

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json", exclude_none=True)
        data["ok"] = self.ok
        return data
