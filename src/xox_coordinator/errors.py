"""
xox_coordinator.errors — Custom exception classes
==================================================

Defines the exception hierarchy for session actions.
Every error carries a stable ``code`` and an HTTP-like ``status`` so a
client can tell "not your turn" from "session over" from "cell taken".
The coordinator converts these into error results at the action
boundary; they never reach the caller as raw exceptions.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class XoxError(Exception):
    """Base exception for all XOX coordinator errors."""

    code = "ERROR"
    status = 500

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Structured form used for logging and error results."""
        data: Dict[str, Any] = {
            "code": self.code,
            "status": self.status,
            "message": self.message,
        }
        if self.context:
            data["context"] = dict(self.context)
        return data


class NotFoundError(XoxError):
    """A session or user does not exist."""

    code = "NOT_FOUND"
    status = 404


class SessionNotFoundError(NotFoundError):
    """Raised when no session is stored under the requested id."""

    def __init__(self, session_id: Any):
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found", session_id=session_id)


class UserNotFoundError(NotFoundError):
    """Raised when a user id is unknown to the user store."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id!r} not found", user_id=user_id)


class SlotsFullError(XoxError):
    """Both seats are taken by other users."""

    code = "SLOTS_FULL"
    status = 409

    def __init__(self, session_id: Optional[int] = None):
        super().__init__("No free seats left in this session", session_id=session_id)


class MarkCollisionError(XoxError):
    """The joining user's mark equals the seated opponent's mark."""

    code = "MARK_COLLISION"
    status = 409

    def __init__(self, mark: str):
        self.mark = mark
        super().__init__(
            f"Mark {mark!r} is already used by the seated opponent; "
            "change your mark and try again",
            mark=mark,
        )


class SessionClosedError(XoxError):
    """The session already reached a terminal state."""

    code = "SESSION_CLOSED"
    status = 409

    def __init__(self, state: Any = None):
        label = getattr(state, "value", state)
        super().__init__("Session is already over", state=label)


class OpponentMissingError(XoxError):
    """A move was attempted before the second player joined."""

    code = "OPPONENT_MISSING"
    status = 409

    def __init__(self) -> None:
        super().__init__("Second player has not joined yet, the game cannot start")


class NotAParticipantError(XoxError):
    """The acting user holds no seat; read-only access only."""

    code = "NOT_A_PARTICIPANT"
    status = 403

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            "You are not playing in this session, you can only watch",
            user_id=user_id,
        )


class NotYourTurnError(XoxError):
    """The acting user is seated but it is the opponent's turn."""

    code = "NOT_YOUR_TURN"
    status = 409

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Action forbidden, it is not your turn", user_id=user_id)


class CellOccupiedError(XoxError):
    """The target cell already holds a mark."""

    code = "CELL_OCCUPIED"
    status = 409

    def __init__(self, x: int, y: int):
        self.x, self.y = x, y
        super().__init__(f"Cell ({x}, {y}) is taken, try another one", x=x, y=y)


class OutOfBoundsError(XoxError):
    """The target coordinates lie outside the grid."""

    code = "OUT_OF_BOUNDS"
    status = 400

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x, self.y = x, y
        super().__init__(
            f"Cell ({x}, {y}) is outside the {width}x{height} board",
            x=x, y=y, width=width, height=height,
        )


class StoreConflictError(XoxError):
    """A concurrent write to the same session committed first."""

    code = "STORE_CONFLICT"
    status = 409

    def __init__(self, session_id: Any, expected_version: int):
        self.session_id = session_id
        self.expected_version = expected_version
        super().__init__(
            f"Session {session_id} was modified concurrently "
            f"(expected version {expected_version})",
            session_id=session_id,
            expected_version=expected_version,
        )


class InvalidMarkError(XoxError):
    """A mark must be exactly one non-whitespace character."""

    code = "INVALID_MARK"
    status = 400

    def __init__(self, mark: Any):
        super().__init__(
            f"Invalid mark {mark!r}: expected a single character", mark=repr(mark)
        )


class InvalidActionError(XoxError):
    """Unknown action name or a malformed action message."""

    code = "INVALID_ACTION"
    status = 400


def validate_mark(mark: Any) -> str:
    """Return ``mark`` if it is a single non-whitespace character."""
    if not isinstance(mark, str) or len(mark) != 1 or mark.isspace():
        raise InvalidMarkError(mark)
    return mark
