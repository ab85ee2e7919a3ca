"""
xox_coordinator — Two-Player Board Game Session Coordinator
===========================================================

Manages XOX game sessions: seats two players first come first served,
enforces turn order, detects wins and draws, and broadcasts every
committed change to the session's channel.

Quick Start:
    from xox_coordinator import (
        SessionCoordinator, InMemorySessionStore, InMemoryUserStore,
        ChannelNotifier, channel_key,
    )
    notifier = ChannelNotifier()
    coordinator = SessionCoordinator(InMemorySessionStore(),
                                     InMemoryUserStore(), notifier)
    session_id = coordinator.start("alice", mark="X").session.session_id
    coordinator.join(session_id, "bob", mark="O")
    result = coordinator.move(session_id, "alice", 1, 1)

Every action returns an ActionResult: ``result.session`` on success,
``result.error`` (code, status, message) otherwise.
"""

from ._game import Board, Seat, Session, SessionState, Slot
from ._game.matchmaker import SeatDecision, SeatDecisionKind, decide_seat
from ._shared.logging_config import setup_logging
from ._shared.notifier import ChannelNotifier, Notifier, channel_key
from ._store import (
    InMemorySessionStore,
    InMemoryUserStore,
    SessionStore,
    SqliteSessionStore,
    SqliteUserStore,
    User,
    UserStore,
    init_database,
)
from ._config import load_config
from .coordinator import SessionCoordinator, build_coordinator
from .errors import (
    XoxError,
    NotFoundError,
    SessionNotFoundError,
    UserNotFoundError,
    SlotsFullError,
    MarkCollisionError,
    SessionClosedError,
    OpponentMissingError,
    NotAParticipantError,
    NotYourTurnError,
    CellOccupiedError,
    OutOfBoundsError,
    StoreConflictError,
    InvalidMarkError,
    InvalidActionError,
)
from .views import ActionResult, ErrorView, PlayerView, SessionView

__all__ = [
    # Main classes
    "SessionCoordinator",
    "build_coordinator",
    "load_config",
    "setup_logging",
    # Core
    "Board",
    "Seat",
    "Session",
    "SessionState",
    "Slot",
    "SeatDecision",
    "SeatDecisionKind",
    "decide_seat",
    # Collaborators
    "SessionStore",
    "UserStore",
    "User",
    "InMemorySessionStore",
    "InMemoryUserStore",
    "SqliteSessionStore",
    "SqliteUserStore",
    "init_database",
    "Notifier",
    "ChannelNotifier",
    "channel_key",
    # Views
    "ActionResult",
    "ErrorView",
    "PlayerView",
    "SessionView",
    # Errors
    "XoxError",
    "NotFoundError",
    "SessionNotFoundError",
    "UserNotFoundError",
    "SlotsFullError",
    "MarkCollisionError",
    "SessionClosedError",
    "OpponentMissingError",
    "NotAParticipantError",
    "NotYourTurnError",
    "CellOccupiedError",
    "OutOfBoundsError",
    "StoreConflictError",
    "InvalidMarkError",
    "InvalidActionError",
]
__version__ = "1.0.0"
