"""
xox_coordinator.coordinator — Session Coordinator
=================================================

Coordinates handlers, stores and the notifier. Each action is one unit
of work:

1. route the message to its handler, which re-reads the session and
   applies the action to that fresh copy;
2. write the result back with a version check;
3. broadcast the new view, only after the write committed.

A write that loses a race (StoreConflictError) is retried once from
step 1, so preconditions are re-validated against the winner's state.
Commit and broadcast for one session run under a per-session lock, so
subscribers see that session's updates in commit order.
"""

import logging
import threading
from typing import Any, Dict, Optional

from ._actions import (
    ActionRouter,
    HandlerOutcome,
    JoinHandler,
    MoveHandler,
    ResignHandler,
    StartHandler,
    ViewHandler,
)
from ._config import DEFAULTS, validate_config
from ._game.session import Session
from ._shared.notifier import ChannelNotifier, Notifier, channel_key
from ._store import (
    InMemorySessionStore,
    InMemoryUserStore,
    SessionStore,
    SqliteSessionStore,
    SqliteUserStore,
    UserStore,
    init_database,
)
from .errors import StoreConflictError, XoxError
from .views import ActionResult, SessionView

logger = logging.getLogger("xox_coordinator.coordinator")

# First attempt plus one retry after a lost write race
MAX_ATTEMPTS = 2


class SessionCoordinator:
    """
    Entry point for session actions.

    Usage:
        coordinator = SessionCoordinator(InMemorySessionStore(),
                                         InMemoryUserStore(),
                                         ChannelNotifier())
        result = coordinator.start("alice")
        coordinator.join(result.session.session_id, "bob")
    """

    def __init__(
        self,
        sessions: SessionStore,
        users: UserStore,
        notifier: Notifier,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.config = {**DEFAULTS, **(config or {})}
        validate_config(self.config)
        self.sessions, self.users, self.notifier = sessions, users, notifier
        self.router = ActionRouter()
        self._commit_locks: Dict[int, threading.Lock] = {}
        self._commit_locks_guard = threading.Lock()
        self._register_handlers()

    def _register_handlers(self) -> None:
        reg = self.router.register_handler
        args = (self.sessions, self.users, self.config)
        reg("start", StartHandler(*args))
        reg("join", JoinHandler(*args))
        reg("move", MoveHandler(*args))
        reg("resign", ResignHandler(*args))
        reg("view", ViewHandler(*args))

    # ── Actions ──────────────────────────────────────────────

    def start(self, creator_id: str, mark: Optional[str] = None) -> ActionResult:
        return self.dispatch(_message("start", user_id=creator_id, mark=mark))

    def join(self, session_id: int, user_id: str, mark: Optional[str] = None) -> ActionResult:
        return self.dispatch(_message("join", session_id=session_id, user_id=user_id, mark=mark))

    def move(self, session_id: int, user_id: str, x: int, y: int) -> ActionResult:
        return self.dispatch(_message("move", session_id=session_id, user_id=user_id, x=x, y=y))

    def resign(self, session_id: int, user_id: str) -> ActionResult:
        return self.dispatch(_message("resign", session_id=session_id, user_id=user_id))

    def view(self, session_id: int) -> ActionResult:
        return self.dispatch(_message("view", session_id=session_id))

    def dispatch(self, message: Dict[str, Any]) -> ActionResult:
        """
        Run one action message to completion.

        Returns:
            ActionResult with the session view, or the error that
            stopped the action
        """
        action = message.get("action", "")
        attempt = 1
        while True:
            try:
                outcome = self.router.route(message)
                if not outcome.changed:
                    return ActionResult.success(self._view(outcome.session))
                return ActionResult.success(self._commit(outcome))
            except StoreConflictError as e:
                if attempt < MAX_ATTEMPTS:
                    logger.warning(f"{action}: lost write race on session {e.session_id}, retrying")
                    attempt += 1
                    continue
                logger.warning(f"{action}: giving up after {attempt} attempts: {e.message}")
                return ActionResult.failure(e)
            except XoxError as e:
                logger.warning(f"{action} rejected: {e.code} {e.message}")
                return ActionResult.failure(e)

    # ── Commit & notify ──────────────────────────────────────

    def _commit(self, outcome: HandlerOutcome) -> SessionView:
        session = outcome.session
        if session.id is None:
            saved = self.sessions.put(session)
            view = self._view(saved)
            with self._commit_lock(saved.id):
                self._notify(view)
            logger.info(f"Session {saved.id} created by {saved.player1.user_id}")
            return view

        with self._commit_lock(session.id):
            saved = self.sessions.put(session)
            view = self._view(saved)
            self._notify(view)
            if saved.is_terminal:
                self._release_commit_lock(saved.id)
        event = outcome.event.value if outcome.event else "seat change"
        logger.info(
            f"Session {saved.id} committed at version {saved.version} "
            f"({event} -> {saved.state.value})"
        )
        return view

    def _commit_lock(self, session_id: int) -> threading.Lock:
        with self._commit_locks_guard:
            return self._commit_locks.setdefault(session_id, threading.Lock())

    def _release_commit_lock(self, session_id: int) -> None:
        # Terminal sessions accept no further writes
        with self._commit_locks_guard:
            self._commit_locks.pop(session_id, None)

    def _notify(self, view: SessionView) -> None:
        channel = channel_key(view.session_id)
        try:
            self.notifier.broadcast(view.to_payload(), channel)
        except Exception as e:
            # Delivery is best effort: the write already committed
            logger.warning(f"Broadcast on {channel} failed: {e}", exc_info=True)

    def _view(self, session: Session) -> SessionView:
        users = {}
        for seat in (session.player1, session.player2):
            if not seat.is_empty:
                user = self.users.get(seat.user_id)
                if user is not None:
                    users[seat.user_id] = user
        return SessionView.from_session(session, users)


def _message(action: str, **fields: Any) -> Dict[str, Any]:
    message = {"action": action}
    message.update({k: v for k, v in fields.items() if v is not None})
    return message


def build_coordinator(
    config: Dict[str, Any],
    notifier: Optional[Notifier] = None,
) -> SessionCoordinator:
    """
    Build a coordinator with the stores selected by ``config["store"]``.

    Args:
        config: Loaded configuration
        notifier: Push transport; defaults to an in-process ChannelNotifier
    """
    if config.get("store", "sqlite") == "sqlite":
        db_path = config.get("db_path", DEFAULTS["db_path"])
        init_database(db_path)
        sessions: SessionStore = SqliteSessionStore(db_path)
        users: UserStore = SqliteUserStore(db_path)
    else:
        sessions, users = InMemorySessionStore(), InMemoryUserStore()
    return SessionCoordinator(sessions, users, notifier or ChannelNotifier(), config)
