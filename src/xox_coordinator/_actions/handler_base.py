# Area: Actions
"""
xox_coordinator._actions.handler_base — Base Action Handler
===========================================================

Abstract base class for all action handlers. A handler re-reads the
session from the store, validates the action and applies it to that
fresh copy. It never writes the session back itself: the coordinator
owns the versioned write and the broadcast that follows it.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import InvalidActionError, SessionNotFoundError, UserNotFoundError
from .._game.enums import SessionEvent
from .._game.session import Session
from .._store.base import SessionStore, User, UserStore

logger = logging.getLogger("xox_coordinator.actions.handler")

INT_PATTERN = re.compile(r"-?[0-9]+")


@dataclass
class HandlerOutcome:
    """
    Result of handling one action.

    Attributes:
        session: The session after the action (unsaved if changed)
        changed: True if the session must be written and broadcast
        event: State machine event produced, if any
    """

    session: Session
    changed: bool = False
    event: Optional[SessionEvent] = None


class BaseActionHandler(ABC):
    """
    Abstract base class for action handlers.

    Provides helper methods for:
    - Extracting and type-checking message fields
    - Loading sessions and users (raising NotFound errors)
    - Creating a user on first contact
    """

    action = ""

    def __init__(self, sessions: SessionStore, users: UserStore, config: Dict[str, Any]):
        """
        Initialize handler.

        Args:
            sessions: Session store
            users: User store
            config: Coordinator configuration
        """
        self.sessions = sessions
        self.users = users
        self.config = config

    @abstractmethod
    def handle(self, message: Dict[str, Any]) -> HandlerOutcome:
        """
        Handle an action message.

        Args:
            message: The action message

        Returns:
            HandlerOutcome for the coordinator to commit
        """
        pass

    def extract_user_id(self, message: Dict[str, Any]) -> str:
        user_id = message.get("user_id")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidActionError(f"{self.action}: 'user_id' must be a non-empty string")
        return user_id

    def extract_int(self, message: Dict[str, Any], key: str) -> int:
        """Read an integer field; digit strings are accepted, floats are not."""
        value = message.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and INT_PATTERN.fullmatch(value.strip()):
            return int(value)
        raise InvalidActionError(f"{self.action}: {key!r} must be an integer, got {value!r}")

    def extract_session_id(self, message: Dict[str, Any]) -> int:
        return self.extract_int(message, "session_id")

    def load_session(self, session_id: int) -> Session:
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def load_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def new_user(self, user_id: str, mark: Optional[str], default_mark: str) -> User:
        """Build (without storing) a user for a first contact."""
        return User(user_id=user_id, mark=mark if mark is not None else default_mark)

    def ensure_user(self, user_id: str, mark: Optional[str], default_mark: str) -> User:
        """
        Return the stored user, creating it on first contact.

        A mark supplied by a known user is ignored: marks are fixed at
        creation.
        """
        user = self.users.get(user_id)
        if user is not None:
            if mark is not None and mark != user.mark:
                logger.debug(f"Ignoring mark {mark!r} for existing user {user_id}")
            return user
        user = self.users.put(self.new_user(user_id, mark, default_mark))
        logger.info(f"Registered user {user_id} with mark {user.mark!r}")
        return user

    def log_handling(self, session_id: Any, user_id: Optional[str]) -> None:
        logger.info(f"Handling {self.action} (session={session_id}, user={user_id})")
