# Area: Actions
"""
xox_coordinator._actions.action_router — Action Router
======================================================

Routes incoming action messages to their handlers based on the
``action`` key.
"""

import logging
from typing import Any, Dict, Optional, Protocol

from ..errors import InvalidActionError

logger = logging.getLogger("xox_coordinator.actions.router")


class ActionHandler(Protocol):
    """Protocol for action handlers."""

    def handle(self, message: Dict[str, Any]) -> Any:
        ...


class ActionRouter:
    """
    Routes action messages to handlers.

    Usage:
        router = ActionRouter()
        router.register_handler("move", move_handler)
        outcome = router.route({"action": "move", ...})
    """

    def __init__(self):
        """Initialize router with empty handler registry."""
        self._handlers: Dict[str, ActionHandler] = {}

    def register_handler(self, action: str, handler: ActionHandler) -> None:
        """
        Register a handler for an action.

        Args:
            action: The action name to handle
            handler: The handler instance
        """
        self._handlers[action] = handler
        logger.debug(f"Registered handler for {action}")

    def get_handler(self, action: str) -> Optional[ActionHandler]:
        return self._handlers.get(action)

    def route(self, message: Dict[str, Any]) -> Any:
        """
        Route a message to its handler.

        Args:
            message: The message to route (must have an 'action' key)

        Returns:
            The handler's result

        Raises:
            InvalidActionError: If no handler is registered for the action
        """
        action = message.get("action", "")
        handler = self._handlers.get(action)

        if handler is None:
            logger.warning(f"No handler for action: {action!r}")
            raise InvalidActionError(f"Unknown action: {action!r}")

        logger.debug(f"Routing {action} to handler")
        return handler.handle(message)
