# Area: Actions
"""Per-action handlers and the router that dispatches to them."""

from .action_router import ActionRouter
from .handler_base import BaseActionHandler, HandlerOutcome
from .handler_join import JoinHandler
from .handler_move import MoveHandler
from .handler_resign import ResignHandler
from .handler_start import StartHandler
from .handler_view import ViewHandler

__all__ = [
    "ActionRouter",
    "BaseActionHandler",
    "HandlerOutcome",
    "JoinHandler",
    "MoveHandler",
    "ResignHandler",
    "StartHandler",
    "ViewHandler",
]
