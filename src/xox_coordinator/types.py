"""
xox_coordinator.types — TypedDict schemas for action messages
=============================================================

Documents the structure of the message dicts accepted by
``SessionCoordinator.dispatch``. The ``action`` key selects the
handler; the remaining keys are that action's arguments.

    >>> MoveMessage.__annotations__
    {'action': ..., 'session_id': int, 'user_id': str, 'x': int, 'y': int}
"""

from typing import Literal, TypedDict


class StartMessage(TypedDict, total=False):
    """Create a session; ``mark`` is used only if the user is new."""
    action: Literal["start"]
    user_id: str
    mark: str


class JoinMessage(TypedDict, total=False):
    """Take a free seat; ``mark`` is used only if the user is new."""
    action: Literal["join"]
    session_id: int
    user_id: str
    mark: str


class MoveMessage(TypedDict):
    """Place the acting user's mark at column ``x``, row ``y``."""
    action: Literal["move"]
    session_id: int
    user_id: str
    x: int
    y: int


class ResignMessage(TypedDict):
    """Forfeit the game."""
    action: Literal["resign"]
    session_id: int
    user_id: str


class ViewMessage(TypedDict):
    """Read a session; open to anyone."""
    action: Literal["view"]
    session_id: int


ACTIONS = ("start", "join", "move", "resign", "view")
