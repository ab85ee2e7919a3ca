# Area: Game
"""
xox_coordinator._game.enums — Session State Machine Enums
=========================================================

Defines the lifecycle states of a session, the events that move a
session between them, and the two player slots.
"""

from enum import Enum


class SessionState(Enum):
    """
    Lifecycle states of a session.

    State transitions:
    NOT_STARTED -> IN_PROGRESS (on MOVE_PLAYED)
    NOT_STARTED/IN_PROGRESS -> FINISHED (on LINE_COMPLETED or RESIGNED)
    NOT_STARTED/IN_PROGRESS -> DRAW (on BOARD_FILLED)
    IN_PROGRESS -> IN_PROGRESS (on MOVE_PLAYED)
    FINISHED, DRAW are terminal.
    """
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.FINISHED, SessionState.DRAW)


class SessionEvent(Enum):
    """
    Events produced by accepted actions.

    - MOVE_PLAYED: a mark was placed and the game goes on
    - LINE_COMPLETED: the placed mark completed a winning line
    - BOARD_FILLED: the placed mark filled the last empty cell, no winner
    - RESIGNED: a seated player forfeited
    """
    MOVE_PLAYED = "MOVE_PLAYED"
    LINE_COMPLETED = "LINE_COMPLETED"
    BOARD_FILLED = "BOARD_FILLED"
    RESIGNED = "RESIGNED"


class Slot(Enum):
    """The two player positions within a session."""
    PLAYER1 = "player1"
    PLAYER2 = "player2"

    @property
    def other(self) -> "Slot":
        return Slot.PLAYER2 if self is Slot.PLAYER1 else Slot.PLAYER1
