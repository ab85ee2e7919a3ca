# Area: Game
"""
xox_coordinator._game — Session Core
====================================

Board, session state machine and seat assignment policy.
Pure in-memory logic with no I/O.
"""

from .board import Board, EMPTY
from .enums import SessionEvent, SessionState, Slot
from .matchmaker import SeatDecision, SeatDecisionKind, decide_seat
from .session import Seat, Session
from .state_machine import TRANSITIONS, can_transition, next_state

__all__ = [
    "Board",
    "EMPTY",
    "SessionEvent",
    "SessionState",
    "Slot",
    "SeatDecision",
    "SeatDecisionKind",
    "decide_seat",
    "Seat",
    "Session",
    "TRANSITIONS",
    "can_transition",
    "next_state",
]
