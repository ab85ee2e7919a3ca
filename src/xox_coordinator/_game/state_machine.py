# Area: Game
"""
xox_coordinator._game.state_machine — Session State Machine
===========================================================

Transition table for the session lifecycle. A session only moves
forward; terminal states accept no events.
"""

import logging

from ..errors import SessionClosedError
from .enums import SessionEvent, SessionState

logger = logging.getLogger("xox_coordinator.game.state_machine")


_OPEN_TRANSITIONS = {
    SessionEvent.MOVE_PLAYED: SessionState.IN_PROGRESS,
    SessionEvent.LINE_COMPLETED: SessionState.FINISHED,
    SessionEvent.BOARD_FILLED: SessionState.DRAW,
    SessionEvent.RESIGNED: SessionState.FINISHED,
}

# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionState.NOT_STARTED: dict(_OPEN_TRANSITIONS),
    SessionState.IN_PROGRESS: dict(_OPEN_TRANSITIONS),
    SessionState.FINISHED: {},
    SessionState.DRAW: {},
}


def can_transition(state: SessionState, event: SessionEvent) -> bool:
    """Check whether ``event`` is accepted in ``state``."""
    return event in TRANSITIONS.get(state, {})


def next_state(state: SessionState, event: SessionEvent) -> SessionState:
    """
    Resolve the state reached from ``state`` on ``event``.

    Raises:
        SessionClosedError: If ``state`` does not accept the event
    """
    if not can_transition(state, event):
        raise SessionClosedError(state)
    new_state = TRANSITIONS[state][event]
    logger.debug(f"Transition: {state.value} --{event.value}--> {new_state.value}")
    return new_state
