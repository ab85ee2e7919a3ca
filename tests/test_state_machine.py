# Area: Game Tests
"""Tests for the session state machine."""

import pytest
from xox_coordinator._game.enums import SessionEvent, SessionState, Slot
from xox_coordinator._game.state_machine import TRANSITIONS, can_transition, next_state
from xox_coordinator.errors import SessionClosedError


class TestSessionStateMachine:
    """Tests for the transition table."""

    def test_first_move_starts_game(self):
        assert next_state(SessionState.NOT_STARTED, SessionEvent.MOVE_PLAYED) == SessionState.IN_PROGRESS

    def test_move_keeps_game_in_progress(self):
        assert next_state(SessionState.IN_PROGRESS, SessionEvent.MOVE_PLAYED) == SessionState.IN_PROGRESS

    @pytest.mark.parametrize("state", [SessionState.NOT_STARTED, SessionState.IN_PROGRESS])
    def test_open_states_can_finish(self, state):
        """Test that open states reach both terminal states."""
        assert next_state(state, SessionEvent.LINE_COMPLETED) == SessionState.FINISHED
        assert next_state(state, SessionEvent.BOARD_FILLED) == SessionState.DRAW
        assert next_state(state, SessionEvent.RESIGNED) == SessionState.FINISHED

    @pytest.mark.parametrize("state", [SessionState.FINISHED, SessionState.DRAW])
    def test_terminal_states_accept_nothing(self, state):
        """Test that terminal states reject every event."""
        assert state.is_terminal is True
        for event in SessionEvent:
            assert can_transition(state, event) is False
            with pytest.raises(SessionClosedError):
                next_state(state, event)

    def test_resignation_never_draws(self):
        """Test that resigning only ever leads to FINISHED."""
        targets = {t[SessionEvent.RESIGNED] for t in TRANSITIONS.values() if SessionEvent.RESIGNED in t}
        assert targets == {SessionState.FINISHED}

    def test_slot_other(self):
        assert Slot.PLAYER1.other is Slot.PLAYER2
        assert Slot.PLAYER2.other is Slot.PLAYER1
