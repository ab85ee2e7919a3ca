# Area: Coordinator Tests
"""Tests for the action message schemas."""

from xox_coordinator.types import (
    ACTIONS,
    JoinMessage,
    MoveMessage,
    ResignMessage,
    StartMessage,
    ViewMessage,
)


class TestActionMessages:
    """Typed messages drive dispatch end to end."""

    def test_actions_match_router(self, coordinator):
        for action in ACTIONS:
            assert coordinator.router.get_handler(action) is not None

    def test_typed_game(self, coordinator):
        start: StartMessage = {"action": "start", "user_id": "alice", "mark": "X"}
        session_id = coordinator.dispatch(start).session.session_id

        join: JoinMessage = {"action": "join", "session_id": session_id, "user_id": "bob"}
        move: MoveMessage = {"action": "move", "session_id": session_id,
                             "user_id": "alice", "x": 0, "y": 0}
        resign: ResignMessage = {"action": "resign", "session_id": session_id, "user_id": "bob"}
        view: ViewMessage = {"action": "view", "session_id": session_id}

        for message in (join, move, resign):
            assert coordinator.dispatch(message).ok
        assert coordinator.dispatch(view).session.version == 4
