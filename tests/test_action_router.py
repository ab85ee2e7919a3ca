# Area: Actions Tests
"""Tests for Action Router."""

import pytest
from unittest.mock import Mock, patch
from xox_coordinator._actions.action_router import ActionRouter
from xox_coordinator.errors import InvalidActionError


class TestActionRouter:
    """Tests for ActionRouter class."""

    def test_routes_to_correct_handler(self):
        """Test that messages are routed to registered handlers."""
        router = ActionRouter()
        mock_handler = Mock()
        mock_handler.handle.return_value = "outcome"
        router.register_handler("move", mock_handler)

        message = {"action": "move", "session_id": 1}
        result = router.route(message)

        mock_handler.handle.assert_called_once_with(message)
        assert result == "outcome"

    def test_unknown_action_raises(self):
        router = ActionRouter()
        with pytest.raises(InvalidActionError) as exc:
            router.route({"action": "fly"})
        assert exc.value.code == "INVALID_ACTION"

    def test_missing_action_raises(self):
        with pytest.raises(InvalidActionError):
            ActionRouter().route({})

    def test_unknown_action_logged(self):
        """Test that unknown actions are logged as warnings."""
        router = ActionRouter()
        with patch("xox_coordinator._actions.action_router.logger") as mock_logger:
            with pytest.raises(InvalidActionError):
                router.route({"action": "fly"})
            mock_logger.warning.assert_called_once()

    def test_get_handler(self):
        router = ActionRouter()
        handler = Mock()
        router.register_handler("view", handler)
        assert router.get_handler("view") is handler
        assert router.get_handler("start") is None
