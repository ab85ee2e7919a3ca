# Area: Actions
"""
xox_coordinator._actions.handler_start — Start Action
=====================================================

Creates a session owned by the acting user, seated as player 1.
"""

from typing import Any, Dict

from .._game.session import Session
from .handler_base import BaseActionHandler, HandlerOutcome


class StartHandler(BaseActionHandler):
    action = "start"

    def handle(self, message: Dict[str, Any]) -> HandlerOutcome:
        user_id = self.extract_user_id(message)
        self.log_handling(None, user_id)
        self.ensure_user(user_id, message.get("mark"), self.config["creator_mark"])
        session = Session.create(
            user_id,
            width=self.config["board_width"],
            height=self.config["board_height"],
        )
        return HandlerOutcome(session=session, changed=True)
