# Area: Actions
"""
xox_coordinator._actions.handler_move — Move Action
===================================================

Places the acting user's mark. Preconditions are checked in a fixed
order (session open, opponent seated, participant, turn, cell) so the
caller always gets the most fundamental reason first.
"""

import logging
from typing import Any, Dict

from .handler_base import BaseActionHandler, HandlerOutcome

logger = logging.getLogger("xox_coordinator.actions.move")


class MoveHandler(BaseActionHandler):
    action = "move"

    def handle(self, message: Dict[str, Any]) -> HandlerOutcome:
        session_id = self.extract_session_id(message)
        user_id = self.extract_user_id(message)
        x = self.extract_int(message, "x")
        y = self.extract_int(message, "y")
        self.log_handling(session_id, user_id)

        session = self.load_session(session_id)
        session.ensure_can_move(user_id)
        user = self.load_user(user_id)

        event = session.move(user_id, x, y, user.mark)
        logger.info(
            f"Session {session_id}: {user_id} played {user.mark!r} at ({x}, {y}) "
            f"-> {session.state.value}"
        )
        return HandlerOutcome(session=session, changed=True, event=event)
