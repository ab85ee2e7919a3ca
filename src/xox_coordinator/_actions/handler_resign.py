# Area: Actions
"""
xox_coordinator._actions.handler_resign — Resign Action
=======================================================

Ends the session in the opponent's favour.
"""

import logging
from typing import Any, Dict

from .handler_base import BaseActionHandler, HandlerOutcome

logger = logging.getLogger("xox_coordinator.actions.resign")


class ResignHandler(BaseActionHandler):
    action = "resign"

    def handle(self, message: Dict[str, Any]) -> HandlerOutcome:
        session_id = self.extract_session_id(message)
        user_id = self.extract_user_id(message)
        self.log_handling(session_id, user_id)

        session = self.load_session(session_id)
        event = session.resign(user_id)
        logger.info(f"Session {session_id}: {user_id} resigned")
        return HandlerOutcome(session=session, changed=True, event=event)
