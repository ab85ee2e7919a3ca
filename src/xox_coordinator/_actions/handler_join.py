# Area: Actions
"""
xox_coordinator._actions.handler_join — Join Action
===================================================

Seats the acting user in a free slot, first come first served.
Rejoining a seat already held is a no-op. A user seen for the first
time is only registered once the seat decision succeeded.
"""

import logging
from typing import Any, Dict, Optional

from .._game.matchmaker import SeatDecisionKind
from .handler_base import BaseActionHandler, HandlerOutcome

logger = logging.getLogger("xox_coordinator.actions.join")


class JoinHandler(BaseActionHandler):
    action = "join"

    def handle(self, message: Dict[str, Any]) -> HandlerOutcome:
        session_id = self.extract_session_id(message)
        user_id = self.extract_user_id(message)
        self.log_handling(session_id, user_id)

        session = self.load_session(session_id)
        known = self.users.get(user_id)
        user = known or self.new_user(user_id, message.get("mark"), self.config["joiner_mark"])

        decision = session.join(
            user_id,
            user.mark,
            player1_mark=self._mark_of(session.player1.user_id),
            player2_mark=self._mark_of(session.player2.user_id),
        )
        if decision.kind is SeatDecisionKind.ALREADY_SEATED:
            logger.info(f"User {user_id} already holds {decision.slot.value} in session {session_id}")
            return HandlerOutcome(session=session, changed=False)

        if known is None:
            self.ensure_user(user_id, user.mark, self.config["joiner_mark"])
        logger.info(f"User {user_id} takes {decision.slot.value} in session {session_id}")
        return HandlerOutcome(session=session, changed=True)

    def _mark_of(self, user_id: Optional[str]) -> Optional[str]:
        if user_id is None:
            return None
        user = self.users.get(user_id)
        return user.mark if user else None
