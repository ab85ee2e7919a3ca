# Area: Actions
"""Read-only access to a session, open to participants and spectators."""

from typing import Any, Dict

from .handler_base import BaseActionHandler, HandlerOutcome


class ViewHandler(BaseActionHandler):
    action = "view"

    def handle(self, message: Dict[str, Any]) -> HandlerOutcome:
        session_id = self.extract_session_id(message)
        return HandlerOutcome(session=self.load_session(session_id))
