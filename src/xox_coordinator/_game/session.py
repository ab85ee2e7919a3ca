# Area: Game
"""
xox_coordinator._game.session — Session Aggregate
=================================================

One game between two seated users: two seats, a board, whose turn it
is, the lifecycle state and the optimistic-concurrency version.

Every operation validates all of its preconditions before touching
anything, so a rejected action leaves the session exactly as it was.
Session objects are rebuilt from the store for each action and are
never shared between requests.
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging

from ..errors import (
    NotAParticipantError,
    NotYourTurnError,
    OpponentMissingError,
    SessionClosedError,
    XoxError,
)
from .board import Board
from .enums import SessionEvent, SessionState, Slot
from .matchmaker import SeatDecision, SeatDecisionKind, decide_seat
from .state_machine import next_state

logger = logging.getLogger("xox_coordinator.game.session")


@dataclass(frozen=True)
class Seat:
    """A player slot: either empty or occupied by a user id."""

    user_id: Optional[str] = None

    @classmethod
    def empty(cls) -> "Seat":
        return cls()

    @classmethod
    def occupied(cls, user_id: str) -> "Seat":
        if user_id is None:
            raise ValueError("An occupied seat needs a user id")
        return cls(user_id=user_id)

    @property
    def is_empty(self) -> bool:
        return self.user_id is None

    def holds(self, user_id: str) -> bool:
        return not self.is_empty and self.user_id == user_id


@dataclass
class Session:
    board: Board
    player1: Seat = field(default_factory=Seat.empty)
    player2: Seat = field(default_factory=Seat.empty)
    active_slot: Slot = Slot.PLAYER1
    state: SessionState = SessionState.NOT_STARTED
    id: Optional[int] = None
    version: int = 0

    @classmethod
    def create(cls, creator_id: str, width: int = 3, height: int = 3) -> "Session":
        """New session owned by ``creator_id``, who takes seat 1."""
        return cls(board=Board(width, height), player1=Seat.occupied(creator_id))

    # ── Seats ────────────────────────────────────────────────

    def seat(self, slot: Slot) -> Seat:
        return self.player1 if slot is Slot.PLAYER1 else self.player2

    def slot_of(self, user_id: str) -> Optional[Slot]:
        if self.player1.holds(user_id):
            return Slot.PLAYER1
        if self.player2.holds(user_id):
            return Slot.PLAYER2
        return None

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    @property
    def active_user_id(self) -> Optional[str]:
        return self.seat(self.active_slot).user_id

    # ── Transitions ──────────────────────────────────────────

    def join(
        self,
        user_id: str,
        mark: str,
        player1_mark: Optional[str] = None,
        player2_mark: Optional[str] = None,
    ) -> SeatDecision:
        """
        Seat ``user_id`` if the matchmaker allows it.

        Returns:
            The SeatDecision; ALREADY_SEATED leaves the session untouched

        Raises:
            SlotsFullError, MarkCollisionError, SessionClosedError: When the
                join is refused
        """
        decision = decide_seat(self, user_id, mark, player1_mark, player2_mark)
        if decision.kind is SeatDecisionKind.REJECT:
            raise decision.reason
        if decision.kind is SeatDecisionKind.ASSIGN_PLAYER1:
            self.player1 = Seat.occupied(user_id)
        elif decision.kind is SeatDecisionKind.ASSIGN_PLAYER2:
            self.player2 = Seat.occupied(user_id)
        return decision

    def ensure_can_move(self, user_id: str) -> Slot:
        """
        Check move preconditions that do not depend on the target cell.

        Returns:
            The acting user's slot
        """
        if self.is_terminal:
            raise SessionClosedError(self.state)
        if self.player1.is_empty or self.player2.is_empty:
            raise OpponentMissingError()
        slot = self.slot_of(user_id)
        if slot is None:
            raise NotAParticipantError(user_id)
        if slot is not self.active_slot:
            raise NotYourTurnError(user_id)
        return slot

    def move(self, user_id: str, x: int, y: int, mark: str) -> SessionEvent:
        """
        Place ``mark`` for ``user_id`` at ``(x, y)`` and advance the game.

        Returns:
            The event the move produced
        """
        self.ensure_can_move(user_id)
        self.board.place_mark(x, y, mark)

        if self.board.has_winning_line():
            event = SessionEvent.LINE_COMPLETED
        elif self.board.is_full():
            event = SessionEvent.BOARD_FILLED
        else:
            event = SessionEvent.MOVE_PLAYED

        self.state = next_state(self.state, event)
        if event is SessionEvent.MOVE_PLAYED:
            self.active_slot = self.active_slot.other
        return event

    def resign(self, user_id: str) -> SessionEvent:
        """
        Forfeit the game for ``user_id``.

        The active slot is pointed at the opponent, which marks the
        winner by forfeit.
        """
        slot = self.slot_of(user_id)
        if slot is None:
            raise NotAParticipantError(user_id)
        self.state = next_state(self.state, SessionEvent.RESIGNED)
        self.active_slot = slot.other
        return SessionEvent.RESIGNED

    # ── Persistence ──────────────────────────────────────────

    def to_record(self) -> Dict[str, Any]:
        """Flat dict matching the ``sessions`` table columns."""
        return {
            "id": self.id,
            "player1_id": self.player1.user_id,
            "player2_id": self.player2.user_id,
            "board": json.dumps(self.board.rows()),
            "active_slot": self.active_slot.value,
            "state": self.state.value,
            "version": self.version,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Session":
        try:
            return cls(
                id=record["id"],
                player1=Seat(record.get("player1_id")),
                player2=Seat(record.get("player2_id")),
                board=Board.from_rows(json.loads(record["board"])),
                active_slot=Slot(record["active_slot"]),
                state=SessionState(record["state"]),
                version=record["version"],
            )
        except (KeyError, ValueError, TypeError) as e:
            logger.error(f"Corrupt session record {record.get('id')}: {e}")
            raise XoxError(f"Corrupt session record {record.get('id')}") from e

    def copy(self) -> "Session":
        return Session.from_record(self.to_record())
