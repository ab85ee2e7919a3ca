# Area: Game
"""
xox_coordinator._game.matchmaker — Seat Assignment Policy
=========================================================

First-come-first-served seat filling. Given a session and a joining
user, decides which seat the user gets, or why the join is refused.
A session in a terminal state seats nobody new.
The mark check only looks at the user seated in the other slot right
now, never at marks of users who held a seat earlier.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from ..errors import MarkCollisionError, SessionClosedError, SlotsFullError, XoxError
from .enums import Slot

if TYPE_CHECKING:
    from .session import Session


class SeatDecisionKind(Enum):
    ASSIGN_PLAYER1 = "assign_player1"
    ASSIGN_PLAYER2 = "assign_player2"
    ALREADY_SEATED = "already_seated"
    REJECT = "reject"


@dataclass(frozen=True)
class SeatDecision:
    """
    Outcome of a join attempt.

    Attributes:
        kind: What should happen to the session
        slot: Seat assigned or already held (None when rejected)
        reason: The error to report when rejected
    """

    kind: SeatDecisionKind
    slot: Optional[Slot] = None
    reason: Optional[XoxError] = None

    @property
    def assigns_seat(self) -> bool:
        return self.kind in (SeatDecisionKind.ASSIGN_PLAYER1, SeatDecisionKind.ASSIGN_PLAYER2)

    @classmethod
    def assign(cls, slot: Slot) -> "SeatDecision":
        kind = (SeatDecisionKind.ASSIGN_PLAYER1 if slot is Slot.PLAYER1
                else SeatDecisionKind.ASSIGN_PLAYER2)
        return cls(kind=kind, slot=slot)

    @classmethod
    def reject(cls, reason: XoxError) -> "SeatDecision":
        return cls(kind=SeatDecisionKind.REJECT, reason=reason)


def decide_seat(
    session: "Session",
    candidate_id: str,
    candidate_mark: str,
    player1_mark: Optional[str] = None,
    player2_mark: Optional[str] = None,
) -> SeatDecision:
    """
    Decide where ``candidate_id`` sits in ``session``.

    Args:
        session: Session as currently stored
        candidate_id: The joining user
        candidate_mark: The joining user's mark
        player1_mark: Mark of the user in seat 1, if seated
        player2_mark: Mark of the user in seat 2, if seated

    Returns:
        SeatDecision describing the assignment or rejection
    """
    held = session.slot_of(candidate_id)
    if held is not None:
        return SeatDecision(kind=SeatDecisionKind.ALREADY_SEATED, slot=held)

    if session.is_terminal:
        return SeatDecision.reject(SessionClosedError(session.state))

    if session.player1.is_empty:
        if not session.player2.is_empty and player2_mark == candidate_mark:
            return SeatDecision.reject(MarkCollisionError(candidate_mark))
        return SeatDecision.assign(Slot.PLAYER1)

    if session.player2.is_empty:
        if player1_mark == candidate_mark:
            return SeatDecision.reject(MarkCollisionError(candidate_mark))
        return SeatDecision.assign(Slot.PLAYER2)

    return SeatDecision.reject(SlotsFullError(session.id))
