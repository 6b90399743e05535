"""
Result values returned by board actions.

A rejected move is an ordinary result, not an exception: the host is
expected to ignore it.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class RejectReason(Enum):
    """Why the board declined a move."""

    FLAGGED = auto()
    ALREADY_REVEALED = auto()
    GAME_OVER = auto()


class RevealStatus(Enum):
    """Outcome of a single reveal call."""

    REVEALED = auto()
    WON = auto()
    LOST = auto()
    REJECTED = auto()


@dataclass(frozen=True)
class RevealResult:
    """
    Result of Board.reveal.

    Attributes:
        status: What the call did.
        adjacent_mines: Count shown on the revealed cell. Set for
            REVEALED and WON.
        reason: Set only when status is REJECTED.
    """

    status: RevealStatus
    adjacent_mines: Optional[int] = None
    reason: Optional[RejectReason] = None

    @classmethod
    def rejected(cls, reason: RejectReason) -> "RevealResult":
        return cls(RevealStatus.REJECTED, reason=reason)

    @property
    def is_rejected(self) -> bool:
        return self.status == RevealStatus.REJECTED


@dataclass(frozen=True)
class FlagResult:
    """
    Result of Board.toggle_flag.

    Attributes:
        is_flagged: Flag state of the cell after the call.
        reason: Set only when the toggle was refused.
    """

    is_flagged: bool = False
    reason: Optional[RejectReason] = None

    @classmethod
    def rejected(cls, reason: RejectReason) -> "FlagResult":
        return cls(reason=reason)

    @property
    def is_rejected(self) -> bool:
        return self.reason is not None
