# =========================================================
# --- core_moves.py ---
# =========================================================

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from .board import BAR, OFF

# =========================================================

class SingleMoveType(Enum):
    """
    Enumeration of possible move types in Backgammon.

    Attributes:
        NORMAL: Standard move from one point (or the bar) to another.
        HIT: Move that hits an opponent's blot.
        BEAR_OFF: Move that bears a stone off the board.
    """
    NORMAL = 1
    HIT = 2
    BEAR_OFF = 3


def point_label(point: int) -> str:
    """Classic point number (White's perspective, 1-24) or BAR/OFF."""
    if point == BAR:
        return "BAR"
    if point == OFF:
        return "OFF"
    return f"P{point + 1}"


@dataclass(frozen=True)
class SingleMove:
    """
    Represents a single die-move in Backgammon.

    Attributes:
        from_point (int): Starting point index of the move, or BAR.
        to_point (int): Target point index of the move, or OFF.
        move_type (SingleMoveType): Type of the move (NORMAL, HIT, BEAR_OFF).
        die (int): Die value used for the move.
    """
    from_point: int
    to_point: int
    move_type: SingleMoveType
    die: int

    @property
    def hit(self) -> bool:
        """True if the move captures a lone opposing stone."""
        return self.move_type is SingleMoveType.HIT

    @property
    def bears_off(self) -> bool:
        return self.to_point == OFF

    def __str__(self) -> str:
        """Return a human-readable string representation of the move."""
        s = f"{point_label(self.from_point)} -> {point_label(self.to_point)} ({self.die})"
        return s + (" *hit" if self.hit else "")

    def __repr__(self) -> str:
        return str(self)


@dataclass(frozen=True)
class TurnMove:
    """
    Represents a full turn consisting of zero or more single moves.

    An empty turn is a pass.

    Attributes:
        single_moves (Tuple[SingleMove, ...]): Ordered single moves executed during the turn.
    """
    single_moves: Tuple[SingleMove, ...] = ()

    def __iter__(self) -> Iterator[SingleMove]:
        return iter(self.single_moves)

    def __len__(self) -> int:
        return len(self.single_moves)

    def __bool__(self) -> bool:
        return bool(self.single_moves)

    def __str__(self) -> str:
        """
        Return a string representation of all moves in the turn, separated by '; '.

        Returns:
            str: Human-readable string of the turn's moves, "(pass)" for an empty turn.
        """
        if not self.single_moves:
            return "(pass)"
        return "; ".join(str(smove) for smove in self.single_moves)

    def __repr__(self) -> str:
        return str(self)
