# =========================================================
# --- core_state.py ---
# =========================================================

import numpy as np
from typing import Optional, List, Any, Tuple, Iterable

from .board import (
    Player, opponent, BOARD_START, BOARD_END, NUM_POINTS, BAR, OFF, BAR_PIPS,
    STONE, NUM_OF_ALL_STONES, DEFAULT_POSITIONS,
)
from .moves import SingleMove
from .state_invariants import assert_state_invariant

from gammonmax.utils.bitmask import bits_from_indices

# =========================================================

#: Pip distance to bear off for every board point, per player
PIP_DISTANCES = (
    np.arange(1, NUM_POINTS + 1, dtype=np.int32),   # White: index 0 -> 1 pip
    np.arange(NUM_POINTS, 0, -1, dtype=np.int32),   # Black: index 23 -> 1 pip
)


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played on the position it is applied to."""
    pass


def _frozen(values: Iterable[int], size: int) -> np.ndarray:
    arr = np.array(values, dtype=np.int8)
    if arr.shape != (size,):
        raise ValueError(f"Expected {size} values, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr

# =========================================================

class PositionMovesMixin:
    """
    Mixin class providing the stone-moving operations.

    Every operation leaves the source position untouched and returns a new one.
    """

    def _check_playable(self, player: Player, move: SingleMove) -> None:
        """Reject a move whose origin or destination does not fit this position."""
        opp = opponent(player)
        if move.from_point == BAR:
            if self.bar[player] <= 0:
                raise IllegalMoveError(f"{player.label} has no stone on the bar: {move}")
        elif not self.is_on_board(move.from_point) or self.num_of_stones(move.from_point, player) == 0:
            raise IllegalMoveError(f"{player.label} has no stone on the origin of {move}")

        if move.to_point != OFF:
            if not self.is_on_board(move.to_point):
                raise IllegalMoveError(f"Destination off the board: {move}")
            if self.num_of_stones(move.to_point, opp) >= 2:
                raise IllegalMoveError(f"Destination blocked by {opp.label}: {move}")

    def apply_move(self, player: Player, move: SingleMove) -> "Position":
        """
        Apply a single move and return the resulting position.

        A blot on the destination is sent to the bar. Hit detection looks at
        the destination before the mover's stone arrives.

        Args:
            player (Player): The side making the move.
            move (SingleMove): The move to apply.

        Returns:
            Position: New position after the move.

        Raises:
            IllegalMoveError: If the move does not fit this position.
        """
        self._check_playable(player, move)
        opp = opponent(player)
        sign = STONE[player]

        points = self.points.copy()
        bar = self.bar.copy()
        off = self.off.copy()

        if move.from_point == BAR:
            bar[player] -= 1
        else:
            points[move.from_point] -= sign

        if move.to_point == OFF:
            off[player] += 1
        else:
            if self.num_of_stones(move.to_point, opp) == 1:
                points[move.to_point] = 0
                bar[opp] += 1
            points[move.to_point] += sign

        new_position = Position(points, bar, off, debug=self.debug)
        new_position._assert("apply_move")
        return new_position

    def apply_turn(self, player: Player, turn: Iterable[SingleMove]) -> "Position":
        """Apply every move of a turn in order. An empty turn returns self."""
        position = self
        for smove in turn:
            position = position.apply_move(player, smove)
        return position

# =========================================================

class Position(PositionMovesMixin):
    """
    Represents an immutable Backgammon position.

    Attributes:
        points (np.ndarray): 24 signed stone counts (positive White, negative Black).
        bar (np.ndarray): Stones waiting on the bar, indexed by player.
        off (np.ndarray): Stones borne off, indexed by player.
        debug (bool): Enable state invariant assertions.
    """

    def __init__(
        self,
        points: Optional[Iterable[int]] = None,
        bar: Optional[Iterable[int]] = None,
        off: Optional[Iterable[int]] = None,
        debug: bool = False,
    ):
        self.debug: bool = debug
        self.points: np.ndarray = _frozen(np.zeros(NUM_POINTS) if points is None else points, NUM_POINTS)
        self.bar: np.ndarray = _frozen((0, 0) if bar is None else bar, 2)
        self.off: np.ndarray = _frozen((0, 0) if off is None else off, 2)

    # ---------- Setup ----------
    @classmethod
    def initial(cls, debug: bool = False) -> "Position":
        """Return the standard starting position."""
        return cls.from_list(DEFAULT_POSITIONS, debug=debug)

    @classmethod
    def from_list(cls, positions: List[List[Tuple[int, int]]], debug: bool = False) -> "Position":
        """
        Build a position from a serialized list of (point, count) per player.

        BAR and OFF may be used as point to place stones on the bar or borne off.

        Raises:
            ValueError: If a side does not hold exactly 15 stones, a point is
                out of range, or both sides claim the same point.
        """
        points = np.zeros(NUM_POINTS, dtype=np.int8)
        bar = [0, 0]
        off = [0, 0]
        for player in Player:
            total = 0
            for point, count in positions[player]:
                if count < 0:
                    raise ValueError(f"Negative stone count {count} for {player.label}")
                if point == BAR:
                    bar[player] += count
                elif point == OFF:
                    off[player] += count
                elif BOARD_START <= point <= BOARD_END:
                    if points[point] * STONE[player] < 0:
                        raise ValueError(f"Point {point} is occupied by both players")
                    points[point] += count * STONE[player]
                else:
                    raise ValueError(f"Invalid point {point}")
                total += count
            if total != NUM_OF_ALL_STONES:
                raise ValueError("Invalid number of stones")
        return cls(points, bar, off, debug=debug)

    def to_list(self) -> List[List[Tuple[int, int]]]:
        """Serialize the position into a list of (point, count) per player."""
        positions: List[List[Tuple[int, int]]] = [[], []]
        for point, stones in enumerate(self.points):
            if stones > 0:
                positions[Player.WHITE].append((point, int(stones)))
            elif stones < 0:
                positions[Player.BLACK].append((point, int(-stones)))
        for player in Player:
            if self.bar[player] > 0:
                positions[player].append((BAR, int(self.bar[player])))
            if self.off[player] > 0:
                positions[player].append((OFF, int(self.off[player])))
        return positions

    # ---------- Queries ----------
    @staticmethod
    def is_on_board(point: int) -> bool:
        """Check if a point index is on the board."""
        return BOARD_START <= point <= BOARD_END

    def num_of_stones(self, point: int, player: Player) -> int:
        """
        Return the number of stones of a player on a point (BAR for the bar).

        Args:
            point (int): Board point index or BAR.
            player (Player): Player to count for.

        Returns:
            int: Number of stones of the player at the point.
        """
        if point == BAR:
            return int(self.bar[player])
        val = int(self.points[point]) * STONE[player]
        return val if val > 0 else 0

    def bar_count(self, player: Player) -> int:
        return int(self.bar[player])

    def off_count(self, player: Player) -> int:
        return int(self.off[player])

    def occupied_mask(self, player: Player) -> int:
        """Bitmask of the points holding at least one stone of player."""
        return bits_from_indices(np.flatnonzero(self.points * STONE[player] > 0))

    def blocked_mask(self, player: Player) -> int:
        """Bitmask of the points player cannot land on (two or more opposing stones)."""
        return bits_from_indices(np.flatnonzero(self.points * STONE[opponent(player)] >= 2))

    def pip_count(self, player: Player) -> int:
        """Total distance to bear off of all stones of player. A stone on the bar counts 25."""
        counts = np.clip(self.points.astype(np.int32) * STONE[player], 0, None)
        return int((counts * PIP_DISTANCES[player]).sum()) + BAR_PIPS * int(self.bar[player])

    def blots(self, player: Player) -> int:
        """Number of points holding exactly one stone of player."""
        return int(np.count_nonzero(self.points * STONE[player] == 1))

    def prime_length(self, player: Player) -> int:
        """Longest run of consecutive points each holding two or more stones of player."""
        best = run = 0
        for stones in self.points * STONE[player]:
            if stones >= 2:
                run += 1
                best = max(best, run)
            else:
                run = 0
        return best

    def is_terminal(self) -> bool:
        """True once either player has borne off all stones."""
        return self.winner() is not None

    def winner(self) -> Optional[Player]:
        """Return the player who has borne off all stones, None if nobody has."""
        for player in Player:
            if self.off[player] >= NUM_OF_ALL_STONES:
                return player
        return None

    # ---------- Equality / Hash ----------
    def key(self) -> Tuple[bytes, Tuple[int, int], Tuple[int, int]]:
        """Canonical structural key (points, bar, off)."""
        return (
            self.points.tobytes(),
            (int(self.bar[0]), int(self.bar[1])),
            (int(self.off[0]), int(self.off[1])),
        )

    def __hash__(self) -> int:
        return hash(self.key())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            np.array_equal(self.points, other.points) and
            np.array_equal(self.bar, other.bar) and
            np.array_equal(self.off, other.off)
        )

    def __repr__(self) -> str:
        white, black = self.to_list()
        return f"Position(white={white}, black={black})"

    # ---------- Debug / Assertions ----------
    def _assert(self, where: str = "") -> None:
        """Assert state invariants if debug mode is active."""
        if self.debug:
            assert_state_invariant(self, where)
