# =========================================================
# --- core_rules.py ---
# =========================================================

import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .board import (
    Player, opponent, BAR, NUM_OF_ALL_STONES, HOME_START, HOME_END,
    OUTSIDE_HOME_MASK, FULL_BOARD_MASK, distance_to_off,
)
from .moves import TurnMove
from .state import Position

from gammonmax.utils.bitmask import remove_from_mask, set_all_bits

# =========================================================

class InvalidDiceError(ValueError):
    """Raised when dice are not exactly two integers in [1, 6]."""
    pass


class Rule:
    """Base class for Backgammon rules."""

    def __init__(self, rule_id: str, description: str) -> None:
        """
        Initialize a rule.

        Args:
            rule_id: Unique identifier for the rule.
            description: Human-readable description.
        """
        self.id: str = rule_id
        self.description: str = description

    def check(self, *args, **kwargs) -> Any:
        """
        Evaluate the rule.

        Raises:
            NotImplementedError: Must be implemented in subclasses.
        """
        raise NotImplementedError


# --- Specific Rules ---

class BarPriorityRule(Rule):
    """R1: Player must re-enter stones from the bar first."""

    def __init__(self) -> None:
        super().__init__("R1", "Player must re-enter stones from the bar before moving any other stones.")

    def check(self, position: Position, player: Player) -> bool:
        """Return True if the player has stones on the bar and may only enter."""
        return position.num_of_stones(BAR, player) > 0


class BearingOffEligibilityRule(Rule):
    """R2: Player may bear off only if all stones are in their home board."""

    def __init__(self) -> None:
        super().__init__("R2", "Player may bear off only if the bar is empty and all stones are in their home board.")

    def check(self, position: Position, player: Player) -> bool:
        """
        Check if all remaining stones are inside the home board.

        Returns:
            True if bearing off is allowed, False otherwise.
        """
        if position.num_of_stones(BAR, player) > 0:
            return False
        return (OUTSIDE_HOME_MASK[player] & position.occupied_mask(player)) == 0


class BearOffTargetRule(Rule):
    """R3: Checks if a stone can bear off with a die, including 'overshoot' logic."""

    def __init__(self) -> None:
        super().__init__("R3", "Die matches the distance to off, or exceeds it with no stone further away.")

    def _no_stone_behind(self, position: Position, player: Player, start: int) -> bool:
        """Check if no own stone sits further from off than start inside the home board."""
        if player == Player.WHITE:
            mask_behind = set_all_bits(start + 1, HOME_END[player])
        else:
            mask_behind = set_all_bits(HOME_START[player], start - 1)
        return (position.occupied_mask(player) & mask_behind) == 0

    def check(self, position: Position, player: Player, start: int, die: int) -> bool:
        """
        Determine if the stone on start can legally bear off with die.

        Eligibility (R2) is checked separately.
        """
        needed = distance_to_off(player, start)
        if die == needed:
            return True
        return die > needed and self._no_stone_behind(position, player, start)


class SingleHitRule(Rule):
    """R4: Target with exactly one opponent stone may be hit."""

    def __init__(self) -> None:
        super().__init__("R4", "Target point with exactly one opponent stone may be hit.")

    def check(self, position: Position, player: Player, point: int) -> bool:
        return position.num_of_stones(point, opponent(player)) == 1


class LegalMaskRule(Rule):
    """R5: Mask of points a player may land on."""

    def __init__(self) -> None:
        super().__init__("R5", "Points not held by two or more opposing stones.")

    def check(self, position: Position, player: Player) -> int:
        """
        Generate the mask of open target points.

        Returns:
            Bitmask of points the player is allowed to land on.
        """
        return remove_from_mask(FULL_BOARD_MASK, position.blocked_mask(player))


class DiceHelperRule(Rule):
    """R6: Validate dice and expand them into the orders they can be played in."""

    def __init__(self) -> None:
        super().__init__("R6", "Validate dice; distinct dice in both orders, doubles as four moves.")

    def validate(self, dice: Sequence[int]) -> Tuple[int, int]:
        """
        Check that dice are exactly two integers in [1, 6].

        Raises:
            InvalidDiceError: On any other input.
        """
        if dice is None or len(dice) != 2:
            raise InvalidDiceError(f"Expected two dice, got {dice!r}")
        for die in dice:
            if isinstance(die, bool) or not isinstance(die, numbers.Integral) or not 1 <= die <= 6:
                raise InvalidDiceError(f"Die values must be integers in [1, 6], got {dice!r}")
        return int(dice[0]), int(dice[1])

    def check(self, dice: Sequence[int]) -> List[Tuple[int, ...]]:
        """
        Return every order the dice can be played in.

        Args:
            dice: Two dice values.

        Returns:
            Both orders for distinct dice, a single four-fold order for doubles.
        """
        d1, d2 = self.validate(dice)
        if d1 == d2:
            return [(d1,) * 4]
        return [(d1, d2), (d2, d1)]


class FilterTurnMovesRule(Rule):
    """R7: Keep only turns that use the maximum number of dice, one per resulting position."""

    def __init__(self) -> None:
        super().__init__("R7", "Filter turn moves to enforce maximum dice usage and drop equivalent outcomes.")

    def check(self, candidates: List[Tuple[TurnMove, Position]], player: Player) -> List[TurnMove]:
        """
        Filter candidate turns.

        Args:
            candidates: (turn, resulting position) pairs in generation order.
            player: The side that moved.

        Returns:
            First-encountered turn per distinct resulting position, all of maximal length.
        """
        if not candidates:
            return []

        max_len = max(len(tmove) for tmove, _ in candidates)
        if max_len == 0:
            return []

        seen: Dict[Tuple, TurnMove] = {}
        for tmove, result in candidates:
            if len(tmove) != max_len:
                continue
            seen.setdefault((result.key(), player), tmove)
        return list(seen.values())


@dataclass(frozen=True)
class GameResult:
    """Encapsulates the outcome of a completed game."""

    winner: Player
    turns: int


class GameOverRule(Rule):
    """R8: Check if the game is over."""

    def __init__(self) -> None:
        super().__init__("R8", "Game ends when a player has borne off all stones.")

    def check(self, position: Position) -> Optional[Player]:
        """Return the winning player, or None if the game continues."""
        for player in Player:
            if position.off_count(player) >= NUM_OF_ALL_STONES:
                return player
        return None


class BackgammonRules:
    """Aggregates all rules and provides a convenient interface for game logic."""

    def __init__(self) -> None:
        """Initialize all rule instances."""
        self.R1 = BarPriorityRule()
        self.R2 = BearingOffEligibilityRule()
        self.R3 = BearOffTargetRule()
        self.R4 = SingleHitRule()
        self.R5 = LegalMaskRule()
        self.R6 = DiceHelperRule()
        self.R7 = FilterTurnMovesRule()
        self.R8 = GameOverRule()

    def must_enter(self, position: Position, player: Player) -> bool:
        """Return True if the player has to enter from the bar."""
        return self.R1.check(position, player)

    def bearing_off_allowed(self, position: Position, player: Player) -> bool:
        """Return True if player may bear off."""
        return self.R2.check(position, player)

    def bear_off_target(self, position: Position, player: Player, start: int, die: int) -> bool:
        """Return True if the stone on start can bear off with die."""
        return self.R3.check(position, player, start=start, die=die)

    def hittable_target(self, position: Position, player: Player, point: int) -> bool:
        """Return True if the target point may be hit."""
        return self.R4.check(position, player, point=point)

    def open_points_mask(self, position: Position, player: Player) -> int:
        """Return bitmask of points the player may land on."""
        return self.R5.check(position, player)

    def validate_dice(self, dice: Sequence[int]) -> Tuple[int, int]:
        """Validate a dice roll."""
        return self.R6.validate(dice)

    def dice_orders(self, dice: Sequence[int]) -> List[Tuple[int, ...]]:
        """Validate dice and return the orders they can be played in."""
        return self.R6.check(dice)

    def filter_turn_moves(self, candidates: List[Tuple[TurnMove, Position]], player: Player) -> List[TurnMove]:
        """Filter generated turn moves according to rules."""
        return self.R7.check(candidates, player)

    def game_over(self, position: Position) -> Optional[Player]:
        """Return the winner if the game is over."""
        return self.R8.check(position)
