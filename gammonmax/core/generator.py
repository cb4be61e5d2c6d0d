# =========================================================
# --- core_generator.py ---
# =========================================================

from typing import List, Optional, Sequence, Tuple

from .board import Player, BAR, OFF, DIRECTION, entry_point
from .moves import SingleMoveType, SingleMove, TurnMove
from .state import Position
from .rules import BackgammonRules

from gammonmax.utils.bitmask import indices_from_bits, is_bit_set

# =========================================================

class SingleMovesGenerator:
    """Generates legal single moves for a given die and position."""

    def generate_moves(self, position: Position, player: Player, die: int, rules: BackgammonRules) -> List[SingleMove]:
        """
        Generate all legal single moves for the player with a given die.

        Stones on the bar must enter first; otherwise start points are visited
        furthest-from-home first.

        Args:
            position: Current position.
            player: Side to move.
            die: The die value to move.
            rules: Game rules engine.

        Returns:
            List of legal SingleMove instances.
        """
        open_mask = rules.open_points_mask(position, player)

        if rules.must_enter(position, player):
            target = entry_point(player, die)
            if not is_bit_set(target, open_mask):
                return []
            return [self._landing_move(BAR, target, die, position, player, rules)]

        starts = indices_from_bits(position.occupied_mask(player))
        if player == Player.WHITE:
            starts.reverse()

        bear_off = rules.bearing_off_allowed(position, player)
        single_moves: List[SingleMove] = []
        for start in starts:
            smove = self._single_move(start, die, open_mask, bear_off, position, player, rules)
            if smove is not None:
                single_moves.append(smove)
        return single_moves

    def _single_move(
        self,
        start: int,
        die: int,
        open_mask: int,
        bear_off: bool,
        position: Position,
        player: Player,
        rules: BackgammonRules,
    ) -> Optional[SingleMove]:
        """
        Generate a single legal move from a given start point using a die.

        Returns:
            A SingleMove if legal, otherwise None.
        """
        target = start + die * DIRECTION[player]

        if position.is_on_board(target):
            if is_bit_set(target, open_mask):
                return self._landing_move(start, target, die, position, player, rules)
            return None

        # Check for bearing off
        if bear_off and rules.bear_off_target(position, player, start, die):
            return SingleMove(start, OFF, SingleMoveType.BEAR_OFF, die)

        return None

    @staticmethod
    def _landing_move(start: int, target: int, die: int, position: Position, player: Player,
                      rules: BackgammonRules) -> SingleMove:
        mtype = SingleMoveType.HIT if rules.hittable_target(position, player, target) else SingleMoveType.NORMAL
        return SingleMove(start, target, mtype, die)


class TurnMoveGenerator:
    """Generates legal sequences of moves (TurnMove) for a given dice roll."""

    def __init__(self, rules: Optional[BackgammonRules] = None) -> None:
        self.rules: BackgammonRules = rules or BackgammonRules()
        self.smgen: SingleMovesGenerator = SingleMovesGenerator()

    def generate_all_turn_moves(self, position: Position, player: Player,
                                dice_order: Tuple[int, ...]) -> List[Tuple[TurnMove, Position]]:
        """
        Generate every move sequence for one fixed order of dice.

        A sequence stops at the first die that cannot be played; the remaining
        dice are dropped.

        Args:
            position: Starting position.
            player: Side to move.
            dice_order: Dice in the order they are used.

        Returns:
            (TurnMove, resulting position) pairs in depth-first order.
        """
        results: List[Tuple[TurnMove, Position]] = []

        def dfs(current: Position, idx: int, path: Tuple[SingleMove, ...]) -> None:
            if idx == len(dice_order):
                results.append((TurnMove(path), current))
                return

            die = dice_order[idx]
            single_moves = self.smgen.generate_moves(current, player, die, self.rules)
            if not single_moves:
                results.append((TurnMove(path), current))
                return

            for smove in single_moves:
                dfs(current.apply_move(player, smove), idx + 1, path + (smove,))

        dfs(position, 0, ())
        return results

    def generate_legal_moves(self, position: Position, player: Player, dice: Sequence[int]) -> List[TurnMove]:
        """
        Generate all legal turn moves for a dice roll.

        Both orders of distinct dice are explored; doubles are played as four
        moves. Only turns using the maximum number of dice are kept, one per
        resulting position.

        Args:
            position: Current position.
            player: Side to move.
            dice: Two dice values in [1, 6].

        Returns:
            Legal TurnMove list in generation order; empty if the player must pass.

        Raises:
            InvalidDiceError: If dice are not two integers in [1, 6].
        """
        candidates: List[Tuple[TurnMove, Position]] = []
        for dice_order in self.rules.dice_orders(dice):
            candidates.extend(self.generate_all_turn_moves(position, player, dice_order))
        return self.rules.filter_turn_moves(candidates, player)
