# =========================================================
# --- players_computer.py ---
# =========================================================

from typing import List, Optional, Sequence, Tuple

from loguru import logger

from gammonmax.core.board import Player as Side, opponent
from gammonmax.core.state import Position
from gammonmax.core.rules import BackgammonRules
from gammonmax.core.generator import TurnMoveGenerator
from gammonmax.core.moves import TurnMove

from .player import Player
from .valuation import Valuation

# =========================================================

#: The 21 distinct rolls {a, b} with a <= b, each counted once
ALL_ROLLS: Tuple[Tuple[int, int], ...] = tuple(
    (a, b) for a in range(1, 7) for b in range(a, 7)
)


class MinimaxBot:
    """
    Backgammon bot choosing the turn with the best worst-case reply.

    For every candidate turn the opponent is assumed to roll whichever of the
    21 distinct rolls hurts most and to answer it with the reply that scores
    best for them one ply deep. Rolls are not weighted by probability.

    Attributes:
        side (Side): The side the bot plays.
        rules (BackgammonRules): Rules engine instance.
        tmgen (TurnMoveGenerator): Turn move generator.
        eval (Valuation): Heuristic evaluation object.
    """

    def __init__(self, side: Side, valuation: Optional[Valuation] = None, rules: Optional[BackgammonRules] = None):
        self.side: Side = side
        self.rules: BackgammonRules = rules or BackgammonRules()
        self.tmgen: TurnMoveGenerator = TurnMoveGenerator(self.rules)
        self.eval: Valuation = valuation or Valuation()

    # ---------------- Evaluation ----------------
    def evaluate(self, position: Position) -> int:
        """Evaluate a position from the bot's point of view."""
        return self.eval.evaluate(position, self.side)

    def best_reply_value(self, position: Position, dice: Tuple[int, int]) -> int:
        """
        Value for the bot after the opponent's best reply to one roll.

        Replies are scored from the bot's point of view and the highest
        score is kept. A pass leaves the position as is.

        Args:
            position (Position): Position after the bot's candidate turn.
            dice (Tuple[int, int]): Opponent roll.

        Returns:
            int: Best value among the replies, scored for the bot.
        """
        opp = opponent(self.side)
        replies = self.tmgen.generate_legal_moves(position, opp, dice)
        if not replies:
            return self.evaluate(position)
        return max(self.evaluate(position.apply_turn(opp, reply)) for reply in replies)

    def worst_case_value(self, position: Position) -> int:
        """Minimum reply value over all 21 opponent rolls."""
        return min(self.best_reply_value(position, dice) for dice in ALL_ROLLS)

    # ---------------- Move selection ----------------
    def choose_turn(self, position: Position, dice: Sequence[int],
                    legal_moves: Optional[List[TurnMove]] = None) -> TurnMove:
        """
        Select the turn maximising the worst-case reply value.

        Ties keep the earliest candidate in generation order.

        Args:
            position (Position): Current position.
            dice (Sequence[int]): The bot's roll.
            legal_moves (Optional[List[TurnMove]]): Precomputed legal turns for this roll.

        Returns:
            TurnMove: The chosen turn, empty if no legal play exists.
        """
        # scores are only reused within one decision
        self.eval.clear_cache()
        if legal_moves is None:
            legal_moves = self.tmgen.generate_legal_moves(position, self.side, dice)
        if not legal_moves:
            logger.debug(f"{self.side.label} has no legal turn for {tuple(dice)}, passing")
            return TurnMove()

        best: Optional[TurnMove] = None
        best_value: Optional[int] = None
        for tmove in legal_moves:
            value = self.worst_case_value(position.apply_turn(self.side, tmove))
            if best_value is None or value > best_value:
                best, best_value = tmove, value

        logger.debug(
            f"{self.side.label} rolled {tuple(dice)}: {len(legal_moves)} candidates, "
            f"chose [{best}] with worst-case value {best_value}"
        )
        return best


# =========================================================
# # --- ComputerPlayer wrapper ---
# =========================================================

class ComputerPlayer(Player):
    """
    Wrapper for MinimaxBot behind the Player interface.

    Attributes:
        side (Side): The side this player plays.
        comp (MinimaxBot): The underlying bot instance.
    """

    def __init__(self, side: Side, valuation: Optional[Valuation] = None):
        super().__init__(side)
        self.comp: MinimaxBot = MinimaxBot(side, valuation)

    def __str__(self) -> str:
        return f"ComputerPlayer({self.side.label})"

    def select_move(
        self,
        moves: List[TurnMove],
        position: Position,
        dice: Tuple[int, int]
    ) -> Optional[TurnMove]:
        """
        Select a move using the underlying MinimaxBot.

        Returns:
            Optional[TurnMove]: Selected move or None if no moves available.
        """
        if not moves:
            return None
        return self.comp.choose_turn(position, dice, legal_moves=moves)
