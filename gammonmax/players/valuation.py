# =========================================================
# --- evaluation.py ---
# =========================================================

from dataclasses import dataclass
from typing import Dict, Tuple

from gammonmax.core.board import Player, opponent, NUM_OF_ALL_STONES
from gammonmax.core.state import Position

# =========================================================

@dataclass(frozen=True)
class EvaluationWeights:
    """
    Weights of the linear evaluation.

    Attributes:
        win (int): Score of a won position (negated for a lost one).
        pip (int): Weight of the pip count difference.
        bar (int): Weight per stone on the bar.
        blots (int): Weight per blot.
        prime (int): Weight of the longest prime.
        bear_off (int): Weight per stone borne off.
    """
    win: int = 100000
    pip: int = 1
    bar: int = 25
    blots: int = 2
    prime: int = 3
    bear_off: int = 5


class Valuation:
    """
    Position evaluation with weighted heuristics, higher is better for the viewpoint.

    Attributes:
        weights (EvaluationWeights): Weights of the linear terms.
        eval_cache (Dict[Tuple, int]): Cache for evaluations keyed by (position key, player),
            emptied by the bot at the start of every decision.
    """

    def __init__(self, weights: EvaluationWeights = EvaluationWeights()):
        self.weights: EvaluationWeights = weights
        self.eval_cache: Dict[Tuple, int] = {}

    def clear_cache(self) -> None:
        """Drop all memoised scores."""
        self.eval_cache.clear()

    # ---------------- Sub-evaluations ----------------
    def evaluate_pips(self, position: Position, player: Player) -> int:
        """Pip difference: fewer own pips is better."""
        return self.weights.pip * (position.pip_count(opponent(player)) - position.pip_count(player))

    def evaluate_bar(self, position: Position, player: Player) -> int:
        """Penalty for own stones on the bar, bonus for opposing ones."""
        opp = opponent(player)
        return -self.weights.bar * position.bar_count(player) + self.weights.bar * position.bar_count(opp)

    def evaluate_blots(self, position: Position, player: Player) -> int:
        """
        Evaluate the penalty/advantage from blots.

        Returns:
            int: Weighted score (negative for own blots, positive for opponent's blots).
        """
        opp = opponent(player)
        return -self.weights.blots * position.blots(player) + self.weights.blots * position.blots(opp)

    def evaluate_primes(self, position: Position, player: Player) -> int:
        opp = opponent(player)
        return self.weights.prime * (position.prime_length(player) - position.prime_length(opp))

    def evaluate_bear_off(self, position: Position, player: Player) -> int:
        opp = opponent(player)
        return self.weights.bear_off * (position.off_count(player) - position.off_count(opp))

    # ---------------- Full evaluation ----------------
    def evaluate(self, position: Position, player: Player) -> int:
        """
        Evaluate the full position for the given player.

        A position where either side has borne off every stone scores
        +/- weights.win regardless of the other terms.

        Args:
            position (Position): Position to score.
            player (Player): Viewpoint.

        Returns:
            int: Score, higher is better for player.
        """
        h = (position.key(), player)
        if h in self.eval_cache:
            return self.eval_cache[h]

        if position.off_count(player) >= NUM_OF_ALL_STONES:
            score = self.weights.win
        elif position.off_count(opponent(player)) >= NUM_OF_ALL_STONES:
            score = -self.weights.win
        else:
            score = (
                self.evaluate_pips(position, player)
                + self.evaluate_bar(position, player)
                + self.evaluate_blots(position, player)
                + self.evaluate_primes(position, player)
                + self.evaluate_bear_off(position, player)
            )

        self.eval_cache[h] = score
        return score


def verdict(score: int) -> str:
    """Describe a score taken from White's point of view."""
    if score > 50:
        return "Clear advantage: White."
    if score > 0:
        return "Slightly better: White."
    if score < -50:
        return "Clear advantage: Black."
    if score < 0:
        return "Slightly better: Black."
    return "Balanced game."
