# =========================================================
# --- players_random.py ---
# =========================================================

import random
from typing import List, Optional, Tuple

from gammonmax.core.board import Player as Side
from gammonmax.core.moves import TurnMove
from gammonmax.core.state import Position

from .player import Player

# =========================================================

class RandomPlayer(Player):
    """
    Player picking uniformly among the legal turns.

    Attributes:
        side (Side): The side this player plays.
        rng (random.Random): Random number generator.
    """

    def __init__(self, side: Side, rng: Optional[random.Random] = None):
        super().__init__(side)
        self.rng: random.Random = rng or random.Random()

    def __str__(self) -> str:
        """Return a human-readable name for the player."""
        return f"Random player 🎲 {self.side.label}"

    def select_move(
        self,
        moves: List[TurnMove],
        position: Position,
        dice: Tuple[int, int]
    ) -> Optional[TurnMove]:
        if not moves:
            return None
        return self.rng.choice(moves)
