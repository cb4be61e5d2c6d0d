# =========================================================
# --- players_player.py ---
# =========================================================

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from gammonmax.core.board import Player as Side
from gammonmax.core.moves import TurnMove
from gammonmax.core.state import Position

# =========================================================

class Player(ABC):
    """
    Abstract base class for a Backgammon player.

    Attributes:
        side (Side): The side this player plays (WHITE or BLACK).
    """

    def __init__(self, side: Side):
        self.side: Side = side

    @abstractmethod
    def select_move(
        self,
        moves: List[TurnMove],
        position: Position,
        dice: Tuple[int, int]
    ) -> Optional[TurnMove]:
        """
        Select a move from a list of legal moves.

        Args:
            moves (List[TurnMove]): List of legal turn moves.
            position (Position): Current position.
            dice (Tuple[int, int]): Dice rolled for this turn.

        Returns:
            Optional[TurnMove]: Selected turn move, or None if no move possible.
        """
        pass
