# =========================================================
# --- players_human.py ---
# =========================================================

from typing import Callable, List, Optional, Tuple

from gammonmax.core.board import Player as Side
from gammonmax.core.moves import TurnMove
from gammonmax.core.state import Position

from .player import Player

# =========================================================

MoveInput = Callable[[List[TurnMove], Position, Tuple[int, int]], Optional[TurnMove]]


class HumanPlayer(Player):
    """
    Human-controlled player class.

    Move selection is delegated to an input function, so the same player works
    for the console and for scripted tests.

    Attributes:
        side (Side): The side this player plays.
        name (str): Player display name.
        input_func (MoveInput): Function used to select a move from available turn moves.
    """

    def __init__(self, side: Side, input_func: MoveInput, name: str = "Human Player"):
        super().__init__(side)
        self.name: str = name
        self.input_func: MoveInput = input_func

    def __str__(self) -> str:
        return f"{self.name} ({self.side.label})"

    def select_move(
        self,
        moves: List[TurnMove],
        position: Position,
        dice: Tuple[int, int],
    ) -> Optional[TurnMove]:
        """
        Ask the input function to pick one of the legal turn moves.

        Returns:
            Optional[TurnMove]: Selected move, None if there is nothing to pick.
        """
        if not moves:
            return None
        return self.input_func(moves, position, dice)
