# =========================================================
# --- cli_cliHumanInterface.py ---
# =========================================================
from typing import Callable, List, Tuple

from gammonmax.core.moves import TurnMove
from gammonmax.core.state import Position

from .cliUtils import read_choice, safe_input

# =========================================================

class HumanMoveSelector:
    """
    CLI interface letting a human pick one of the legal turn moves by index.

    Attributes:
        input_func (Callable[[str], str]): Prompt function, `safe_input` by default.
    """

    def __init__(self, input_func: Callable[[str], str] = safe_input):
        self.input_func: Callable[[str], str] = input_func

    def _display_options(self, turn_moves: List[TurnMove], dice: Tuple[int, int]) -> None:
        print(f"\nDice: {dice[0]}-{dice[1]}")
        for idx, tmove in enumerate(turn_moves):
            print(f"[{idx}] {tmove}")

    def select(self, turn_moves: List[TurnMove], position: Position, dice: Tuple[int, int]) -> TurnMove:
        """
        Show the numbered turn moves and read an index until a valid one is entered.

        Raises:
            ExitGame: If the user quits at the prompt.
        """
        self._display_options(turn_moves, dice)
        choice = read_choice(
            self.input_func,
            "Choose move by index: ",
            {str(idx) for idx in range(len(turn_moves))},
            f"Invalid input, enter a number between 0 and {len(turn_moves) - 1}",
        )
        return turn_moves[int(choice)]
