# =========================================================
# --- cli_cliHandlers.py ---
# =========================================================

from typing import Any, Dict, Callable

from .cliColors import PLAYER
from .cliUtils import interruptible_sleep
from .boardDisplay import BoardDisplay

# =========================================================

class CLIHandlers:
    """
    Handles CLI events for Backgammon game visualization.

    Attributes:
        delay (float): Delay in seconds between event prints to allow user to follow the game.
        clear_screen (bool): Whether the board display clears the terminal.
    """

    def __init__(self, delay: float = 1.0, clear_screen: bool = True):
        self.delay: float = delay
        self.clear_screen: bool = clear_screen

    def _board(self, position) -> BoardDisplay:
        return BoardDisplay(position, clear_screen=self.clear_screen)

    # ---------------- Event Handlers ----------------
    def handle_start_roll(self, event: Dict[str, Any]) -> None:
        """
        Handle the opening roll that determines the starting player.
        """
        print(f"\nRolling start dice 🎲🎲 ...:\n")
        print(f"{PLAYER[0]} rolls 🎲: {event['dice'][0]}")
        print(f"{PLAYER[1]} rolls 🎲: {event['dice'][1]}")
        print(f"\n=> {PLAYER[event['turn']]} starts.")
        interruptible_sleep(self.delay)

    def handle_turn_start(self, event: Dict[str, Any]) -> None:
        """
        Handle start of a turn: display board and current player.

        Args:
            event (dict): Event data with 'state', 'turn', and 'bear_off_allowed'.
        """
        self._board(event["state"]).draw_all()
        print(f"\nTurn: {PLAYER[event['turn']]}")
        if event['bear_off_allowed']:
            print(f"\nBearing off allowed!\n")

    def handle_roll_dice(self, event: Dict[str, Any]) -> None:
        """
        Handle dice roll event: display dice and player type.
        """
        print(f"\n{PLAYER[event['turn']]} rolled 🎲🎲: {event['dice'][0]}-{event['dice'][1]}")
        print(f"({event.get('player_type')})")

    def handle_no_moves(self, event: Dict[str, Any]) -> None:
        print(f"\nNo legal moves available, {PLAYER[event['turn']]} passes.\n")
        interruptible_sleep(self.delay)

    def handle_chosen_move(self, event: Dict[str, Any]) -> None:
        """
        Handle event when a player has chosen a move.

        Args:
            event (dict): Event data with 'turn' and 'move'.
        """
        print(f"\n{PLAYER[event['turn']]} plays: {event['move']}")
        interruptible_sleep(self.delay)

    def handle_apply_move(self, event: Dict[str, Any]) -> None:
        """
        Handle event when a single move is applied to the board.

        Args:
            event (dict): Event data with 'state' and 'move'.
        """
        move = event["move"]
        self._board(event["state"]).draw_all({move.from_point}, {move.to_point})
        print(f"\nApply move: {move}")
        interruptible_sleep(self.delay)

    def handle_turn_end(self, event: Dict[str, Any]) -> None:
        print(f"\nTurn ended. Next player: {PLAYER[event['next_turn']]}")
        interruptible_sleep(self.delay)

    def handle_game_over(self, event: Dict[str, Any]) -> None:
        """
        Handle game over event: display final board and winner.

        Args:
            event (dict): Event data with 'state', 'winner', 'player_type' and 'turns'.
        """
        self._board(event["state"]).draw_all()
        print(f"\nGame Over! Winner: {PLAYER[event['winner']]} ({event['player_type']}) "
              f"after {event['turns']} turns\n")

    # ---------------- Handler Mapping ----------------
    @property
    def handlers(self) -> Dict[str, Callable[[Dict[str, Any]], None]]:
        """
        Returns a dictionary mapping event types to their handler functions.
        """
        return {
            "start_roll": self.handle_start_roll,
            "turn_start": self.handle_turn_start,
            "roll_dice": self.handle_roll_dice,
            "no_moves": self.handle_no_moves,
            "chosen_move": self.handle_chosen_move,
            "apply_move": self.handle_apply_move,
            "turn_end": self.handle_turn_end,
            "game_over": self.handle_game_over,
        }
