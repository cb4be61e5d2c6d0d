# =========================================================
# --- cli_game.py ---
# =========================================================

import sys
from typing import Callable

from loguru import logger

from gammonmax.config import Config, config
from gammonmax.core.board import Player as Side
from gammonmax.core.state import Position
from gammonmax.core.rules import BackgammonRules
from gammonmax.core.engine import GameEngine

from gammonmax.players.player import Player
from gammonmax.players.human import HumanPlayer
from gammonmax.players.random import RandomPlayer
from gammonmax.players.computer import ComputerPlayer

from .cliColors import PLAYER
from .cliUtils import ExitGame, read_choice, safe_input, clear
from .cliHumanInterface import HumanMoveSelector
from .cliHandlers import CLIHandlers

# =========================================================

class CLISetup:
    """
    Factory and setup utilities for configuring players
    and initializing the game engine for the CLI.
    """

    def __init__(self, cfg: Config = config, input_func: Callable[[str], str] = safe_input):
        self.cfg: Config = cfg
        self.input_func: Callable[[str], str] = input_func

    def create_human_player(self, side: Side) -> HumanPlayer:
        """Create a human player choosing turns by index at the prompt."""
        return HumanPlayer(side, input_func=HumanMoveSelector(self.input_func).select)

    def choose_player(self, side: Side) -> Player:
        """
        Prompt the user to choose a player type for a given side.

        Returns:
            Player: Instantiated player object.
        """
        print(f"\nChoose player for {PLAYER[side]}: 1-Human, 2-Random, 3-Computer")
        choice = read_choice(self.input_func, "Choice (1/2/3): ", ("1", "2", "3"), "Invalid input, enter 1, 2 or 3")
        if choice == "1":
            return self.create_human_player(side)
        if choice == "2":
            return RandomPlayer(side)
        return ComputerPlayer(side)

    def setup_engine(self) -> GameEngine:
        """
        Initialize the game engine with rules, position and players.
        """
        return GameEngine(
            self.choose_player(Side.WHITE),
            self.choose_player(Side.BLACK),
            Position.initial(debug=self.cfg.DEBUG),
            BackgammonRules(),
        )


class BackgammonCLI:
    """
    Main command-line interface controller for running a Backgammon game.
    """

    def __init__(self, cfg: Config = config, stepwise: bool = False):
        self.cfg: Config = cfg
        self.setup = CLISetup(cfg)
        self.handlers = CLIHandlers(cfg.DELAY).handlers
        self.stepwise = stepwise

    def play_game(self, engine: GameEngine) -> None:
        """
        Run the game loop and dispatch events to CLI handlers.
        """
        for event in engine.play_game(stepwise=self.stepwise, max_turns=self.cfg.max_turns):
            handler = self.handlers.get(event["type"])
            if handler:
                handler(event)

    def run(self) -> None:
        """
        Start the CLI application and run a complete game session.
        """
        clear()
        try:
            engine = self.setup.setup_engine()
            self.play_game(engine)
        except ExitGame:
            print("\nGame exited by player.")
        except KeyboardInterrupt:
            print("\nGame interrupted by user. Exiting...")


def main() -> None:
    logger.remove()
    logger.add(sys.stderr, level=config.LOG_LEVEL)
    BackgammonCLI().run()


# ---------------- Main ----------------
if __name__ == "__main__":
    main()
