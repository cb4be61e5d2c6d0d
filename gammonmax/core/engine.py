# =========================================================
# --- core_engine.py ---
# =========================================================

import random
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from loguru import logger

from gammonmax.players.player import Player as GamePlayer

from .board import Player, opponent
from .moves import TurnMove
from .rules import BackgammonRules, GameResult
from .state import Position
from .generator import TurnMoveGenerator

# ========================================================

DiceSource = Callable[[], Tuple[int, int]]


class RandomDice:
    """
    Dice source rolling two fair dice.

    Attributes:
        rng (random.Random): Random number generator for dice rolls.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng: random.Random = rng or random.Random()

    def __call__(self) -> Tuple[int, int]:
        return self.rng.randint(1, 6), self.rng.randint(1, 6)


class EngineEvents:
    """
    Event factory for game engine events.
    Returns structured dictionaries for UI or logging.
    """

    def start_roll(self, dice: Tuple[int, int], turn: Player) -> Dict[str, Any]:
        """Event: The opening roll decided which player starts."""
        return {
            "type": "start_roll",
            "dice": dice,
            "turn": turn,
        }

    def turn_start(self, turn: Player, position: Position, bear_off_allowed: bool) -> Dict[str, Any]:
        """Event: A new turn has started."""
        return {
            "type": "turn_start",
            "turn": turn,
            "state": position,
            "bear_off_allowed": bear_off_allowed,
        }

    def roll_dice(self, dice: Tuple[int, int], turn: Player, player_type: str) -> Dict[str, Any]:
        """Event: Dice have been rolled."""
        return {
            "type": "roll_dice",
            "dice": dice,
            "turn": turn,
            "player_type": player_type,
        }

    def no_moves(self, turn: Player) -> Dict[str, Any]:
        """Event: Player has no legal moves available."""
        return {
            "type": "no_moves",
            "turn": turn,
        }

    def chosen_move(self, turn: Player, move: TurnMove) -> Dict[str, Any]:
        """Event: Player has chosen a move."""
        return {
            "type": "chosen_move",
            "turn": turn,
            "move": move,
        }

    def apply_move(self, move: Any, position: Position) -> Dict[str, Any]:
        """Event: A single move has been applied to the position."""
        return {
            "type": "apply_move",
            "move": move,
            "state": position,
        }

    def turn_end(self, next_turn: Player, position: Position) -> Dict[str, Any]:
        """Event: The current turn has ended."""
        return {
            "type": "turn_end",
            "next_turn": next_turn,
            "state": position,
        }

    def game_over(self, position: Position, result: GameResult, player_type: str) -> Dict[str, Any]:
        """Event: The game has ended."""
        return {
            "type": "game_over",
            "state": position,
            "winner": result.winner,
            "player_type": player_type,
            "turns": result.turns,
        }


class GameEngine:
    """
    Backgammon game engine managing players, position, turns, dice and events.

    Attributes:
        players (list): The White and Black player objects.
        position (Position): Current position, replaced after every move.
        turn (Player): Side to move.
        rules (BackgammonRules): Rules engine.
        tmgen (TurnMoveGenerator): Turn move generator.
        dice_source (DiceSource): Callable returning two dice values.
        emit_enabled (bool): If True, yield events during play.
        events (EngineEvents): Event generator for logging/UI.
        dice (Optional[Tuple[int, int]]): Current dice rolled, None before the first roll.
        turns_played (int): Number of turns played so far.
    """

    def __init__(
        self,
        white: GamePlayer,
        black: GamePlayer,
        position: Optional[Position] = None,
        rules: Optional[BackgammonRules] = None,
        dice_source: Optional[DiceSource] = None,
        emit_enabled: bool = True,
        start_player: Player = Player.WHITE,
    ):
        self.players: list[GamePlayer] = [white, black]
        self.position: Position = position if position is not None else Position.initial()
        self.turn: Player = start_player
        self.rules: BackgammonRules = rules or BackgammonRules()
        self.tmgen: TurnMoveGenerator = TurnMoveGenerator(self.rules)
        self.dice_source: DiceSource = dice_source or RandomDice()
        self.emit_enabled: bool = emit_enabled
        self.events: EngineEvents = EngineEvents()
        self.dice: Optional[Tuple[int, int]] = None
        self.turns_played: int = 0

    # ---------- Properties ----------
    @property
    def player(self) -> GamePlayer:
        """Return the current player object."""
        return self.players[self.turn]

    @property
    def legal_moves(self) -> list[TurnMove]:
        """Return list of legal turn moves for the current dice and position."""
        return self.tmgen.generate_legal_moves(self.position, self.turn, self.dice)

    def get_player_type(self, player: Player) -> str:
        """Return string representation of a player."""
        return str(self.players[player])

    # ---------- Dice ----------
    def roll(self) -> Tuple[int, int]:
        """Draw two dice from the dice source and validate them."""
        return self.rules.validate_dice(self.dice_source())

    def roll_start_dice(self) -> Tuple[int, int]:
        """Roll one die per side to determine which player starts. Re-roll doubles."""
        d0, d1 = self.roll()
        while d0 == d1:
            d0, d1 = self.roll()
        self.turn = Player.WHITE if d0 > d1 else Player.BLACK
        return d0, d1

    def roll_dice(self) -> None:
        """Roll dice for a turn."""
        self.dice = self.roll()

    # ---------- Turn Management ----------
    def next_turn(self) -> None:
        """Switch to the next player."""
        self.turn = opponent(self.turn)

    def game_finished(self) -> Optional[GameResult]:
        """Check if the game is over, returning a GameResult if so."""
        winner = self.rules.game_over(self.position)
        if winner is None:
            return None
        return GameResult(winner, self.turns_played)

    # ---------- Event Emission ----------
    def emit(self, event: dict) -> Iterator[dict]:
        """Yield an event if emission is enabled."""
        if self.emit_enabled:
            yield event

    # ---------- Internal Phases ----------
    def _play_turn_moves(self, stepwise: bool):
        """Apply the selected turn move, emitting events if stepwise."""
        moves = self.legal_moves
        if not moves:
            logger.debug(f"{self.turn.label} cannot move with {self.dice}")
            yield from self.emit(self.events.no_moves(self.turn))
            return

        turn_move = self.player.select_move(moves, self.position, self.dice)
        if turn_move is None or turn_move not in moves:
            raise ValueError(f"{self.get_player_type(self.turn)} selected an illegal turn: {turn_move}")
        logger.debug(f"{self.turn.label} plays {turn_move}")
        yield from self.emit(self.events.chosen_move(self.turn, turn_move))

        for smove in turn_move:
            self.position = self.position.apply_move(self.turn, smove)
            if stepwise:
                yield from self.emit(self.events.apply_move(smove, self.position))

    # ---------- Game Loop ----------
    def play_from_state(self, stepwise: bool = True, max_turns: Optional[int] = None):
        """
        Play the game from the current position, yielding events.

        Args:
            stepwise (bool): If True, events are yielded after each single move.
            max_turns (Optional[int]): Maximum turns to play. None = no limit.

        Yields:
            dict: Engine events describing the game progression.
        """
        game_result = self.game_finished()
        turns = 0

        while not game_result:
            if max_turns is not None and turns >= max_turns:
                logger.info(f"Stopping after {turns} turns without a winner")
                break

            bear_off_allowed = self.rules.bearing_off_allowed(self.position, self.turn)
            yield from self.emit(self.events.turn_start(self.turn, self.position, bear_off_allowed))

            self.roll_dice()
            yield from self.emit(self.events.roll_dice(self.dice, self.turn, self.get_player_type(self.turn)))

            yield from self._play_turn_moves(stepwise)

            yield from self.emit(self.events.turn_end(opponent(self.turn), self.position))

            self.next_turn()
            turns += 1
            self.turns_played += 1
            game_result = self.game_finished()

        if game_result:
            logger.info(f"{game_result.winner.label} wins after {game_result.turns} turns")
            yield from self.emit(self.events.game_over(
                self.position, game_result, self.get_player_type(game_result.winner)
            ))

    def play_game(self, stepwise: bool = True, max_turns: Optional[int] = None):
        """
        Play a full game starting from the opening roll.

        Yields:
            dict: Engine events describing the game progression.
        """
        dice = self.roll_start_dice()
        yield from self.emit(self.events.start_roll(dice, self.turn))
        yield from self.play_from_state(stepwise=stepwise, max_turns=max_turns)

    def run(self, max_turns: Optional[int] = None) -> Optional[GameResult]:
        """Play a whole game without emitting events and return its result."""
        for _ in self.play_game(stepwise=False, max_turns=max_turns):
            pass
        return self.game_finished()
