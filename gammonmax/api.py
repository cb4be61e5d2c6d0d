# =========================================================
# --- api.py ---
# =========================================================

"""
Entry points for callers that only need positions, turns and the bot:

- initial_position()
- generate_turns(position, player, dice)
- apply_turn(position, player, turn)
- choose_turn(position, player, dice)
"""

from typing import List, Sequence

from gammonmax.core.board import Player
from gammonmax.core.generator import TurnMoveGenerator
from gammonmax.core.moves import TurnMove
from gammonmax.core.state import Position
from gammonmax.players.computer import MinimaxBot

# =========================================================

def initial_position() -> Position:
    """Return the standard starting position."""
    return Position.initial()


def generate_turns(position: Position, player: Player, dice: Sequence[int]) -> List[TurnMove]:
    """Return every legal, maximal turn for the roll, one per resulting position."""
    return TurnMoveGenerator().generate_legal_moves(position, player, dice)


def apply_turn(position: Position, player: Player, turn: TurnMove) -> Position:
    """Apply a turn produced by generate_turns for the same position."""
    return position.apply_turn(player, turn)


def choose_turn(position: Position, player: Player, dice: Sequence[int]) -> TurnMove:
    """Return the minimax bot's turn for player; empty if player must pass."""
    return MinimaxBot(player).choose_turn(position, dice)
