# =========================================================
# --- cli_cliColors.py ---
# =========================================================

from typing import Tuple

from gammonmax.core.board import Player

# =========================================================

class TColor:
    """
    ANSI escape codes used by the board display.

    WHITE and RED mark White's and Black's stones, GREEN and YELLOW the
    origin and destination of the last move.
    """
    WHITE: str   = "\033[97m"
    RED: str     = "\033[91m"
    GREEN: str   = "\033[92m"
    YELLOW: str  = "\033[93m"
    RESET: str   = "\033[0m"
    BOLD: str    = "\033[1m"


#: Stone color per side, indexed by Player
STONE_COLOR: Tuple[str, str] = (TColor.WHITE, TColor.RED)


def paint(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI color, or return it unchanged when colors are off."""
    return f"{color}{text}{TColor.RESET}" if enabled else text


def side_name(side: Player, use_color: bool = True) -> str:
    """Display name of a side, e.g. '(W)hite'."""
    return paint(f"({side.label[0]}){side.label[1:]}", STONE_COLOR[side], use_color)


PLAYER: Tuple[str, str] = tuple(side_name(side) for side in Player)
