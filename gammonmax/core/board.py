# =========================================================
# --- core_board.py ---
# =========================================================

from enum import IntEnum

from gammonmax.utils.bitmask import set_all_bits

# =========================================================

"""
Board-related constants and the per-player lookup tables.

This module defines:
- Board points and the bar / bear-off sentinels
- The Player tag and its opponent pairing
- Stone signs, movement directions and bar entry anchors
- Home board ranges and their bitmasks
- Default starting positions
"""


class Player(IntEnum):
    """The two sides. The value doubles as index into every per-player table."""
    WHITE = 0
    BLACK = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()


def opponent(player: Player) -> Player:
    """Return the other side."""
    return Player(1 - player)


#: Board point range (0-23 are the playable points)
BOARD_START = 0
BOARD_END = 23
NUM_POINTS = 24

#: Sentinels used in moves: origin "from the bar" and destination "borne off"
BAR = -1
OFF = -2

#: Total number of stones per player
NUM_OF_ALL_STONES = 15

#: Pip distance of a stone waiting on the bar
BAR_PIPS = 25

#: Stone representation on the board
#: Positive for White, negative for Black
STONE = (1, -1)

#: Movement directions per player
#: White moves "down" (23 -> 0), Black moves "up" (0 -> 23)
DIRECTION = (-1, 1)

#: Virtual point a stone on the bar starts from.
#: entry point = ENTRY_ANCHOR + die * DIRECTION, i.e. 24 - die for White, die - 1 for Black
ENTRY_ANCHOR = (24, -1)

#: Home board ranges for each player (inclusive)
#: White: points 0-5, Black: points 18-23
HOME_START = (0, 18)
HOME_END = (5, 23)

#: Bitmask representing all playable points on the board
FULL_BOARD_MASK = set_all_bits(BOARD_START, BOARD_END)

#: Bitmasks for each player's home board
HOME_MASK = (
    set_all_bits(HOME_START[0], HOME_END[0]),  # White home mask
    set_all_bits(HOME_START[1], HOME_END[1]),  # Black home mask
)

#: Bitmasks for outside home board (complement of home)
OUTSIDE_HOME_MASK = (
    HOME_MASK[0] ^ FULL_BOARD_MASK,
    HOME_MASK[1] ^ FULL_BOARD_MASK,
)

#: Default starting positions
#: Each entry: list of (point, number_of_stones) for that player
#: White: 2 stones on 24, 5 on 13, 3 on 8, 5 on 6 (indices 23, 12, 7, 5)
#: Black mirrored: indices 0, 11, 16, 18
DEFAULT_POSITIONS = [
    [(23, 2), (12, 5), (7, 3), (5, 5)],
    [(0, 2), (11, 5), (16, 3), (18, 5)],
]


def entry_point(player: Player, die: int) -> int:
    """Point a stone entering from the bar lands on for the given die."""
    return ENTRY_ANCHOR[player] + die * DIRECTION[player]


def distance_to_off(player: Player, point: int) -> int:
    """Number of pips from point to bearing off."""
    if point == BAR:
        return BAR_PIPS
    return point + 1 if player == Player.WHITE else NUM_POINTS - point
