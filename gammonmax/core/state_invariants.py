# =========================================================
# --- core_state_invariants.py ---
# =========================================================

import numpy as np
from typing import Any

from .board import Player, STONE, NUM_OF_ALL_STONES

# =========================================================

def assert_stone_invariant(position: Any, where: str = "") -> None:
    """
    Check that the total number of stones for each player is consistent.

    This includes stones on the board, on the bar, and borne off stones.

    Args:
        position: The Position object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If the total stones for a player do not equal NUM_OF_ALL_STONES.
    """
    for p in Player:
        board = int(np.clip(position.points.astype(np.int32) * STONE[p], 0, None).sum())
        bar = int(position.bar[p])
        off = int(position.off[p])
        total = board + bar + off

        if total != NUM_OF_ALL_STONES:
            raise AssertionError(
                f"[STONE LOST] {p.label}: {total}/{NUM_OF_ALL_STONES} at {where}\n"
                f"Board={board}, Bar={bar}, BearOff={off}"
            )


def assert_counter_invariant(position: Any, where: str = "") -> None:
    """
    Check that bar and bear-off counters are within range.

    Args:
        position: The Position object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If a counter is negative or exceeds NUM_OF_ALL_STONES.
    """
    for name, counters in (("bar", position.bar), ("off", position.off)):
        for p in Player:
            if not 0 <= int(counters[p]) <= NUM_OF_ALL_STONES:
                raise AssertionError(
                    f"[COUNTER RANGE] {name} counter of {p.label} is {int(counters[p])} at {where}"
                )


def assert_state_invariant(position: Any, where: str = "") -> None:
    """
    Perform full invariant check for a Position.

    This includes:
    - Stone count consistency
    - Bar / bear-off counter ranges

    Points store one signed count each, so a point can never hold stones of
    both players at once.

    Raises:
        AssertionError: If any invariant fails.
    """
    assert_stone_invariant(position, where)
    assert_counter_invariant(position, where)
