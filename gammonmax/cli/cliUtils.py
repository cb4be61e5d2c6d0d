# =========================================================
# --- cli_cliUtils.py ---
# =========================================================
import os
import time
from typing import Callable, Collection

# =========================================================

class ExitGame(Exception):
    """Raised by `safe_input` when the user quits ('q', 'quit', Ctrl+C or Ctrl+D)."""
    pass


def safe_input(prompt: str) -> str:
    """
    Read a stripped line from stdin, turning quit requests into ExitGame.

    Raises:
        ExitGame: If the user interrupts or enters 'q'/'quit'.
    """
    try:
        inp: str = input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        raise ExitGame()
    if inp.lower() in ("q", "quit"):
        raise ExitGame()
    return inp


def read_choice(
    input_func: Callable[[str], str],
    prompt: str,
    valid: Collection[str],
    error: str,
) -> str:
    """Prompt until the answer is one of `valid`, printing `error` after each miss."""
    while True:
        choice = input_func(prompt)
        if choice in valid:
            return choice
        print(error)


def interruptible_sleep(seconds: float) -> None:
    """Sleep in short slices so Ctrl+C is handled promptly. Non-positive delays return at once."""
    deadline = time.monotonic() + seconds
    while time.monotonic() < deadline:
        time.sleep(0.05)


def clear() -> None:
    """Clear the terminal screen ('cls' on Windows, 'clear' elsewhere)."""
    os.system('cls' if os.name == 'nt' else 'clear')
