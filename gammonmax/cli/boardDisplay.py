# =========================================================
# --- cli_boardDisplay.py ---
# =========================================================

from typing import Optional, Set, Iterable

from gammonmax.core.board import Player, NUM_POINTS
from gammonmax.core.state import Position
from gammonmax.players.valuation import Valuation, verdict

from .cliColors import TColor, STONE_COLOR, paint
from .cliUtils import clear

# =========================================================

class BoardDisplay:
    """
    Class for displaying the Backgammon board in the terminal.

    Points are numbered 1-24 from White's perspective; White moves 24 -> 1,
    Black moves 1 -> 24.

    Attributes:
        position (Position): The position to draw.
        clear_screen (bool): Whether to clear the screen before drawing.
        field_size (int): Width of a board point for formatting.
        use_color (bool): Whether to use colored output.
    """

    def __init__(self, position: Position, clear_screen: bool = True, use_color: bool = True) -> None:
        self.position: Position = position
        self.clear_screen: bool = clear_screen
        self.field_size: int = 4  # Width of each board point for alignment
        self.use_color: bool = use_color

    def _paint(self, text: str, color: str) -> str:
        return paint(text, color, self.use_color)

    def _point_str(self, point: int) -> str:
        """
        Returns a formatted string representing a board point index.

        Returns:
            str: "nW" for n White stones, "nB" for n Black stones, "." if empty.
        """
        white = self.position.num_of_stones(point, Player.WHITE)
        black = self.position.num_of_stones(point, Player.BLACK)

        if white:
            return self._paint(f"{white}W".rjust(self.field_size), STONE_COLOR[Player.WHITE])
        if black:
            return self._paint(f"{black}B".rjust(self.field_size), STONE_COLOR[Player.BLACK])
        return ".".rjust(self.field_size)

    def _color_index(
        self,
        point: int,
        from_points: Optional[Iterable[int]] = None,
        to_points: Optional[Iterable[int]] = None
    ) -> str:
        """
        Returns the point number, highlighted if a move starts (GREEN) or ends (YELLOW) there.
        """
        from_points = from_points or set()
        to_points = to_points or set()

        s = f"{point + 1}".rjust(self.field_size)
        if point in to_points:
            return self._paint(s, TColor.YELLOW)
        if point in from_points:
            return self._paint(s, TColor.GREEN)
        return s

    def draw_points(self, from_points: Optional[Set[int]] = None, to_points: Optional[Set[int]] = None) -> None:
        """
        Draws all board points including move color highlights.

        Upper half shows points 24..13, lower half 12..1.
        """
        half = NUM_POINTS // 2

        upper_range = range(NUM_POINTS - 1, half - 1, -1)
        print("     " + "".join(self._color_index(p, from_points, to_points) for p in upper_range))
        print("TOP :" + "".join(self._point_str(p) for p in upper_range))
        print("----+" + "-" * (half * self.field_size))

        lower_range = range(half - 1, -1, -1)
        print("BOT :" + "".join(self._point_str(p) for p in lower_range))
        print("     " + "".join(self._color_index(p, from_points, to_points) for p in lower_range))

    def draw_bar_and_off(self) -> None:
        """
        Draws the bar and the bear-off area for both players.
        """
        white, black = Player.WHITE, Player.BLACK
        print(f"\nBar: W={self.position.bar_count(white)}  B={self.position.bar_count(black)}   |   "
              f"Off: W={self.position.off_count(white)}  B={self.position.off_count(black)}")

    def draw_status(self) -> None:
        """
        Draws the status panel: evaluation verdict from White's point of view and pip counts.
        """
        score = Valuation().evaluate(self.position, Player.WHITE)
        print("\n--- Game status ---")
        print(verdict(score))
        print(f"Pips White: {self.position.pip_count(Player.WHITE)} | "
              f"Pips Black: {self.position.pip_count(Player.BLACK)}")

    def draw_all(self, from_points: Optional[Set[int]] = None, to_points: Optional[Set[int]] = None) -> None:
        """
        Draws the entire board, including points, bar, bear-off areas and status panel.

        Args:
            from_points (Optional[Set[int]]): Points stones are moving from.
            to_points (Optional[Set[int]]): Points stones are moving to.
        """
        if self.clear_screen:
            clear()
        print(self._paint("--- Board ---", TColor.BOLD))
        print("White: 24 -> 1   |   Black: 1 -> 24\n")
        self.draw_points(from_points, to_points)
        self.draw_bar_and_off()
        self.draw_status()
