"""
Win checker for the TicTacToe engine.
Checks if a side has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .game_state import Cell, Symbol, GameState, WINNING_STATE, cell_from_symbol


def build_winning_lines(size: int) -> np.ndarray:
    """
    Build the table of winning lines as flat row-major indices.

    Args:
        size: Board dimension.

    Returns:
        Array of shape (2 * size + 2, size): rows, then columns,
        then the top-left and top-right diagonals.
    """
    grid = np.arange(size * size).reshape(size, size)
    lines = list(grid) + list(grid.T)
    lines.append(grid.diagonal())
    lines.append(np.fliplr(grid).diagonal())
    return np.array(lines)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same side in a row
    (horizontally, vertically, or diagonally).
    The whole board is re-checked on every call; nothing is tracked
    between moves.
    """

    def __init__(self, size: int = 3):
        self.size = size
        self.winning_lines = build_winning_lines(size)

    def has_won(self, cells: np.ndarray, symbol: Symbol) -> bool:
        """
        Check if a side has completed any line.

        Args:
            cells: Flat row-major array of Cell values.
            symbol: The side to check.

        Returns:
            True if at least one row, column or diagonal is all that side.
        """
        complete = np.all(cells[self.winning_lines] == cell_from_symbol(symbol), axis=1)
        return bool(complete.any())

    def check_winner(self, cells: np.ndarray) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Cross is checked first so the reported winner is fixed even for
        a board where both sides have a line.

        Returns:
            The winning Symbol, or None if no winner yet.
        """
        for symbol in (Symbol.CROSS, Symbol.NOUGHT):
            if self.has_won(cells, symbol):
                return symbol
        return None

    def check_draw(self, cells: np.ndarray) -> bool:
        """A draw is a full board with no winner."""
        if self.check_winner(cells) is not None:
            return False
        return not bool(np.any(cells == Cell.EMPTY))

    def evaluate(self, cells: np.ndarray) -> GameState:
        """
        Compute the game state from the cells alone.

        Args:
            cells: Flat row-major array of Cell values.

        Returns:
            CROSS_WINS, NOUGHT_WINS, DRAW or PLAYING, in that precedence.
        """
        winner = self.check_winner(cells)
        if winner is not None:
            return WINNING_STATE[winner]

        if self.check_draw(cells):
            return GameState.DRAW

        return GameState.PLAYING

    def get_winning_line(self, cells: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.winning_lines:
            values = cells[line]
            if values[0] != Cell.EMPTY and np.all(values == values[0]):
                return [divmod(int(index), self.size) for index in line]
        return None
