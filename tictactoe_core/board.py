"""
Board for the TicTacToe engine.
Owns the 3x3 grid, the side to move and the game outcome.
"""

from typing import Optional, List, Tuple

import numpy as np

from .config import GameConfig
from .game_state import Cell, Symbol, GameState, cell_from_symbol
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker


class Board:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The cells, row-major (index = row * size + col); 9 on the default 3x3 board
    - The side to move next (Cross starts)
    - The game state, recomputed from the cells after every move

    A board is not safe for concurrent writers. Callers sharing one
    across threads must hold their own lock around set_cell() and reset().
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize an empty board.

        Args:
            config: Engine configuration (default: GameConfig()).
        """
        self.config = config or GameConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker(self.config.BOARD_SIZE)

        self._cells = np.full(self.config.cell_count(), Cell.EMPTY, dtype=np.int8)
        self._current_symbol = Symbol.CROSS
        self._state = GameState.PLAYING

    # ==================== QUERIES ====================

    def dimension(self) -> int:
        return self.config.BOARD_SIZE

    def cell_count(self) -> int:
        return self.config.cell_count()

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """
        Snapshot of all cells, row-major.

        A copy for inspection; the board never hands out its own array.
        """
        return tuple(Cell(int(value)) for value in self._cells)

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Coordinates are not checked here; use validate_move() or
        set_cell() for untrusted input.
        """
        return Cell(int(self._cells[self._index(row, col)]))

    def moves_remaining(self) -> int:
        """Count of cells still empty."""
        return int(np.count_nonzero(self._cells == Cell.EMPTY))

    def current_symbol(self) -> Symbol:
        return self._current_symbol

    def current_state(self) -> GameState:
        return self._state

    def game_over(self) -> bool:
        return self._state.is_terminal

    @staticmethod
    def cell_glyph(cell: Cell) -> str:
        """
        Default display token for a cell value.

        Uses the fixed GameConfig glyphs; render() uses the board's own
        config instead.

        Raises:
            ValueError: If cell is not a Cell.
        """
        if not isinstance(cell, Cell):
            raise ValueError(f"Not a cell value: {cell!r}")
        return GameConfig.GLYPHS[cell]

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, row-major.
        """
        return [divmod(int(index), self.dimension())
                for index in np.flatnonzero(self._cells == Cell.EMPTY)]

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """The completed line as (row, col) tuples, or None."""
        return self.win_checker.get_winning_line(self._cells)

    def validate_move(self, row: int, col: int) -> ValidationResult:
        """Check whether a move would be accepted, without playing it."""
        return self.validator.validate_move(self, row, col)

    # ==================== MOVES ====================

    def set_cell(self, row: int, col: int, symbol: Symbol) -> bool:
        """
        Place a mark for a side.

        The side is chosen by the caller and is not required to match
        current_symbol().

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            symbol: Side whose mark is written.

        Returns:
            True if the mark was written, False if the move was rejected
            (off the board, occupied cell, or game already over).
        """
        result = self.validate_move(row, col)
        if not result.is_valid:
            if self.config.DEBUG_MODE:
                print(result.error_message)
            return False

        self._cells[self._index(row, col)] = cell_from_symbol(symbol)
        self._state = self.win_checker.evaluate(self._cells)

        # No further turn once the game has ended
        if not self.game_over():
            self._current_symbol = self._current_symbol.opposite()

        return True

    def reset(self):
        """Clear the board for a new game. Cross moves first."""
        self._cells.fill(Cell.EMPTY)
        self._state = GameState.PLAYING
        self._current_symbol = Symbol.CROSS

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board(self.config)
        new_board._cells = self._cells.copy()
        new_board._current_symbol = self._current_symbol
        new_board._state = self._state
        return new_board

    # ==================== DISPLAY ====================

    def render(self) -> str:
        """Text dump of the board: one line of glyphs per row."""
        size = self.dimension()
        rows = []
        for row in range(size):
            rows.append("".join(self.config.GLYPHS[self.get_cell(row, col)]
                                for col in range(size)))
        return "\n".join(rows)

    def print_board(self):
        """Print the board to console."""
        print(self.render())

    def _index(self, row: int, col: int) -> int:
        return row * self.dimension() + col
