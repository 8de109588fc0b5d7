"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

from .game_state import Cell

if TYPE_CHECKING:
    from .board import Board


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Row and column must be on the board
    3. Can only place on empty cells

    Rejections are routine input, so they are reported as a result
    rather than raised.
    """

    def validate_move(self, board: "Board", row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Board the move would be played on.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # Check if game is over
        if board.current_state().is_terminal:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message=f"Game is already over ({board.current_state().value})!"
            )

        # Check if row/col are in valid range
        last = board.dimension() - 1
        if not (0 <= row <= last and 0 <= col <= last):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_BOUNDS,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{last}."
            )

        # Check if cell is empty
        cell = board.get_cell(row, col)
        if cell != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {cell.name.lower()}"
            )

        return ValidationResult(is_valid=True)
