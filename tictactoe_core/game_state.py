"""
Enumerations for the TicTacToe engine.
Cells, sides and the derived game outcome.
"""

from enum import Enum, IntEnum


class Cell(IntEnum):
    """The mark occupying one board position."""
    EMPTY = 0
    CROSS = 1
    NOUGHT = 2


class Symbol(Enum):
    """The two sides in the game. Cross always moves first."""
    CROSS = "cross"
    NOUGHT = "nought"

    def opposite(self) -> "Symbol":
        """Get the opposite side."""
        return Symbol.NOUGHT if self == Symbol.CROSS else Symbol.CROSS


class GameState(Enum):
    """
    Outcome of the game so far.

    Never set by a caller - the board recomputes it after every move.
    """
    PLAYING = "playing"
    CROSS_WINS = "cross_wins"
    NOUGHT_WINS = "nought_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameState.PLAYING


def cell_from_symbol(symbol: Symbol) -> Cell:
    """Map a side to the cell value it writes."""
    return Cell.CROSS if symbol == Symbol.CROSS else Cell.NOUGHT


# Which outcome means a given side has won
WINNING_STATE = {
    Symbol.CROSS: GameState.CROSS_WINS,
    Symbol.NOUGHT: GameState.NOUGHT_WINS,
}
