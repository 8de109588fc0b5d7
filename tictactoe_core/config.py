"""
Configuration for the TicTacToe engine.
Board dimensions, display glyphs and debug settings.
"""

from types import MappingProxyType

from .game_state import Cell


class GameConfig:
    """
    Configuration class for the game engine.

    Override attributes on an instance (or subclass) to change behaviour.
    The board reads every setting from its own config, so a different
    BOARD_SIZE or GLYPHS takes effect for that board only.

    GLYPHS and SYMBOL_NAMES are read-only mappings shared by all
    instances; to change them assign a new mapping, don't mutate.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== DISPLAY SETTINGS ====================
    # Fixed-width token per cell for the text dump
    GLYPHS = MappingProxyType({
        Cell.CROSS: "[x]",
        Cell.NOUGHT: "[o]",
        Cell.EMPTY: "[-]",
    })

    # Names shown by the console game
    SYMBOL_NAMES = MappingProxyType({
        "cross": "X",
        "nought": "O",
    })

    # ==================== DEBUG SETTINGS ====================
    # Print the reason for every rejected move
    DEBUG_MODE = False

    def cell_count(self) -> int:
        """Number of cells, derived from BOARD_SIZE."""
        return self.BOARD_SIZE * self.BOARD_SIZE
