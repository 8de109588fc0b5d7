"""
TicTacToe Core
==============
Rules engine for 3x3 TicTacToe: board state, move validation,
turn alternation and win/draw detection.
"""

from .game_state import Cell, Symbol, GameState, cell_from_symbol
from .config import GameConfig
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker
from .board import Board

__version__ = "1.0.0"
