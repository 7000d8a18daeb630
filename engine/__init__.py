"""
Board state engine for TicTacToe.
Handles snapshots, history navigation, move rules and win detection.
"""

__version__ = "1.0.0"

from .game_state import GameState, Mark, Snapshot, BOARD_SIZE, CELL_COUNT
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
