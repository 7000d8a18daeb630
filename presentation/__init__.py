"""
Presentation module for TicTacToe.
Stateless views of the game: text, window and screenshot rendering.
"""

from .config import UIConfig
from .board_view import BoardView, HistoryEntry, render, format_board, format_history
from .board_image import BoardImageRenderer
