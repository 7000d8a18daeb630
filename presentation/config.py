"""
Display configuration for TicTacToe.
All the settings for the window, the console view and board screenshots.
"""


class UIConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_GEOMETRY = "640x420"
    WINDOW_MIN_SIZE = (520, 360)

    # ==================== COLORS ====================
    BG_COLOR = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_WIN_BG = '#065f46'      # Green for the winning line
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'
    HISTORY_COLOR = '#00ff88'
    CURRENT_ENTRY_BG = '#2d3748'

    # Mark colors
    MARK_COLORS = {
        "X": '#f87171',
        "O": '#10b981',
    }

    # ==================== FONTS ====================
    FONT_FAMILY = 'Segoe UI'
    CELL_FONT = (FONT_FAMILY, 24, 'bold')
    TITLE_FONT = (FONT_FAMILY, 16, 'bold')
    STATUS_FONT = (FONT_FAMILY, 12)
    HISTORY_FONT = (FONT_FAMILY, 11)

    # ==================== LABELS ====================
    STATUS_WINNER = "Winner {mark}"
    STATUS_NEXT = "Next Player: {mark}"
    HISTORY_START = "Game start"
    HISTORY_MOVE = "Move #{index}"

    # ==================== SCREENSHOT SETTINGS ====================
    # Size of one cell in the saved board image (pixels)
    IMAGE_CELL_SIZE = 120
    IMAGE_LINE_WIDTH = 4
    IMAGE_STATUS_HEIGHT = 40
    SCREENSHOT_DIR = "."
    SCREENSHOT_NAME = "tictactoe_{timestamp}.png"
