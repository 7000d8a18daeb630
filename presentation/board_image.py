"""
Board screenshots for TicTacToe.
Draws a BoardView with Pillow and saves it as a PNG.
"""

import os
import time
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from engine.game_state import BOARD_SIZE
from .board_view import BoardView
from .config import UIConfig


class BoardImageRenderer:
    """
    Renders a board view into an image.

    Layout: the 3x3 grid on top, the status line underneath.
    """

    def __init__(self, config: Optional[UIConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or UIConfig()
        self.font = ImageFont.load_default()

    @property
    def size(self):
        board = self.config.IMAGE_CELL_SIZE * BOARD_SIZE
        return (board, board + self.config.IMAGE_STATUS_HEIGHT)

    def render(self, view: BoardView) -> Image.Image:
        """
        Draw the view.

        Args:
            view: The view to draw.

        Returns:
            An RGB image.
        """
        cfg = self.config
        cell = cfg.IMAGE_CELL_SIZE
        board = cell * BOARD_SIZE

        image = Image.new("RGB", self.size, cfg.BG_COLOR)
        draw = ImageDraw.Draw(image)

        for index, value in enumerate(view.cells):
            row, col = divmod(index, BOARD_SIZE)
            x0, y0 = col * cell, row * cell
            box = (x0, y0, x0 + cell, y0 + cell)

            winning = view.winning_line is not None and index in view.winning_line
            draw.rectangle(box, fill=cfg.CELL_WIN_BG if winning else cfg.CELL_BG)

            if value:
                self._draw_mark(draw, value, box)

        # Grid lines
        for i in range(1, BOARD_SIZE):
            draw.line([(i * cell, 0), (i * cell, board)], fill=cfg.BG_COLOR, width=cfg.IMAGE_LINE_WIDTH)
            draw.line([(0, i * cell), (board, i * cell)], fill=cfg.BG_COLOR, width=cfg.IMAGE_LINE_WIDTH)

        # Status line
        text_y = board + (cfg.IMAGE_STATUS_HEIGHT // 2) - 6
        draw.text((10, text_y), view.status, fill=cfg.STATUS_COLOR, font=self.font)

        return image

    def _draw_mark(self, draw: ImageDraw.ImageDraw, value: str, box):
        """Draw X as two strokes and O as a ring, inset from the cell border."""
        x0, y0, x1, y1 = box
        pad = self.config.IMAGE_CELL_SIZE // 5
        width = max(2, self.config.IMAGE_CELL_SIZE // 12)
        color = self.config.MARK_COLORS.get(value, 'white')

        inner = (x0 + pad, y0 + pad, x1 - pad, y1 - pad)
        if value == "X":
            draw.line([inner[:2], inner[2:]], fill=color, width=width)
            draw.line([(inner[0], inner[3]), (inner[2], inner[1])], fill=color, width=width)
        else:
            draw.ellipse(inner, outline=color, width=width)

    def save(self, view: BoardView, directory: Optional[str] = None) -> str:
        """
        Save a screenshot of the view.

        Args:
            view: The view to draw.
            directory: Where to write. Defaults to config.SCREENSHOT_DIR.

        Returns:
            Path of the written file.

        Raises:
            OSError: If the file cannot be written.
        """
        directory = directory or self.config.SCREENSHOT_DIR
        os.makedirs(directory, exist_ok=True)

        filename = self.config.SCREENSHOT_NAME.format(timestamp=int(time.time()))
        path = os.path.join(directory, filename)

        self.render(view).save(path, format="PNG")
        return path
