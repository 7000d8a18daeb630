import os
from PIL import Image
from engine.game_state import GameState
from presentation.board_image import BoardImageRenderer
from presentation.board_view import render
from presentation.config import UIConfig


def won_game():
    game = GameState()
    for cell in (0, 3, 1, 4, 2):
        game.place_mark(cell)
    return game


def hex_rgb(color):
    color = color.lstrip('#')
    return tuple(int(color[i:i + 2], 16) for i in (0, 2, 4))


def test_image_size():
    renderer = BoardImageRenderer()
    image = renderer.render(render(GameState()))
    cell = UIConfig.IMAGE_CELL_SIZE
    assert image.size == (cell * 3, cell * 3 + UIConfig.IMAGE_STATUS_HEIGHT)
    assert image.mode == "RGB"


def test_winning_cells_are_highlighted():
    renderer = BoardImageRenderer()
    image = renderer.render(render(won_game()))
    cell = UIConfig.IMAGE_CELL_SIZE
    corner = (6, 6)  # inside the cell, outside the mark and grid lines
    assert image.getpixel(corner) == hex_rgb(UIConfig.CELL_WIN_BG)
    assert image.getpixel((corner[0], cell + corner[1])) == hex_rgb(UIConfig.CELL_BG)


def test_save_writes_png(tmp_path):
    renderer = BoardImageRenderer()
    path = renderer.save(render(won_game()), str(tmp_path / "shots"))
    assert os.path.exists(path)
    assert os.path.basename(path).startswith("tictactoe_")
    with Image.open(path) as image:
        assert image.format == "PNG"
