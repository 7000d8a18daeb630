import pytest
from engine.game_state import Mark
from engine.win_checker import WinChecker

X, O, _ = Mark.X, Mark.O, None


def test_row_win():
    squares = [X, X, X, _, _, _, _, _, _]
    assert WinChecker().check_winner(squares) == X


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(line):
    squares = [_] * 9
    for i in line:
        squares[i] = O
    checker = WinChecker()
    assert checker.check_winner(squares) == O
    assert checker.get_winning_line(squares) == line


def test_full_board_with_diagonal_is_a_win():
    squares = [X, O, X, O, X, O, O, X, X]
    checker = WinChecker()
    assert checker.check_winner(squares) == X
    assert checker.get_winning_line(squares) == (0, 4, 8)
    assert not checker.check_draw(squares)


def test_draw_board():
    squares = [X, O, X, X, O, O, O, X, X]
    checker = WinChecker()
    assert checker.check_winner(squares) is None
    assert checker.check_draw(squares)


def test_empty_board_has_no_winner():
    checker = WinChecker()
    assert checker.check_winner([_] * 9) is None
    assert checker.get_winning_line([_] * 9) is None
    assert not checker.check_draw([_] * 9)


def test_line_order_decides_between_two_winners():
    # Not reachable in play, but detection is defined on any cell array
    squares = [O, O, O, X, X, X, _, _, _]
    assert WinChecker().check_winner(squares) == O


def test_detection_is_idempotent():
    squares = [O, X, _, X, O, _, _, X, O]
    checker = WinChecker()
    assert checker.check_winner(squares) == checker.check_winner(squares) == O
    assert checker.check_winner(tuple(squares)) == O


def test_partial_board_is_not_draw():
    squares = [X, O, X, _, _, _, _, _, _]
    assert not WinChecker().check_draw(squares)
