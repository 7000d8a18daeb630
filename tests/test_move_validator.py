from engine.game_state import Mark, Snapshot
from engine.move_validator import MoveValidator

X, O, _ = Mark.X, Mark.O, None


def test_empty_cell_is_valid():
    result = MoveValidator().validate_move(Snapshot.empty(), 4)
    assert result.is_valid
    assert result.error_message is None


def test_occupied_cell_is_rejected():
    snapshot = Snapshot(squares=(X, _, _, _, _, _, _, _, _), next_mark=O)
    result = MoveValidator().validate_move(snapshot, 0)
    assert not result.is_valid
    assert "occupied by X" in result.error_message


def test_out_of_range_is_rejected():
    validator = MoveValidator()
    assert not validator.validate_move(Snapshot.empty(), 9).is_valid
    assert not validator.validate_move(Snapshot.empty(), -1).is_valid


def test_won_board_is_rejected_before_anything_else():
    snapshot = Snapshot(squares=(X, X, X, O, O, _, _, _, _), next_mark=O, winner=X)
    result = MoveValidator().validate_move(snapshot, 5)
    assert not result.is_valid
    assert "won by X" in result.error_message


def test_jump_range():
    validator = MoveValidator()
    assert validator.validate_jump(3, 0).is_valid
    assert validator.validate_jump(3, 2).is_valid
    assert not validator.validate_jump(3, 3).is_valid
    assert not validator.validate_jump(3, -1).is_valid


def test_valid_moves():
    validator = MoveValidator()
    snapshot = Snapshot(squares=(X, O, _, _, _, _, _, _, X), next_mark=O)
    assert validator.get_valid_moves(snapshot) == [2, 3, 4, 5, 6, 7]

    won = Snapshot(squares=(X, X, X, O, O, _, _, _, _), next_mark=O, winner=X)
    assert validator.get_valid_moves(won) == []
