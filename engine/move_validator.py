"""
Move validator for TicTacToe.
Decides whether a click or a history jump is accepted.
"""

from typing import List, Optional
from dataclasses import dataclass


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe clicks and history jumps.

    Rules:
    1. Can only place on empty cells
    2. Cell index must be 0-8
    3. Game must not be won
    4. Jumps must point at an existing history entry
    """

    def validate_move(self, snapshot, cell_index: int) -> ValidationResult:
        """
        Validate a click on a cell.

        Args:
            snapshot: The snapshot being clicked on.
            cell_index: Cell to place the next mark on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if snapshot.winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already won by {snapshot.winner.value}!"
            )

        # Check if index is in valid range
        if not (0 <= cell_index < len(snapshot.squares)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell_index}. Must be 0-{len(snapshot.squares) - 1}."
            )

        # Check if cell is empty
        occupant = snapshot.squares[cell_index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell_index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def validate_jump(self, history_length: int, index: int) -> ValidationResult:
        """
        Validate a jump to a history entry.

        Args:
            history_length: Number of snapshots in the history.
            index: Requested history position.

        Returns:
            ValidationResult.
        """
        if not (0 <= index < history_length):
            return ValidationResult(
                is_valid=False,
                error_message=f"No history entry {index}. Must be 0-{history_length - 1}."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, snapshot) -> List[int]:
        """
        Get all cells the next mark may be placed on.

        Args:
            snapshot: Current snapshot.

        Returns:
            List of valid cell indices.
        """
        if snapshot.winner is not None:
            return []

        return snapshot.get_empty_cells()


# Quick test
if __name__ == "__main__":
    from engine.game_state import GameState

    print("Testing MoveValidator...")

    game = GameState()
    validator = MoveValidator()

    result = validator.validate_move(game.current, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    game.place_mark(4)

    # Same cell again
    result = validator.validate_move(game.current, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    # Out of range
    result = validator.validate_move(game.current, 9)
    print(f"Move 9: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_jump(len(game), 5)
    print(f"Jump 5: valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(game.current)}")

    print("\nMoveValidator test done!")
