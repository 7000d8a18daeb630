"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally)

    Cells are indexed 0-8, row by row:

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8
    """

    # All possible winning lines, checked in this order
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, squares: Sequence):
        """
        Check if there's a winner.

        Args:
            squares: The 9 cells of a board (None for empty).

        Returns:
            The winning mark of the first complete line, or None if no winner yet.
        """
        line = self.get_winning_line(squares)
        if line is None:
            return None

        return squares[line[0]]

    def _check_line(self, squares: Sequence, line: Tuple[int, int, int]) -> bool:
        """True if all 3 cells of the line hold the same mark."""
        first = squares[line[0]]
        if first is None:
            return False  # Empty cell, no winner on this line

        return first == squares[line[1]] == squares[line[2]]

    def get_winning_line(self, squares: Sequence) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            squares: The 9 cells of a board.

        Returns:
            The first winning line as a triple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(squares, line):
                return line
        return None

    def check_draw(self, squares: Sequence) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled and no line is complete.
        """
        if self.check_winner(squares) is not None:
            return False

        return all(cell is not None for cell in squares)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Row win
    squares = ["X", "X", "X", None, "O", None, "O", None, None]
    print(f"Test 1 (row): winner = {checker.check_winner(squares)}")
    assert checker.check_winner(squares) == "X"

    # Test 2: Full board, no line
    squares = ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
    print(f"Test 2 (draw): is_draw = {checker.check_draw(squares)}")
    assert checker.check_draw(squares)

    print("\nWinChecker test done!")
