"""
Game state management for TicTacToe.
Tracks the board snapshots, the next mark and the navigable history.
"""

from enum import Enum
from typing import Callable, List, Optional, Tuple
from dataclasses import dataclass

from .win_checker import WinChecker
from .move_validator import MoveValidator


class Mark(Enum):
    """The two marks in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# The board is a 3x3 grid stored as a flat sequence of cells
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True)
class Snapshot:
    """
    One board position in the game history.

    Snapshots are never mutated. A click builds a new snapshot from the
    current one, a history jump appends a copy of an earlier one.
    """
    squares: Tuple[Optional[Mark], ...] = (None,) * CELL_COUNT
    next_mark: Mark = Mark.X
    winner: Optional[Mark] = None

    @classmethod
    def empty(cls) -> "Snapshot":
        """The starting snapshot: empty board, X to play, no winner."""
        return cls()

    def get_empty_cells(self) -> List[int]:
        """Indices of all empty cells."""
        return [i for i, cell in enumerate(self.squares) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.squares)


Listener = Callable[["GameState"], None]


class GameState:
    """
    The complete state of one TicTacToe session.

    Tracks:
    - The history of board snapshots (append-only, never empty)
    - Which snapshot is currently displayed
    - Who wants to hear about changes

    Invalid clicks and jumps are ignored: nothing changes and nobody is
    notified.
    """

    def __init__(
        self,
        win_checker: Optional[WinChecker] = None,
        validator: Optional[MoveValidator] = None
    ):
        self.win_checker = win_checker or WinChecker()
        self.validator = validator or MoveValidator()

        self._history: List[Snapshot] = [Snapshot.empty()]
        self._current_index = 0
        self._listeners: List[Listener] = []

    # ==================== READ-ONLY ACCESS ====================

    @property
    def current(self) -> Snapshot:
        """The snapshot being displayed."""
        return self._history[self._current_index]

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)

    # ==================== OPERATIONS ====================

    def place_mark(self, cell_index: int) -> bool:
        """
        Place the next mark on a cell of the current snapshot.

        Args:
            cell_index: Cell to mark (0-8, row by row).

        Returns:
            True if the click was accepted, False if it was ignored.
        """
        result = self.validator.validate_move(self.current, cell_index)
        if not result.is_valid:
            return False

        board = self.current

        # Place the mark on a copy of the cells
        squares = list(board.squares)
        squares[cell_index] = board.next_mark

        snapshot = Snapshot(
            squares=tuple(squares),
            next_mark=board.next_mark.opposite(),
            winner=self.win_checker.check_winner(squares)
        )
        self._append(snapshot)

        return True

    def jump_to(self, index: int) -> bool:
        """
        Go back (or forward) to an earlier board.

        The chosen snapshot is copied onto the end of the history, so the
        history is never truncated.

        Args:
            index: Position in the history.

        Returns:
            True if the jump was accepted, False if it was ignored.
        """
        result = self.validator.validate_jump(len(self._history), index)
        if not result.is_valid:
            return False

        source = self._history[index]
        self._append(
            Snapshot(
                squares=source.squares,
                next_mark=source.next_mark,
                winner=source.winner
            )
        )

        return True

    def _append(self, snapshot: Snapshot):
        self._history.append(snapshot)
        self._current_index = len(self._history) - 1
        self._notify()

    # ==================== CHANGE NOTIFICATION ====================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener(game_state)` after every accepted click or jump.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        # Iterate over a copy so listeners may unsubscribe themselves
        for listener in list(self._listeners):
            listener(self)


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()
    game.subscribe(lambda state: print(f"  history length now {len(state)}"))

    # X wins on the top row
    for cell in (0, 3, 1, 4, 2):
        print(f"\n{game.current.next_mark.value} plays cell {cell}")
        game.place_mark(cell)

    print(f"\nWinner: {game.current.winner}")
    print(f"Click after win accepted: {game.place_mark(8)}")

    print("\nJumping back to the start...")
    game.jump_to(0)
    print(f"Current index: {game.current_index}, squares: {game.current.squares}")

    print("\nGame state test done!")
