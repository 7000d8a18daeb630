"""
Stateless view of a TicTacToe game.
Turns the engine's current snapshot into what the player sees.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from engine.game_state import BOARD_SIZE, GameState
from .config import UIConfig


@dataclass
class HistoryEntry:
    """One clickable entry of the history list."""
    index: int
    label: str
    is_current: bool = False


@dataclass
class BoardView:
    """
    Everything needed to draw one frame of the game.
    """
    cells: List[str]                                 # Mark value or "" per cell
    status: str                                      # "Winner X" / "Next Player: O"
    history: List[HistoryEntry]
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def rows(self) -> List[List[str]]:
        """The cells grouped into rows of 3."""
        return [
            self.cells[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        ]


def history_label(index: int, config: Optional[UIConfig] = None) -> str:
    """Label of a history entry: "Game start" for 0, "Move #N" otherwise."""
    config = config or UIConfig()
    if index == 0:
        return config.HISTORY_START
    return config.HISTORY_MOVE.format(index=index)


def status_text(snapshot, config: Optional[UIConfig] = None) -> str:
    """Status line for a snapshot."""
    config = config or UIConfig()
    if snapshot.winner is not None:
        return config.STATUS_WINNER.format(mark=snapshot.winner.value)
    return config.STATUS_NEXT.format(mark=snapshot.next_mark.value)


def render(game_state: GameState, config: Optional[UIConfig] = None) -> BoardView:
    """
    Build the view for the game's current snapshot.

    Args:
        game_state: The game to show.
        config: Display configuration. Uses defaults if not provided.

    Returns:
        A BoardView with cells, status and history entries.
    """
    config = config or UIConfig()
    snapshot = game_state.current

    cells = ["" if cell is None else cell.value for cell in snapshot.squares]

    history = [
        HistoryEntry(
            index=index,
            label=history_label(index, config),
            is_current=(index == game_state.current_index)
        )
        for index in range(len(game_state))
    ]

    return BoardView(
        cells=cells,
        status=status_text(snapshot, config),
        history=history,
        winning_line=game_state.win_checker.get_winning_line(snapshot.squares)
    )


def format_board(view: BoardView) -> str:
    """
    Text drawing of a view, for the console.
    Empty cells show the number to type to play there.

        ┌───┬───┬───┐
        │ X │ 1 │ O │
        ...
    """
    lines = ["┌───┬───┬───┐"]

    for row, cells in enumerate(view.rows):
        first = row * BOARD_SIZE
        row_str = "│".join(
            f" {cell or first + col} " for col, cell in enumerate(cells)
        )
        lines.append(f"│{row_str}│")
        if row < BOARD_SIZE - 1:
            lines.append("├───┼───┼───┤")

    lines.append("└───┴───┴───┘")
    lines.append("")
    lines.append(view.status)

    return "\n".join(lines)


def format_history(view: BoardView) -> str:
    """Numbered history list; the displayed entry is marked with '>'."""
    lines = []
    for entry in view.history:
        marker = ">" if entry.is_current else " "
        lines.append(f"{marker} {entry.index:>3}. {entry.label}")
    return "\n".join(lines)
