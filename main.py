"""
Main entry point for TicTacToe.

Two ways to play:
- Window (default): Tkinter board with clickable cells and history
- Console (--no-ui): type cell numbers and history jumps

Run this script to play TicTacToe!
"""

from typing import Callable, Optional

from engine.game_state import GameState
from presentation.config import UIConfig
from presentation.board_view import render, format_board, format_history
from presentation.board_image import BoardImageRenderer


HELP_TEXT = "Commands: 0-8 place a mark, 'j N' jump to history entry N, 'h' history, 's' screenshot, 'q' quit"


class TicTacToeConsole:
    """
    Console controller for TicTacToe.

    Game flow:
    1. The board, status and history are printed
    2. The player types a command
    3. Cell commands go to place_mark, jump commands to jump_to
    4. The game state notifies us and the board is printed again
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        config: Optional[UIConfig] = None,
        screenshot_dir: Optional[str] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the console game.

        Args:
            game_state: Game to play. A new game if not provided.
            config: Display configuration.
            screenshot_dir: Where 's' saves board images.
            input_fn: Reads one command (for tests).
            output_fn: Writes one block of text (for tests).
        """
        self.game_state = game_state or GameState()
        self.config = config or UIConfig()
        self.screenshot_dir = screenshot_dir
        self.image_renderer = BoardImageRenderer(self.config)
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

        self.is_running = False
        self.game_state.subscribe(lambda _state: self.show_board())

    def show_board(self):
        view = render(self.game_state, self.config)
        self.output_fn("\n" + format_board(view))

    def show_history(self):
        view = render(self.game_state, self.config)
        self.output_fn(format_history(view))

    def handle_command(self, command: str):
        """
        Run one console command.

        Args:
            command: The typed line.
        """
        command = command.strip().lower()

        if not command:
            return

        if command in ("q", "quit"):
            self.output_fn("\nGame quit by user.")
            self.is_running = False
        elif command in ("h", "history"):
            self.show_history()
        elif command in ("s", "screenshot"):
            self._save_screenshot()
        elif command.isdecimal():
            if not self.game_state.place_mark(int(command)):
                self.output_fn("Click ignored.")
        elif command.split()[0] in ("j", "jump"):
            self._jump(command.split()[1:])
        else:
            self.output_fn(HELP_TEXT)

    def _jump(self, args):
        if len(args) != 1 or not args[0].isdecimal():
            self.output_fn(HELP_TEXT)
            return

        if not self.game_state.jump_to(int(args[0])):
            self.output_fn("Jump ignored.")

    def _save_screenshot(self):
        view = render(self.game_state, self.config)
        try:
            path = self.image_renderer.save(view, self.screenshot_dir)
        except OSError as e:
            self.output_fn(f"ERROR: Could not save screenshot: {e}")
            return
        self.output_fn(f"Saved: {path}")

    def start(self):
        """Start the game loop."""
        self.output_fn(HELP_TEXT)
        self.show_board()

        self.is_running = True
        while self.is_running:
            try:
                command = self.input_fn("> ")
            except EOFError:
                break
            self.handle_command(command)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--screenshot-dir",
        default=UIConfig.SCREENSHOT_DIR,
        help="Directory for saved board screenshots"
    )

    args = parser.parse_args(argv)

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    game_state = GameState()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(game_state, screenshot_dir=args.screenshot_dir)
        ui.run()
        return

    # Console mode (--no-ui)
    console = TicTacToeConsole(game_state, screenshot_dir=args.screenshot_dir)

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
