"""
TicTacToe UI
A graphical interface for two-player TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to place the next mark)
- Game status (next player or winner)
- The move history (click an entry to jump back to it)
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from engine.game_state import BOARD_SIZE, GameState
from presentation.config import UIConfig
from presentation.board_view import BoardView, render
from presentation.board_image import BoardImageRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window keeps no game state of its own: it subscribes to the
    GameState and redraws everything whenever it changes.
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        config: Optional[UIConfig] = None,
        screenshot_dir: Optional[str] = None,
        root: Optional[tk.Tk] = None
    ):
        """Initialize the UI."""
        self.game_state = game_state or GameState()
        self.config = config or UIConfig()
        self.screenshot_dir = screenshot_dir
        self.image_renderer = BoardImageRenderer(self.config)

        self.view: Optional[BoardView] = None

        # Create UI
        self.root = root or tk.Tk()
        self._create_ui()

        self._unsubscribe = self.game_state.subscribe(lambda _state: self.refresh())
        self.refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BG_COLOR)
        self.root.geometry(cfg.WINDOW_GEOMETRY)
        self.root.minsize(*cfg.WINDOW_MIN_SIZE)

        # Configure style
        style = ttk.Style(self.root)
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BG_COLOR)
        style.configure('TLabel', background=cfg.BG_COLOR, foreground='white', font=(cfg.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground=cfg.TITLE_COLOR)
        style.configure('Status.TLabel', font=cfg.STATUS_FONT, foreground=cfg.STATUS_COLOR)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        self.board_frame = ttk.Frame(left_frame)
        self.board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(BOARD_SIZE * BOARD_SIZE):
            row, col = divmod(index, BOARD_SIZE)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=4,
                height=2,
                bg=cfg.CELL_BG,
                fg='white',
                activebackground=cfg.CURRENT_ENTRY_BG,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        tk.Button(
            left_frame,
            text="Save Screenshot",
            font=(cfg.FONT_FAMILY, 10, 'bold'),
            bg='#6366f1',
            fg='white',
            command=self._save_screenshot
        ).pack(pady=5)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=220)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="History", style='Title.TLabel').pack(pady=(0, 10))

        list_frame = ttk.Frame(right_frame)
        list_frame.pack(fill=tk.BOTH, expand=True)

        scrollbar = ttk.Scrollbar(list_frame, orient=tk.VERTICAL)
        self.history_list = tk.Listbox(
            list_frame,
            font=cfg.HISTORY_FONT,
            bg=cfg.CELL_BG,
            fg=cfg.HISTORY_COLOR,
            selectbackground=cfg.CURRENT_ENTRY_BG,
            activestyle='none',
            exportselection=False,
            yscrollcommand=scrollbar.set
        )
        scrollbar.configure(command=self.history_list.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.history_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        # One jump per click or Enter; selection also moves on drag and arrow keys
        self.history_list.bind('<ButtonRelease-1>', self._on_history_activate)
        self.history_list.bind('<Return>', self._on_history_activate)

        self.message_label = ttk.Label(right_frame, text="")
        self.message_label.pack(pady=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== RENDERING ====================

    def refresh(self):
        """Redraw board, status and history from the game state."""
        self.view = render(self.game_state, self.config)
        self._update_board_display(self.view)
        self.status_label.configure(text=self.view.status)
        self._update_history(self.view)

    def _update_board_display(self, view: BoardView):
        """Update the board grid display."""
        cfg = self.config
        for index, value in enumerate(view.cells):
            winning = view.winning_line is not None and index in view.winning_line
            self.board_cells[index].configure(
                text=value,
                bg=cfg.CELL_WIN_BG if winning else cfg.CELL_BG,
                fg=cfg.MARK_COLORS.get(value, 'white')
            )

    def _update_history(self, view: BoardView):
        """Rebuild the history list and select the displayed entry."""
        self.history_list.delete(0, tk.END)
        for entry in view.history:
            self.history_list.insert(tk.END, entry.label)
            if entry.is_current:
                self.history_list.selection_set(entry.index)
                self.history_list.see(entry.index)

    # ==================== EVENTS ====================

    def _on_cell_click(self, index: int):
        self.game_state.place_mark(index)

    def _on_history_activate(self, _event=None):
        selection = self.history_list.curselection()
        if not selection:
            return

        self.game_state.jump_to(selection[0])

    def _save_screenshot(self):
        """Save the board as a PNG."""
        try:
            path = self.image_renderer.save(self.view, self.screenshot_dir)
        except OSError as e:
            self.message_label.configure(text=f"ERROR: {str(e)[:30]}")
            print(f"Screenshot error: {e}")
            return

        self.message_label.configure(text="Screenshot saved")
        print(f"Saved: {path}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._unsubscribe()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
