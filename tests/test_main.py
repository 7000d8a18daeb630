import os
import pytest
from engine.game_state import GameState, Mark
from main import TicTacToeConsole, HELP_TEXT, main


def make_console(commands, tmp_path=None):
    lines = iter(commands)
    output = []

    def read(_prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    console = TicTacToeConsole(
        GameState(),
        screenshot_dir=str(tmp_path) if tmp_path else None,
        input_fn=read,
        output_fn=output.append
    )
    return console, output


def test_cell_command_places_mark():
    console, output = make_console([])
    console.handle_command("4")
    assert console.game_state.current.squares[4] == Mark.X
    assert "Next Player: O" in output[-1]


def test_ignored_click_reports_and_keeps_history():
    console, output = make_console([])
    console.handle_command("4")
    console.handle_command("4")
    console.handle_command("12")
    assert len(console.game_state) == 2
    assert output[-1] == "Click ignored."


def test_jump_command():
    console, output = make_console([])
    console.handle_command("0")
    console.handle_command("j 0")
    assert console.game_state.current_index == 2
    assert console.game_state.current.squares == (None,) * 9

    console.handle_command("jump 9")
    assert output[-1] == "Jump ignored."
    assert len(console.game_state) == 3


@pytest.mark.parametrize("command", ["hello", "j", "j x", "j 1 2", "²", "j ²"])
def test_unknown_commands_print_help(command):
    console, output = make_console([])
    console.handle_command(command)
    assert output == [HELP_TEXT]
    assert len(console.game_state) == 1


def test_history_command():
    console, output = make_console([])
    console.handle_command("0")
    console.handle_command("h")
    assert output[-1].splitlines()[-1] == ">   1. Move #1"


def test_screenshot_command(tmp_path):
    console, output = make_console([], tmp_path)
    console.handle_command("s")
    assert output[-1].startswith("Saved: ")
    assert os.path.exists(output[-1][len("Saved: "):])


def test_game_loop_until_quit():
    console, output = make_console(["0", "3", "1", "4", "2", "5", "q", "8"])
    console.start()
    assert console.game_state.current.winner == Mark.X
    assert len(console.game_state) == 6
    assert "Winner X" in output[-3]
    assert output[-2] == "Click ignored."
    assert output[-1] == "\nGame quit by user."


def test_game_loop_stops_at_end_of_input():
    console, _output = make_console(["4"])
    console.start()
    assert len(console.game_state) == 2


def test_main_console_mode(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda _prompt: "q")
    main(["--no-ui"])
    out = capsys.readouterr().out
    assert "Next Player: X" in out
    assert "Goodbye!" in out


def test_screenshot_error_is_reported_and_game_continues(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    console, output = make_console([], blocker)
    console.handle_command("s")
    assert output[-1].startswith("ERROR: Could not save screenshot: ")

    console.handle_command("0")
    assert console.game_state.current.squares[0] == Mark.X
    assert len(console.game_state) == 2


def test_main_interrupted(monkeypatch, capsys):
    def interrupt(_prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    main(["--no-ui"])
    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert out.rstrip().endswith("Goodbye!")
