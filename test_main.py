"""
Tests for the console game.
"""

import pytest

from main import TicTacToeGame, main, parse_move, parse_move_list
from tictactoe_core import Cell, GameState, Symbol


def scripted_input(answers):
    """input() replacement that returns the given answers in order."""
    answers = iter(answers)
    return lambda prompt: next(answers)


@pytest.mark.parametrize("text,expected", [
    ("1,2", (1, 2)),
    (" 0 , 0 ", (0, 0)),
    ("-1,4", (-1, 4)),
    ("a,b", None),
    ("1", None),
    ("1,2,3", None),
    ("", None),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


def test_parse_move_list():
    assert parse_move_list("0,0;1,1; 2,2;") == [(0, 0), (1, 1), (2, 2)]


def test_parse_move_list_rejects_bad_entry():
    with pytest.raises(ValueError):
        parse_move_list("0,0;oops")


def test_play_script_cross_wins(capsys):
    game = TicTacToeGame()
    state = game.play_script([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert state == GameState.CROSS_WINS
    assert "X WINS!" in capsys.readouterr().out


def test_play_script_reports_rejected_move(capsys):
    game = TicTacToeGame()
    game.play_script([(0, 0), (0, 0), (5, 5)])
    out = capsys.readouterr().out
    assert "already occupied" in out
    assert "Invalid position (5, 5)" in out
    assert game.board.current_symbol() == Symbol.NOUGHT


def test_play_script_stops_after_game_over(capsys):
    game = TicTacToeGame()
    game.play_script([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (2, 2)])
    assert game.board.get_cell(2, 2) == Cell.EMPTY
    assert "ignoring remaining moves" in capsys.readouterr().out


def test_interactive_game_to_draw(capsys):
    answers = ["0,0", "0,1", "0,2", "1,1", "1,0", "1,2", "2,1", "2,0", "2,2", "n"]
    game = TicTacToeGame(input_func=scripted_input(answers))
    game.start()
    assert game.board.current_state() == GameState.DRAW
    assert not game.is_running
    assert "DRAW" in capsys.readouterr().out


def test_interactive_bad_input_then_quit(capsys):
    game = TicTacToeGame(input_func=scripted_input(["hello", "1,1", "q"]))
    game.start()
    assert game.board.get_cell(1, 1) == Cell.CROSS
    assert "Invalid input format" in capsys.readouterr().out


def test_interactive_reset():
    game = TicTacToeGame(input_func=scripted_input(["1,1", "r", "q"]))
    game.start()
    assert game.board.moves_remaining() == 9
    assert game.board.current_symbol() == Symbol.CROSS


def test_interactive_play_again():
    answers = ["0,0", "1,0", "0,1", "1,1", "0,2", "y", "2,2", "q"]
    game = TicTacToeGame(input_func=scripted_input(answers))
    game.start()
    assert game.board.current_state() == GameState.PLAYING
    assert game.board.get_cell(2, 2) == Cell.CROSS
    assert game.board.moves_remaining() == 8


def test_main_with_moves(capsys):
    assert main(["--moves", "2,0;0,0;2,1;0,2;2,2"]) == 0
    out = capsys.readouterr().out
    assert "X WINS!" in out
    assert "[x][x][x]" in out


def test_main_verbose_shows_winning_line(capsys):
    main(["--verbose", "--moves", "0,0;1,0;0,1;1,1;0,2"])
    out = capsys.readouterr().out
    assert "Moves remaining: 8" in out
    assert "Winning line: [(0, 0), (0, 1), (0, 2)]" in out


def test_main_rejects_bad_moves():
    with pytest.raises(SystemExit):
        main(["--moves", "0,0;x"])
