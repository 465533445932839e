"""
Tests for the console game.
Run with: pytest test_main.py
"""

import io
import json

import pytest

from engine.board import Board, BoardState, Piece
from engine.move_validator import MoveValidator, OCCUPIED_MESSAGE
from main import TicTacToeGame, TokenReader, format_board, main

# Every index a few times over, so the human always finds an empty cell
ALL_MOVES = " ".join(["0 1 2 3 4 5 6 7 8"] * 5)


def test_token_reader_splits_on_whitespace():
    reader = TokenReader(io.StringIO("1  2\n\n 3\t4\n"))
    assert [reader.read() for _ in range(4)] == ["1", "2", "3", "4"]


def test_token_reader_raises_at_end():
    reader = TokenReader(io.StringIO("7"))
    assert reader.read() == "7"
    with pytest.raises(EOFError):
        reader.read()


def test_format_board():
    board = Board.new()
    board.put(0, Piece.WHITE)
    board.put(4, Piece.BLACK)

    assert format_board(board) == "\n".join([
        "------------",
        "o 1 2",
        "3 x 5",
        "6 7 8",
        "------------",
    ])


def test_validator_messages():
    validator = MoveValidator()
    board = Board.new()
    board.put(4, Piece.WHITE)

    assert validator.validate_move(board, "3").index == 3
    assert validator.validate_move(board, "4").error_message == OCCUPIED_MESSAGE
    assert not validator.validate_move(board, "9").is_valid
    assert not validator.validate_move(board, "-1").is_valid
    assert not validator.validate_move(board, "abc").is_valid

    finished = Board([Piece.WHITE] * 3 + [None] * 6)
    assert validator.validate_move(finished, "5").error_message == "Game is already over!"
    assert validator.get_valid_moves(finished) == []
    assert validator.get_valid_moves(board) == [0, 1, 2, 3, 5, 6, 7, 8]


def test_human_first_never_wins(capsys):
    game = TicTacToeGame(input_stream=io.StringIO("1 " + ALL_MOVES))
    state = game.start()

    out = capsys.readouterr().out
    assert out.startswith("Do you want to put the first piece?\n0: No, 1: Yes\n")
    assert "Ready play game" in out
    assert "Your turn" in out and "CPU turn" in out
    assert state != BoardState.PLAYING
    assert "You win" not in out
    assert out.rstrip().endswith(("Draw", "You lose"))


def test_question_is_repeated_on_bad_answer(capsys):
    game = TicTacToeGame(input_stream=io.StringIO("yes 2 1 " + ALL_MOVES))
    game.start()

    out = capsys.readouterr().out
    assert out.count("0: No, 1: Yes") == 3
    assert game.human_first is True


def test_occupied_cell_is_asked_again(capsys):
    # Human plays 4, CPU answers, then the human tries 4 again
    game = TicTacToeGame(human_first=True, input_stream=io.StringIO("4 4 x 42 " + ALL_MOVES))
    game.start()

    out = capsys.readouterr().out
    assert OCCUPIED_MESSAGE in out
    assert "'x' is not a cell index" in out
    assert "Invalid index 42" in out
    assert game.board.cells[4] == Piece.WHITE


def test_human_plays_black_when_second(capsys):
    # CPU's first move needs a full search of the empty board
    game = TicTacToeGame(human_first=False, input_stream=io.StringIO(ALL_MOVES))
    state = game.start()

    out = capsys.readouterr().out
    assert out.index("CPU turn") < out.index("Your turn")
    assert state in (BoardState.DRAW, BoardState.WHITE_WIN)
    assert "You win" not in out


def test_main_single_call(capsys):
    status = main(["--board", "[1, 1, 0, 2, 2, 0, 0, 0, 0]"])

    assert status == 0
    assert json.loads(capsys.readouterr().out) == [1, 1, 1, 2, 2, 0, 0, 0, 0]


def test_main_single_call_bad_board(capsys):
    status = main(["--board", "[1, 1, 5]"])

    assert status == 2
    assert "ERROR" in capsys.readouterr().err


def test_main_input_closed(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 4"))
    status = main([])

    assert status == 1
    assert "Input closed." in capsys.readouterr().out
