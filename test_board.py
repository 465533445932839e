"""
Tests for the TicTacToe board.
Run with: pytest test_board.py
"""

import pytest

from engine.board import Board, BoardState, LineState, Piece, Turn, judge_line

W = Piece.WHITE
B = Piece.BLACK


def test_new_board_is_empty():
    board = Board.new()
    assert board.cells == [None] * 9
    assert board.count_blank() == 9
    assert board.board_state() == BoardState.PLAYING


def test_board_must_have_nine_cells():
    with pytest.raises(ValueError):
        Board([None] * 8)


def test_put_and_can_put():
    board = Board.new()
    assert board.can_put(4)
    board.put(4, W)
    assert not board.can_put(4)
    assert board.cells[4] == W
    assert board.empty_indices() == [0, 1, 2, 3, 5, 6, 7, 8]


def test_put_overwrites_without_checking():
    board = Board.new()
    board.put(0, W)
    board.put(0, B)
    assert board.cells[0] == B


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_out_of_range_index_raises(index):
    board = Board.new()
    with pytest.raises(IndexError):
        board.can_put(index)
    with pytest.raises(IndexError):
        board.put(index, W)


def test_copies_are_independent():
    board = Board.new()
    board.put(0, W)
    clone = board.copy()
    clone.put(1, B)

    assert board.cells[1] is None
    assert clone.cells[0] == W
    assert board != clone


def test_constructor_does_not_share_cells():
    cells = [None] * 9
    board = Board(cells)
    cells[0] = W
    assert board.cells[0] is None


def test_turn_from_empty_cell_parity():
    board = Board.new()
    assert board.who_can_put_next_piece() == Turn.WHITE

    board.put(4, W)
    assert board.who_can_put_next_piece() == Turn.BLACK

    board.put(0, B)
    assert board.who_can_put_next_piece() == Turn.WHITE


def test_full_board_reports_black_turn():
    board = Board([W, B, W, W, B, B, B, W, W])
    assert board.count_blank() == 0
    assert board.who_can_put_next_piece() == Turn.BLACK


def test_turn_maps_to_piece():
    assert Turn.WHITE.piece == W
    assert Turn.BLACK.piece == B
    assert W.opposite() == B


def test_top_row_white_win():
    board = Board([W, W, W, None, B, B, None, None, B])
    assert board.board_state() == BoardState.WHITE_WIN


def test_column_black_win():
    board = Board([B, W, W, B, None, None, B, W, None])
    assert board.board_state() == BoardState.BLACK_WIN


def test_main_diagonal_win():
    board = Board([W, B, None, None, W, B, None, None, W])
    assert board.board_state() == BoardState.WHITE_WIN


def test_anti_diagonal_win():
    board = Board([W, W, B, None, B, None, B, None, W])
    assert board.board_state() == BoardState.BLACK_WIN


def test_full_board_without_line_is_draw():
    board = Board([W, B, W, W, B, B, B, W, W])
    assert board.board_state() == BoardState.DRAW
    assert board.is_terminal()


def test_unfinished_board_is_playing():
    board = Board([W, B, W, None, B, None, None, W, None])
    assert board.board_state() == BoardState.PLAYING
    assert not board.is_terminal()


def test_win_on_full_board_beats_draw():
    board = Board([W, B, W, B, W, B, B, W, W])
    assert board.board_state() == BoardState.WHITE_WIN


def test_judge_line():
    assert judge_line(W, W, None) == LineState.PLAYING
    assert judge_line(W, W, W) == LineState.WHITE_WIN
    assert judge_line(B, B, B) == LineState.BLACK_WIN
    assert judge_line(W, B, W) == LineState.DRAW
