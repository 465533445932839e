"""
Binding module for Minimax TicTacToe.
Lets a host application ask for the best move with a flat integer board.
"""

from .codec import BoardCodec, BoardFormatError, decode_board, encode_board, board_to_array
from .api import get_next_best_board, get_next_best_board_json
