"""
Engine module for Minimax TicTacToe.
Handles the board, the rules, and the minimax opponent.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .board import Board, BoardState, Piece, Turn
from .search import MinimaxSearch, NoLegalMovesError, Valuation, get_next_best_board
from .move_validator import MoveValidator, ValidationResult
