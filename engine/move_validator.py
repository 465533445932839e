"""
Move validator for Minimax TicTacToe.
Checks a human's move before it touches the board.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, BoardState, CELL_COUNT


OCCUPIED_MESSAGE = "You can not put piece on it index"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None     # Parsed cell index when valid


class MoveValidator:
    """
    Validates TicTacToe moves typed by a human.
    
    Rules:
    1. Game must not be over
    2. Move must be a whole number
    3. Cell index must be 0-8
    4. Can only place on empty cells
    """
    
    def validate_move(self, board: Board, token: str) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            board: Current board.
            token: The cell index as typed.
            
        Returns:
            ValidationResult with is_valid, error_message and the index.
        """
        if board.board_state() != BoardState.PLAYING:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )
        
        try:
            index = int(token)
        except (TypeError, ValueError):
            return ValidationResult(
                is_valid=False,
                error_message=f"'{token}' is not a cell index"
            )
        
        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid index {index}. Must be 0-{CELL_COUNT - 1}."
            )
        
        if not board.can_put(index):
            return ValidationResult(is_valid=False, error_message=OCCUPIED_MESSAGE)
        
        return ValidationResult(is_valid=True, index=index)
    
    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves for the player to move.
        
        Returns:
            Empty cell indices, or an empty list once the game is over.
        """
        if board.board_state() != BoardState.PLAYING:
            return []
        
        return board.empty_indices()
