"""
Cell codec for the embedding call.
Converts between a Board and a flat array of 9 integer cell codes.
"""

import numpy as np
from typing import Optional, List

from engine.config import EngineConfig
from engine.board import Board, Piece


class BoardFormatError(ValueError):
    """Raised when an encoded board cannot be read."""


class BoardCodec:
    """
    Encodes boards as 9 integers in row-major order.
    
    Codes (from EngineConfig): 0 = empty, 1 = white, 2 = black.
    """
    
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        
        self.piece_to_code = {
            None: self.config.EMPTY_CODE,
            Piece.WHITE: self.config.WHITE_CODE,
            Piece.BLACK: self.config.BLACK_CODE,
        }
        self.code_to_piece = {code: piece for piece, code in self.piece_to_code.items()}
    
    def validate(self, cells) -> np.ndarray:
        """
        Check an encoded board and return it as a numpy array.
        
        Args:
            cells: Sequence or 1-D array of 9 integer codes.
            
        Returns:
            The codes as a 1-D integer array.
            
        Raises:
            BoardFormatError: On wrong shape, non-integer values or unknown codes.
        """
        try:
            array = np.asarray(cells)
        except (TypeError, ValueError) as e:
            raise BoardFormatError(f"Could not read board: {e}") from e
        
        if array.ndim != 1 or array.shape[0] != self.config.CELL_COUNT:
            raise BoardFormatError(
                f"Expected {self.config.CELL_COUNT} cells, got shape {array.shape}"
            )
        
        # bool is not an integer dtype in numpy, so True/False are rejected here
        if not np.issubdtype(array.dtype, np.integer):
            raise BoardFormatError(f"Expected integer cells, got {array.dtype}")
        
        unknown = ~np.isin(array, list(self.code_to_piece))
        if unknown.any():
            bad = int(array[unknown][0])
            raise BoardFormatError(f"expected number type 0 or 1 or 2, got {bad}")
        
        return array
    
    def decode(self, cells) -> Board:
        """Build a board from encoded cells."""
        array = self.validate(cells)
        
        board = Board.new()
        for index, code in enumerate(array.tolist()):
            piece = self.code_to_piece[code]
            if piece is not None:
                board.put(index, piece)
        
        return board
    
    def encode(self, board: Board) -> List[int]:
        """Encode a board as a list of 9 ints."""
        return [self.piece_to_code[cell] for cell in board.cells]
    
    def to_array(self, board: Board) -> np.ndarray:
        """Encode a board as a numpy int8 array."""
        return np.array(self.encode(board), dtype=np.int8)


_default_codec = BoardCodec()


def decode_board(cells) -> Board:
    """Build a board from 9 integer codes."""
    return _default_codec.decode(cells)


def encode_board(board: Board) -> List[int]:
    """Encode a board as 9 integer codes."""
    return _default_codec.encode(board)


def board_to_array(board: Board) -> np.ndarray:
    """Encode a board as a numpy int8 array."""
    return _default_codec.to_array(board)
