"""
Single-call entry points for host applications.
A host passes the board as 9 integer codes and gets the best next board back.
"""

import json
from typing import List

from engine.search import MinimaxSearch
from .codec import BoardFormatError, decode_board, encode_board


def get_next_best_board(cells) -> List[int]:
    """
    Get the best next board for a host caller.
    
    Args:
        cells: 9 integer codes (0 empty, 1 white, 2 black), row-major.
            A list, tuple or 1-D numpy array.
            
    Returns:
        The board after the best move, in the same encoding.
        
    Raises:
        BoardFormatError: If `cells` is not a valid encoded board.
        NoLegalMovesError: If the game on that board is already over.
    """
    board = decode_board(cells)
    return encode_board(MinimaxSearch().get_next_best_board(board))


def get_next_best_board_json(payload: str) -> str:
    """Same as get_next_best_board, but takes and returns a JSON array."""
    try:
        cells = json.loads(payload)
    except json.JSONDecodeError as e:
        raise BoardFormatError(f"Board is not valid JSON: {e}") from e
    
    if not isinstance(cells, list):
        raise BoardFormatError("Board must be a JSON array")
    
    return json.dumps(get_next_best_board(cells))
