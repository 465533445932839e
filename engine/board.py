"""
Board for Minimax TicTacToe.
Holds the 9 cells, derives whose turn it is and classifies the position.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .config import EngineConfig


class Piece(Enum):
    """The mark a player puts on a cell."""
    WHITE = "white"   # Always moves first
    BLACK = "black"

    def opposite(self) -> "Piece":
        """Get the opposite piece."""
        return Piece.BLACK if self == Piece.WHITE else Piece.WHITE


class Turn(Enum):
    """Which player may put the next piece."""
    WHITE = "white"
    BLACK = "black"

    @property
    def piece(self) -> Piece:
        """The piece this player puts on the board."""
        return Piece.WHITE if self == Turn.WHITE else Piece.BLACK


class BoardState(Enum):
    """Classification of a whole board."""
    PLAYING = "playing"
    WHITE_WIN = "white_win"
    BLACK_WIN = "black_win"
    DRAW = "draw"


class LineState(Enum):
    """Classification of a single row, column or diagonal."""
    PLAYING = "playing"     # At least one empty cell
    WHITE_WIN = "white_win"
    BLACK_WIN = "black_win"
    DRAW = "draw"           # Full, but mixed pieces


# A cell is empty (None) or holds a piece
Cell = Optional[Piece]

CELL_COUNT = EngineConfig.CELL_COUNT

ROWS = [(0, 1, 2), (3, 4, 5), (6, 7, 8)]
COLUMNS = [(0, 3, 6), (1, 4, 7), (2, 5, 8)]
DIAGONALS = [(0, 4, 8), (2, 4, 6)]

# Order matters: the first complete line decides the winner
WINNING_LINES = ROWS + COLUMNS + DIAGONALS

_LINE_TO_BOARD = {
    LineState.WHITE_WIN: BoardState.WHITE_WIN,
    LineState.BLACK_WIN: BoardState.BLACK_WIN,
}


def judge_line(a: Cell, b: Cell, c: Cell) -> LineState:
    """
    Judge one line of three cells.

    Args:
        a, b, c: The cells of the line.

    Returns:
        PLAYING if any cell is empty, the owner's win if all three match,
        DRAW if the line is full with mixed pieces.
    """
    if a is None or b is None or c is None:
        return LineState.PLAYING

    if a == b == c:
        return LineState.WHITE_WIN if a == Piece.WHITE else LineState.BLACK_WIN

    return LineState.DRAW


@dataclass
class Board:
    """
    A 3x3 TicTacToe board stored as a flat list of 9 cells.

    Cell index = row * 3 + col. The board does not store whose turn it is;
    that follows from how many cells are still empty.
    """

    cells: List[Cell] = field(default_factory=lambda: [None] * CELL_COUNT)

    def __post_init__(self):
        # Own the storage so boards never share cells
        self.cells = list(self.cells)
        if len(self.cells) != CELL_COUNT:
            raise ValueError(
                f"A board has exactly {CELL_COUNT} cells, got {len(self.cells)}"
            )

    @classmethod
    def new(cls) -> "Board":
        """Create an empty board."""
        return cls()

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(list(self.cells))

    def _check_index(self, index: int):
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Cell index {index} out of range 0-{CELL_COUNT - 1}")

    def can_put(self, index: int) -> bool:
        """
        Check if a piece can be put on a cell.

        Args:
            index: Cell index (0-8). Anything else raises IndexError.

        Returns:
            True if the cell is empty.
        """
        self._check_index(index)
        return self.cells[index] is None

    def put(self, index: int, piece: Piece):
        """
        Put a piece on a cell.

        Does not check occupancy; call can_put() first.

        Args:
            index: Cell index (0-8). Anything else raises IndexError.
            piece: The piece to put.
        """
        self._check_index(index)
        self.cells[index] = piece

    def count_blank(self) -> int:
        """Number of empty cells."""
        return sum(1 for cell in self.cells if cell is None)

    def empty_indices(self) -> List[int]:
        """Indices of the empty cells, in increasing order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def who_can_put_next_piece(self) -> Turn:
        """
        Derive whose turn it is.

        White moves first on a 9-cell board, so an odd number of empty
        cells means White and an even number means Black. A full board
        reports Black even though the game is over.
        """
        if self.count_blank() % 2 == 1:
            return Turn.WHITE
        return Turn.BLACK

    def board_state(self) -> BoardState:
        """
        Classify the board.

        Rows are checked first, then columns, then the two diagonals.
        The first line with three matching pieces decides the winner.

        Returns:
            The win state of that line, otherwise PLAYING while an empty
            cell is left and DRAW on a full board.
        """
        cells = self.cells
        for a, b, c in WINNING_LINES:
            line = judge_line(cells[a], cells[b], cells[c])
            if line in _LINE_TO_BOARD:
                return _LINE_TO_BOARD[line]

        if any(cell is None for cell in cells):
            return BoardState.PLAYING

        return BoardState.DRAW

    def is_terminal(self) -> bool:
        """True once the game on this board is won or drawn."""
        return self.board_state() != BoardState.PLAYING
