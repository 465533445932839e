"""
Minimax search for Minimax TicTacToe.
Scores the full game tree and picks the best next board for the player to move.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import EngineConfig
from .board import Board, BoardState, Turn


class NoLegalMovesError(RuntimeError):
    """Raised when a best move is requested on a finished board."""


@dataclass
class Valuation:
    """A board paired with its score."""
    board: Board
    score: int


class MinimaxSearch:
    """
    Exhaustive minimax over every reachable board. No pruning.

    Scores are from White's point of view: White picks the highest score,
    Black the lowest. Wins found sooner are worth more, losses found later
    cost less.
    """

    def __init__(self, config: Optional[EngineConfig] = None, verbose: bool = False):
        """
        Initialize the search.

        Args:
            config: Engine configuration. Uses defaults if not provided.
            verbose: Print a short report after every search.
        """
        self.config = config or EngineConfig()
        self.verbose = verbose or self.config.DEBUG_MODE

        # How many boards were scored by the last search
        self.positions_evaluated = 0

    def get_next_best_board(self, board: Board) -> Board:
        """
        Get the board after the best move for the player to move.

        Args:
            board: A board that is still being played.

        Returns:
            A new board with exactly one more piece. The input is untouched.

        Raises:
            NoLegalMovesError: If the board is already won or drawn.
        """
        return self.search(board).board

    def search(self, board: Board) -> Valuation:
        """Run minimax from the root and return the chosen board with its score."""
        if board.board_state() != BoardState.PLAYING:
            raise NoLegalMovesError("no legal moves")

        self.positions_evaluated = 0
        valuation = self.minimax(board, 0)

        if self.verbose:
            print(f"CPU evaluated {self.positions_evaluated} positions. "
                  f"Best score: {valuation.score}")

        return valuation

    def minimax(self, board: Board, depth: int) -> Valuation:
        """
        Score a board by recursing into every successor.

        Args:
            board: Board to search from.
            depth: Recursion depth, 0 at the root.

        Returns:
            The chosen successor of `board` with its score, or the board's
            own valuation if it has no successors.
        """
        boards = self.next_boards(board)
        if not boards:
            return self.calc_valuation(board, depth)

        scored = []
        for next_board in boards:
            self.positions_evaluated += 1
            state = next_board.board_state()
            if state == BoardState.PLAYING:
                score = self.minimax(next_board, depth + 1).score
            else:
                score = self._score(state, depth)
            scored.append(Valuation(next_board, score))

        if board.who_can_put_next_piece() == Turn.WHITE:
            # Keep the first best: replace only on a strictly higher score
            best = scored[0]
            for valuation in scored[1:]:
                if valuation.score > best.score:
                    best = valuation
        else:
            # Keep the last best: replace unless the score is strictly higher
            best = scored[0]
            for valuation in scored[1:]:
                if not valuation.score > best.score:
                    best = valuation

        return best

    def next_boards(self, board: Board) -> List[Board]:
        """
        Every board reachable with one move, in increasing cell order.

        Returns an empty list if the game on `board` is over.
        """
        if board.board_state() != BoardState.PLAYING:
            return []

        piece = board.who_can_put_next_piece().piece
        boards = []
        for index in board.empty_indices():
            next_board = board.copy()
            next_board.put(index, piece)
            boards.append(next_board)

        return boards

    def calc_valuation(self, board: Board, depth: int) -> Valuation:
        """
        Score a board on its own, without looking ahead.

        White wins score WIN_SCORE - depth, Black wins -WIN_SCORE + depth,
        anything else scores depth.
        """
        self.positions_evaluated += 1
        return Valuation(board, self._score(board.board_state(), depth))

    def _score(self, state: BoardState, depth: int) -> int:
        win_score = self.config.WIN_SCORE
        if state == BoardState.WHITE_WIN:
            return win_score - depth
        if state == BoardState.BLACK_WIN:
            return -win_score + depth
        # Ongoing or drawn: the depth itself
        return depth


def get_next_best_board(board: Board) -> Board:
    """Best next board for the player to move, using the default configuration."""
    return MinimaxSearch().get_next_best_board(board)
