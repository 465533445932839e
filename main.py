"""
Main script for Minimax TicTacToe.

This script ties together:
- Engine (board, move validation, minimax search)
- Binding (flat integer boards for the --board option)

Run this script to play TicTacToe against the computer!
"""

import sys
from typing import Optional, Iterator, TextIO

# Engine imports
from engine.config import EngineConfig
from engine.board import Board, BoardState, Piece, Turn
from engine.move_validator import MoveValidator
from engine.search import MinimaxSearch, NoLegalMovesError

# Binding imports
from binding import BoardFormatError, get_next_best_board_json


class TokenReader:
    """
    Reads whitespace-separated tokens from a text stream.
    Raises EOFError once the stream runs dry.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._tokens: Iterator[str] = iter(())

    def read(self) -> str:
        """Return the next token."""
        while True:
            token = next(self._tokens, None)
            if token is not None:
                return token

            line = self.stream.readline()
            if not line:
                raise EOFError("input closed")
            self._tokens = iter(line.split())


def format_cell(index: int, cell: Optional[Piece], config: EngineConfig) -> str:
    """Text for one cell: its index when empty, otherwise the piece symbol."""
    if cell == Piece.WHITE:
        return config.WHITE_SYMBOL
    if cell == Piece.BLACK:
        return config.BLACK_SYMBOL
    return str(index)


def format_board(board: Board, config: Optional[EngineConfig] = None) -> str:
    """Render the board as three rows of three cells between separator lines."""
    config = config or EngineConfig()
    size = config.BOARD_SIZE

    lines = [config.SEPARATOR]
    for row in range(size):
        start = row * size
        lines.append(" ".join(
            format_cell(i, board.cells[i], config) for i in range(start, start + size)
        ))
    lines.append(config.SEPARATOR)

    return "\n".join(lines)


class TicTacToeGame:
    """
    Console game between a human and the minimax search.

    Game flow:
    1. Ask whether the human puts the first piece (first player is WHITE)
    2. Human types a cell index, or the CPU searches for the best board
    3. Print the board after every move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        human_first: Optional[bool] = None,
        search: Optional[MinimaxSearch] = None,
        input_stream: Optional[TextIO] = None,
        config: Optional[EngineConfig] = None
    ):
        """
        Initialize the game.

        Args:
            human_first: Whether the human plays WHITE. Asked on start if None.
            search: Search used for the CPU's moves.
            input_stream: Where tokens are read from (default: stdin).
            config: Engine configuration.
        """
        self.config = config or EngineConfig()
        self.human_first = human_first
        self.search = search or MinimaxSearch(self.config)
        self.reader = TokenReader(input_stream or sys.stdin)
        self.validator = MoveValidator()

        self.board = Board.new()

    def start(self) -> BoardState:
        """
        Play one game to the end.

        Returns:
            The final board state.
        """
        if self.human_first is None:
            self.human_first = self._ask_first_player()

        self.board = Board.new()
        print("Ready play game")
        self._show_board()

        self._game_loop()

        state = self.board.board_state()
        self._show_game_result(state)
        return state

    def _ask_first_player(self) -> bool:
        """Ask if the human wants to put the first piece."""
        print("Do you want to put the first piece?")
        print("0: No, 1: Yes")
        while True:
            answer = self.reader.read()
            if answer == "0":
                return False
            if answer == "1":
                return True
            print("0: No, 1: Yes")

    @property
    def human_turn(self) -> Turn:
        """The turn that belongs to the human."""
        return Turn.WHITE if self.human_first else Turn.BLACK

    def _game_loop(self):
        """Main game loop."""
        while self.board.board_state() == BoardState.PLAYING:
            turn = self.board.who_can_put_next_piece()

            if turn == self.human_turn:
                print("Your turn")
                index = self._read_human_move()
                self.board.put(index, turn.piece)
            else:
                print("CPU turn")
                self.board = self.search.get_next_best_board(self.board)

            self._show_board()

    def _read_human_move(self) -> int:
        """Read tokens until one names an empty cell."""
        while True:
            result = self.validator.validate_move(self.board, self.reader.read())
            if result.is_valid:
                return result.index
            print(result.error_message)

    def _show_board(self):
        print(format_board(self.board, self.config))

    def _show_game_result(self, state: BoardState):
        """Show the final game result."""
        if state == BoardState.DRAW:
            print("Draw")
            return

        human_won = (
            (state == BoardState.WHITE_WIN and self.human_first) or
            (state == BoardState.BLACK_WIN and not self.human_first)
        )
        print("You win" if human_won else "You lose")


def run_single_call(payload: str) -> int:
    """Print the best next board for an encoded board. Returns the exit status."""
    try:
        print(get_next_best_board_json(payload))
    except (BoardFormatError, NoLegalMovesError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax opponent")
    order = parser.add_mutually_exclusive_group()
    order.add_argument(
        "--first",
        dest="human_first",
        action="store_const",
        const=True,
        help="Put the first piece yourself (skip the question)"
    )
    order.add_argument(
        "--second",
        dest="human_first",
        action="store_const",
        const=False,
        help="Let the CPU put the first piece (skip the question)"
    )
    parser.add_argument(
        "--board",
        metavar="JSON",
        help="Print the best next board for a JSON array of 9 cell codes and exit"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics for every CPU move"
    )

    args = parser.parse_args(argv)

    if args.board is not None:
        return run_single_call(args.board)

    game = TicTacToeGame(
        human_first=args.human_first,
        search=MinimaxSearch(verbose=args.verbose)
    )

    try:
        game.start()
    except EOFError:
        print("Input closed.")
        return 1
    except KeyboardInterrupt:
        print("\nGame quit by user.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
