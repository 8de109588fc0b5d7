"""
Console game for the TicTacToe engine.

Two players share one terminal and take turns entering moves as
"row,col". The board is printed after every accepted move.

Run this script to play TicTacToe at the console!
"""

from typing import Callable, List, Optional, Tuple

from tictactoe_core.board import Board
from tictactoe_core.config import GameConfig
from tictactoe_core.game_state import GameState


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a move typed as "row,col".

    Args:
        text: Raw input, e.g. "1,2" or " 0 , 0 ".

    Returns:
        (row, col), or None if the text is not two integers.
    """
    parts = text.split(",")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def parse_move_list(text: str) -> List[Tuple[int, int]]:
    """
    Parse a scripted sequence such as "0,0;1,1;2,2".

    Raises:
        ValueError: If any entry is not a "row,col" pair.
    """
    moves = []
    for entry in text.split(";"):
        if not entry.strip():
            continue
        move = parse_move(entry)
        if move is None:
            raise ValueError(f"Bad move '{entry.strip()}'. Use row,col (e.g. 1,1).")
        moves.append(move)
    return moves


class TicTacToeGame:
    """
    Console controller for a two-player game.

    Game flow:
    1. The side to move enters a position
    2. The board validates and applies the move
    3. The board is printed
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_func: Callable[[str], str] = input,
        verbose: bool = False
    ):
        """
        Initialize the console game.

        Args:
            config: Engine configuration.
            input_func: Where moves are read from (default: input).
            verbose: Show remaining moves and the winning line after each move.
        """
        self.config = config or GameConfig()
        self.board = Board(self.config)
        self.input_func = input_func
        self.verbose = verbose
        self.is_running = False

    def symbol_name(self, symbol) -> str:
        return self.config.SYMBOL_NAMES[symbol.value]

    def play_move(self, row: int, col: int) -> bool:
        """
        Play a move for the side to move.

        Returns:
            True if the move was accepted.
        """
        symbol = self.board.current_symbol()
        result = self.board.validate_move(row, col)
        if not result.is_valid:
            print(f"!! {result.error_message}")
            return False

        self.board.set_cell(row, col, symbol)
        print(f"\n{self.symbol_name(symbol)} plays ({row}, {col})")
        self.board.print_board()

        if self.verbose:
            line = self.board.winning_line()
            if line:
                print(f"Winning line: {line}")
            else:
                print(f"Moves remaining: {self.board.moves_remaining()}")
        return True

    def play_script(self, moves: List[Tuple[int, int]]) -> GameState:
        """
        Play a fixed sequence of moves, alternating sides.

        Rejected moves are reported and skipped.

        Returns:
            The game state after the last move.
        """
        for row, col in moves:
            if self.board.game_over():
                print("!! Game is already over, ignoring remaining moves.")
                break
            self.play_move(row, col)

        self._announce_result()
        return self.board.current_state()

    def start(self):
        """Start an interactive game."""
        print("\nStarting TicTacToe game...")
        print("Enter moves as row,col (0-2). 'r' to reset, 'q' to quit\n")
        self.board.print_board()

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.board.game_over():
                self._announce_result()
                answer = self.input_func("Play again? (y/n): ").strip().lower()
                if answer == "y":
                    self._reset_game()
                    continue
                break

            name = self.symbol_name(self.board.current_symbol())
            text = self.input_func(f"{name} to move (row,col): ").strip().lower()

            if text == "q":
                break
            if text == "r":
                self._reset_game()
                continue

            move = parse_move(text)
            if move is None:
                print("!! Invalid input format. Use row,col (e.g. 0,0 or 1,2).")
                continue

            self.play_move(*move)

        self.is_running = False

    def _announce_result(self):
        """Print the final result."""
        state = self.board.current_state()
        print("\n" + "=" * 30)
        if state == GameState.CROSS_WINS:
            print(f"   {self.config.SYMBOL_NAMES['cross']} WINS!")
        elif state == GameState.NOUGHT_WINS:
            print(f"   {self.config.SYMBOL_NAMES['nought']} WINS!")
        elif state == GameState.DRAW:
            print("   It's a DRAW!")
        else:
            print(f"   Game unfinished, {self.symbol_name(self.board.current_symbol())} to move")
        print("=" * 30)

    def _reset_game(self):
        """Reset the game for a new round."""
        self.board.reset()
        print("\nGame reset! X moves first.")
        self.board.print_board()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--moves",
        type=str,
        help="Play a scripted game, e.g. \"0,0;1,1;0,1\" (sides alternate, X first)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show remaining moves and the winning line after each move"
    )

    args = parser.parse_args(argv)

    game = TicTacToeGame(verbose=args.verbose)

    if args.moves is not None:
        try:
            moves = parse_move_list(args.moves)
        except ValueError as e:
            parser.error(str(e))
        game.play_script(moves)
        return 0

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
