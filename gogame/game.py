"""A game of Go between a human playing black and the computer playing white."""

from gogame.ai import ArtificialIntelligence
from gogame.board import Board
from gogame.board_value import BLACK, EMPTY, WHITE

KOMI = 7.5


class Game:
    """Holds the board and the white computer player, and reports each move."""

    def __init__(self, board=None):
        self.board = board if board is not None else Board()
        self.ai = ArtificialIntelligence(WHITE)

    @classmethod
    def from_file(cls, filename):
        """Start a game from a board stored in a file."""
        return cls(Board.from_file(filename))

    def print_board(self):
        print(self.board.render(), end="")

    def print_winner(self):
        black_score = self.board.calculate_score(BLACK)
        white_score = self.board.calculate_score(WHITE) + KOMI
        if black_score < white_score:
            print(f"White won with {white_score:g} points.")
            print(f"Black lost with {black_score:g} points.")
        elif black_score > white_score:
            print(f"Black won with {black_score:g} points.")
            print(f"White lost with {white_score:g} points.")
        else:
            print(f"White and black tied with {black_score:g} points.")
        print()

    def black_pass(self):
        print("Black passed.")

    def black_play(self, row, column):
        """Try to place a black stone; return True if it was placed."""
        if not self.board.is_on_board(row, column):
            print(f"Forbidden: Place row {row}, column {column} is outside the board.")
            print()
            return False
        if self.board.get_at(row, column) != EMPTY:
            print(f"Forbidden: Place row {row}, column {column} is not empty.")
            print()
            return False
        if self.board.copy().play_stone(row, column, BLACK).us >= 1:
            print("Forbidden: Suicide rule")
            return False
        removed = self.board.play_stone(row, column, BLACK)
        print(f"Black played a stone at row {row}, column {column}")
        self._print_removed(removed)
        return True

    def white_ai(self):
        """Let the computer move; return True if it placed a stone."""
        move = self.ai.choose_move(self.board)
        if not move.is_played:
            return False
        self.board.play_stone(move.row, move.column, WHITE)
        print(f"White placed a stone at row {move.row}, column {move.column}")
        print()
        return True

    @staticmethod
    def _print_removed(removed):
        print(f"Captured {removed.them} stones.")
        print(f"Lost {removed.us} stones to suicide.")