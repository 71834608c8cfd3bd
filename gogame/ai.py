"""A computer player that picks among the best-scoring moves at random."""

import random

from gogame.board_value import EMPTY, get_other_player, is_board_value_player
from gogame.move import SortableMove
from gogame.search import binary_search_first, sort_moves

_PASS_BONUS = 0.5


class ArtificialIntelligence:
    """Chooses moves for one player by maximising its net score."""

    def __init__(self, us_value, rng=None):
        if not is_board_value_player(us_value):
            raise ValueError(f"{us_value!r} is not a player value")
        self.us_value = us_value
        self._rng = rng if rng is not None else random.Random()

    def _net_score(self, board):
        return float(
            board.calculate_score(self.us_value)
            - board.calculate_score(get_other_player(self.us_value))
        )

    def _play_result(self, board, row, column):
        """Return the net score after playing at a place, or None if illegal."""
        if not board.is_on_board(row, column) or board.get_at(row, column) != EMPTY:
            return None
        scratch = board.copy()
        if scratch.play_stone(row, column, self.us_value).us >= 1:
            return None
        return self._net_score(scratch)

    def _candidate_moves(self, board):
        yield SortableMove(is_played=False, net_score=self._net_score(board) + _PASS_BONUS)
        for row in range(board.size):
            for column in range(board.size):
                score = self._play_result(board, row, column)
                if score is not None:
                    yield SortableMove(
                        is_played=True, row=row, column=column, net_score=score
                    )

    def choose_move(self, board):
        """Return one of the moves (a pass included) with the highest net score."""
        moves = list(self._candidate_moves(board))
        sort_moves(moves)
        first_best = binary_search_first(moves, moves[-1])
        return moves[self._rng.randrange(first_best, len(moves))]