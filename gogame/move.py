"""Moves chosen during a game."""

from dataclasses import dataclass
from functools import total_ordering


@dataclass
class Move:
    """A move: either a stone placed at a row and column, or a pass."""

    is_played: bool = False
    row: int = 0
    column: int = 0


@total_ordering
@dataclass(eq=False)
class SortableMove(Move):
    """A move carrying a net score; moves compare by that score alone."""

    net_score: float = 0.0

    def __eq__(self, other):
        if not isinstance(other, SortableMove):
            return NotImplemented
        return self.net_score == other.net_score

    def __lt__(self, other):
        if not isinstance(other, SortableMove):
            return NotImplemented
        return self.net_score < other.net_score