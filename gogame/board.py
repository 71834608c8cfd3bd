"""A square Go board and the rules for placing and capturing stones."""

import re
import warnings
from collections import deque
from dataclasses import dataclass
from itertools import product, zip_longest

from gogame.board_value import (
    EMPTY,
    MARKED,
    get_other_player,
    is_board_value_player,
    is_board_value_valid,
)

STAR_POINT_SPACING = 6
BOARD_SIZE_MIN = 1
BOARD_SIZE_MAX = 24
BOARD_SIZE_DEFAULT = 19

_COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
_SIZE_PATTERN = re.compile(r"\s*([+-]?\d+)")


class BoardFileError(ValueError):
    """A board file cannot be opened or does not describe a usable board."""


class BoardFileWarning(UserWarning):
    """A board file had a defect that was repaired while loading it."""


@dataclass(frozen=True)
class StonesRemoved:
    """Stones taken off the board by one move."""

    us: int
    them: int


class Board:
    """A square grid of board values, empty when created."""

    def __init__(self, size=BOARD_SIZE_DEFAULT):
        if not BOARD_SIZE_MIN <= size <= BOARD_SIZE_MAX:
            raise ValueError(
                f"board size {size} is outside {BOARD_SIZE_MIN}..{BOARD_SIZE_MAX}"
            )
        self._size = size
        self._cells = [[EMPTY] * size for _ in range(size)]

    @classmethod
    def from_file(cls, filename):
        """Load a board from a text file: its size, then one line per row.

        Raises BoardFileError when the file cannot be used at all. Missing,
        short or invalid content is replaced by empty places, and the first
        such repair is reported as a BoardFileWarning.
        """
        if not filename:
            raise ValueError("filename must not be empty")
        try:
            with open(filename, encoding="latin-1") as stream:
                text = stream.read()
        except OSError as exc:
            raise BoardFileError(f'Could not open file "{filename}"') from exc

        match = _SIZE_PATTERN.match(text)
        if match is None:
            raise BoardFileError(f'File "{filename}" does not start with board size')
        size = int(match.group(1))
        if size > BOARD_SIZE_MAX:
            raise BoardFileError(
                f'File "{filename}" has board size {size}, '
                f"but maximum is {BOARD_SIZE_MAX}"
            )
        if size < BOARD_SIZE_MIN:
            raise BoardFileError(
                f'File "{filename}" has board size {size}, '
                f"but minimum is {BOARD_SIZE_MIN}"
            )

        board = cls(size)
        newline = text.find("\n", match.end())
        lines = [] if newline < 0 else text[newline + 1:].split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        reported = False

        def report(message):
            nonlocal reported
            if not reported:
                warnings.warn(message, BoardFileWarning, stacklevel=3)
                reported = True

        for row, line in zip_longest(range(size), lines[:size]):
            if line is None:
                report(
                    f'Could not read line {row} of file "{filename}"; '
                    f"replacing with '{EMPTY}'s"
                )
                line = ""
            elif len(line) < size:
                report(
                    f'Line {row} of file "{filename}" only contains '
                    f"{len(line)} / {size} characters; adding '{EMPTY}'s to end"
                )
            for column, value in enumerate(line[:size].ljust(size, EMPTY)):
                if is_board_value_valid(value):
                    board._cells[row][column] = value
                else:
                    report(
                        f'Line {row}, character {column} of file "{filename}" '
                        f"is an invalid {value!r} character; substituting '{EMPTY}'"
                    )
        return board

    @property
    def size(self):
        """Number of rows (and of columns) on the board."""
        return self._size

    def copy(self):
        """Return an independent board with the same places."""
        duplicate = Board(self._size)
        duplicate._cells = [list(row) for row in self._cells]
        return duplicate

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self):
        return f"Board(size={self._size})"

    def is_on_board(self, row, column):
        """Return True if the place lies inside the board."""
        return 0 <= row < self._size and 0 <= column < self._size

    def get_at(self, row, column):
        """Return the value at a place on the board."""
        self._require_on_board(row, column)
        return self._cells[row][column]

    def set_at(self, row, column, value):
        """Put a board value at a place on the board."""
        self._require_on_board(row, column)
        self._require_valid(value)
        self._cells[row][column] = value

    def count_with_value(self, value):
        """Return how many places hold ``value``."""
        self._require_valid(value)
        return sum(row.count(value) for row in self._cells)

    def calculate_score(self, us_value):
        """Return the places owned by ``us_value``: its stones and enclosed area."""
        self._require_player(us_value)
        other = get_other_player(us_value)
        scratch = self.copy()
        scratch.fill_connected(EMPTY, other, other)
        scratch.fill_connected(EMPTY, us_value, us_value)
        return scratch.count_with_value(us_value)

    def render(self):
        """Return the board as text with row numbers, column letters and star points."""
        letters = self._column_line()
        lines = [letters]
        for row, cells in enumerate(self._cells):
            shown = "".join(
                f"{self._display_value(row, column, value)} "
                for column, value in enumerate(cells)
            )
            lines.append(f"{row:2d} {shown}{row:2d}")
        lines.append(letters)
        return "\n".join(lines) + "\n"

    def play_stone(self, row, column, us_value):
        """Place a stone, then remove captured groups: the opponent's first, then ours."""
        self._require_on_board(row, column)
        if self._cells[row][column] != EMPTY:
            raise ValueError(f"place row {row}, column {column} is not empty")
        self._require_player(us_value)
        self._cells[row][column] = us_value
        them = self._capture_player(get_other_player(us_value))
        us = self._capture_player(us_value)
        return StonesRemoved(us=us, them=them)

    def replace_all(self, old_value, new_value):
        """Change every place holding ``old_value`` to ``new_value``."""
        self._require_valid(old_value)
        self._require_valid(new_value)
        self._cells = [
            [new_value if value == old_value else value for value in row]
            for row in self._cells
        ]

    def fill_connected(self, old_value, new_value, neighbour_value):
        """Turn ``old_value`` places into ``new_value`` where connected to a neighbour value.

        A place holding ``old_value`` changes when it touches ``neighbour_value``
        or an already changed place, until nothing more changes.
        """
        for value in (old_value, new_value, neighbour_value):
            self._require_valid(value)
        if old_value == new_value:
            raise ValueError("old and new values must differ")
        if old_value == neighbour_value:
            self._fill_by_sweeping(old_value, new_value, neighbour_value)
            return

        seeds = [
            (row, column)
            for row, column in self._places()
            if self._cells[row][column] == old_value
            and (
                self.is_a_neighbour_with_value(row, column, neighbour_value)
                or self.is_a_neighbour_with_value(row, column, new_value)
            )
        ]
        for row, column in seeds:
            self._cells[row][column] = new_value
        pending = deque(seeds)
        while pending:
            place = pending.popleft()
            for row, column in self._neighbours(*place):
                if self._cells[row][column] == old_value:
                    self._cells[row][column] = new_value
                    pending.append((row, column))

    def is_a_neighbour_with_value(self, row, column, value):
        """Return True if an orthogonally adjacent place holds ``value``."""
        self._require_on_board(row, column)
        self._require_valid(value)
        return any(
            self._cells[r][c] == value for r, c in self._neighbours(row, column)
        )

    def _fill_by_sweeping(self, old_value, new_value, neighbour_value):
        changed = True
        while changed:
            changed = False
            for row, column in self._places():
                if self._cells[row][column] == old_value and (
                    self.is_a_neighbour_with_value(row, column, neighbour_value)
                    or self.is_a_neighbour_with_value(row, column, new_value)
                ):
                    self._cells[row][column] = new_value
                    changed = True

    def _capture_player(self, player):
        self.replace_all(player, MARKED)
        self.fill_connected(MARKED, player, EMPTY)
        captured = self.count_with_value(MARKED)
        self.replace_all(MARKED, EMPTY)
        return captured

    def _places(self):
        return product(range(self._size), repeat=2)

    def _neighbours(self, row, column):
        for r, c in ((row - 1, column), (row + 1, column), (row, column - 1), (row, column + 1)):
            if self.is_on_board(r, c):
                yield r, c

    def _is_aligned_for_star_point(self, index):
        return index % STAR_POINT_SPACING == (self._size // 2) % STAR_POINT_SPACING

    def _display_value(self, row, column, value):
        if (
            value == EMPTY
            and self._is_aligned_for_star_point(row)
            and self._is_aligned_for_star_point(column)
        ):
            return "*"
        return value

    def _column_line(self):
        return "  " + "".join(f"{letter:>2}" for letter in _COLUMN_LETTERS[: self._size])

    def _require_on_board(self, row, column):
        if not self.is_on_board(row, column):
            raise IndexError(f"place row {row}, column {column} is outside the board")

    @staticmethod
    def _require_valid(value):
        if not is_board_value_valid(value):
            raise ValueError(f"{value!r} is not a board value")

    @staticmethod
    def _require_player(value):
        if not is_board_value_player(value):
            raise ValueError(f"{value!r} is not a player value")