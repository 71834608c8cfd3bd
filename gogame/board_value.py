"""Values that a place on a Go board can hold."""

EMPTY = "."
BLACK = "O"
WHITE = "@"
MARKED = "#"

_VALID_VALUES = frozenset((EMPTY, BLACK, WHITE, MARKED))
_PLAYER_VALUES = frozenset((BLACK, WHITE))


def is_board_value_valid(value):
    """Return True if ``value`` is one of the known board values."""
    return value in _VALID_VALUES


def is_board_value_player(value):
    """Return True if ``value`` is the stone of a player (black or white)."""
    return value in _PLAYER_VALUES


def get_other_player(player):
    """Return the opponent's stone value for ``player``."""
    if not is_board_value_player(player):
        raise ValueError(f"{player!r} is not a player value")
    return WHITE if player == BLACK else BLACK