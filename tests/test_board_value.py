import pytest

from gogame.board_value import (
    BLACK,
    EMPTY,
    MARKED,
    WHITE,
    get_other_player,
    is_board_value_player,
    is_board_value_valid,
)


@pytest.mark.parametrize("char", [".", "O", "@", "#"])
def test_board_characters_are_valid_values(char):
    assert is_board_value_valid(char) is True


def test_player_characters_map_to_each_other():
    assert get_other_player("O") == "@"
    assert get_other_player("@") == "O"


@pytest.mark.parametrize("value", [EMPTY, BLACK, WHITE, MARKED])
def test_known_values_are_valid(value):
    assert is_board_value_valid(value) is True


@pytest.mark.parametrize("value", ["x", "", "OO", "*", " "])
def test_unknown_values_are_invalid(value):
    assert is_board_value_valid(value) is False


@pytest.mark.parametrize("value", [BLACK, WHITE])
def test_players_are_players(value):
    assert is_board_value_player(value) is True


@pytest.mark.parametrize("value", [EMPTY, MARKED, "x", ""])
def test_non_players_are_not_players(value):
    assert is_board_value_player(value) is False


def test_other_player_of_black_is_white():
    assert get_other_player(BLACK) == WHITE


def test_other_player_of_white_is_black():
    assert get_other_player(WHITE) == BLACK


@pytest.mark.parametrize("value", [BLACK, WHITE])
def test_other_player_is_an_involution(value):
    assert get_other_player(get_other_player(value)) == value


@pytest.mark.parametrize("value", [EMPTY, MARKED, "x"])
def test_other_player_rejects_non_players(value):
    with pytest.raises(ValueError):
        get_other_player(value)