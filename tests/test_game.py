import random

import pytest

from gogame.ai import ArtificialIntelligence
from gogame.board import Board, BoardFileError
from gogame.board_value import BLACK, EMPTY, WHITE
from gogame.game import Game


def _game(size, seed=0):
    game = Game(Board(size))
    game.ai = ArtificialIntelligence(WHITE, random.Random(seed))
    return game


def test_default_board_size():
    assert Game().board.size == Board().size


def test_play_outside_board(capsys):
    game = _game(3)
    assert game.black_play(5, 0) is False
    assert "Forbidden: Place row 5, column 0 is outside the board." in capsys.readouterr().out


def test_play_on_occupied_place(capsys):
    game = _game(3)
    game.board.set_at(1, 1, WHITE)
    assert game.black_play(1, 1) is False
    assert "is not empty" in capsys.readouterr().out
    assert game.board.get_at(1, 1) == WHITE


def test_suicide_is_forbidden(capsys):
    game = _game(1)
    assert game.black_play(0, 0) is False
    assert "Forbidden: Suicide rule" in capsys.readouterr().out
    assert game.board.get_at(0, 0) == EMPTY


def test_legal_play(capsys):
    game = _game(3)
    assert game.black_play(1, 1) is True
    out = capsys.readouterr().out
    assert "Black played a stone at row 1, column 1" in out
    assert "Captured 0 stones." in out
    assert game.board.get_at(1, 1) == BLACK


def test_capture_is_reported(capsys):
    game = _game(2)
    game.board.set_at(0, 0, WHITE)
    game.board.set_at(0, 1, BLACK)
    assert game.black_play(1, 0) is True
    assert "Captured 1 stones." in capsys.readouterr().out
    assert game.board.get_at(0, 0) == EMPTY


def test_white_passes_when_nothing_is_legal(capsys):
    game = _game(1)
    assert game.white_ai() is False
    assert game.board.count_with_value(WHITE) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("seed", range(4))
def test_white_places_a_stone(seed, capsys):
    game = _game(2, seed)
    assert game.white_ai() is True
    assert game.board.count_with_value(WHITE) == 1
    assert "White placed a stone at row" in capsys.readouterr().out


def test_winner_on_empty_board_is_white(capsys):
    _game(1).print_winner()
    out = capsys.readouterr().out
    assert "White won with 7.5 points." in out
    assert "Black lost with" in out


def test_winner_black(capsys):
    game = _game(3)
    game.board.set_at(1, 1, BLACK)
    game.print_winner()
    assert capsys.readouterr().out.startswith("Black won with")


def test_black_pass(capsys):
    _game(3).black_pass()
    assert capsys.readouterr().out == "Black passed.\n"


def test_print_board_matches_render(capsys):
    game = _game(5)
    game.board.set_at(0, 0, BLACK)
    game.print_board()
    assert capsys.readouterr().out == game.board.render()


def test_from_file(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("3\nO..\n...\n..@\n")
    game = Game.from_file(str(path))
    assert game.board.size == 3
    assert game.board.get_at(0, 0) == BLACK
    assert game.board.get_at(2, 2) == WHITE


def test_from_missing_file(tmp_path):
    with pytest.raises(BoardFileError):
        Game.from_file(str(tmp_path / "missing.txt"))