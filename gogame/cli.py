"""Interactive console game of Go against the computer."""

import argparse
import warnings

from gogame.board import BOARD_SIZE_MAX, BOARD_SIZE_MIN, Board, BoardFileWarning
from gogame.game import Game
from gogame.place_string import (
    is_place_string_well_formed,
    place_string_to_column,
    place_string_to_row,
)


def ask_board_size():
    """Ask until the player enters a board size within the allowed range."""
    answer = input("What size do you want the board to be?: ")
    while True:
        try:
            size = int(answer.strip())
        except ValueError:
            size = None
        if size is not None and BOARD_SIZE_MIN <= size <= BOARD_SIZE_MAX:
            return size
        answer = input("Invalid board size. Try again: ")


def _load_game(filename):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", BoardFileWarning)
        try:
            game = Game.from_file(filename)
        except ValueError as exc:
            print(f"Error: {exc}")
            return Game()
    for warning in caught:
        if issubclass(warning.category, BoardFileWarning):
            print(f"Error: {warning.message}")
    return game


def _play(game):
    """Run the move loop until the player quits; return the final game."""
    while True:
        game.print_board()
        print()
        try:
            move = input("What is your move: ")
        except EOFError:
            print()
            return game
        print()
        if move == "quit":
            return game
        if move == "new":
            game.print_winner()
            game = Game(Board(ask_board_size()))
        elif move == "load":
            game.print_winner()
            filename = input("Enter the file name: ")
            game = _load_game(filename)
            print()
        elif move == "pass":
            print("Black passed")
            game.white_ai()
        elif is_place_string_well_formed(move):
            game.black_play(place_string_to_row(move), place_string_to_column(move))
            game.white_ai()
        else:
            print(f"{move} is ill-formed")
            print()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="gogame", description="Play Go as black against the computer."
    )
    parser.parse_args(argv)

    print("Welcome to the game of Go")
    try:
        name = input("What is your name?: ")
        game = Game(Board(ask_board_size()))
    except EOFError:
        print()
        return 1
    print()
    print(f"Hello {name}. You will play black.")
    print('You can enter "quit" to end the game')
    print()

    try:
        game = _play(game)
    except EOFError:
        print()

    game.print_board()
    print()
    game.print_winner()
    print(f"Goodbye, {name}.")
    return 0