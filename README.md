# gogame

A game of Go played in the terminal. You play black. The computer plays
white. It looks at every legal move and at passing, and picks at random
one of those that give it the best score difference. Passing gets a
bonus of half a point.

## Installing

```
pip install .
```

## Playing

```
gogame
```

You are asked for your name and for a board size from 1 to 24. The
question is asked again until the size is valid. On each turn the board
is shown and you enter one of the following:

- a place such as `D4`: a column letter followed by a row number. The
  letters run from A to Z and skip I and O. Rows are counted from 0 at
  the top. After your stone, white moves.
- `pass`: white moves.
- `new`: the result is shown, and a new board is started after you give
  its size.
- `load`: the result is shown, and a board is loaded from a file whose
  name you enter. If the file cannot be used, an error is printed and a
  new empty 19×19 board is started.
- `quit`: the final board and the result are shown, and the game ends.
  End of input (Ctrl-D) ends the game in the same way.

Anything else is reported as ill-formed.

Empty points are shown as `.`, black stones as `O` and white stones as
`@`. Empty star points are shown as `*`. Column letters and row numbers
are printed around the board.

A black move is refused when the place is off the board, when it is
already taken, or when the stone would leave its own group without
liberties (suicide). The opponent's captures are removed before this
check is made. Scores count the stones and the empty areas enclosed by
each player. White gets 7.5 points of komi when the winner is announced.

There is no ko rule, no saving of games, no undo and no play between two
humans.

## Board files

A board file starts with the board size, followed by one line per row
made of `.`, `O`, `@` and `#` characters. A file that cannot be opened,
that does not start with a size, or whose size is outside 1 to 24 raises
`gogame.board.BoardFileError`. Missing or short lines are padded with
empty points, and unknown characters are replaced by empty points. The
first such repair is reported as a `gogame.board.BoardFileWarning`.

## Using it from Python

```python
from gogame.board import Board
from gogame.board_value import BLACK, WHITE
from gogame.game import Game

board = Board(9)
removed = board.play_stone(4, 4, BLACK)   # StonesRemoved(us=0, them=0)
print(board.render())
print(board.calculate_score(BLACK), board.calculate_score(WHITE))

game = Game(Board(9))
game.black_play(2, 2)
game.white_ai()
game.print_winner()
```

- `gogame.board.Board(size=19)` has `get_at`, `set_at`, `play_stone`,
  `calculate_score`, `count_with_value`, `replace_all`, `fill_connected`,
  `is_on_board`, `is_a_neighbour_with_value`, `copy`, `render` and the
  `size` property. `Board.from_file(filename)` loads a saved board.
- `gogame.game.Game(board=None)` prints each move. `Game.from_file(filename)`
  starts a game from a saved board.
- `gogame.ai.ArtificialIntelligence(us_value, rng=None)` chooses a move
  with `choose_move(board)`. Pass a `random.Random` as `rng` to get
  repeatable choices.
- `gogame.place_string` parses places such as `"D4"`. `gogame.search`
  holds the searching and sorting helpers for move lists.

## Running the tests

```
pip install .[test]
pytest
```