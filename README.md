# shitris

The game logic behind a falling-block puzzle whose boards and pieces are
described by plain text files: a grid of cells that fills up and clears
full rows, level and speed progress, a score counter, and a loader for
board, piece and high-score files. No third-party packages are needed.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

### `shitris.vec2`

`Vec2(x, y)` is an immutable integer pair. `+`, `-` and `*` work with
another `Vec2` (component by component) or with a plain `int` (applied to
both components). `//` divides both components by an `int`, rounding
toward zero. The comparisons `<`, `>`, `<=` and `>=` hold only when they
hold for both components, so two vectors may be neither smaller nor
larger than each other. A `Vec2` unpacks as `x, y = v`.

### `shitris.settings`

The layout constants of the game (screen size, board position and cell
size, button positions and sizes, and so on) as module-level names such
as `SCREEN_WIDTH`, `CELL_SIZE`, `BOARD_POSITION` and `BOARD_SIZE`
(10 by 20).

`PulsingSize(minimum, maximum, step, initial)` is a value that moves in
steps between two bounds: `grow()` adds one step while the value is below
the maximum, `shrink()` takes one away while it is above the minimum, and
`reset()` returns it to `initial`. Each returns the new `value`. A minimum
above the maximum, a step that is not positive, or an initial value
outside the bounds raises `ValueError`. The settings module holds one
`PulsingSize` per animated button text or texture, for example
`PLAY_BUTTON_TEXT_SIZE` and `RETURN_TEXT_SIZE`.

### `shitris.board`

- `Color(r, g, b, a=255)`: an RGBA colour; a channel outside 0–255 raises
  `ValueError`. `RAYWHITE` and the grey `LOCKED_COLOR`,
  `LOCKED_ALTERNATE_COLOR` and `LOCKED_ALTERNATE_COLOR2` are provided.
- `Cell`: whether a square is filled, and its three colours.
- `Board(screen_pos, cell_size, padding, width=10, height=20)`: a grid of
  cells. Width, height and cell size must be positive (`ValueError`
  otherwise).
  - `set_cell(pos, color, alternate_color, alternate_color2)` fills a cell;
    `cell(pos)` returns it. Both raise `IndexError` off the board.
  - `cell_exists(pos)` tells whether a cell is filled; positions off the
    board count as empty.
  - `erase()` empties every cell.
  - `move_cell(old, new)` moves a filled cell; an empty `old` is ignored.
  - `full_lines()` lists the indices of complete rows, top to bottom.
  - `clear_lines()` removes complete rows, shifts everything above them
    down, adds the number of rows to `lines`, and raises `level` and
    `speed` by one once `lines` reaches the threshold for the current
    level (10 for level 0, 32 for level 1, ...). It returns a `LineClear`
    with the cleared `rows` and `found_extra_lines`, which tells whether
    cells were left on the board.
  - `increase_score(amount)` adds to `score` and returns it;
    `reset_score()` sets `score` and `lines` back to zero.
  - `resize(width, height)` changes the size, keeping the stored cells in
    order and padding with empty ones.

### `shitris.loader`

Reads the text files that define boards and pieces. Malformed input or an
unreadable file raises `LoadError` (a `ValueError`).

- `parse_board(text, base_dir=".")` / `load_board(name, directory=".")`
  return a `BoardDefinition` with `width`, `height`, the set of `filled`
  positions, the `pieces`, `preview_amount` and `high_score`;
  `max_dimension()` gives the largest piece size. `load_board` reads
  `<name>.board` and the high score from `<name>.HS`.
- `parse_piece(text)` / `load_piece(path)` return a `PieceDefinition`:
  dimension, shape, the three colours, alias and the eight rotation kick
  tables (`zero_to_one`, `one_to_zero`, `one_to_two`, `two_to_one`,
  `two_to_three`, `three_to_two`, `three_to_zero`, `zero_to_three`).
- `load_high_score(name, directory=".")` returns the integer on the first
  line of `<name>.HS`, or 0 when the file is missing or that line is empty.
- `apply_board(definition, board)` resizes a `Board` to the definition and
  fills its starting cells in the locked grey colours.

## File formats

A board file: the width and height separated by a space, then one line
per row (`0` is empty, any other character is filled), then the number of
pieces, one piece file path per line (relative to the board's directory),
and finally how many upcoming pieces to preview.

```
4 3
0000
0000
1101
1
square.piece
3
```

A piece file: the dimension, the shape as one line read row by row (`#`
is filled), the colour as `r,g,b,a,`, the number of kicks per table, the
eight kick tables in the order listed above, each as `x:y|` entries, the
alias, and two more colours. Channel values are taken modulo 256.

```
2
####
255,255,0,255,
1
0:0|
0:0|
0:0|
0:0|
0:0|
0:0|
0:0|
0:0|
O
200,200,0,255,
150,150,0,255,
```

## Example

```python
from shitris.board import Board
from shitris.loader import apply_board, load_board
from shitris.vec2 import Vec2

definition = load_board("classic", ".")   # reads ./classic.board and ./classic.HS
board = Board(Vec2(350, 100), 45, 5)
apply_board(definition, board)
print(board.full_lines())
print(board.clear_lines())
```

## What this package does not do

It has no window, drawing, keyboard or mouse handling, sound, or menus,
and no command to start a game. Pieces are loaded as definitions only:
moving, rotating, dropping and locking a piece onto the board, picking
random pieces, and writing high scores back to disk are left to the
program that uses it.