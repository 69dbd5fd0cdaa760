"""The playing field: a grid of cells with line clearing and level progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from shitris import settings
from shitris.vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


RAYWHITE = Color(245, 245, 245, 255)
LOCKED_COLOR = Color(200, 200, 200, 255)
LOCKED_ALTERNATE_COLOR = Color(170, 170, 170, 255)
LOCKED_ALTERNATE_COLOR2 = Color(230, 230, 230, 255)


@dataclass(slots=True)
class Cell:
    """One square of the board: whether it is filled and the colours it carries."""

    exists: bool = False
    color: Color = RAYWHITE
    alternate_color: Color = RAYWHITE
    alternate_color2: Color = RAYWHITE


class LineClear(NamedTuple):
    """Outcome of clearing lines.

    ``rows`` are the indices of the rows that were full, top to bottom.
    ``found_extra_lines`` tells whether cells were still on the board when
    the clear was scored.
    """

    rows: tuple[int, ...]
    found_extra_lines: bool


@dataclass
class Board:
    """A rectangular grid of cells stored row by row."""

    screen_pos: Vec2
    cell_size: int
    padding: int
    width: int = settings.BOARD_SIZE.x
    height: int = settings.BOARD_SIZE.y
    speed: int = field(default=0, init=False)
    level: int = field(default=0, init=False)
    score: int = field(default=0, init=False)
    lines: int = field(default=0, init=False)
    found_extra_lines: bool = field(default=False, init=False)
    score_saved: bool = field(default=False, init=False)
    _cells: list[Cell] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("board width and height must be positive")
        if self.cell_size <= 0:
            raise ValueError("cell size must be positive")
        self._cells = [Cell() for _ in range(self.width * self.height)]

    def _in_bounds(self, pos: Vec2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def _index(self, pos: Vec2) -> int:
        if not self._in_bounds(pos):
            raise IndexError(f"position {pos} is outside the {self.width}x{self.height} board")
        return pos.y * self.width + pos.x

    def set_cell(
        self,
        pos: Vec2,
        color: Color,
        alternate_color: Color,
        alternate_color2: Color,
    ) -> None:
        """Fill the cell at ``pos`` with the given colours."""
        cell = self._cells[self._index(pos)]
        cell.exists = True
        cell.color = color
        cell.alternate_color = alternate_color
        cell.alternate_color2 = alternate_color2

    def cell(self, pos: Vec2) -> Cell:
        """Return the cell at ``pos``."""
        return self._cells[self._index(pos)]

    def cell_exists(self, pos: Vec2) -> bool:
        """Whether ``pos`` is on the board and filled; off-board is empty."""
        return self._in_bounds(pos) and self._cells[self._index(pos)].exists

    def erase(self) -> None:
        """Empty every cell; colours are left as they were."""
        for cell in self._cells:
            cell.exists = False

    def move_cell(self, old: Vec2, new: Vec2) -> None:
        """Move a filled cell from ``old`` to ``new``; an empty ``old`` is ignored."""
        if not self.cell_exists(old):
            return
        self.found_extra_lines = True
        source = self.cell(old)
        self.set_cell(new, source.color, source.alternate_color, source.alternate_color2)
        source.exists = False

    def full_lines(self) -> list[int]:
        """Indices of the rows in which every cell is filled, top to bottom."""
        return [
            y
            for y in range(self.height)
            if all(self.cell_exists(Vec2(x, y)) for x in range(self.width))
        ]

    def clear_lines(self) -> LineClear:
        """Remove full rows, drop the rows above them and update level and speed."""
        rows = self.full_lines()
        self.lines += len(rows)
        for row in rows:
            for x in range(self.width):
                self.cell(Vec2(x, row)).exists = False
                for y in range(row, -1, -1):
                    self.move_cell(Vec2(x, y), Vec2(x, y + 1))

        if any(cell.exists for cell in self._cells):
            self.found_extra_lines = True

        result = LineClear(tuple(rows), self.found_extra_lines)
        if rows:
            self.found_extra_lines = False

        threshold = sum((i + 1) * 10 + self.level for i in range(self.level + 1))
        if self.lines >= threshold:
            self.speed += 1
            self.level += 1
        return result

    def increase_score(self, amount: int) -> int:
        """Add ``amount`` to the score and return the new score."""
        self.score += amount
        return self.score

    def reset_score(self) -> None:
        """Start a fresh score and line count."""
        self.score = 0
        self.lines = 0
        self.score_saved = False

    def resize(self, width: int, height: int) -> None:
        """Change the board size, keeping the stored cells in order and padding with empty ones."""
        if width <= 0 or height <= 0:
            raise ValueError("board width and height must be positive")
        size = width * height
        if size < len(self._cells):
            del self._cells[size:]
        else:
            self._cells.extend(Cell() for _ in range(size - len(self._cells)))
        self.width = width
        self.height = height