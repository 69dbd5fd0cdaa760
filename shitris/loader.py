"""Reading board and piece definitions, and stored high scores, from text files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from shitris.board import (
    LOCKED_ALTERNATE_COLOR,
    LOCKED_ALTERNATE_COLOR2,
    LOCKED_COLOR,
    Board,
    Color,
)
from shitris.vec2 import Vec2

PathLike = Union[str, Path]

BOARD_SUFFIX = ".board"
HIGH_SCORE_SUFFIX = ".HS"

_INTEGER = re.compile(r"\s*([+-]?\d+)")

# Order in which the kick tables follow one another in a piece file.
KICK_TABLES = (
    "zero_to_one",
    "one_to_zero",
    "one_to_two",
    "two_to_one",
    "two_to_three",
    "three_to_two",
    "three_to_zero",
    "zero_to_three",
)


class LoadError(ValueError):
    """A board, piece or high-score file could not be read."""


class _Reader:
    """Sequential reader that splits text at a chosen delimiter."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read_until(self, delimiter: str = "\n") -> str:
        """Return text up to ``delimiter`` and skip past it; empty at the end."""
        if self._pos >= len(self._text):
            return ""
        end = self._text.find(delimiter, self._pos)
        if end == -1:
            token = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            token = self._text[self._pos:end]
            self._pos = end + 1
        return token

    def read_int(self, delimiter: str = "\n", what: str = "value") -> int:
        return _parse_int(self.read_until(delimiter), what)


def _parse_int(token: str, what: str) -> int:
    """Parse a leading integer, allowing leading whitespace and trailing text."""
    match = _INTEGER.match(token)
    if match is None:
        raise LoadError(f"expected an integer for {what}, got {token!r}")
    return int(match.group(1))


def _read_color(reader: _Reader, what: str) -> Color:
    channels = [reader.read_int(",", what) & 0xFF for _ in range(4)]
    return Color(*channels)


@dataclass(frozen=True)
class PieceDefinition:
    """A piece: its square shape, colours, rotation kick tables and alias."""

    dimension: int
    shape: tuple[bool, ...]
    color: Color
    overloads: int
    zero_to_one: tuple[Vec2, ...]
    one_to_zero: tuple[Vec2, ...]
    one_to_two: tuple[Vec2, ...]
    two_to_one: tuple[Vec2, ...]
    two_to_three: tuple[Vec2, ...]
    three_to_two: tuple[Vec2, ...]
    three_to_zero: tuple[Vec2, ...]
    zero_to_three: tuple[Vec2, ...]
    alias: str
    alternate_color: Color
    alternate_color2: Color


@dataclass(frozen=True)
class BoardDefinition:
    """A board layout with its starting cells, pieces and preview length."""

    width: int
    height: int
    filled: frozenset[Vec2]
    pieces: tuple[PieceDefinition, ...]
    preview_amount: int
    high_score: int = 0

    def max_dimension(self) -> int:
        """The largest piece dimension, or 0 when there are no pieces."""
        return max((piece.dimension for piece in self.pieces), default=0)


def parse_piece(text: str) -> PieceDefinition:
    """Parse the text of a piece file."""
    reader = _Reader(text)

    dimension = reader.read_int(what="dimension")
    if dimension <= 0:
        raise LoadError(f"piece dimension must be positive, got {dimension}")
    size = dimension * dimension

    shape = [False] * size
    for index, char in enumerate(reader.read_until()):
        if char == "#":
            if index >= size:
                raise LoadError(
                    f"shape marks cell {index} but a {dimension}x{dimension} piece has {size}"
                )
            shape[index] = True

    color = _read_color(reader, "colour")

    reader.read_until()
    overloads = reader.read_int(what="overload count")
    if overloads < 0:
        raise LoadError(f"overload count must not be negative, got {overloads}")

    kicks = {}
    for table in KICK_TABLES:
        kicks[table] = tuple(
            Vec2(reader.read_int(":", table), reader.read_int("|", table))
            for _ in range(overloads)
        )

    reader.read_until()
    alias = reader.read_until()

    alternate_color = _read_color(reader, "alternate colour")
    reader.read_until()
    alternate_color2 = _read_color(reader, "second alternate colour")

    return PieceDefinition(
        dimension=dimension,
        shape=tuple(shape),
        color=color,
        overloads=overloads,
        alias=alias,
        alternate_color=alternate_color,
        alternate_color2=alternate_color2,
        **kicks,
    )


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(f"cannot read {path}: {exc}") from exc


def load_piece(path: PathLike) -> PieceDefinition:
    """Read and parse a piece file."""
    return parse_piece(_read_text(Path(path)))


def parse_board(text: str, base_dir: PathLike = ".") -> BoardDefinition:
    """Parse the text of a board file; piece paths are resolved against ``base_dir``."""
    reader = _Reader(text)
    base = Path(base_dir)

    width = reader.read_int(" ", "board width")
    height = reader.read_int(what="board height")
    if width <= 0 or height <= 0:
        raise LoadError(f"board size must be positive, got {width}x{height}")

    filled = set()
    for y in range(height):
        row = reader.read_until()
        if len(row) < width:
            raise LoadError(f"board row {y} has {len(row)} cells, expected {width}")
        filled.update(Vec2(x, y) for x, char in enumerate(row[:width]) if char != "0")

    piece_count = reader.read_int(what="piece count")
    if piece_count < 0:
        raise LoadError(f"piece count must not be negative, got {piece_count}")
    pieces = tuple(load_piece(base / reader.read_until()) for _ in range(piece_count))

    preview_amount = reader.read_int(what="preview amount")
    if preview_amount < 0:
        raise LoadError(f"preview amount must not be negative, got {preview_amount}")

    return BoardDefinition(
        width=width,
        height=height,
        filled=frozenset(filled),
        pieces=pieces,
        preview_amount=preview_amount,
    )


def load_high_score(name: str, directory: PathLike = ".") -> int:
    """Read the stored high score for board ``name``; 0 when none is stored."""
    path = Path(directory) / f"{name}{HIGH_SCORE_SUFFIX}"
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return 0
    first_line = text.split("\n", 1)[0]
    if first_line == "":
        return 0
    return _parse_int(first_line, "high score")


def load_board(name: str, directory: PathLike = ".") -> BoardDefinition:
    """Read board ``name`` and its high score from ``directory``."""
    base = Path(directory)
    definition = parse_board(_read_text(base / f"{name}{BOARD_SUFFIX}"), base)
    return BoardDefinition(
        width=definition.width,
        height=definition.height,
        filled=definition.filled,
        pieces=definition.pieces,
        preview_amount=definition.preview_amount,
        high_score=load_high_score(name, base),
    )


def apply_board(definition: BoardDefinition, board: Board) -> None:
    """Resize ``board`` to the definition and fill its starting cells."""
    board.resize(definition.width, definition.height)
    for pos in sorted(definition.filled, key=lambda p: (p.y, p.x)):
        board.set_cell(pos, LOCKED_COLOR, LOCKED_ALTERNATE_COLOR, LOCKED_ALTERNATE_COLOR2)