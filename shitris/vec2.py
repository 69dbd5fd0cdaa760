"""Integer 2D vector used for board and screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Operand = Union["Vec2", int]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable pair of integers.

    Arithmetic accepts another vector (component-wise) or a plain integer
    (applied to both components). Ordering comparisons hold only when they
    hold for both components, so two vectors may be neither less, greater
    nor equal to one another.
    """

    x: int = 0
    y: int = 0

    def __iter__(self):
        yield self.x
        yield self.y

    @staticmethod
    def _pair(other: object) -> tuple[int, int] | None:
        if isinstance(other, Vec2):
            return other.x, other.y
        if isinstance(other, int) and not isinstance(other, bool):
            return other, other
        return None

    def __add__(self, other: Operand) -> Vec2:
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vec2(self.x + pair[0], self.y + pair[1])

    def __sub__(self, other: Operand) -> Vec2:
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vec2(self.x - pair[0], self.y - pair[1])

    def __mul__(self, other: Operand) -> Vec2:
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vec2(self.x * pair[0], self.y * pair[1])

    def __floordiv__(self, other: int) -> Vec2:
        """Divide both components by an integer, rounding toward zero."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Vec2(_trunc_div(self.x, other), _trunc_div(self.y, other))

    def __lt__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x < other.x and self.y < other.y

    def __gt__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x > other.x and self.y > other.y

    def __le__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y

    def __ge__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x >= other.x and self.y >= other.y