"""Small class examples: speed from distance and time, a running total, shapes."""

from __future__ import annotations

from dataclasses import dataclass


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass
class Motion:
    """A distance covered in a time."""

    distance: int = 0
    time: int = 1

    def speed(self) -> int:
        """Return distance divided by time, truncated toward zero."""
        if self.time == 0:
            raise ZeroDivisionError("time must not be zero")
        return _truncating_div(self.distance, self.time)


class Accumulator:
    """A running total that numbers can only be added to."""

    def __init__(self, total: int = 0) -> None:
        self._total = total

    def add(self, number: int) -> None:
        """Add ``number`` to the total."""
        self._total += number

    @property
    def total(self) -> int:
        """The current total."""
        return self._total


@dataclass
class Shape:
    """A shape with a width and a height; its own area is 0."""

    width: int = 0
    height: int = 0

    def area(self) -> int:
        return 0


class Rectangle(Shape):
    """A rectangle."""

    def area(self) -> int:
        return self.width * self.height


class Triangle(Shape):
    """A triangle with the given base and height."""

    def area(self) -> int:
        return _truncating_div(self.width * self.height, 2)