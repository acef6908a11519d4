"""Spatial relationships between two rectangles.

Each predicate compares a single axis with strict inequality; overlap on
the other axis is not required.
"""

from typing import Callable

from ..models.geometry import Rectangle
from ..models.resize import Direction

RectPredicate = Callable[[Rectangle, Rectangle], bool]


def above(this: Rectangle, that: Rectangle) -> bool:
    """Check if this rectangle is above that rectangle."""
    return this.y < that.y


def below(this: Rectangle, that: Rectangle) -> bool:
    """Check if this rectangle is below that rectangle."""
    return this.y > that.y


def left_of(this: Rectangle, that: Rectangle) -> bool:
    """Check if this rectangle is to the left of that rectangle."""
    return this.x < that.x


def right_of(this: Rectangle, that: Rectangle) -> bool:
    """Check if this rectangle is to the right of that rectangle."""
    return this.x > that.x


_PREDICATES = {
    Direction.UP: above,
    Direction.DOWN: below,
    Direction.LEFT: left_of,
    Direction.RIGHT: right_of,
}


def predicate_for(direction: Direction) -> RectPredicate:
    """Predicate telling whether a rectangle lies in ``direction`` of another."""
    return _PREDICATES[direction]
