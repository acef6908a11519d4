"""Resize request and decision models.

A resize direction always carries an Amount. The Amount can only be built
as "nothing" or "a value with an optional unit", so a unit without a value
never reaches the command formatter.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Unit(str, Enum):
    """Sway resize units (see ``man 5 sway``)."""

    PX = "px"    # Pixels
    PPT = "ppt"  # Percentage points


class Amount(BaseModel):
    """How far to resize; sway picks its defaults when no value is given.

    Examples:
        >>> Amount.none().value is None
        True
        >>> Amount.of(10, Unit.PPT).unit
        <Unit.PPT: 'ppt'>
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[int] = Field(None, ge=0)
    unit: Optional[Unit] = None

    @model_validator(mode='after')
    def validate_unit_has_value(self) -> 'Amount':
        """A unit is meaningless without a value."""
        if self.unit is not None and self.value is None:
            raise ValueError("invalid state, units should always have an amount")
        return self

    @classmethod
    def none(cls) -> "Amount":
        return cls()

    @classmethod
    def of(cls, value: int, unit: Optional[Unit] = None) -> "Amount":
        return cls(value=value, unit=unit)

    @property
    def is_empty(self) -> bool:
        return self.value is None


class Direction(str, Enum):
    """Resize direction."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Direction":
        """Up<->Down, Left<->Right."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class ResizeDirection(BaseModel):
    """A direction together with the amount to resize by."""

    model_config = ConfigDict(frozen=True)

    direction: Direction
    amount: Amount = Field(default_factory=Amount.none)

    def flip(self) -> "ResizeDirection":
        """Same amount, opposite direction."""
        return ResizeDirection(direction=self.direction.opposite(), amount=self.amount)


class ResizeRequest(BaseModel):
    """Validated user request."""

    model_config = ConfigDict(frozen=True)

    direction: ResizeDirection
    flip: bool = False


class ResizeDecision(BaseModel):
    """Resolved resize action to send to sway."""

    model_config = ConfigDict(frozen=True)

    grow: bool
    direction: ResizeDirection

    @property
    def action(self) -> str:
        return "grow" if self.grow else "shrink"
