"""Data models for sway-helper."""

from .geometry import (
    ContainerNode,
    DisplayRelation,
    NodeKind,
    OutputInfo,
    OutputPlacement,
    Rectangle,
)
from .resize import (
    Amount,
    Direction,
    ResizeDecision,
    ResizeDirection,
    ResizeRequest,
    Unit,
)

__all__ = [
    "Amount",
    "ContainerNode",
    "Direction",
    "DisplayRelation",
    "NodeKind",
    "OutputInfo",
    "OutputPlacement",
    "Rectangle",
    "ResizeDecision",
    "ResizeDirection",
    "ResizeRequest",
    "Unit",
]
