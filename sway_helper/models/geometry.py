"""Window tree and output snapshot models.

Immutable values built from one sway IPC query and discarded once the
command for the current invocation has been issued.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Rectangle(BaseModel):
    """Axis-aligned rectangle in layout coordinates (origin top-left, y grows down)."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(0, description="Horizontal position in pixels")
    y: int = Field(0, description="Vertical position in pixels")
    width: int = Field(0, ge=0, description="Width in pixels")
    height: int = Field(0, ge=0, description="Height in pixels")


class NodeKind(str, Enum):
    """Sway node types relevant to resizing."""

    TILING_CONTAINER = "con"
    FLOATING_CONTAINER = "floating_con"
    WORKSPACE = "workspace"
    OTHER = "other"

    @classmethod
    def from_ipc(cls, node_type: Optional[str]) -> "NodeKind":
        """Map a sway ``type`` string to a NodeKind (unknown types become OTHER)."""
        try:
            return cls(node_type)
        except ValueError:
            return cls.OTHER


class ContainerNode(BaseModel):
    """Read-only snapshot of a node in the sway window tree."""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    name: Optional[str] = None
    rect: Rectangle = Field(default_factory=Rectangle)
    focused: bool = False
    kind: NodeKind = NodeKind.OTHER
    focus: Tuple[int, ...] = ()  # child ids, most recently focused first
    nodes: Tuple["ContainerNode", ...] = ()
    floating_nodes: Tuple["ContainerNode", ...] = ()

    @property
    def is_floating(self) -> bool:
        return self.kind is NodeKind.FLOATING_CONTAINER

    @property
    def is_tiling(self) -> bool:
        return self.kind is NodeKind.TILING_CONTAINER


class OutputInfo(BaseModel):
    """Display output as reported by GET_OUTPUTS."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Output identifier (e.g., eDP-1)")
    make: Optional[str] = None
    model: Optional[str] = None
    serial: Optional[str] = None
    active: bool = True
    rect: Rectangle = Field(default_factory=Rectangle)

    @property
    def description(self) -> str:
        """Human readable "make model serial" string (empty parts skipped)."""
        parts = [p for p in (self.make, self.model, self.serial) if p and p != "Unknown"]
        return " ".join(parts)


class DisplayRelation(str, Enum):
    """Where a display goes relative to a reference display."""

    ABOVE = "above"
    BELOW = "below"
    LEFT_OF = "left-of"
    RIGHT_OF = "right-of"

    @property
    def is_vertical(self) -> bool:
        return self in (DisplayRelation.ABOVE, DisplayRelation.BELOW)


class OutputPlacement(BaseModel):
    """Absolute layout position computed for one output."""

    model_config = ConfigDict(frozen=True)

    name: str
    x: int
    y: int
