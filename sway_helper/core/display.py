"""Two-display placement.

Positions a display above, below, left of or right of a reference display.
The two displays are stacked without a gap and the smaller one is centered
along the other axis. Only setups with exactly two outputs are supported.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..errors import DisplayNotFoundError, SameDisplayError, TooManyOutputsError
from ..models.geometry import DisplayRelation, OutputInfo, OutputPlacement

logger = logging.getLogger('sway_helper.display')


def find_output(outputs: Sequence[OutputInfo], identifier: str) -> Optional[OutputInfo]:
    """Find an output by name (e.g. "eDP-1") or by make/model/serial (e.g. "LG Display").

    Exact name matches win over description matches.
    """
    for output in outputs:
        if output.name == identifier:
            return output

    needle = identifier.lower()
    for output in outputs:
        if needle and needle in output.description.lower():
            return output
    return None


def resolve_output(outputs: Sequence[OutputInfo], identifier: str) -> OutputInfo:
    """Like find_output() but raises DisplayNotFoundError."""
    output = find_output(outputs, identifier)
    if output is None:
        raise DisplayNotFoundError(identifier, [o.name for o in outputs])
    return output


def _center_offset(size: int, other_size: int) -> int:
    """Offset that centers a display of ``size`` against one of ``other_size``."""
    if size >= other_size:
        return 0
    return (other_size - size) // 2


def place_pair(display: OutputInfo, relation: DisplayRelation, reference: OutputInfo) -> Tuple[OutputPlacement, OutputPlacement]:
    """Compute positions putting ``display`` ``relation`` ``reference``.

    Returns:
        (display placement, reference placement)
    """
    a, b = display.rect, reference.rect

    if relation.is_vertical:
        a_x = _center_offset(a.width, b.width)
        b_x = _center_offset(b.width, a.width)
        if relation is DisplayRelation.ABOVE:
            a_y, b_y = 0, a.height
        else:
            a_y, b_y = b.height, 0
        return (
            OutputPlacement(name=display.name, x=a_x, y=a_y),
            OutputPlacement(name=reference.name, x=b_x, y=b_y),
        )

    a_y = _center_offset(a.height, b.height)
    b_y = _center_offset(b.height, a.height)
    if relation is DisplayRelation.LEFT_OF:
        a_x, b_x = 0, a.width
    else:
        a_x, b_x = b.width, 0
    return (
        OutputPlacement(name=display.name, x=a_x, y=a_y),
        OutputPlacement(name=reference.name, x=b_x, y=b_y),
    )


def place_displays(
    outputs: Sequence[OutputInfo],
    name: str,
    relation: DisplayRelation,
    reference: str,
) -> Tuple[OutputPlacement, OutputPlacement]:
    """Validate the two-display preconditions and compute both placements.

    Args:
        outputs: Outputs reported by sway
        name: Display to move
        relation: Where ``name`` goes relative to ``reference``
        reference: The reference display

    Raises:
        SameDisplayError: If both identifiers name the same display
        TooManyOutputsError: If more than two active outputs exist
        DisplayNotFoundError: If an identifier matches no output
    """
    if name == reference:
        raise SameDisplayError(name)

    active: List[OutputInfo] = [o for o in outputs if o.active]
    if len(active) > 2:
        raise TooManyOutputsError([o.name for o in active])

    display = resolve_output(active, name)
    other = resolve_output(active, reference)
    if display.name == other.name:
        raise SameDisplayError(display.name)

    placements = place_pair(display, relation, other)
    logger.debug(
        f"Placing {display.name} {relation.value} {other.name}: "
        + ", ".join(f"{p.name}=({p.x},{p.y})" for p in placements)
    )
    return placements
