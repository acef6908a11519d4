"""Directional resize decisions.

Instead of having to specify grow/shrink, a resize towards a direction
grows the focused container if there is a neighbor on that side and
otherwise shrinks it from the opposite side:

    +---------+----------+
    | <- left | right -> |
    +---------+----------+
    | focused |          |
    +---------+----------+

``resize right`` grows the focused container to the right, while
``resize left`` shrinks its right edge instead of trying to grow it.
Up and down behave the same way.
"""

import logging
from typing import Iterable, List, Optional

from ..errors import NoFocusedContainerError, NoFocusedWorkspaceError
from ..models.geometry import ContainerNode
from ..models.resize import ResizeDecision, ResizeRequest
from .rect import predicate_for

logger = logging.getLogger('sway_helper.resize')


def tiling_containers(workspace: ContainerNode) -> List[ContainerNode]:
    """Tiling children of a workspace (floating containers excluded)."""
    return [node for node in workspace.nodes if node.is_tiling]


def can_grow_towards(focused: ContainerNode, siblings: Iterable[ContainerNode], request: ResizeRequest) -> bool:
    """True if any sibling lies in the requested direction of the focused container."""
    in_direction = predicate_for(request.direction.direction)
    return any(in_direction(node.rect, focused.rect) for node in siblings)


def plan_resize(
    focused: Optional[ContainerNode],
    workspace: Optional[ContainerNode],
    request: ResizeRequest,
) -> Optional[ResizeDecision]:
    """Decide how to resize the focused container.

    Args:
        focused: Focused container (top-most container on the focus chain)
        workspace: Focused workspace holding the container
        request: Requested direction, amount and flip flag

    Returns:
        The decision to execute, or None when the container is the only
        tiling container of the workspace and nothing can be resized.

    Raises:
        NoFocusedContainerError: If no container is focused
        NoFocusedWorkspaceError: If no workspace is focused
    """
    direction = request.direction
    if focused is None:
        raise NoFocusedContainerError(direction.direction.value)
    if workspace is None:
        raise NoFocusedWorkspaceError(direction.direction.value)

    # Floating containers have no neighbors constraining them
    if focused.is_floating:
        logger.debug(f"Container {focused.id} is floating, resizing {direction.direction.value} as requested")
        return ResizeDecision(grow=not request.flip, direction=direction)

    tiling = tiling_containers(workspace)
    if len(tiling) <= 1:
        # Already using all available space
        logger.info(f"Container {focused.id} is the only tiling container on workspace {workspace.name!r}")
        return None

    not_focused = [node for node in tiling if not node.focused and node.id != focused.id]
    can_grow = can_grow_towards(focused, not_focused, request)
    grow = can_grow ^ request.flip
    final = direction if can_grow else direction.flip()

    logger.debug(
        f"Resize {direction.direction.value}: can_grow={can_grow} flip={request.flip} "
        f"-> {'grow' if grow else 'shrink'} {final.direction.value}"
    )
    return ResizeDecision(grow=grow, direction=final)
