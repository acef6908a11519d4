"""Window tree snapshots and focus lookups."""

from typing import Any, Callable, Optional

from ..models.geometry import ContainerNode, NodeKind, Rectangle

NodePredicate = Callable[[ContainerNode], bool]


def snapshot_rect(rect: Any) -> Rectangle:
    """Convert an i3ipc Rect into a Rectangle."""
    return Rectangle(x=rect.x, y=rect.y, width=rect.width, height=rect.height)


def snapshot(con: Any) -> ContainerNode:
    """Recursively convert an i3ipc Con into an immutable ContainerNode."""
    return ContainerNode(
        id=con.id,
        name=con.name,
        rect=snapshot_rect(con.rect),
        focused=bool(con.focused),
        kind=NodeKind.from_ipc(con.type),
        focus=tuple(con.focus or ()),
        nodes=tuple(snapshot(child) for child in con.nodes or ()),
        floating_nodes=tuple(snapshot(child) for child in con.floating_nodes or ()),
    )


def is_a_container(node: ContainerNode) -> bool:
    return node.kind in (NodeKind.TILING_CONTAINER, NodeKind.FLOATING_CONTAINER)


def is_a_workspace(node: ContainerNode) -> bool:
    return node.kind is NodeKind.WORKSPACE


def find_focused(node: ContainerNode, predicate: NodePredicate) -> Optional[ContainerNode]:
    """Follow the focus chain from ``node`` and return the first node matching ``predicate``.

    The focus chain goes through the most recently focused child of each
    node, so for containers this yields the top-level container of the
    focused workspace rather than the focused leaf.
    """
    current: Optional[ContainerNode] = node
    while current is not None:
        if predicate(current):
            return current
        if not current.focus:
            return None
        first = current.focus[0]
        current = next(
            (child for child in current.nodes + current.floating_nodes if child.id == first),
            None,
        )
    return None


def focused_container(tree: ContainerNode) -> Optional[ContainerNode]:
    """Finds the focused container."""
    return find_focused(tree, is_a_container)


def focused_workspace(tree: ContainerNode) -> Optional[ContainerNode]:
    """Finds the focused workspace."""
    return find_focused(tree, is_a_workspace)
