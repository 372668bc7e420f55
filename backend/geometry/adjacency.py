"""Edge adjacency between the rectangles of a single room."""

from enum import StrEnum

from core.models import RoomShape
from geometry.intervals import Interval


class Edge(StrEnum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


def _coincident(a: float, b: float, tolerance: float) -> bool:
    if tolerance <= 0.0:
        return a == b
    return abs(a - b) <= tolerance


def shares_edge(shape_a: RoomShape, shape_b: RoomShape, tolerance: float = 0.0) -> bool:
    """Check whether two rectangles touch along an edge with positive overlap.

    Touching only at a corner does not count. A shape never shares an edge
    with itself.
    """
    if shape_a is shape_b:
        return False

    a, b = shape_a.position, shape_b.position

    # Shared vertical edge: one's right side is the other's left side.
    horizontal = (
        _coincident(shape_a.right, b.x, tolerance) or _coincident(shape_b.right, a.x, tolerance)
    ) and max(a.y, b.y) < min(shape_a.bottom, shape_b.bottom)

    # Shared horizontal edge: one's bottom side is the other's top side.
    vertical = (
        _coincident(shape_a.bottom, b.y, tolerance) or _coincident(shape_b.bottom, a.y, tolerance)
    ) and max(a.x, b.x) < min(shape_a.right, shape_b.right)

    return horizontal or vertical


def _touches(shape: RoomShape, other: RoomShape, edge: Edge, tolerance: float) -> bool:
    """Whether ``other`` lies against ``shape`` on exactly ``edge``."""
    match edge:
        case Edge.TOP:
            return _coincident(other.bottom, shape.position.y, tolerance)
        case Edge.BOTTOM:
            return _coincident(shape.bottom, other.position.y, tolerance)
        case Edge.LEFT:
            return _coincident(other.right, shape.position.x, tolerance)
        case Edge.RIGHT:
            return _coincident(shape.right, other.position.x, tolerance)


def edge_range(shape: RoomShape, edge: Edge) -> tuple[float, float]:
    """Extent of an edge along its own axis: x for top/bottom, y for left/right."""
    match edge:
        case Edge.TOP | Edge.BOTTOM:
            return shape.position.x, shape.right
        case Edge.LEFT | Edge.RIGHT:
            return shape.position.y, shape.bottom


def edge_coordinate(shape: RoomShape, edge: Edge) -> float:
    """The fixed coordinate an edge sits on (y for top/bottom, x for left/right)."""
    match edge:
        case Edge.TOP:
            return shape.position.y
        case Edge.BOTTOM:
            return shape.bottom
        case Edge.LEFT:
            return shape.position.x
        case Edge.RIGHT:
            return shape.right


def get_shared_segments(
    shape: RoomShape,
    edge: Edge,
    all_shapes: list[RoomShape],
    tolerance: float = 0.0,
) -> list[Interval]:
    """Find the portions of one edge of ``shape`` covered by other shapes of the room.

    Each neighbour touching that edge contributes at most one interval.
    Intervals are returned unmerged, in the order of ``all_shapes``.
    """
    start, end = edge_range(shape, edge)
    shared: list[Interval] = []

    for other in all_shapes:
        if other is shape or other.area <= 0 or not shares_edge(shape, other, tolerance):
            continue
        if not _touches(shape, other, edge, tolerance):
            continue

        other_start, other_end = edge_range(other, edge)
        overlap_start = max(start, other_start)
        overlap_end = min(end, other_end)
        if overlap_start < overlap_end:
            shared.append(Interval(overlap_start, overlap_end))

    return shared
