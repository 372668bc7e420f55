"""Visible wall segments of composite rooms."""

from collections.abc import Iterator
from dataclasses import dataclass

from core.models import Room, RoomShape
from core.rooms import draws_outline
from geometry.adjacency import Edge, edge_coordinate, edge_range, get_shared_segments
from geometry.intervals import get_non_shared_segments


@dataclass(frozen=True)
class Segment:
    """A drawable line between (x1, y1) and (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float
    edge: Edge
    shape_index: int


_EDGE_ORDER = (Edge.TOP, Edge.BOTTOM, Edge.LEFT, Edge.RIGHT)


def shape_outline(
    shape: RoomShape,
    all_shapes: list[RoomShape],
    shape_index: int = 0,
    tolerance: float = 0.0,
) -> Iterator[Segment]:
    """Yield the non-shared parts of each edge of one shape: top, bottom, left, right."""
    if shape.size.width <= 0 or shape.size.height <= 0:
        return

    for edge in _EDGE_ORDER:
        fixed = edge_coordinate(shape, edge)
        start, end = edge_range(shape, edge)
        shared = get_shared_segments(shape, edge, all_shapes, tolerance)
        for gap in get_non_shared_segments(start, end, shared):
            if edge in (Edge.TOP, Edge.BOTTOM):
                yield Segment(gap.start, fixed, gap.end, fixed, edge, shape_index)
            else:
                yield Segment(fixed, gap.start, fixed, gap.end, edge, shape_index)


def room_outline(room: Room, tolerance: float = 0.0) -> list[Segment]:
    """All wall segments of a room, with edges internal to the room suppressed.

    Rooms that are not outlined (corridors) produce no segments.
    """
    if not draws_outline(room.kind):
        return []

    segments: list[Segment] = []
    for index, shape in enumerate(room.shapes):
        segments.extend(shape_outline(shape, room.shapes, index, tolerance))
    return segments
