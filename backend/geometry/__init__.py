"""Geometry of composite rooms - pure functions over room shapes."""

from geometry.adjacency import Edge, edge_coordinate, edge_range, get_shared_segments, shares_edge
from geometry.bounds import RoomBounds, get_room_bounds, get_room_center
from geometry.intervals import Interval, get_non_shared_segments, merge_intervals
from geometry.outline import Segment, room_outline, shape_outline

__all__ = [
    "Edge",
    "Interval",
    "RoomBounds",
    "Segment",
    "edge_coordinate",
    "edge_range",
    "get_non_shared_segments",
    "get_room_bounds",
    "get_room_center",
    "get_shared_segments",
    "merge_intervals",
    "room_outline",
    "shape_outline",
    "shares_edge",
]
