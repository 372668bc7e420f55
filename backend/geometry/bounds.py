"""Label anchor and bounding box of a composite room."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from core.models import Point, Room, RoomShape


@dataclass(frozen=True)
class RoomBounds:
    """Union extents of a room's shapes plus the width of its narrowest shape."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    min_width: float

    @property
    def bounding_width(self) -> float:
        return self.max_x - self.min_x

    @property
    def bounding_height(self) -> float:
        return self.max_y - self.min_y


_EMPTY_BOUNDS = RoomBounds(min_x=0.0, min_y=0.0, max_x=0.0, max_y=0.0, min_width=0.0)


def _extents(shapes: list[RoomShape]) -> NDArray[np.float64]:
    """Stack shapes into an (n, 4) array of x, y, width, height."""
    return np.asarray(
        [[s.position.x, s.position.y, s.size.width, s.size.height] for s in shapes],
        dtype=np.float64,
    )


def get_room_center(room: Room) -> Point:
    """Anchor point for a room's label: the centre of its largest shape.

    Ties go to the first shape. This is deliberately not the centroid of the
    union, which can fall outside an L- or T-shaped room.
    """
    if not room.shapes:
        return Point(0.0, 0.0)

    ext = _extents(room.shapes)
    # argmax returns the first occurrence on ties
    largest = ext[int(np.argmax(ext[:, 2] * ext[:, 3]))]
    return Point(float(largest[0] + largest[2] / 2), float(largest[1] + largest[3] / 2))


def get_room_bounds(room: Room) -> RoomBounds:
    if not room.shapes:
        return _EMPTY_BOUNDS

    ext = _extents(room.shapes)
    return RoomBounds(
        min_x=float(ext[:, 0].min()),
        min_y=float(ext[:, 1].min()),
        max_x=float((ext[:, 0] + ext[:, 2]).max()),
        max_y=float((ext[:, 1] + ext[:, 3]).max()),
        min_width=float(ext[:, 2].min()),
    )
