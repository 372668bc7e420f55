"""Core data models for floor maps.

Coordinates are abstract floor-plan units with y growing downwards.
"""

from dataclasses import dataclass, field

from core.rooms import RoomKind


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class RoomShape:
    """One axis-aligned rectangle of a room's silhouette."""

    position: Point
    size: Size

    @property
    def right(self) -> float:
        return self.position.x + self.size.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.size.height

    @property
    def area(self) -> float:
        return self.size.width * self.size.height


def rect(x: float, y: float, width: float, height: float) -> RoomShape:
    """Shorthand for building a shape from its top-left corner and size."""
    return RoomShape(position=Point(x, y), size=Size(width, height))


@dataclass
class Room:
    id: str
    location: str  # display name
    kind: RoomKind
    shapes: list[RoomShape]
    labs: list[str] = field(default_factory=list)  # entity slugs, lab-research only
    professors: list[str] = field(default_factory=list)  # full names, professor-office only


@dataclass
class Blueprint:
    width: float
    height: float
    background_image: str | None = None


@dataclass
class Floor:
    id: str
    name: str
    level: int  # 0 = ground, -1 = basement
    blueprint: Blueprint
    rooms: list[Room]


@dataclass
class Building:
    id: str
    name: str
    floors: list[Floor]
    code: str | None = None


@dataclass
class Entity:
    """A campus entity (lab, student group) whose logo may label a room."""

    slug: str
    name: str
    image_path: str | None = None
