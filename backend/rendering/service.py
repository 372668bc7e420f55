"""Render service for floor maps.

Combines the outline and label computations for every room of a floor
into the payload the frontend draws:

- wall segments per room, with edges internal to the room suppressed
- a label box (anchor, font sizes, icon or logos) per room
- resting and hover colours for the active theme

Outlines cost O(shapes^2) per room and the viewer asks for them on every
re-render, so they are memoized by room id and shape list. Labels depend
on the entity lookup and are cheap, so they are recomputed each time.
"""

import logging
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass, field

from core.config import DEFAULT, LayoutConfig
from core.models import Blueprint, Entity, Floor, Room, RoomShape
from core.rooms import RoomKind, is_interactive
from geometry.outline import Segment, room_outline
from labels.layout import LabelBox, layout_label
from rendering.style import RoomColors, room_colors, stroke_width

logger = logging.getLogger(__name__)

MAX_CACHED_ROOMS = 512

type OutlineKey = tuple[str, tuple[RoomShape, ...], float]


@dataclass
class RoomRender:
    room_id: str
    kind: RoomKind
    interactive: bool
    segments: list[Segment]
    label: LabelBox | None  # corridors carry no label
    colors: RoomColors
    hover_colors: RoomColors  # corridors keep their resting colours
    stroke_width: float
    hover_stroke_width: float


@dataclass
class FloorRender:
    floor_id: str
    blueprint: Blueprint
    rooms: list[RoomRender] = field(default_factory=list)


class RenderService:
    """Renders rooms and floors, memoizing room outlines."""

    def __init__(self, config: LayoutConfig = DEFAULT, max_cached_rooms: int = MAX_CACHED_ROOMS) -> None:
        self.config = config
        self.max_cached_rooms = max_cached_rooms
        self._outlines: OrderedDict[OutlineKey, list[Segment]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def _outline_key(self, room: Room) -> OutlineKey:
        return (room.id, tuple(room.shapes), self.config.edge_tolerance)

    def outline(self, room: Room) -> list[Segment]:
        """Wall segments of a room, served from the cache when the shapes are unchanged."""
        key = self._outline_key(room)
        cached = self._outlines.get(key)
        if cached is not None:
            self.hits += 1
            self._outlines.move_to_end(key)
            return list(cached)

        self.misses += 1
        segments = room_outline(room, tolerance=self.config.edge_tolerance)
        logger.debug("Room %s: %d shapes -> %d segments", room.id, len(room.shapes), len(segments))

        self._outlines[key] = segments
        if len(self._outlines) > self.max_cached_rooms:
            evicted, _ = self._outlines.popitem(last=False)
            logger.debug("Evicted outline of room %s", evicted[0])
        return list(segments)

    def render_room(
        self,
        room: Room,
        entities: Mapping[str, Entity] | None = None,
        is_dark: bool = False,
    ) -> RoomRender:
        if not room.shapes:
            logger.warning("Room %s has no shapes; rendering nothing", room.id)

        interactive = is_interactive(room.kind)
        is_corridor = room.kind == RoomKind.CORRIDOR
        return RoomRender(
            room_id=room.id,
            kind=room.kind,
            interactive=interactive,
            segments=self.outline(room),
            label=layout_label(room, entities, self.config) if interactive else None,
            colors=room_colors(is_corridor, is_hovered=False, is_dark=is_dark),
            hover_colors=room_colors(is_corridor, is_hovered=interactive, is_dark=is_dark),
            stroke_width=stroke_width(is_hovered=False),
            hover_stroke_width=stroke_width(is_hovered=interactive),
        )

    def render_floor(
        self,
        floor: Floor,
        entities: Mapping[str, Entity] | None = None,
        is_dark: bool = False,
    ) -> FloorRender:
        rooms = [self.render_room(room, entities, is_dark) for room in floor.rooms]
        logger.info(
            "Floor %s: rendered %d rooms, %d segments (cache hits=%d misses=%d)",
            floor.id,
            len(rooms),
            sum(len(r.segments) for r in rooms),
            self.hits,
            self.misses,
        )
        return FloorRender(floor_id=floor.id, blueprint=floor.blueprint, rooms=rooms)

    def clear(self) -> None:
        self._outlines.clear()
        self.hits = 0
        self.misses = 0
