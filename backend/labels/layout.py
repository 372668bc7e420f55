"""Adaptive label sizing.

The label box is centred on the room anchor (see ``geometry.bounds``). Its
font shrinks for long text so the title fits the narrowest shape of the
room, and the icon above the title is dropped when the room is too short
to hold it without overflowing.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from core.config import DEFAULT, LayoutConfig
from core.models import Entity, Point, Room
from core.rooms import RoomKind, has_icon, room_icon
from geometry.bounds import get_room_bounds, get_room_center
from labels.text import display_text, has_labs, has_professors, logo_entities, subtitle_text


@dataclass(frozen=True)
class TextDimensions:
    font_size: float
    subtitle_font_size: float
    text_width: float
    text_height: float
    show_icon: bool


@dataclass
class LabelBox:
    """Everything the frontend needs to draw a room label around its anchor."""

    center: Point
    dimensions: TextDimensions
    title: str
    subtitle: str | None = None
    icon: str | None = None
    logos: list[Entity] = field(default_factory=list)
    badge_only: bool = False  # icon badge without text (bathrooms)

    @property
    def x(self) -> float:
        return self.center.x - self.dimensions.text_width / 2

    @property
    def y(self) -> float:
        return self.center.y - self.dimensions.text_height / 2


def _fit_font_size(text: str, min_width: float, config: LayoutConfig) -> float:
    base = config.base_font_size
    if not text:
        return base
    char_width = base * config.char_width_ratio
    max_chars = math.floor(min_width / char_width)
    scaled = (max_chars / len(text)) * base * config.font_fill_ratio
    return max(config.min_font_size, min(base, scaled))


def get_text_dimensions(
    room: Room,
    entities: Mapping[str, Entity] | None = None,
    config: LayoutConfig = DEFAULT,
) -> TextDimensions:
    """Compute font sizes, label box size and whether the room icon fits."""
    bounds = get_room_bounds(room)
    bounding_height = bounds.bounding_height
    subtitle_font_size = config.subtitle_font_size

    font_size = _fit_font_size(display_text(room, entities), bounds.min_width, config)
    text_width = max(bounds.min_width * config.text_width_ratio, config.min_text_width)

    icon_applicable = has_icon(room.kind)
    show_logos = bool(logo_entities(room, entities))
    if show_logos:
        icon_height = min(font_size * config.logo_scale, config.max_logo_size) + config.icon_margin
    elif icon_applicable:
        icon_height = font_size * config.icon_scale + config.icon_margin
    else:
        icon_height = 0.0

    if has_labs(room) or has_professors(room):
        lines_height = font_size + subtitle_font_size + config.subtitle_margin
    else:
        lines_height = font_size + config.title_margin

    text_height = max(bounding_height * config.text_height_ratio, icon_height + lines_height)
    can_fit_icon = bounding_height >= icon_height + lines_height + config.icon_fit_margin
    show_icon = icon_applicable and not show_logos and can_fit_icon

    return TextDimensions(
        font_size=font_size,
        subtitle_font_size=subtitle_font_size,
        text_width=text_width,
        text_height=text_height,
        show_icon=show_icon,
    )


def layout_label(
    room: Room,
    entities: Mapping[str, Entity] | None = None,
    config: LayoutConfig = DEFAULT,
) -> LabelBox:
    """Anchor, dimensions and content of a room's label."""
    center = get_room_center(room)

    if room.kind == RoomKind.BATHROOM:
        badge = TextDimensions(
            font_size=config.base_font_size,
            subtitle_font_size=config.subtitle_font_size,
            text_width=config.badge_size,
            text_height=config.badge_size,
            show_icon=True,
        )
        return LabelBox(center=center, dimensions=badge, title="", icon=room_icon(room.kind), badge_only=True)

    dims = get_text_dimensions(room, entities, config)
    return LabelBox(
        center=center,
        dimensions=dims,
        title=display_text(room, entities),
        subtitle=subtitle_text(room),
        icon=room_icon(room.kind) if dims.show_icon else None,
        logos=logo_entities(room, entities),
    )
