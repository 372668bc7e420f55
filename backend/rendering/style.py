"""Fill and stroke colours for rooms on the floor map, served with each room render."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoomColors:
    fill: str
    stroke: str


def room_colors(is_corridor: bool, is_hovered: bool, is_dark: bool) -> RoomColors:
    """Colours for a room given its hover state and the active theme.

    Corridors keep a faint fill regardless of hover since they are not interactive.
    """
    if is_corridor:
        fill = "rgba(59, 130, 246, 0.15)" if is_dark else "rgba(59, 130, 246, 0.13)"
    elif is_hovered:
        fill = "rgba(59, 130, 246, 0.6)" if is_dark else "rgba(59, 130, 246, 0.4)"
    else:
        fill = "rgba(59, 130, 246, 0.2)" if is_dark else "rgba(59, 130, 246, 0.15)"

    if is_hovered:
        stroke = "rgb(59, 130, 246)" if is_dark else "rgb(37, 99, 235)"
    else:
        stroke = "rgba(59, 130, 246, 0.5)" if is_dark else "rgba(59, 130, 246, 0.3)"

    return RoomColors(fill=fill, stroke=stroke)


def stroke_width(is_hovered: bool) -> float:
    return 2.0 if is_hovered else 1.0
