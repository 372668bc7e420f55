"""Floor rendering - outlines, labels, viewport and colours for the map viewer."""

from rendering.service import FloorRender, RenderService, RoomRender
from rendering.style import RoomColors, room_colors, stroke_width
from rendering.viewport import BlueprintScale, blueprint_scale, viewport_breakpoint

__all__ = [
    "BlueprintScale",
    "FloorRender",
    "RenderService",
    "RoomColors",
    "RoomRender",
    "blueprint_scale",
    "viewport_breakpoint",
    "room_colors",
    "stroke_width",
]
