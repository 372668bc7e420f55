"""Core domain models and layout configuration."""

from core.config import DEFAULT as DEFAULT_LAYOUT_CONFIG
from core.config import LayoutConfig
from core.models import Blueprint, Building, Entity, Floor, Point, Room, RoomShape, Size, rect
from core.rooms import RoomKind, draws_outline, has_icon, is_interactive, room_icon

__all__ = [
    "DEFAULT_LAYOUT_CONFIG",
    "Blueprint",
    "Building",
    "Entity",
    "Floor",
    "LayoutConfig",
    "Point",
    "Room",
    "RoomKind",
    "RoomShape",
    "Size",
    "draws_outline",
    "has_icon",
    "is_interactive",
    "rect",
    "room_icon",
]
