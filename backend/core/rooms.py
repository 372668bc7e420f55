"""Room kinds and the per-kind rendering rules."""

from enum import StrEnum


class RoomKind(StrEnum):
    CLASSROOM = "classroom"
    CORRIDOR = "corridor"
    BATHROOM = "bathroom"
    LAB_CLASS = "lab-class"
    LAB_RESEARCH = "lab-research"
    LIBRARY = "library"
    PROFESSOR_OFFICE = "professor-office"
    INSTITUTIONAL_OFFICE = "institutional-office"
    SHARED_SPACE = "shared-space"
    STAIRS = "stairs"


def draws_outline(kind: RoomKind) -> bool:
    """Whether the room's walls are stroked.

    Corridors are background regions: filled, never outlined, never interactive.
    """
    match kind:
        case RoomKind.CORRIDOR:
            return False
        case (
            RoomKind.CLASSROOM
            | RoomKind.BATHROOM
            | RoomKind.LAB_CLASS
            | RoomKind.LAB_RESEARCH
            | RoomKind.LIBRARY
            | RoomKind.PROFESSOR_OFFICE
            | RoomKind.INSTITUTIONAL_OFFICE
            | RoomKind.SHARED_SPACE
            | RoomKind.STAIRS
        ):
            return True


def is_interactive(kind: RoomKind) -> bool:
    return draws_outline(kind)


def has_icon(kind: RoomKind) -> bool:
    """Whether a label for this kind reserves space for an icon above the text."""
    match kind:
        case RoomKind.BATHROOM | RoomKind.CORRIDOR:
            return False
        case (
            RoomKind.CLASSROOM
            | RoomKind.LAB_CLASS
            | RoomKind.LAB_RESEARCH
            | RoomKind.LIBRARY
            | RoomKind.PROFESSOR_OFFICE
            | RoomKind.INSTITUTIONAL_OFFICE
            | RoomKind.SHARED_SPACE
            | RoomKind.STAIRS
        ):
            return True


def room_icon(kind: RoomKind) -> str | None:
    """Icon identifier the frontend draws for a room kind."""
    match kind:
        case RoomKind.CLASSROOM:
            return "book-open"
        case RoomKind.LAB_CLASS:
            return "monitor"
        case RoomKind.LAB_RESEARCH:
            return "search"
        case RoomKind.LIBRARY:
            return "library"
        case RoomKind.PROFESSOR_OFFICE | RoomKind.SHARED_SPACE:
            return "users"
        case RoomKind.INSTITUTIONAL_OFFICE:
            return "building"
        case RoomKind.STAIRS:
            return "arrow-up-down"
        case RoomKind.BATHROOM:
            return "wc"
        case RoomKind.CORRIDOR:
            return None
