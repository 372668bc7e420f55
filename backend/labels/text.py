"""Label text for rooms: lab names, professor first names or the room location."""

from collections.abc import Mapping

from core.models import Entity, Room
from core.rooms import RoomKind


def _join_names(names: list[str]) -> str:
    """Join names the way the campus UI reads them: "A", "A e B", "A, B e C"."""
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} e {names[-1]}"


def first_name(full_name: str) -> str:
    return full_name.split(" ")[0]


def format_professors_for_display(professors: list[str]) -> str:
    """First names only, e.g. "Ruy, Mardson e Henrique"."""
    return _join_names([first_name(p) for p in professors])


def format_professors_for_details(professors: list[str]) -> str:
    return _join_names(list(professors))


def format_labs_for_display(labs: list[str], entities: Mapping[str, Entity] | None = None) -> str:
    """Lab names from the entity lookup, falling back to the slug for unknown labs."""
    entities = entities or {}
    return _join_names([entities[slug].name if slug in entities else slug for slug in labs])


def has_labs(room: Room) -> bool:
    return room.kind == RoomKind.LAB_RESEARCH and len(room.labs) > 0


def has_professors(room: Room) -> bool:
    return room.kind == RoomKind.PROFESSOR_OFFICE and len(room.professors) > 0


def display_text(room: Room, entities: Mapping[str, Entity] | None = None) -> str:
    """Title line of a room label."""
    if has_labs(room):
        return format_labs_for_display(room.labs, entities)
    if has_professors(room):
        return format_professors_for_display(room.professors)
    return room.location


def subtitle_text(room: Room) -> str | None:
    """The location is shown underneath when the title is made of lab or professor names."""
    if has_labs(room) or has_professors(room):
        return room.location
    return None


def logo_entities(room: Room, entities: Mapping[str, Entity] | None = None) -> list[Entity]:
    """Lab entities of a room that have a logo image to draw."""
    if not has_labs(room) or not entities:
        return []
    return [entities[slug] for slug in room.labs if slug in entities and entities[slug].image_path]
