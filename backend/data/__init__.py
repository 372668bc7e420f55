"""Sample data and the entity directory."""

from data.entities import SAMPLE_ENTITIES, EntityDirectory, EntityLookupError, lab_slugs, room_lab_slugs
from data.sample_floor import SAMPLE_BUILDING

__all__ = [
    "SAMPLE_BUILDING",
    "SAMPLE_ENTITIES",
    "EntityDirectory",
    "EntityLookupError",
    "lab_slugs",
    "room_lab_slugs",
]
