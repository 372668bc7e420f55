"""FastAPI entry point - thin layer over the floor map domain."""

import logging
import os

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from core.models import Floor, Room
from data import SAMPLE_BUILDING, EntityDirectory, room_lab_slugs
from rendering import BlueprintScale, FloorRender, RenderService, RoomRender, blueprint_scale

logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
logging.getLogger("rendering.service").setLevel(logging.INFO)
logging.getLogger("data.entities").setLevel(logging.INFO)

app = FastAPI(title="Campus Maps API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- module-level state, initialised at import time ---
EntityDirectory.configure(os.environ.get("ENTITY_API_URL"))
renderer = RenderService()
_floors: dict[str, Floor] = {floor.id: floor for floor in SAMPLE_BUILDING.floors}


class FloorSummary(BaseModel):
    id: str
    name: str
    level: int


def _get_floor(floor_id: str) -> Floor:
    floor = _floors.get(floor_id)
    if floor is None:
        raise HTTPException(status_code=404, detail=f"Unknown floor {floor_id}")
    return floor


def _get_room(floor: Floor, room_id: str) -> Room:
    for room in floor.rooms:
        if room.id == room_id:
            return room
    raise HTTPException(status_code=404, detail=f"Unknown room {room_id} on floor {floor.id}")


@app.get("/floors")
def list_floors() -> list[FloorSummary]:
    floors = sorted(_floors.values(), key=lambda f: f.level)
    return [FloorSummary(id=f.id, name=f.name, level=f.level) for f in floors]


@app.get("/floors/{floor_id}")
def get_floor(floor_id: str) -> Floor:
    return _get_floor(floor_id)


@app.get("/floors/{floor_id}/render")
async def render_floor(floor_id: str, dark: bool = False) -> FloorRender:
    """Wall segments and label boxes for every room on the floor."""
    floor = _get_floor(floor_id)
    entities = await EntityDirectory.for_floor(floor)
    return renderer.render_floor(floor, entities, is_dark=dark)


@app.get("/floors/{floor_id}/rooms/{room_id}/render")
async def render_room(floor_id: str, room_id: str, dark: bool = False) -> RoomRender:
    floor = _get_floor(floor_id)
    room = _get_room(floor, room_id)
    entities = await EntityDirectory.get_entities(room_lab_slugs(room))
    return renderer.render_room(room, entities, is_dark=dark)


@app.get("/floors/{floor_id}/scale")
def get_scale(
    floor_id: str,
    window_width: float = Query(gt=0),
    compact: bool = False,
) -> BlueprintScale:
    """Scale that fits the floor blueprint into a viewport of the given width."""
    return blueprint_scale(_get_floor(floor_id).blueprint, window_width, compact)
