"""API tests through FastAPI's test client."""

from collections.abc import Iterable

import pytest
from fastapi.testclient import TestClient

import main as main_module
from core.models import Entity
from data import EntityDirectory
from main import app

client = TestClient(app)


def test_list_floors_sorted_by_level() -> None:
    response = client.get("/floors")
    assert response.status_code == 200
    assert [f["level"] for f in response.json()] == [0, 1]


def test_get_floor() -> None:
    body = client.get("/floors/floor-ground").json()
    assert body["name"] == "Terreo"
    assert body["rooms"][0]["kind"] == "lab-research"


def test_unknown_floor_is_404() -> None:
    assert client.get("/floors/nope").status_code == 404
    assert client.get("/floors/nope/render").status_code == 404


def test_render_floor() -> None:
    body = client.get("/floors/floor-ground/render").json()
    rooms = {r["room_id"]: r for r in body["rooms"]}
    assert rooms["corridor-ground"]["segments"] == []
    assert rooms["corridor-ground"]["label"] is None
    lab = rooms["lab-research-1"]
    assert lab["label"]["title"] == "ARIA e LUMO"
    assert lab["label"]["dimensions"]["show_icon"] is False


def test_render_room() -> None:
    body = client.get("/floors/floor-2/rooms/lab-class-202/render").json()
    # stacked halves: the internal edge at y=40 is never drawn
    assert all(not (s["y1"] == 40 and s["y2"] == 40) for s in body["segments"])
    assert len(body["segments"]) == 6


def test_unknown_room_is_404() -> None:
    assert client.get("/floors/floor-2/rooms/nope/render").status_code == 404


def test_scale() -> None:
    body = client.get("/floors/floor-2/scale", params={"window_width": 1280}).json()
    assert body["scaled_height"] == 600
    assert client.get("/floors/floor-2/scale", params={"window_width": 0}).status_code == 422


def test_render_room_resolves_labs_only_for_research_labs(monkeypatch: pytest.MonkeyPatch) -> None:
    requested: list[set[str]] = []

    async def fake_get_entities(slugs: Iterable[str]) -> dict[str, Entity]:
        requested.append(set(slugs))
        return {}

    monkeypatch.setattr(EntityDirectory, "get_entities", fake_get_entities)
    floor = main_module._floors["floor-ground"]
    classroom = next(r for r in floor.rooms if r.id == "classroom-101")
    monkeypatch.setattr(classroom, "labs", ["aria"])

    assert client.get("/floors/floor-ground/rooms/classroom-101/render").status_code == 200
    assert client.get("/floors/floor-ground/rooms/lab-research-1/render").status_code == 200
    assert requested == [set(), {"aria", "lumo"}]


def test_render_floor_survives_failing_entity_directory() -> None:
    EntityDirectory.configure("http://127.0.0.1:9", timeout_s=1.0)
    try:
        response = client.get("/floors/floor-ground/render")
    finally:
        EntityDirectory.configure(None)
    assert response.status_code == 200
    rooms = {r["room_id"]: r for r in response.json()["rooms"]}
    assert rooms["lab-research-1"]["label"]["title"] == "aria e lumo"


def test_render_floor_dark_theme() -> None:
    body = client.get("/floors/floor-2/render", params={"dark": True}).json()
    assert body["rooms"][0]["colors"]["fill"] == "rgba(59, 130, 246, 0.2)"
