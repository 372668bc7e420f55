"""Tests for the render service and its outline cache."""

import logging

import pytest

from core.config import LayoutConfig
from core.models import Room, rect
from core.rooms import RoomKind
from data.entities import SAMPLE_ENTITIES
from data.sample_floor import SAMPLE_BUILDING
from rendering.service import RenderService


def _l_room(room_id: str = "lab") -> Room:
    return Room(
        id=room_id,
        location="Lab",
        kind=RoomKind.LAB_CLASS,
        shapes=[rect(0, 0, 115, 115), rect(0, 115, 55, 20)],
    )


def test_outline_is_cached_per_room() -> None:
    service = RenderService()
    first = service.outline(_l_room())
    second = service.outline(_l_room())
    assert first == second
    assert (service.hits, service.misses) == (1, 1)


def test_changed_shapes_miss_the_cache() -> None:
    service = RenderService()
    room = _l_room()
    service.outline(room)
    moved = Room(id=room.id, location=room.location, kind=room.kind, shapes=[rect(0, 0, 115, 115)])
    assert len(service.outline(moved)) == 4
    assert service.misses == 2


def test_cache_is_bounded() -> None:
    service = RenderService(max_cached_rooms=2)
    for i in range(3):
        service.outline(_l_room(f"lab-{i}"))
    service.outline(_l_room("lab-0"))
    assert service.misses == 4


def test_returned_segments_are_copies() -> None:
    service = RenderService()
    segments = service.outline(_l_room())
    segments.clear()
    assert service.outline(_l_room())


def test_tolerance_from_config() -> None:
    shapes = [rect(0, 0, 0.1 + 0.2, 10), rect(0.3, 0, 1, 10)]  # 0.30000000000000004 vs 0.3
    room = Room(id="r", location="Sala", kind=RoomKind.CLASSROOM, shapes=shapes)
    assert len(RenderService().outline(room)) == 8
    assert len(RenderService(LayoutConfig(edge_tolerance=1e-9)).outline(room)) == 6


def test_corridor_renders_without_label_or_segments() -> None:
    corridor = Room(id="c", location="Corredor", kind=RoomKind.CORRIDOR, shapes=[rect(0, 0, 100, 20)])
    render = RenderService().render_room(corridor)
    assert render.segments == []
    assert render.label is None
    assert not render.interactive


def test_render_sample_floor(caplog: pytest.LogCaptureFixture) -> None:
    floor = SAMPLE_BUILDING.floors[0]
    service = RenderService()
    with caplog.at_level(logging.INFO, logger="rendering.service"):
        render = service.render_floor(floor, SAMPLE_ENTITIES)

    assert render.floor_id == floor.id
    assert [r.room_id for r in render.rooms] == [room.id for room in floor.rooms]
    assert "rendered" in caplog.text

    lab = next(r for r in render.rooms if r.room_id == "lab-research-1")
    assert lab.label is not None
    assert lab.label.title == "ARIA e LUMO"
    assert [e.slug for e in lab.label.logos] == ["aria"]
    # bottom edge of the large shape keeps only the part not touching the small one
    assert [(s.x1, s.x2) for s in lab.segments if s.shape_index == 0 and s.edge == "bottom"] == [(55, 115)]


def test_empty_room_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    room = Room(id="ghost", location="Sala", kind=RoomKind.CLASSROOM, shapes=[])
    with caplog.at_level(logging.WARNING, logger="rendering.service"):
        render = RenderService().render_room(room)
    assert render.segments == []
    assert render.label is not None
    assert "ghost" in caplog.text


def test_render_carries_theme_colours() -> None:
    service = RenderService()
    light = service.render_room(_l_room())
    dark = service.render_room(_l_room(), is_dark=True)
    assert light.colors.fill == "rgba(59, 130, 246, 0.15)"
    assert light.hover_colors.stroke == "rgb(37, 99, 235)"
    assert dark.hover_colors.fill == "rgba(59, 130, 246, 0.6)"
    assert (light.stroke_width, light.hover_stroke_width) == (1.0, 2.0)


def test_corridor_does_not_highlight_on_hover() -> None:
    corridor = Room(id="c", location="Corredor", kind=RoomKind.CORRIDOR, shapes=[rect(0, 0, 100, 20)])
    render = RenderService().render_room(corridor)
    assert render.hover_colors == render.colors
    assert render.hover_stroke_width == render.stroke_width
