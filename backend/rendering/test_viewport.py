"""Tests for blueprint scaling and room colours."""

import pytest

from core.models import Blueprint
from rendering.style import room_colors, stroke_width
from rendering.viewport import blueprint_scale, viewport_breakpoint


def test_breakpoints() -> None:
    assert viewport_breakpoint(1280) == "desktop"
    assert viewport_breakpoint(1024) == "desktop"
    assert viewport_breakpoint(800) == "tablet"
    assert viewport_breakpoint(375) == "mobile"


def test_desktop_scale_is_height_bound() -> None:
    result = blueprint_scale(Blueprint(width=400, height=260), 1280)
    assert result.scale == pytest.approx(600 / 260)
    assert result.scaled_height == pytest.approx(600)


def test_compact_mobile_scale() -> None:
    result = blueprint_scale(Blueprint(width=1100, height=100), 375, compact=True)
    assert result.scale == pytest.approx(0.5)
    assert result.scaled_width == pytest.approx(550)


def test_degenerate_blueprint() -> None:
    assert blueprint_scale(Blueprint(width=0, height=100), 1280).scaled_width == 0


def test_corridor_colors_ignore_hover() -> None:
    assert room_colors(True, True, False).fill == room_colors(True, False, False).fill


def test_hover_changes_stroke() -> None:
    assert room_colors(False, True, True).stroke == "rgb(59, 130, 246)"
    assert room_colors(False, False, True).stroke == "rgba(59, 130, 246, 0.5)"
    assert stroke_width(True) == 2
