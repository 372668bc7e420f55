"""Fit a floor blueprint into the viewer's viewport."""

from dataclasses import dataclass

from core.models import Blueprint

DESKTOP_MIN_WIDTH = 1024  # px
TABLET_MIN_WIDTH = 768  # px

# (max_width, max_height) in px per breakpoint
_FULL_BOUNDS = {"desktop": (1400, 600), "tablet": (1400, 1000), "mobile": (1000, 700)}
_COMPACT_BOUNDS = {"desktop": (700, 350), "tablet": (650, 400), "mobile": (550, 350)}


@dataclass(frozen=True)
class BlueprintScale:
    scale: float
    scaled_width: float
    scaled_height: float


def viewport_breakpoint(window_width: float) -> str:
    if window_width >= DESKTOP_MIN_WIDTH:
        return "desktop"
    if window_width >= TABLET_MIN_WIDTH:
        return "tablet"
    return "mobile"


def blueprint_scale(blueprint: Blueprint, window_width: float, compact: bool = False) -> BlueprintScale:
    """Uniform scale that fits the blueprint inside the viewport box for this width."""
    bounds = _COMPACT_BOUNDS if compact else _FULL_BOUNDS
    max_width, max_height = bounds[viewport_breakpoint(window_width)]

    if blueprint.width <= 0 or blueprint.height <= 0:
        return BlueprintScale(scale=1.0, scaled_width=0.0, scaled_height=0.0)

    scale = min(max_width / blueprint.width, max_height / blueprint.height)
    return BlueprintScale(
        scale=scale,
        scaled_width=blueprint.width * scale,
        scaled_height=blueprint.height * scale,
    )
