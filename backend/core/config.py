"""Centralised layout tunables.

Every magic number that controls outline detection and label sizing lives
here. Create a custom ``LayoutConfig`` to tweak values for testing::

    cfg = LayoutConfig(edge_tolerance=1e-6)
    segments = room_outline(room, tolerance=cfg.edge_tolerance)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """All layout tunables, grouped by category."""

    # --- Edge coincidence ---
    edge_tolerance: float = 0.0  # 0.0 = exact coordinate equality

    # --- Fonts ---
    base_font_size: float = 12.0
    min_font_size: float = 8.0
    subtitle_ratio: float = 0.7  # subtitle is 70% of the base font
    char_width_ratio: float = 0.6  # estimated glyph width per font unit
    font_fill_ratio: float = 0.9  # headroom when shrinking long text

    # --- Label box ---
    text_width_ratio: float = 0.9  # of the narrowest shape
    min_text_width: float = 40.0
    text_height_ratio: float = 0.6  # of the bounding height

    # --- Icons and logos ---
    logo_scale: float = 1.5  # logo size per font unit
    max_logo_size: float = 32.0
    icon_scale: float = 1.2  # icon size per font unit
    icon_margin: float = 4.0
    icon_fit_margin: float = 15.0  # free space required before showing the icon
    badge_size: float = 28.0  # icon-only badge (bathrooms)

    # --- Text lines ---
    title_margin: float = 4.0
    subtitle_margin: float = 6.0

    @property
    def subtitle_font_size(self) -> float:
        return self.base_font_size * self.subtitle_ratio


DEFAULT = LayoutConfig()
