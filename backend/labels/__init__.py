"""Room label content and adaptive sizing."""

from labels.layout import LabelBox, TextDimensions, get_text_dimensions, layout_label
from labels.text import (
    display_text,
    format_labs_for_display,
    format_professors_for_details,
    format_professors_for_display,
    logo_entities,
    subtitle_text,
)

__all__ = [
    "LabelBox",
    "TextDimensions",
    "display_text",
    "format_labs_for_display",
    "format_professors_for_details",
    "format_professors_for_display",
    "get_text_dimensions",
    "layout_label",
    "logo_entities",
    "subtitle_text",
]
