"""Editor package containing color range algebra and text element state."""

from .color_ranges import apply_color_to_range, cleanup_color_ranges, shift_color_ranges
from .edits import TextEdit, compute_text_edit
from .text_element import DEFAULT_STROKE_COLOR, TextElement, WrapFunction

__all__ = [
    "DEFAULT_STROKE_COLOR",
    "TextEdit",
    "TextElement",
    "WrapFunction",
    "apply_color_to_range",
    "cleanup_color_ranges",
    "compute_text_edit",
    "shift_color_ranges",
]
