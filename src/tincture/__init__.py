"""Per-character color overrides for wrapped text elements."""

import logging

from .core.ranges import ColorRange, ColorRanges
from .editor.color_ranges import apply_color_to_range, cleanup_color_ranges, shift_color_ranges
from .editor.text_element import TextElement
from .render.colors import ColorSegment, get_color_segments, get_per_char_colors

__all__ = [
    "ColorRange",
    "ColorRanges",
    "ColorSegment",
    "TextElement",
    "apply_color_to_range",
    "cleanup_color_ranges",
    "get_color_segments",
    "get_per_char_colors",
    "shift_color_ranges",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
