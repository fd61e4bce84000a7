"""Render-side helpers turning color ranges into draw segments."""

from .colors import ColorFilter, ColorSegment, get_color_segments, get_per_char_colors, iter_line_segments

__all__ = [
    "ColorFilter",
    "ColorSegment",
    "get_color_segments",
    "get_per_char_colors",
    "iter_line_segments",
]
