"""Core domain types shared by the editor and render packages."""

from .ranges import ColorRange, ColorRanges, coerce_color_ranges, serialize_color_ranges

__all__ = ["ColorRange", "ColorRanges", "coerce_color_ranges", "serialize_color_ranges"]
