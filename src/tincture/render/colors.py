"""Projection of logical color ranges onto wrapped, render-ready text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Sequence

from ..theme.filters import Appearance, apply_dark_mode_filter as _default_dark_mode_filter

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..editor.text_element import TextElement

__all__ = [
    "ColorSegment",
    "ColorFilter",
    "get_color_segments",
    "get_per_char_colors",
    "iter_line_segments",
]

LOGGER = logging.getLogger(__name__)

ColorFilter = Callable[[str], str]


@dataclass(slots=True, frozen=True)
class ColorSegment:
    """Run of consecutive characters drawn with the same color."""

    text: str
    color: str


def _theme_color(color: str, theme: Appearance, dark_mode_filter: ColorFilter) -> str:
    return dark_mode_filter(color) if theme == "dark" else color


def get_per_char_colors(
    element: "TextElement",
    theme: Appearance,
    apply_dark_mode_filter: ColorFilter | None = None,
) -> list[str] | None:
    """Return one color per character of ``element.text``.

    Returns ``None`` when the element carries no color ranges so callers can
    draw the whole text with its stroke color.

    The wrapped text must be the original text with some spaces turned into
    newlines and extra characters inserted; nothing may be deleted or
    reordered. Characters outside that contract get the default color.
    """

    if not element.color_ranges:
        return None

    dark_mode_filter = apply_dark_mode_filter or _default_dark_mode_filter
    original_text = element.original_text
    text = element.text
    default_color = _theme_color(element.stroke_color, theme, dark_mode_filter)

    original_colors = [default_color] * len(original_text)
    for entry in element.color_ranges:
        clamped_start = max(0, entry.start)
        clamped_end = min(len(original_text), entry.end)
        if clamped_start >= clamped_end:
            continue
        color = _theme_color(entry.color, theme, dark_mode_filter)
        original_colors[clamped_start:clamped_end] = [color] * (clamped_end - clamped_start)

    wrapped_colors: list[str] = []
    original_index = 0
    unmatched = 0
    for char in text:
        if original_index < len(original_text):
            original_char = original_text[original_index]
            # Wrapping converts soft-break spaces into newlines.
            if char == original_char or (char == "\n" and original_char == " "):
                wrapped_colors.append(original_colors[original_index])
                original_index += 1
                continue
        wrapped_colors.append(default_color)
        unmatched += 1

    if original_index < len(original_text):
        LOGGER.debug(
            "Wrapped text consumed %d of %d original characters (%d unmatched)",
            original_index,
            len(original_text),
            unmatched,
        )
    return wrapped_colors


def get_color_segments(line: str, line_colors: Sequence[str]) -> list[ColorSegment]:
    """Group consecutive characters of ``line`` sharing a color into segments."""

    if not line:
        return [ColorSegment(text="", color=line_colors[0] if line_colors else "")]

    segments: list[ColorSegment] = []
    run_start = 0
    current_color = line_colors[0]
    for index in range(1, len(line)):
        if line_colors[index] != current_color:
            segments.append(ColorSegment(text=line[run_start:index], color=current_color))
            run_start = index
            current_color = line_colors[index]
    segments.append(ColorSegment(text=line[run_start:], color=current_color))
    return segments


def iter_line_segments(
    text: str,
    per_char_colors: Sequence[str] | None,
    default_color: str,
) -> Iterator[list[ColorSegment]]:
    """Yield the segments of every line of the wrapped ``text``.

    ``per_char_colors`` is the output of :func:`get_per_char_colors`; the
    entries belonging to the newline characters are skipped.
    """

    offset = 0
    for line in text.split("\n"):
        if per_char_colors is None:
            yield [ColorSegment(text=line, color=default_color)]
        else:
            line_colors = per_char_colors[offset : offset + len(line)]
            if not line:
                line_colors = [default_color]
            yield get_color_segments(line, line_colors)
        offset += len(line) + 1
