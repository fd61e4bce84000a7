"""Interval algebra for per-character color overrides.

Every helper here is pure: inputs are never mutated and each call returns a new
tuple. Stored collections are expected in canonical form (sorted, disjoint,
same-color neighbours merged, no empty spans); :func:`cleanup_color_ranges`
restores that form after any mutation.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..core.ranges import ColorRange, ColorRanges

__all__ = ["apply_color_to_range", "cleanup_color_ranges", "shift_color_ranges"]


def cleanup_color_ranges(
    ranges: Sequence[ColorRange],
    text_length: int | float,
) -> tuple[ColorRange, ...]:
    """Clamp ``ranges`` to ``[0, text_length]``, drop empty spans, sort and merge."""

    clamped = [
        ColorRange(max(0, entry.start), min(text_length, entry.end), entry.color)
        for entry in ranges
        if max(0, entry.start) < min(text_length, entry.end)
    ]
    if not clamped:
        return ()

    clamped.sort(key=lambda entry: (entry.start, entry.end))

    merged: list[ColorRange] = [clamped[0]]
    for current in clamped[1:]:
        previous = merged[-1]
        if current.color == previous.color and current.start <= previous.end:
            merged[-1] = previous.with_bounds(previous.start, max(previous.end, current.end))
        else:
            merged.append(current)
    return tuple(merged)


def apply_color_to_range(
    existing: ColorRanges,
    start: int,
    end: int,
    color: str,
    stroke_color: str,
) -> tuple[ColorRange, ...]:
    """Paint ``color`` over ``[start, end)``.

    Overlapped parts of existing ranges are cut away; their left and right
    remainders survive with their original colors. Painting with
    ``stroke_color`` only erases, since the base color is never stored as an
    override. A zero or negative width paint returns ``existing`` untouched.
    """

    if start >= end:
        return tuple(existing) if existing is not None else ()

    result: list[ColorRange] = []
    for entry in existing or ():
        if not entry.overlaps(start, end):
            result.append(entry)
            continue
        if entry.start < start:
            result.append(entry.with_bounds(entry.start, start))
        if entry.end > end:
            result.append(entry.with_bounds(end, entry.end))

    if color != stroke_color:
        result.append(ColorRange(start, end, color))

    return cleanup_color_ranges(result, math.inf)


def shift_color_ranges(
    ranges: ColorRanges,
    edit_start: int,
    inserted_length: int,
    deleted_length: int,
) -> ColorRanges:
    """Move ``ranges`` to follow an edit of the logical text.

    The edit deletes ``deleted_length`` characters at ``edit_start`` and inserts
    ``inserted_length`` characters in their place. Ranges that overlap the
    deleted span keep only the parts outside it. Text inserted strictly inside
    a range takes its color; text inserted at either edge stays uncolored.
    Returns ``None`` once nothing survives.
    """

    if not ranges:
        return ranges

    delta = inserted_length - deleted_length
    edit_end = edit_start + deleted_length
    result: list[ColorRange] = []

    for entry in ranges:
        if entry.end <= edit_start:
            result.append(entry)
            continue
        if entry.start >= edit_end:
            result.append(entry.with_bounds(entry.start + delta, entry.end + delta))
            continue

        if entry.start < edit_start:
            new_start = entry.start
            new_end = max(edit_start, entry.end - deleted_length + inserted_length)
        else:
            new_start = edit_start + inserted_length
            new_end = new_start + max(0, entry.end - edit_end)

        if new_start < new_end:
            result.append(entry.with_bounds(new_start, new_end))

    return tuple(result) or None
