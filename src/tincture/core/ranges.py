"""Structured helpers for representing colored text spans."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ColorRange:
    """Color override covering the half-open span ``[start, end)`` of logical text.

    Unlike a selection, a color range keeps its bounds exactly as given: an
    inverted or out-of-bounds range is a valid intermediate value that the
    normalizer later clamps or drops.
    """

    start: int
    end: int
    color: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", self._coerce_index(self.start, "start"))
        object.__setattr__(self, "end", self._coerce_index(self.end, "end"))
        if not isinstance(self.color, str):
            raise TypeError(f"ColorRange color must be a string, received {type(self.color)!r}")

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"ColorRange {label} must be an integer, received {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"ColorRange {label} must be an integer") from exc

    @property
    def length(self) -> int:
        """Return the width of the range (zero for empty or inverted ranges)."""

        return max(0, self.end - self.start)

    def overlaps(self, start: int, end: int) -> bool:
        """Return ``True`` when the range shares at least one index with ``[start, end)``."""

        return not (self.end <= start or self.start >= end)

    def with_bounds(self, start: int, end: int) -> ColorRange:
        return ColorRange(start, end, self.color)

    def to_tuple(self) -> tuple[int, int, str]:
        return (self.start, self.end, self.color)

    def to_dict(self) -> dict[str, Any]:
        """Return the range as a ``{start, end, color}`` record."""

        return {"start": self.start, "end": self.end, "color": self.color}

    @classmethod
    def from_value(cls, value: Any) -> ColorRange:
        """Coerce ``value`` into a :class:`ColorRange`."""

        if isinstance(value, ColorRange):
            return value
        if value is None:
            raise ValueError("ColorRange value is required")
        if isinstance(value, Mapping):
            missing = [key for key in ("start", "end", "color") if value.get(key) is None]
            if missing:
                raise ValueError(f"ColorRange mappings require keys: {', '.join(missing)}")
            return cls(value["start"], value["end"], value["color"])
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) != 3:
                raise ValueError("ColorRange sequences must have exactly three entries")
            return cls(seq[0], seq[1], seq[2])
        start = getattr(value, "start", None)
        end = getattr(value, "end", None)
        color = getattr(value, "color", None)
        if start is not None and end is not None and color is not None:
            return cls(start, end, color)
        raise TypeError("Unsupported ColorRange input")


ColorRanges = Optional[Tuple[ColorRange, ...]]
"""Stored range collection; ``None`` means the element has no overrides."""


def coerce_color_ranges(payload: Iterable[Any] | None) -> ColorRanges:
    """Build a range collection from host records, skipping malformed entries."""

    if payload is None:
        return None
    ranges: list[ColorRange] = []
    for index, entry in enumerate(payload):
        try:
            ranges.append(ColorRange.from_value(entry))
        except (TypeError, ValueError) as exc:
            LOGGER.warning("Skipping malformed color range #%d (%r): %s", index, entry, exc)
    return tuple(ranges) or None


def serialize_color_ranges(ranges: ColorRanges) -> list[dict[str, Any]]:
    """Return ``ranges`` as a list of ``{start, end, color}`` records."""

    if not ranges:
        return []
    return [entry.to_dict() for entry in ranges]


__all__ = ["ColorRange", "ColorRanges", "coerce_color_ranges", "serialize_color_ranges"]
