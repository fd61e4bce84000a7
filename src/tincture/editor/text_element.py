"""Immutable text element state carrying color overrides."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterable, Mapping

from ..core.ranges import ColorRange, ColorRanges, coerce_color_ranges, serialize_color_ranges
from ..render.colors import ColorFilter, ColorSegment, get_per_char_colors, iter_line_segments
from ..theme.filters import apply_dark_mode_filter
from ..theme.models import Appearance
from .color_ranges import apply_color_to_range, cleanup_color_ranges, shift_color_ranges
from .edits import TextEdit, compute_text_edit

__all__ = ["DEFAULT_STROKE_COLOR", "TextElement", "WrapFunction"]

LOGGER = logging.getLogger(__name__)

DEFAULT_STROKE_COLOR = "#1e1e1e"

WrapFunction = Callable[[str], str]
"""Turns logical text into wrapped text by inserting characters or turning spaces into newlines."""


def _identity_wrap(text: str) -> str:
    return text


def _canonical_ranges(
    ranges: Iterable[ColorRange] | None, text_length: int, stroke_color: str
) -> ColorRanges:
    if ranges is None:
        return None
    overrides = [ColorRange.from_value(entry) for entry in ranges]
    kept = [entry for entry in overrides if entry.color != stroke_color]
    return cleanup_color_ranges(kept, text_length) or None


@dataclass(slots=True, frozen=True)
class TextElement:
    """Text element fields consumed by the color range helpers.

    ``original_text`` is the logical string the user edits; ``text`` is the
    same string after wrapping. Every method returns a new element.

    ``color_ranges`` is stored in canonical form whatever the caller passes:
    overrides equal to ``stroke_color`` are dropped, the rest are clamped to
    the logical text, sorted and merged, and an empty result becomes ``None``.
    """

    original_text: str = ""
    text: str | None = None
    stroke_color: str = DEFAULT_STROKE_COLOR
    color_ranges: ColorRanges = field(default=None)

    def __post_init__(self) -> None:
        if self.text is None:
            object.__setattr__(self, "text", self.original_text)
        object.__setattr__(
            self,
            "color_ranges",
            _canonical_ranges(self.color_ranges, len(self.original_text), self.stroke_color),
        )

    @property
    def has_color_overrides(self) -> bool:
        return self.color_ranges is not None

    def paint(self, start: int, end: int, color: str) -> TextElement:
        """Return a copy with ``color`` painted over ``[start, end)`` of the logical text."""

        painted = apply_color_to_range(self.color_ranges, start, end, color, self.stroke_color)
        painted_element = replace(self, color_ranges=painted)
        LOGGER.debug(
            "Painted %s over [%d, %d): %d range(s) stored",
            color,
            start,
            end,
            len(painted_element.color_ranges or ()),
        )
        return painted_element

    def apply_edit(
        self,
        edit_start: int,
        inserted_text: str,
        deleted_length: int,
        *,
        wrap: WrapFunction | None = None,
    ) -> TextElement:
        """Replace ``deleted_length`` characters at ``edit_start`` with ``inserted_text``."""

        edit_start = min(max(0, edit_start), len(self.original_text))
        deleted_length = min(max(0, deleted_length), len(self.original_text) - edit_start)
        edit = TextEdit(edit_start, len(inserted_text), deleted_length)
        return self._with_edit(edit, edit.apply(self.original_text, inserted_text), wrap)

    def with_original_text(
        self,
        new_text: str,
        *,
        caret: int | None = None,
        wrap: WrapFunction | None = None,
    ) -> TextElement:
        """Return a copy holding ``new_text``, shifting ranges by the derived edit."""

        edit = compute_text_edit(self.original_text, new_text, caret=caret)
        return self._with_edit(edit, new_text, wrap)

    def _with_edit(self, edit: TextEdit, new_text: str, wrap: WrapFunction | None) -> TextElement:
        shifted = shift_color_ranges(
            self.color_ranges, edit.start, edit.inserted_length, edit.deleted_length
        )
        wrapped = (wrap or _identity_wrap)(new_text)
        edited = replace(self, original_text=new_text, text=wrapped, color_ranges=shifted)
        LOGGER.debug(
            "Edit at %d (+%d/-%d) left %d color range(s)",
            edit.start,
            edit.inserted_length,
            edit.deleted_length,
            len(edited.color_ranges or ()),
        )
        return edited

    def with_wrapped_text(self, text: str) -> TextElement:
        return replace(self, text=text)

    def with_stroke_color(self, color: str) -> TextElement:
        """Return a copy using ``color`` as base color, dropping overrides equal to it."""

        return replace(self, stroke_color=color)

    def per_char_colors(
        self,
        theme: Appearance = "light",
        dark_mode_filter: ColorFilter | None = None,
    ) -> list[str] | None:
        return get_per_char_colors(self, theme, dark_mode_filter)

    def line_segments(
        self,
        theme: Appearance = "light",
        dark_mode_filter: ColorFilter | None = None,
    ) -> list[list[ColorSegment]]:
        """Return the draw segments of every wrapped line."""

        color_filter = dark_mode_filter or apply_dark_mode_filter
        default_color = color_filter(self.stroke_color) if theme == "dark" else self.stroke_color
        colors = get_per_char_colors(self, theme, color_filter)
        return list(iter_line_segments(self.text or "", colors, default_color))

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "originalText": self.original_text,
            "text": self.text,
            "strokeColor": self.stroke_color,
        }
        if self.color_ranges:
            payload["colorRanges"] = serialize_color_ranges(self.color_ranges)
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> TextElement:
        original_text = str(payload.get("originalText") or payload.get("text") or "")
        text = payload.get("text")
        ranges = coerce_color_ranges(payload.get("colorRanges"))
        return cls(
            original_text=original_text,
            text=str(text) if text is not None else None,
            stroke_color=str(payload.get("strokeColor") or DEFAULT_STROKE_COLOR),
            color_ranges=ranges,
        )
