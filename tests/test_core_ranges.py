"""Tests for the ColorRange value type and its coercion helpers."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from tincture.core.ranges import ColorRange, coerce_color_ranges, serialize_color_ranges


def test_from_value_accepts_mappings_sequences_and_objects() -> None:
    expected = ColorRange(1, 4, "red")

    assert ColorRange.from_value({"start": 1, "end": 4, "color": "red"}) == expected
    assert ColorRange.from_value([1, 4, "red"]) == expected
    assert ColorRange.from_value(SimpleNamespace(start=1, end=4, color="red")) == expected
    assert ColorRange.from_value(expected) is expected


def test_from_value_coerces_numeric_strings() -> None:
    assert ColorRange.from_value({"start": "2", "end": 7.0, "color": "blue"}) == ColorRange(2, 7, "blue")


def test_from_value_rejects_missing_keys() -> None:
    with pytest.raises(ValueError, match="color"):
        ColorRange.from_value({"start": 0, "end": 3})


def test_from_value_rejects_unsupported_input() -> None:
    with pytest.raises(TypeError):
        ColorRange.from_value(42)
    with pytest.raises(ValueError):
        ColorRange.from_value([0, 1])
    with pytest.raises(ValueError):
        ColorRange.from_value({"start": "zero", "end": 1, "color": "red"})


def test_from_value_rejects_fractional_indices() -> None:
    with pytest.raises(ValueError, match="start"):
        ColorRange.from_value({"start": 3.7, "end": 9, "color": "red"})
    with pytest.raises(ValueError, match="end"):
        ColorRange(0, 2.5, "red")


def test_inverted_bounds_are_kept_for_later_cleanup() -> None:
    entry = ColorRange(8, 3, "red")

    assert (entry.start, entry.end) == (8, 3)
    assert entry.length == 0


def test_overlaps_uses_half_open_bounds() -> None:
    entry = ColorRange(2, 5, "red")

    assert entry.overlaps(4, 9)
    assert not entry.overlaps(5, 9)
    assert not entry.overlaps(0, 2)


def test_coerce_color_ranges_skips_malformed_records(caplog: pytest.LogCaptureFixture) -> None:
    payload = [
        {"start": 0, "end": 3, "color": "red"},
        {"start": 4, "color": "blue"},
        "garbage",
        {"start": 5, "end": 9, "color": "green"},
    ]

    with caplog.at_level(logging.WARNING, logger="tincture.core.ranges"):
        ranges = coerce_color_ranges(payload)

    assert ranges == (ColorRange(0, 3, "red"), ColorRange(5, 9, "green"))
    assert sum("Skipping malformed color range" in record.message for record in caplog.records) == 2


def test_coerce_color_ranges_folds_empty_input_to_none() -> None:
    assert coerce_color_ranges(None) is None
    assert coerce_color_ranges([]) is None
    assert coerce_color_ranges([{"start": 1}]) is None


def test_serialize_color_ranges_emits_records() -> None:
    ranges = (ColorRange(0, 3, "red"), ColorRange(5, 9, "green"))

    assert serialize_color_ranges(ranges) == [
        {"start": 0, "end": 3, "color": "red"},
        {"start": 5, "end": 9, "color": "green"},
    ]
    assert serialize_color_ranges(None) == []
