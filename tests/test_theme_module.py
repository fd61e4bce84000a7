"""Unit tests for color parsing and the dark-mode filter."""

from __future__ import annotations

import pytest

from tincture.theme import apply_dark_mode_filter, invert_and_rotate, normalize_color, tuple_to_hex


def test_normalize_color_accepts_hex_and_component_strings() -> None:
    assert normalize_color("#ffffff") == (255, 255, 255)
    assert normalize_color("#abc") == (170, 187, 204)
    assert normalize_color("10, 20, 300") == (10, 20, 255)
    assert normalize_color([1, -2, 3]) == (1, 0, 3)


@pytest.mark.parametrize("value", ["", "#12345", "1, 2"])
def test_normalize_color_rejects_malformed_strings(value: str) -> None:
    with pytest.raises(ValueError):
        normalize_color(value)


def test_normalize_color_rejects_unknown_types() -> None:
    with pytest.raises(TypeError):
        normalize_color(12)


def test_tuple_to_hex_formats_lowercase() -> None:
    assert tuple_to_hex((255, 0, 16)) == "#ff0010"


def test_dark_mode_filter_maps_black_and_white() -> None:
    assert apply_dark_mode_filter("#000000") == "#ededed"
    assert apply_dark_mode_filter("#FFF") == "#121212"


def test_dark_mode_filter_keeps_alpha_channel() -> None:
    assert apply_dark_mode_filter("#00000080") == "#ededed80"


@pytest.mark.parametrize("color", ["transparent", "red", "rgb(1, 2, 3)"])
def test_dark_mode_filter_leaves_unparseable_colors(color: str) -> None:
    assert apply_dark_mode_filter(color) == color


def test_invert_and_rotate_keeps_greys_grey() -> None:
    red, green, blue = invert_and_rotate((128, 128, 128))

    assert red == green == blue
