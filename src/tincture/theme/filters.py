"""Dark-mode color transform matching the canvas ``invert(93%) hue-rotate(180deg)`` filter."""

from __future__ import annotations

import logging
import math
from functools import lru_cache

from .models import Appearance, ColorTuple, normalize_color, tuple_to_hex

__all__ = ["Appearance", "apply_dark_mode_filter", "invert_and_rotate"]

LOGGER = logging.getLogger(__name__)

_INVERT_AMOUNT = 0.93
_HUE_ROTATION_DEGREES = 180.0


def _hue_rotate_matrix(degrees: float) -> tuple[tuple[float, float, float], ...]:
    angle = math.radians(degrees)
    cos = math.cos(angle)
    sin = math.sin(angle)
    return (
        (
            0.213 + cos * 0.787 - sin * 0.213,
            0.715 - cos * 0.715 - sin * 0.715,
            0.072 - cos * 0.072 + sin * 0.928,
        ),
        (
            0.213 - cos * 0.213 + sin * 0.143,
            0.715 + cos * 0.285 + sin * 0.140,
            0.072 - cos * 0.072 - sin * 0.283,
        ),
        (
            0.213 - cos * 0.213 - sin * 0.787,
            0.715 - cos * 0.715 + sin * 0.715,
            0.072 + cos * 0.928 + sin * 0.072,
        ),
    )


_HUE_MATRIX = _hue_rotate_matrix(_HUE_ROTATION_DEGREES)


def invert_and_rotate(rgb: ColorTuple) -> ColorTuple:
    """Apply the partial inversion followed by the hue rotation to ``rgb``."""

    inverted = [_INVERT_AMOUNT + (channel / 255.0) * (1.0 - 2.0 * _INVERT_AMOUNT) for channel in rgb]
    rotated = []
    for row in _HUE_MATRIX:
        value = sum(weight * channel for weight, channel in zip(row, inverted))
        rotated.append(round(min(1.0, max(0.0, value)) * 255))
    return (rotated[0], rotated[1], rotated[2])


@lru_cache(maxsize=512)
def apply_dark_mode_filter(color: str) -> str:
    """Return the dark-theme rendition of the hex ``color``.

    An ``#rrggbbaa`` alpha channel is carried over. Colors that are not hex
    (named colors, ``transparent``) are returned unchanged.
    """

    text = color.strip()
    alpha = ""
    if text.startswith("#") and len(text) == 9:
        text, alpha = text[:7], text[7:]
    try:
        rgb = normalize_color(text)
    except (TypeError, ValueError) as exc:
        LOGGER.debug("Leaving color %r unfiltered: %s", color, exc)
        return color
    return tuple_to_hex(invert_and_rotate(rgb)) + alpha.lower()
