"""Color value helpers shared by the theme filters."""

from __future__ import annotations

from typing import Any, Literal, Sequence, Tuple

ColorTuple = Tuple[int, int, int]
Appearance = Literal["light", "dark"]
APPEARANCES: tuple[str, ...] = ("light", "dark")


def _clamp_channel(value: Any) -> int:
    channel = int(value)
    if channel < 0:
        return 0
    if channel > 255:
        return 255
    return channel


def normalize_color(value: Any) -> ColorTuple:
    """Convert ``value`` into an RGB tuple, accepting hex strings or sequences."""

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Color strings cannot be empty")
        if text.startswith("#"):
            text = text[1:]
        if "," in text:
            parts = [part.strip() for part in text.split(",") if part.strip()]
            if len(parts) != 3:
                raise ValueError(f"Color '{value}' must have exactly 3 components")
            return tuple(_clamp_channel(int(part, 0)) for part in parts)  # type: ignore[return-value]
        if len(text) in (3, 6):
            if len(text) == 3:
                text = "".join(ch * 2 for ch in text)
            return tuple(int(text[i : i + 2], 16) for i in range(0, 6, 2))  # type: ignore[return-value]
        raise ValueError(f"Unsupported color format: {value!r}")

    if isinstance(value, Sequence):
        items = list(value)
        if len(items) != 3:
            raise ValueError(f"RGB sequences must contain 3 values, received {value!r}")
        return tuple(_clamp_channel(component) for component in items)  # type: ignore[return-value]

    raise TypeError(f"Cannot convert {type(value)!r} to an RGB color")


def tuple_to_hex(value: ColorTuple) -> str:
    return "#" + "".join(f"{component:02x}" for component in value)


__all__ = ["APPEARANCES", "Appearance", "ColorTuple", "normalize_color", "tuple_to_hex"]
