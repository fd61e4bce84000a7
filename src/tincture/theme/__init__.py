"""Theme helpers for adjusting colors to the active appearance."""

from .models import APPEARANCES, Appearance, ColorTuple, normalize_color, tuple_to_hex
from .filters import apply_dark_mode_filter, invert_and_rotate

__all__ = [
    "APPEARANCES",
    "Appearance",
    "ColorTuple",
    "apply_dark_mode_filter",
    "invert_and_rotate",
    "normalize_color",
    "tuple_to_hex",
]
