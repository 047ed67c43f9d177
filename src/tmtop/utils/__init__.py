"""String utilities for dashboard cells."""

from .padding import char_width, display_width, left_pad_and_trim, right_pad_and_trim

__all__ = [
    "char_width",
    "display_width",
    "left_pad_and_trim",
    "right_pad_and_trim",
]
