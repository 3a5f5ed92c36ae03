"""The sixteen-colour PICO-8 palette."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


_P8_PALETTE: tuple[Color, ...] = (
    Color(0, 0, 0, 255),  # black
    Color(29, 43, 83, 255),  # dark blue
    Color(126, 37, 83, 255),  # dark purple
    Color(0, 135, 81, 255),  # dark green
    Color(171, 82, 54, 255),  # brown
    Color(95, 87, 79, 255),  # dark gray
    Color(194, 195, 199, 255),  # light gray
    Color(255, 241, 232, 255),  # white
    Color(255, 0, 77, 255),  # red
    Color(255, 163, 0, 255),  # orange
    Color(255, 236, 39, 255),  # yellow
    Color(0, 228, 54, 255),  # green
    Color(41, 173, 255, 255),  # blue
    Color(131, 118, 156, 255),  # lavender
    Color(255, 119, 168, 255),  # pink
    Color(255, 204, 170, 255),  # light peach
)


def p8_palette_get(index: int) -> Color:
    """Return the palette colour at ``index``, wrapping around the palette."""
    if index < 0:
        raise ValueError("palette index must not be negative")
    return _P8_PALETTE[index % len(_P8_PALETTE)]