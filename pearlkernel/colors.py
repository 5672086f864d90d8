"""Text-mode colour attributes."""

from enum import IntEnum
from itertools import product

TRANSPARENT = 0x00


class Color(IntEnum):
    """The sixteen text-mode colours."""

    BLACK = 0x0
    BLUE = 0x1
    GREEN = 0x2
    CYAN = 0x3
    RED = 0x4
    PURPLE = 0x5
    BROWN = 0x6
    GRAY = 0x7
    DARK_GRAY = 0x8
    LIGHT_BLUE = 0x9
    LIGHT_GREEN = 0xA
    LIGHT_CYAN = 0xB
    LIGHT_RED = 0xC
    LIGHT_PURPLE = 0xD
    YELLOW = 0xE
    WHITE = 0xF


def attribute(foreground: int, background: int) -> int:
    """Combine a foreground and background colour into one attribute byte."""
    for value in (foreground, background):
        if not 0 <= value <= 0xF:
            raise ValueError(f"colour out of range: {value!r}")
    return (background << 4) | foreground


COMBINATIONS: dict[str, int] = {
    f"{fg.name}_ON_{bg.name}": attribute(fg, bg)
    for bg, fg in product(Color, Color)
    if fg is not bg
}

GREEN_ON_BLACK = attribute(Color.GREEN, Color.BLACK)
RED_ON_BLACK = attribute(Color.RED, Color.BLACK)
WHITE_ON_BLACK = attribute(Color.WHITE, Color.BLACK)
BLACK_ON_WHITE = attribute(Color.BLACK, Color.WHITE)
WHITE_ON_BLUE = attribute(Color.WHITE, Color.BLUE)