"""
ITE 8291r2 - user-facing value types and their parsers.

Each value keeps the level the user typed and resolves it to the byte the
controller understands. Parsers raise ValueError on anything outside the
accepted set.
"""

import enum
import re
from dataclasses import dataclass
from typing import NamedTuple

from ite8291r2.protocol import (BRIGHTNESS_VALUES, SPEED_VALUES,
                                DIRECTION_LEFT, DIRECTION_RIGHT)

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


def _parse_level(text, table, label):
    """Parse a 1-based level against a value table."""
    try:
        level = int(text)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be an integer 1-{len(table)}, got '{text}'") from None
    if not 1 <= level <= len(table):
        raise ValueError(f"{label} must be 1-{len(table)}, got {level}")
    return level


@dataclass(frozen=True)
class Brightness:
    level: int

    @property
    def value(self) -> int:
        return BRIGHTNESS_VALUES[self.level - 1]

    def __str__(self):
        return f"0x{self.value:02X}"


@dataclass(frozen=True)
class Speed:
    level: int

    @property
    def value(self) -> int:
        return SPEED_VALUES[self.level - 1]

    def __str__(self):
        return f"0x{self.value:02X}"


class Color(NamedTuple):
    red: int
    green: int
    blue: int

    def __str__(self):
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


NAMED_COLORS = {
    "red":   Color(0xFF, 0x00, 0x00),
    "green": Color(0x00, 0xFF, 0x00),
    "blue":  Color(0x00, 0x00, 0xFF),
}


class Direction(enum.Enum):
    LEFT = DIRECTION_LEFT
    RIGHT = DIRECTION_RIGHT

    def __str__(self):
        return self.name.lower()


def parse_brightness(text):
    """Parse a brightness level (1-5) into a Brightness."""
    return Brightness(_parse_level(text, BRIGHTNESS_VALUES, "brightness"))


def parse_speed(text):
    """Parse a speed level (1-5, 5 is fastest) into a Speed."""
    return Speed(_parse_level(text, SPEED_VALUES, "speed"))


def parse_color(text):
    """Parse a color name (red/green/blue) or '#RRGGBB' into a Color.

    Names are case-insensitive. Hex must be exactly 7 characters including
    the leading '#'.
    """
    if text.startswith("#"):
        if not _HEX_COLOR.fullmatch(text):
            raise ValueError(f"expected #RRGGBB, got '{text}'")
        return Color(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))
    try:
        return NAMED_COLORS[text.lower()]
    except KeyError:
        names = ", ".join(NAMED_COLORS)
        raise ValueError(f"unknown color '{text}' (use {names} or #RRGGBB)") from None


def parse_direction(text):
    """Parse 'left' or 'right' (any case) into a Direction."""
    try:
        return Direction[text.upper()]
    except KeyError:
        raise ValueError(f"direction must be left or right, got '{text}'") from None
