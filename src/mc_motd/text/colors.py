"""Static ANSI lookup tables for Minecraft named colors and legacy codes."""

from __future__ import annotations

import re
from types import MappingProxyType

RESET = "\033[0m"

NAMED_COLORS = MappingProxyType(
    {
        "black": "\033[30m",
        "dark_blue": "\033[34m",
        "dark_green": "\033[32m",
        "dark_aqua": "\033[36m",
        "dark_red": "\033[31m",
        "dark_purple": "\033[35m",
        "gold": "\033[33m",
        "gray": "\033[37m",
        "dark_gray": "\033[90m",
        "blue": "\033[94m",
        "green": "\033[92m",
        "aqua": "\033[96m",
        "red": "\033[91m",
        "light_purple": "\033[95m",
        "yellow": "\033[93m",
        "white": "\033[97m",
    }
)

# xterm RGB values of the escapes above, used for nearest-color matching.
ESCAPE_RGB = MappingProxyType(
    {
        "\033[30m": (0, 0, 0),
        "\033[31m": (205, 0, 0),
        "\033[32m": (0, 205, 0),
        "\033[33m": (205, 205, 0),
        "\033[34m": (0, 0, 238),
        "\033[35m": (205, 0, 205),
        "\033[36m": (0, 205, 205),
        "\033[37m": (229, 229, 229),
        "\033[90m": (127, 127, 127),
        "\033[91m": (255, 0, 0),
        "\033[92m": (0, 255, 0),
        "\033[93m": (255, 255, 0),
        "\033[94m": (92, 92, 255),
        "\033[95m": (255, 0, 255),
        "\033[96m": (0, 255, 255),
        "\033[97m": (255, 255, 255),
    }
)

PALETTE = tuple((name, ESCAPE_RGB[escape]) for name, escape in NAMED_COLORS.items())

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")
_LEGACY_COLOR_NAMES = "0123456789abcdef"

LEGACY_CODES = MappingProxyType(
    {
        **{code: NAMED_COLORS[name] for code, (name, _) in zip(_LEGACY_COLOR_NAMES, PALETTE)},
        "l": "\033[1m",
        "o": "\033[3m",
        "n": "\033[4m",
        "m": "\033[9m",
        "r": RESET,
    }
)


def parse_hex(value: str) -> tuple[int, int, int] | None:
    """Decode ``#RRGGBB``; anything else yields ``None``."""
    if not _HEX_COLOR.fullmatch(value):
        return None
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def nearest_named_color(rgb: tuple[int, int, int]) -> str:
    """Closest palette entry by squared RGB distance; the first minimum wins ties."""
    best_name, best_distance = PALETTE[0][0], None
    for name, (r, g, b) in PALETTE:
        distance = (rgb[0] - r) ** 2 + (rgb[1] - g) ** 2 + (rgb[2] - b) ** 2
        if best_distance is None or distance < best_distance:
            best_name, best_distance = name, distance
    return best_name


def truecolor_escape(rgb: tuple[int, int, int]) -> str:
    return "\033[38;2;{};{};{}m".format(*rgb)
