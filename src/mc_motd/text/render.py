"""Plain and ANSI-colored projections of a MOTD description."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from .colors import LEGACY_CODES, NAMED_COLORS, RESET, nearest_named_color, parse_hex, truecolor_escape
from .components import ChatComponent, Description, LegacyText, TextLeaf, parse_description

HexMode = Literal["truecolor", "nearest"]

LEGACY_MARKER = "§"


def color_escape(color: str | None, hex_mode: HexMode = "truecolor") -> str:
    """ANSI escape for a named or ``#RRGGBB`` color; unknown values map to ``""``."""
    if not color:
        return ""
    if color.startswith("#"):
        rgb = parse_hex(color)
        if rgb is None:
            return ""
        if hex_mode == "nearest":
            return NAMED_COLORS[nearest_named_color(rgb)]
        return truecolor_escape(rgb)
    return NAMED_COLORS.get(color, "")


def substitute_legacy_codes(text: str) -> str:
    """Replace ``§<code>`` pairs with escapes; unknown pairs pass through untouched."""
    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == LEGACY_MARKER and index + 1 < len(text):
            escape = LEGACY_CODES.get(text[index + 1])
            if escape is not None:
                out.append(escape)
                index += 2
                continue
        out.append(char)
        index += 1
    return "".join(out)


def _coerce(description: Any) -> Description:
    if isinstance(description, (ChatComponent, LegacyText)):
        return description
    return parse_description(description)


def _collect_plain(component: ChatComponent, out: list[str]) -> None:
    out.append(component.text)
    for child in component.extra:
        if isinstance(child, TextLeaf):
            out.append(child.text)
        else:
            _collect_plain(child, out)


def _collect_colored(component: ChatComponent, out: list[str], hex_mode: HexMode, inherited: str) -> None:
    own = color_escape(component.color, hex_mode)
    active = own or inherited
    out.append(own)
    out.append(substitute_legacy_codes(component.text))

    last = len(component.extra) - 1
    for index, child in enumerate(component.extra):
        if isinstance(child, TextLeaf):
            out.append(substitute_legacy_codes(child.text))
            continue
        _collect_colored(child, out, hex_mode, active)
        # the child ended with a reset; later siblings still inherit this node's color
        if active and index < last:
            out.append(active)

    out.append(RESET)


def render_plain(description: Any) -> str:
    """Text content only; legacy strings come back verbatim, ``§`` codes included."""
    parsed = _coerce(description)
    if isinstance(parsed, LegacyText):
        return parsed.text
    out: list[str] = []
    _collect_plain(parsed, out)
    return "".join(out)


def render_colored(description: Any, hex_mode: HexMode = "truecolor") -> str:
    parsed = _coerce(description)
    if isinstance(parsed, LegacyText):
        return substitute_legacy_codes(parsed.text) + RESET
    out: list[str] = []
    _collect_colored(parsed, out, hex_mode, "")
    return "".join(out)


@dataclass(slots=True, frozen=True)
class MotdRenderer:
    """Binds a hex color mode to both projections."""

    hex_mode: HexMode = "truecolor"

    def plain(self, description: Any) -> str:
        return render_plain(description)

    def colored(self, description: Any) -> str:
        return render_colored(description, self.hex_mode)
