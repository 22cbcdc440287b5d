"""MOTD rich-text model and renderers."""

from .colors import LEGACY_CODES, NAMED_COLORS, PALETTE, RESET, nearest_named_color
from .components import ChatComponent, ChatNode, Description, LegacyText, TextLeaf, parse_description, parse_node
from .render import HexMode, MotdRenderer, color_escape, render_colored, render_plain, substitute_legacy_codes

__all__ = [
    "LEGACY_CODES",
    "NAMED_COLORS",
    "PALETTE",
    "RESET",
    "ChatComponent",
    "ChatNode",
    "Description",
    "HexMode",
    "LegacyText",
    "MotdRenderer",
    "TextLeaf",
    "color_escape",
    "nearest_named_color",
    "parse_description",
    "parse_node",
    "render_colored",
    "render_plain",
    "substitute_legacy_codes",
]
