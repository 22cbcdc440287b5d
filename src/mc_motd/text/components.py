"""Chat-component tree decoded from the status ``description`` field."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from mc_motd.errors import FormatError


@dataclass(slots=True, frozen=True)
class TextLeaf:
    """Bare string child of a component."""

    text: str


@dataclass(slots=True, frozen=True)
class ChatComponent:
    text: str = ""
    color: str | None = None
    extra: tuple["ChatNode", ...] = field(default_factory=tuple)


ChatNode = Union[ChatComponent, TextLeaf]


@dataclass(slots=True, frozen=True)
class LegacyText:
    """Plain-string description that may embed ``§`` formatting codes."""

    text: str


Description = Union[ChatComponent, LegacyText]


def parse_component(value: dict[str, Any]) -> ChatComponent:
    text = value.get("text", "")
    if not isinstance(text, str):
        raise FormatError(f"component 'text' must be a string, got {type(text).__name__}")

    color = value.get("color")
    if color is not None and not isinstance(color, str):
        raise FormatError(f"component 'color' must be a string, got {type(color).__name__}")

    raw_extra = value.get("extra", [])
    if not isinstance(raw_extra, list):
        raise FormatError(f"component 'extra' must be a list, got {type(raw_extra).__name__}")

    return ChatComponent(text=text, color=color, extra=tuple(parse_node(child) for child in raw_extra))


def parse_node(value: Any) -> ChatNode:
    """Decide between string leaf and object node before decoding any fields."""
    if isinstance(value, str):
        return TextLeaf(value)
    if isinstance(value, dict):
        return parse_component(value)
    raise FormatError(f"chat component must be a string or an object, got {type(value).__name__}")


def parse_description(value: Any) -> Description:
    if isinstance(value, str):
        return LegacyText(value)
    if isinstance(value, dict):
        return parse_component(value)
    raise FormatError(f"description must be a string or an object, got {type(value).__name__}")
