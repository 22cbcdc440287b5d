"""Typed view over the raw status JSON returned by the server."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .errors import FormatError


@dataclass(slots=True)
class ServerStatus:
    version_name: str
    protocol: int
    players_online: int
    players_max: int
    description: Any = ""
    raw: dict[str, Any] = field(default_factory=dict)


def _section(document: dict[str, Any], key: str) -> dict[str, Any]:
    value = document.get(key)
    if not isinstance(value, dict):
        raise FormatError(f"status field '{key}' must be an object", phase="parse")
    return value


def _integer(section: dict[str, Any], key: str, owner: str) -> int:
    value = section.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"status field '{owner}.{key}' must be an integer", phase="parse")
    return value


def parse_status(raw_json: str) -> ServerStatus:
    try:
        document = json.loads(raw_json)
    except json.JSONDecodeError as exc:
        raise FormatError(f"status response is not valid JSON: {exc}", phase="parse") from exc

    if not isinstance(document, dict):
        raise FormatError("status response must be a JSON object", phase="parse")

    version = _section(document, "version")
    players = _section(document, "players")
    name = version.get("name")
    if not isinstance(name, str):
        raise FormatError("status field 'version.name' must be a string", phase="parse")

    return ServerStatus(
        version_name=name,
        protocol=_integer(version, "protocol", "version"),
        players_online=_integer(players, "online", "players"),
        players_max=_integer(players, "max", "players"),
        description=document.get("description", ""),
        raw=document,
    )
