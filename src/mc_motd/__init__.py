"""Minecraft Java Edition server list ping client and MOTD renderer."""

from .errors import AddressError, FormatError, MotdError, ProtocolError, StatusConnectionError, TruncatedStreamError
from .protocol import StatusQuery, query_status
from .text import render_colored, render_plain

__all__ = [
    "AddressError",
    "FormatError",
    "MotdError",
    "ProtocolError",
    "StatusConnectionError",
    "StatusQuery",
    "TruncatedStreamError",
    "query_status",
    "render_colored",
    "render_plain",
]
