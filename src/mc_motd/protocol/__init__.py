"""Server list ping wire protocol."""

from .client import DEFAULT_PROTOCOL_VERSION, StatusClient, StatusQuery, query_status
from .packets import STATUS_REQUEST, build_handshake, build_ping, frame, read_pong, read_status_response
from .varint import decode_varint, encode_varint, read_exact

__all__ = [
    "DEFAULT_PROTOCOL_VERSION",
    "STATUS_REQUEST",
    "StatusClient",
    "StatusQuery",
    "build_handshake",
    "build_ping",
    "decode_varint",
    "encode_varint",
    "frame",
    "query_status",
    "read_exact",
    "read_pong",
    "read_status_response",
]
