"""Builders and readers for the handshake, status and ping/pong packets."""

from __future__ import annotations

import io
import struct

from mc_motd.errors import FormatError, ProtocolError

from .varint import ByteSource, decode_varint, encode_varint, read_exact

HANDSHAKE_PACKET_ID = 0x00
STATUS_PACKET_ID = 0x00
PING_PACKET_ID = 0x01
NEXT_STATE_STATUS = 1

# length=1, packet-ID=0
STATUS_REQUEST = b"\x01\x00"

_PORT = struct.Struct(">H")
_TIMESTAMP = struct.Struct(">q")


def frame(payload: bytes) -> bytes:
    return encode_varint(len(payload)) + payload


def build_handshake(host: str, port: int, protocol_version: int) -> bytes:
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")

    host_bytes = host.encode("utf-8")
    payload = b"".join(
        (
            encode_varint(HANDSHAKE_PACKET_ID),
            encode_varint(protocol_version),
            encode_varint(len(host_bytes)),
            host_bytes,
            _PORT.pack(port),
            encode_varint(NEXT_STATE_STATUS),
        )
    )
    return frame(payload)


def build_ping(timestamp_ms: int) -> bytes:
    return frame(encode_varint(PING_PACKET_ID) + _TIMESTAMP.pack(timestamp_ms))


def _read_packet(source: ByteSource) -> io.BytesIO:
    length = decode_varint(source)
    if length == 0:
        raise ProtocolError("empty packet")
    return io.BytesIO(read_exact(source, length))


def read_status_response(source: ByteSource) -> str:
    """Read the framed status response and return its JSON document as text."""
    payload = _read_packet(source)
    packet_id = decode_varint(payload)
    if packet_id != STATUS_PACKET_ID:
        raise ProtocolError(f"unexpected status response ID {packet_id:#04x}")

    json_length = decode_varint(payload)
    remaining = len(payload.getbuffer()) - payload.tell()
    if json_length > remaining:
        raise ProtocolError(f"declared JSON length {json_length} exceeds packet payload ({remaining} bytes)")

    raw = read_exact(payload, json_length)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError(f"status JSON is not valid UTF-8: {exc}", phase="status") from exc


def read_pong(source: ByteSource) -> int:
    """Read the pong packet and return the echoed timestamp."""
    payload = _read_packet(source)
    packet_id = decode_varint(payload)
    if packet_id != PING_PACKET_ID:
        raise ProtocolError(f"unexpected ping response ID {packet_id:#04x}")
    (echoed,) = _TIMESTAMP.unpack(read_exact(payload, _TIMESTAMP.size))
    return echoed
