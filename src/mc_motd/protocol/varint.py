"""VarInt codec used by every length and packet-ID field of the protocol."""

from __future__ import annotations

from typing import Protocol

from mc_motd.errors import ProtocolError, TruncatedStreamError

MAX_VARINT_BYTES = 5
# the fifth byte may only carry the top 4 bits of a 32-bit value
_LAST_BYTE_MAX = 0x0F


class ByteSource(Protocol):
    """Anything exposing a blocking ``read(n)`` (socket files, ``io.BytesIO``)."""

    def read(self, size: int = -1, /) -> bytes:
        ...


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as little-endian base-128."""
    if value < 0:
        raise ValueError(f"VarInt value must be non-negative, got {value}")

    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            byte |= 0x80
        out.append(byte)
        if not value:
            return bytes(out)


def decode_varint(source: ByteSource) -> int:
    """Read one VarInt, one byte at a time."""
    result = 0
    for index in range(MAX_VARINT_BYTES):
        chunk = source.read(1)
        if not chunk:
            raise TruncatedStreamError(f"stream ended after {index} VarInt byte(s)")
        byte = chunk[0]
        if index == MAX_VARINT_BYTES - 1 and byte > _LAST_BYTE_MAX:
            raise ProtocolError("VarInt too long")
        result |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return result
    raise ProtocolError("VarInt too long")


def read_exact(source: ByteSource, size: int) -> bytes:
    """Read exactly ``size`` bytes or fail with :class:`TruncatedStreamError`."""
    buffer = bytearray()
    while len(buffer) < size:
        chunk = source.read(size - len(buffer))
        if not chunk:
            raise TruncatedStreamError(f"expected {size} bytes, stream ended after {len(buffer)}")
        buffer.extend(chunk)
    return bytes(buffer)
