"""Error taxonomy shared by the protocol engine, status parser and renderer."""

from __future__ import annotations


class MotdError(Exception):
    """Base class for every failure surfaced by a status query."""

    def __init__(self, message: str, *, phase: str | None = None) -> None:
        super().__init__(message)
        self.phase = phase

    def describe(self) -> str:
        if self.phase:
            return f"{self.phase} failed: {self}"
        return str(self)


class StatusConnectionError(MotdError, ConnectionError):
    """Raised when the TCP connection cannot be opened or an I/O deadline expires."""


class ProtocolError(MotdError):
    """Raised when the server sends bytes that do not follow the status protocol."""


class TruncatedStreamError(ProtocolError, OSError):
    """Raised when the stream ends before a value is complete."""


class FormatError(MotdError, ValueError):
    """Raised when the status JSON or a chat component has an unexpected shape."""


class AddressError(MotdError, ValueError):
    """Raised for a malformed ``host[:port]`` argument."""
