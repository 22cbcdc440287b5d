"""Blocking single-shot client for the server list ping exchange.

One query owns one TCP connection: handshake, status request, status
response, then a ping/pong round trip whose wall time is reported as latency.
Nothing is retried and the socket is closed on every exit path.
"""

from __future__ import annotations

import logging
import socket
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterator, Optional

from mc_motd.errors import MotdError, StatusConnectionError

from .packets import STATUS_REQUEST, build_handshake, build_ping, read_pong, read_status_response

DEFAULT_PROTOCOL_VERSION = 754

Connector = Callable[[tuple[str, int], Optional[float]], socket.socket]


@dataclass(slots=True)
class StatusQuery:
    """Raw status document plus the measured ping/pong round trip."""

    raw_json: str
    latency: timedelta

    @property
    def latency_ms(self) -> float:
        return self.latency / timedelta(milliseconds=1)


class _Deadline:
    def __init__(self, timeout: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.seconds: float | None = timeout if timeout > 0 else None
        self._expires_at = clock() + timeout if self.seconds is not None else None

    def remaining(self, phase: str) -> float | None:
        if self._expires_at is None:
            return None
        left = self._expires_at - self._clock()
        if left <= 0:
            raise StatusConnectionError("session deadline exceeded", phase=phase)
        return left


class StatusClient:
    """Runs the handshake/status/ping sequence against one server."""

    def __init__(
        self,
        *,
        timeout: float = 5.0,
        protocol_version: int = DEFAULT_PROTOCOL_VERSION,
        connector: Connector = socket.create_connection,
        logger: logging.Logger | None = None,
    ) -> None:
        if timeout < 0:
            raise ValueError("timeout must be >= 0")
        self._timeout = timeout
        self._protocol_version = protocol_version
        self._connector = connector
        self._logger = logger or logging.getLogger("mc_motd.protocol.client")

    def query(self, host: str, port: int) -> StatusQuery:
        deadline = _Deadline(self._timeout)
        sock = self._connect(host, port, deadline)

        with sock, sock.makefile("rb") as stream:
            with self._phase("handshake", sock, deadline):
                sock.sendall(build_handshake(host, port, self._protocol_version))
                sock.sendall(STATUS_REQUEST)
            self._logger.debug("status_request_sent", extra={"host": host, "port": port})

            with self._phase("status", sock, deadline):
                raw_json = read_status_response(stream)
            self._logger.debug("status_response_received", extra={"json_length": len(raw_json)})

            with self._phase("ping", sock, deadline):
                sent_at = int(time.time() * 1000)
                started = time.perf_counter()
                sock.sendall(build_ping(sent_at))
                echoed = read_pong(stream)
                elapsed = time.perf_counter() - started

        if echoed != sent_at:
            self._logger.debug("pong_timestamp_mismatch", extra={"sent": sent_at, "echoed": echoed})

        latency = timedelta(seconds=elapsed)
        self._logger.info("status_query_finished", extra={"host": host, "port": port, "latency_ms": elapsed * 1000})
        return StatusQuery(raw_json=raw_json, latency=latency)

    def _connect(self, host: str, port: int, deadline: _Deadline) -> socket.socket:
        self._logger.debug("connecting", extra={"host": host, "port": port, "timeout": deadline.seconds})
        try:
            return self._connector((host, port), deadline.seconds)
        except OSError as exc:
            raise StatusConnectionError(f"could not connect to {host}:{port}: {exc}", phase="connect") from exc

    @contextmanager
    def _phase(self, name: str, sock: socket.socket, deadline: _Deadline) -> Iterator[None]:
        sock.settimeout(deadline.remaining(name))
        try:
            yield
        except MotdError as exc:
            if exc.phase is None:
                exc.phase = name
            raise
        except socket.timeout as exc:
            raise StatusConnectionError("timed out waiting for the server", phase=name) from exc
        except OSError as exc:
            raise StatusConnectionError(str(exc) or type(exc).__name__, phase=name) from exc


def query_status(
    host: str,
    port: int = 25565,
    timeout: float = 5.0,
    *,
    protocol_version: int = DEFAULT_PROTOCOL_VERSION,
) -> StatusQuery:
    """Query one server and return its raw status JSON and ping latency."""
    return StatusClient(timeout=timeout, protocol_version=protocol_version).query(host, port)
