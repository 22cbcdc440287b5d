"""Address parsing plus SRV and IP lookups performed before a query."""

from __future__ import annotations

import ipaddress
import logging
import socket
from dataclasses import dataclass, replace
from typing import Any, Callable

import dns.exception
import dns.resolver

from .errors import AddressError

DEFAULT_PORT = 25565
SRV_PREFIX = "_minecraft._tcp."

logger = logging.getLogger("mc_motd.address")


@dataclass(slots=True, frozen=True)
class ServerAddress:
    host: str
    port: int
    explicit_port: bool = False
    from_srv: bool = False


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as exc:
        raise AddressError(f"invalid port: {raw!r}") from exc
    if not 0 < port <= 0xFFFF:
        raise AddressError(f"port out of range: {port}")
    return port


def parse_address(value: str, default_port: int = DEFAULT_PORT) -> ServerAddress:
    """Split ``host[:port]``; IPv6 hosts need brackets to carry a port."""
    value = value.strip()
    if not value:
        raise AddressError("empty server address")

    if value.startswith("["):
        host, sep, rest = value[1:].partition("]")
        if not sep or not host:
            raise AddressError(f"unterminated IPv6 address: {value!r}")
        if not rest:
            return ServerAddress(host=host, port=default_port)
        if not rest.startswith(":"):
            raise AddressError(f"unexpected text after IPv6 address: {rest!r}")
        return ServerAddress(host=host, port=_parse_port(rest[1:]), explicit_port=True)

    if value.count(":") > 1:
        return ServerAddress(host=value, port=default_port)

    host, sep, raw_port = value.partition(":")
    if not host:
        raise AddressError(f"missing host in {value!r}")
    if not sep:
        return ServerAddress(host=host, port=default_port)
    return ServerAddress(host=host, port=_parse_port(raw_port), explicit_port=True)


def is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def resolve_srv(
    address: ServerAddress,
    resolve: Callable[[str, str], Any] = dns.resolver.resolve,
) -> ServerAddress:
    """Rewrite host/port from a ``_minecraft._tcp`` SRV record when one exists.

    Explicit ports and IP literals are never rewritten. Lookup failures keep
    the original address.
    """
    if address.explicit_port or is_ip_address(address.host):
        return address

    try:
        answer = resolve(SRV_PREFIX + address.host, "SRV")
    except dns.exception.DNSException as exc:
        logger.debug("srv_lookup_failed", extra={"host": address.host, "error": type(exc).__name__})
        return address

    records = sorted(answer, key=lambda record: (record.priority, -record.weight))
    if not records:
        return address

    record = records[0]
    target = record.target.to_text(omit_final_dot=True)
    logger.debug("srv_record_found", extra={"host": address.host, "target": target, "port": record.port})
    return replace(address, host=target, port=record.port, from_srv=True)


def lookup_ip(host: str) -> str | None:
    """First resolved IP for display purposes; ``None`` when resolution fails."""
    try:
        infos = socket.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    except OSError:
        return None
    return infos[0][4][0] if infos else None
