from __future__ import annotations

import types

import dns.resolver
import pytest

from mc_motd.address import ServerAddress, lookup_ip, parse_address, resolve_srv
from mc_motd.errors import AddressError


def _srv(target: str, port: int, priority: int = 0, weight: int = 0):
    return types.SimpleNamespace(
        target=types.SimpleNamespace(to_text=lambda omit_final_dot=False: target if omit_final_dot else target + "."),
        port=port,
        priority=priority,
        weight=weight,
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("mc.example.com", ServerAddress("mc.example.com", 25565)),
        ("mc.example.com:25570", ServerAddress("mc.example.com", 25570, explicit_port=True)),
        ("[::1]:25566", ServerAddress("::1", 25566, explicit_port=True)),
        ("[2001:db8::1]", ServerAddress("2001:db8::1", 25565)),
        ("2001:db8::1", ServerAddress("2001:db8::1", 25565)),
        ("  localhost  ", ServerAddress("localhost", 25565)),
    ],
)
def test_parse_address(value: str, expected: ServerAddress) -> None:
    assert parse_address(value) == expected


def test_parse_address_custom_default_port() -> None:
    assert parse_address("host", default_port=1234).port == 1234


@pytest.mark.parametrize("value", ["", "host:abc", "host:0", "host:70000", ":25565", "[::1", "[::1]x"])
def test_parse_address_rejects_bad_input(value: str) -> None:
    with pytest.raises(AddressError):
        parse_address(value)


def test_srv_record_rewrites_host_and_port() -> None:
    queries: list[tuple[str, str]] = []

    def resolve(qname: str, rdtype: str):
        queries.append((qname, rdtype))
        return [_srv("backup.example.net", 25600, priority=10), _srv("play.example.net", 25599, priority=1)]

    resolved = resolve_srv(parse_address("example.net"), resolve=resolve)

    assert queries == [("_minecraft._tcp.example.net", "SRV")]
    assert resolved == ServerAddress("play.example.net", 25599, from_srv=True)


def test_srv_lookup_failure_keeps_address() -> None:
    def resolve(qname: str, rdtype: str):
        raise dns.resolver.NXDOMAIN()

    address = parse_address("example.net")

    assert resolve_srv(address, resolve=resolve) is address


@pytest.mark.parametrize("value", ["example.net:25565", "127.0.0.1", "[::1]"])
def test_srv_skipped_for_explicit_port_and_ip(value: str) -> None:
    def resolve(qname: str, rdtype: str):
        raise AssertionError("SRV lookup should not happen")

    address = parse_address(value)

    assert resolve_srv(address, resolve=resolve) is address


def test_lookup_ip_for_literal() -> None:
    assert lookup_ip("127.0.0.1") == "127.0.0.1"


def test_lookup_ip_unresolvable(monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise OSError("no such host")

    monkeypatch.setattr("mc_motd.address.socket.getaddrinfo", fail)

    assert lookup_ip("nowhere.invalid") is None
