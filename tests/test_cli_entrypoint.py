from __future__ import annotations

import importlib
import json
from datetime import timedelta

import pytest

from mc_motd.errors import StatusConnectionError
from mc_motd.protocol import StatusQuery

STATUS_JSON = json.dumps(
    {
        "version": {"name": "1.20.1", "protocol": 763},
        "players": {"online": 5, "max": 20},
        "description": {"text": "Welcome", "color": "gold", "extra": [" to the server"]},
    }
)


@pytest.fixture()
def cli(monkeypatch):
    pytest.importorskip("typer")
    module = importlib.import_module("mc_motd.main")
    monkeypatch.setattr(module, "configure_logging", lambda level: None)
    monkeypatch.setattr(module, "lookup_ip", lambda host: "192.0.2.10")
    return module


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("mc_motd.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_text_mode_prints_plain_motd_and_summary(cli, monkeypatch) -> None:
    from typer.testing import CliRunner

    calls: list[tuple] = []

    def fake_query(host, port, timeout, *, protocol_version):
        calls.append((host, port, timeout, protocol_version))
        return StatusQuery(raw_json=STATUS_JSON, latency=timedelta(milliseconds=42))

    monkeypatch.setattr(cli, "query_status", fake_query)

    result = CliRunner().invoke(cli.app, ["--text", "--no-srv", "--timeout", "1.5", "mc.example.com:25570"])

    assert result.exit_code == 0, result.output
    assert "Welcome to the server" in result.output
    assert "Version: 1.20.1 (protocol 763)" in result.output
    assert "Players: 5 / 20" in result.output
    assert "Latency: 42 ms" in result.output
    assert calls == [("mc.example.com", 25570, 1.5, 754)]


def test_debug_mode_prints_all_projections(cli, monkeypatch) -> None:
    from typer.testing import CliRunner

    monkeypatch.setattr(
        cli,
        "query_status",
        lambda *args, **kwargs: StatusQuery(raw_json=STATUS_JSON, latency=timedelta(milliseconds=7)),
    )

    result = CliRunner().invoke(cli.app, ["--debug", "--no-srv", "127.0.0.1"])

    assert result.exit_code == 0, result.output
    assert "Raw JSON:" in result.output
    assert "Plain MOTD:" in result.output
    assert "Colored MOTD:" in result.output


def test_connection_error_exits_with_code_one(cli, monkeypatch) -> None:
    from typer.testing import CliRunner

    def refuse(*args, **kwargs):
        raise StatusConnectionError("connection refused", phase="connect")

    monkeypatch.setattr(cli, "query_status", refuse)

    result = CliRunner().invoke(cli.app, ["--no-srv", "127.0.0.1:1"])

    assert result.exit_code == 1
    assert "connect failed: connection refused" in result.output


def test_invalid_hex_mode_is_rejected(cli) -> None:
    from typer.testing import CliRunner

    result = CliRunner().invoke(cli.app, ["--hex-mode", "sepia", "127.0.0.1"])

    assert result.exit_code != 0


class _MarkerRenderer:
    def __init__(self, hex_mode: str = "truecolor") -> None:
        self.hex_mode = hex_mode

    def plain(self, description) -> str:
        return "PLAIN-MOTD"

    def colored(self, description) -> str:
        return "COLORED-MOTD"


@pytest.mark.parametrize(
    ("flags", "expected", "unexpected"),
    [
        (["--text"], "PLAIN-MOTD", "COLORED-MOTD"),
        (["--text", "--color"], "COLORED-MOTD", "PLAIN-MOTD"),
        ([], "COLORED-MOTD", "PLAIN-MOTD"),
    ],
)
def test_color_flag_wins_over_text(cli, monkeypatch, flags, expected, unexpected) -> None:
    from typer.testing import CliRunner

    monkeypatch.setattr(cli, "MotdRenderer", _MarkerRenderer)
    monkeypatch.setattr(
        cli,
        "query_status",
        lambda *args, **kwargs: StatusQuery(raw_json=STATUS_JSON, latency=timedelta(milliseconds=3)),
    )

    result = CliRunner().invoke(cli.app, [*flags, "--no-srv", "127.0.0.1"])

    assert result.exit_code == 0, result.output
    assert expected in result.output
    assert unexpected not in result.output
