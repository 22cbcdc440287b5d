"""CLI entrypoint: query one server and print its MOTD."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from mc_motd.address import lookup_ip, parse_address, resolve_srv
from mc_motd.config import settings
from mc_motd.errors import MotdError
from mc_motd.protocol import query_status
from mc_motd.status import parse_status
from mc_motd.telemetry.logging import configure_logging
from mc_motd.text import MotdRenderer, parse_description

app = typer.Typer(help="Fetch and display the MOTD of a Minecraft Java Edition server")
console = Console()

HEX_MODES = ("truecolor", "nearest")


@app.command()
def motd(
    address: str = typer.Argument(..., help="Server address, host[:port]"),
    color: bool = typer.Option(False, "--color", "-c", help="Show the colored MOTD (default, wins over --text)"),
    text: bool = typer.Option(False, "--text", "-t", help="Show the plain-text MOTD, for old terminals"),
    debug: bool = typer.Option(False, "--debug", help="Show raw JSON, plain and colored MOTD"),
    timeout: float = typer.Option(None, min=0, help="Connect/session deadline in seconds, 0 disables it"),
    srv: bool = typer.Option(None, "--srv/--no-srv", help="Look up _minecraft._tcp SRV records"),
    hex_mode: str = typer.Option(None, help="How to print #RRGGBB colors: truecolor or nearest"),
) -> None:
    """Query ADDRESS (default port 25565) and print MOTD, version, players and latency."""
    configure_logging(settings.log_level)

    mode = hex_mode or settings.hex_mode
    if mode not in HEX_MODES:
        raise typer.BadParameter(f"expected one of {', '.join(HEX_MODES)}", param_hint="--hex-mode")

    use_srv = settings.use_srv if srv is None else srv
    effective_timeout = settings.timeout if timeout is None else timeout

    try:
        target = parse_address(address, default_port=settings.default_port)
        if use_srv:
            target = resolve_srv(target)

        ip = lookup_ip(target.host) or "unresolved"
        console.print(f"Fetching MOTD from {escape(target.host)} [dim]\\[{escape(ip)}:{target.port}][/dim] ...")

        result = query_status(
            target.host,
            target.port,
            effective_timeout,
            protocol_version=settings.protocol_version,
        )
        status = parse_status(result.raw_json)
        description = parse_description(status.description)
    except MotdError as exc:
        console.print({"error": exc.describe(), "phase": exc.phase})
        raise typer.Exit(code=1)

    renderer = MotdRenderer(hex_mode=mode)
    if debug:
        console.print("\nRaw JSON:")
        console.print_json(result.raw_json)
        console.print("\nPlain MOTD:")
        console.print(renderer.plain(description), markup=False, highlight=False)
        console.print("\nColored MOTD:")
        console.print(Text.from_ansi(renderer.colored(description)))
    elif text and not color:
        console.print()
        console.print(renderer.plain(description), markup=False, highlight=False)
    else:
        console.print()
        console.print(Text.from_ansi(renderer.colored(description)))

    console.print(f"\nVersion: {escape(status.version_name)} (protocol {status.protocol})", highlight=False)
    console.print(f"Players: {status.players_online} / {status.players_max}", highlight=False)
    console.print(f"Latency: {result.latency_ms:.0f} ms", highlight=False)


if __name__ == "__main__":
    app()
