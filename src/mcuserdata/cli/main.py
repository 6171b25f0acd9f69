"""Command line interface (typer + rich).

Each command maps onto one ``PlayerLookupService`` operation. Library errors
are printed and turned into exit code 1.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from mcuserdata.cli import doctor
from mcuserdata.cli.ui_components import build_basic_data_table, build_profile_table, print_banner
from mcuserdata.core.errors import MinecraftUserDataError
from mcuserdata.core.renders import RenderKind
from mcuserdata.core.services.player_lookup import PlayerLookupService

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Look up Minecraft players, skins and capes.")
app.command("doctor")(doctor.run)

_console = Console()
_err_console = Console(stderr=True)


def build_service() -> PlayerLookupService:
    return PlayerLookupService()


def _execute(operation: Callable[[PlayerLookupService], Awaitable[T]]) -> T:
    service = build_service()
    try:
        return asyncio.run(operation(service))
    except (MinecraftUserDataError, ValueError) as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _print_render(kind: RenderKind, name: str) -> None:
    typer.echo(_execute(lambda service: service.render_url(kind, name)))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """mcuserdata: Minecraft player lookups."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=_err_console, show_path=False)],
        )
        logging.getLogger("httpx").setLevel(logging.INFO)


@app.command("uuid")
def uuid_command(name: str = typer.Argument(..., help="Player name.")) -> None:
    """Print the player id for NAME."""

    typer.echo(_execute(lambda service: service.resolve_uuid(name)))


@app.command("name")
def name_command(uuid: str = typer.Argument(..., help="Player id (with or without dashes).")) -> None:
    """Print the current player name for UUID."""

    typer.echo(_execute(lambda service: service.resolve_name(uuid)))


@app.command("profile")
def profile_command(
    name: str = typer.Argument(..., help="Player name."),
    as_json: bool = typer.Option(False, "--json", help="Print the profile as JSON."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner first."),
) -> None:
    """Print skin, cape and model information for NAME."""

    profile = _execute(lambda service: service.get_profile(name))
    if as_json:
        typer.echo(json.dumps(profile.model_dump(mode="json"), ensure_ascii=False, indent=2, sort_keys=True))
        return
    if banner:
        print_banner(_console)
    _console.print(build_profile_table(profile))


@app.command("data")
def data_command(name: str = typer.Argument(..., help="Player name.")) -> None:
    """Print the canonical username and id for NAME."""

    data = _execute(lambda service: service.get_basic_data(name))
    _console.print(build_basic_data_table(data))


@app.command("skin")
def skin_command(name: str = typer.Argument(..., help="Player name.")) -> None:
    """Print the skin image URL for NAME."""

    _print_render(RenderKind.SKIN, name)


@app.command("avatar")
def avatar_command(name: str = typer.Argument(..., help="Player name.")) -> None:
    """Print the 2D head avatar URL for NAME."""

    _print_render(RenderKind.AVATAR, name)


@app.command("cape")
def cape_command(name: str = typer.Argument(..., help="Player name.")) -> None:
    """Print the cape image URL for NAME."""

    _print_render(RenderKind.CAPE, name)


@app.command("body")
def body_command(name: str = typer.Argument(..., help="Player name.")) -> None:
    """Print the body render URL for NAME."""

    _print_render(RenderKind.BODY, name)


@app.command("head")
def head_command(name: str = typer.Argument(..., help="Player name.")) -> None:
    """Print the head render URL for NAME."""

    _print_render(RenderKind.HEAD, name)


def run() -> None:
    app()
