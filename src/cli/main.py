"""CLI principal (Typer).

Comandos:
- `channels`: información de uno o varios canales.
- `followed`: canales que sigue un usuario.
- `followers`: seguidores de un canal.
- `doctor`: diagnóstico de configuración.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.helix import FollowedListCall, FollowersListCall, HelixClient
from adapters.json_exporter import export_response_json
from cli import doctor
from cli.ui_components import build_channels_table, build_follows_table
from core.call import paginate
from core.config import AppSettings
from core.errors import HelixError

app = typer.Typer(no_args_is_help=True, help="Twitch Helix client: channels and follows.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

R = TypeVar("R")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx loguea cada request en INFO; con --verbose ya lo hacemos nosotros.
    logging.getLogger("httpx").setLevel(logging.WARNING)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests (DEBUG)."),
) -> None:
    configure_logging(verbose)


def _run(factory: Callable[[HelixClient], Awaitable[R]]) -> R:
    async def _go() -> R:
        async with HelixClient(AppSettings()) as client:
            return await factory(client)

    try:
        return asyncio.run(_go())
    except HelixError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


async def _collect(call: FollowedListCall | FollowersListCall, all_pages: bool) -> list[Any]:
    if all_pages:
        return [page async for page in paginate(call)]
    return [await call.do()]


def _apply_paging(
    call: FollowedListCall | FollowersListCall,
    first: int | None,
    after: str | None,
) -> None:
    if first is not None:
        call.first(first)
    if after:
        call.after(after)


@app.command()
def channels(
    broadcaster_ids: list[str] = typer.Argument(..., help="Broadcaster IDs."),
    json_path: Path | None = typer.Option(None, "--json", help="Export response to JSON."),
) -> None:
    """Información de canales por broadcaster ID."""

    response = _run(lambda client: client.channels.list().broadcaster_id(broadcaster_ids).do())
    _console.print(build_channels_table(response.data))
    if json_path:
        export_response_json(response=response, output_path=json_path)


@app.command()
def followed(
    user_id: str = typer.Option(..., "--user-id", help="User whose follows are listed."),
    broadcaster_id: str | None = typer.Option(None, "--broadcaster-id"),
    first: int | None = typer.Option(None, "--first", help="Page size (1-100)."),
    after: str | None = typer.Option(None, "--after", help="Cursor."),
    all_pages: bool = typer.Option(False, "--all", help="Follow cursors until the end."),
    json_path: Path | None = typer.Option(None, "--json", help="Export response to JSON."),
) -> None:
    """Canales que sigue un usuario."""

    async def fetch(client: HelixClient) -> list[Any]:
        call = client.channels.followed.list().user_id(user_id)
        if broadcaster_id:
            call.broadcaster_id(broadcaster_id)
        _apply_paging(call, first, after)
        return await _collect(call, all_pages)

    pages = _run(fetch)
    _print_pages(pages, title="Followed channels", json_path=json_path)


@app.command()
def followers(
    broadcaster_id: str = typer.Option(..., "--broadcaster-id", help="Channel whose followers are listed."),
    user_id: str | None = typer.Option(None, "--user-id"),
    first: int | None = typer.Option(None, "--first", help="Page size (1-100)."),
    after: str | None = typer.Option(None, "--after", help="Cursor."),
    all_pages: bool = typer.Option(False, "--all", help="Follow cursors until the end."),
    json_path: Path | None = typer.Option(None, "--json", help="Export response to JSON."),
) -> None:
    """Seguidores de un canal."""

    async def fetch(client: HelixClient) -> list[Any]:
        call = client.channels.followers.list().broadcaster_id(broadcaster_id)
        if user_id:
            call.user_id(user_id)
        _apply_paging(call, first, after)
        return await _collect(call, all_pages)

    pages = _run(fetch)
    _print_pages(pages, title="Followers", json_path=json_path)


def _print_pages(pages: list[Any], *, title: str, json_path: Path | None) -> None:
    rows = [row for page in pages for row in page.data]
    _console.print(build_follows_table(rows, title=title))
    cursor = pages[-1].cursor if pages else ""
    if cursor:
        _console.print(f"[dim]next cursor:[/dim] {cursor}")
    if json_path:
        export_response_json(response=pages, output_path=json_path)


def run() -> None:
    app()
