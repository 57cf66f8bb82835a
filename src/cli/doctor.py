"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.helix import HelixClient
from cli.ui_components import print_banner
from core.config import AppSettings, write_user_env_vars
from core.errors import HelixAPIError, HelixError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Lista un canal cualquiera para validar credenciales y conectividad."""

    try:
        async with HelixClient(settings) as client:
            await client.channels.list().broadcaster_id(["12826"]).do()
        return True, "HTTP 200"
    except HelixAPIError as exc:
        return False, f"HTTP {exc.status_code}: {exc.message}"
    except HelixError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    print_banner(_console)

    table = Table(title="helix-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.client_id:
        table.add_row("Client-Id", "OK", settings.client_id)
    else:
        table.add_row("Client-Id", "MISSING", "Set HELIX_CLIENT_ID or run `doctor setup`")
    if settings.access_token:
        table.add_row("Access token", "OK", "Bearer token configured")
    else:
        table.add_row("Access token", "MISSING", "Helix rejects requests without a token")
    table.add_row("Base URL", "OK", settings.base_url)

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("Helix API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive setup (stores credentials in the user config .env)."""

    client_id = typer.prompt("Client-Id").strip()
    if not client_id:
        raise typer.BadParameter("Client-Id is required")
    access_token = typer.prompt("Access token", hide_input=True, confirmation_prompt=False).strip()

    env_path = write_user_env_vars(
        {
            "HELIX_CLIENT_ID": client_id,
            "HELIX_ACCESS_TOKEN": access_token,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
