"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Channel, Followed, Follower


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("helix-client", style="bold magenta")
    subtitle = Text("Twitch Helix • canales • follows", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_channels_table(channels: Iterable[Channel]) -> Table:
    table = Table(title="Channels")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Login", style="white")
    table.add_column("Title", style="white")
    table.add_column("Game", style="magenta")
    table.add_column("Tags", style="dim")
    for channel in channels:
        table.add_row(
            channel.id,
            channel.display_name or channel.login,
            channel.title,
            channel.game_name,
            ", ".join(channel.tags),
        )
    return table


def build_follows_table(rows: Iterable[Followed | Follower], *, title: str) -> Table:
    """Tabla común para `followed` y `followers` (ID, login, nombre, fecha)."""

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Login", style="white")
    table.add_column("Name", style="white")
    table.add_column("Followed at", style="green")
    for row in rows:
        if isinstance(row, Followed):
            ident = (row.broadcaster_id, row.broadcaster_login, row.broadcaster_name)
        else:
            ident = (row.user_id, row.user_login, row.user_name)
        table.add_row(*ident, row.followed_at.isoformat())
    return table
