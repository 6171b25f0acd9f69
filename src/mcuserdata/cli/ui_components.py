"""Rich components for the CLI.

Kept apart from the commands so tables/panels can be reused across them.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mcuserdata.core.domain.models import BasicData, NormalizedProfile


def print_banner(console: Console) -> None:
    title = Text("mcuserdata", style="bold green")
    subtitle = Text("Minecraft identities • skins • capes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_profile_table(profile: NormalizedProfile) -> Table:
    """Two-column table describing a decoded profile."""

    table = Table(title=f"Profile: {profile.name}", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white", overflow="fold")
    table.add_row("UUID", profile.id)
    table.add_row("Username", profile.name)
    if profile.created_at is None:
        table.add_row("Timestamp", "-")
    else:
        table.add_row("Timestamp", f"{profile.timestamp} ({profile.created_at.isoformat()})")
    table.add_row("Skin", profile.skin or "-")
    table.add_row("Cape", Text(profile.cape, style="magenta" if profile.has_cape else "dim"))
    table.add_row("Slim model", Text("yes" if profile.is_slim else "no", style="green" if profile.is_slim else "dim"))
    return table


def build_basic_data_table(data: BasicData) -> Table:
    table = Table(title="Player")
    table.add_column("Username", style="cyan", no_wrap=True)
    table.add_column("UUID", style="white")
    table.add_row(data.username, data.uuid)
    return table
