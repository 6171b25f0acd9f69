"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
from rich.console import Console
from rich.table import Table

from mcuserdata.adapters.http_client import build_async_client
from mcuserdata.core.config import AppSettings, get_user_env_file

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__
    return True, f"HTTP {response.status_code}"


async def _check_services(settings: AppSettings) -> list[tuple[str, bool, str]]:
    targets = {
        "Identity service": f"{settings.api_base_url}/users/profiles/minecraft/Notch",
        "Session service": f"{settings.session_base_url}/session/minecraft/profile/069a79f444e94726a5befca90e38aaf5",
        "Render service": settings.render_base_url,
    }
    results = await asyncio.gather(*(_check_http(url, settings) for url in targets.values()))
    return [(label, ok, detail) for label, (ok, detail) in zip(targets, results)]


def run() -> None:
    """Show active settings and check connectivity to every upstream service."""

    settings = AppSettings()

    table = Table(title="mcuserdata doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)

    for label, ok, detail in asyncio.run(_check_services(settings)):
        table.add_row(label, "OK" if ok else "FAIL", detail)

    _console.print(table)
