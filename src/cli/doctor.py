"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.token_store import FileTokenStore
from core.config import AppSettings, resolve_base_url, resolve_token_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    base_url = resolve_base_url(settings)
    token_store = FileTokenStore(resolve_token_file(settings))

    table = Table(title="CMS Admin Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.api_base_url:
        table.add_row("API base_url", "OK", base_url)
    else:
        table.add_row("API base_url", "DEFAULT", f"{base_url} (set CMS_ADMIN_API_BASE_URL to override)")
    if token_store.get_token():
        table.add_row("Session", "OK", str(token_store.path))
    else:
        table.add_row("Session", "MISSING", "Run `login` first")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(base_url, settings))
    table.add_row("Backend connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="set-base-url")
def set_base_url(url: str = typer.Argument(..., help="Backend origin, e.g. https://api.example.com")) -> None:
    """Store the backend origin in the user config .env."""

    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("url must start with http:// or https://")

    env_path = write_user_env_vars({"CMS_ADMIN_API_BASE_URL": url})
    _console.print(f"[green]Saved API base URL to:[/green] {env_path}")
