"""CLI principal (Typer).

Comandos:
- `login` / `logout` / `whoami`: sesión contra el backend.
- `list <resource>` / `delete <resource> <id>`: operaciones de lectura y baja.
- `cordless-add`: alta rápida en la lista cordless (JSON, sin archivos).
- `category-add`: alta de categoría con imagen (multipart).
- Lecturas y mutaciones pasan por `QueryCache` (reintentos + invalidación).
- `doctor ...`: diagnóstico de configuración y conectividad.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import httpx
import typer
from rich.console import Console

from adapters.auth import AuthService
from adapters.http_client import ApiClient
from adapters.query_cache import QueryCache
from adapters.resources import (
    ArticleApi,
    CatalogApi,
    CategoryApi,
    CordlessApi,
    InstagramGalleryApi,
    ProductApi,
    WebGalleryApi,
)
from adapters.resources.category import CreateCategoryInput
from adapters.resources.cordless import CreateCordlessInput
from adapters.token_store import FileTokenStore
from cli import doctor
from cli.ui_components import build_resource_table, build_user_panel, print_error
from core.config import AppSettings, resolve_token_file
from core.domain.errors import ApiError, AuthenticationError
from core.domain.forms import UploadFile
from core.logging_config import configure_logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Admin console for the content backend.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_query_cache = QueryCache()


class Resource(str, Enum):
    CATEGORIES = "categories"
    PRODUCTS = "products"
    CATALOGUES = "catalogues"
    CORDLESS = "cordless"
    GALLERY_WEB = "gallery-web"
    GALLERY_INSTAGRAM = "gallery-instagram"
    ARTICLES = "articles"


_RESOURCE_APIS: dict[Resource, Callable[[ApiClient], Any]] = {
    Resource.CATEGORIES: CategoryApi,
    Resource.PRODUCTS: ProductApi,
    Resource.CATALOGUES: CatalogApi,
    Resource.CORDLESS: CordlessApi,
    Resource.GALLERY_WEB: WebGalleryApi,
    Resource.GALLERY_INSTAGRAM: InstagramGalleryApi,
    Resource.ARTICLES: ArticleApi,
}


def build_api_client(settings: AppSettings | None = None) -> ApiClient:
    settings = settings or AppSettings()
    return ApiClient(settings=settings, token_store=FileTokenStore(resolve_token_file(settings)))


def _run(operation: Callable[[ApiClient], Awaitable[T]]) -> T:
    """Ejecuta `operation` con un cliente nuevo y traduce errores a exit code 1."""

    async def _main() -> T:
        async with build_api_client() as client:
            return await operation(client)

    try:
        return asyncio.run(_main())
    except (ApiError, AuthenticationError, httpx.TransportError) as exc:
        print_error(_console, exc)
        raise typer.Exit(code=1) from exc
    except (typer.Exit, typer.Abort):
        raise
    except Exception as exc:
        logger.debug("Unexpected error", exc_info=True)
        print_error(_console, exc)
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines."),
) -> None:
    configure_logging(verbose=verbose, log_json=log_json)


@app.command()
def login(
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Log in and persist the session token."""

    async def _login(client: ApiClient) -> None:
        assert client.token_store is not None
        user = await AuthService(client, client.token_store).login(email, password)
        _console.print(build_user_panel(user))

    _run(_login)


@app.command()
def logout() -> None:
    """Forget the stored session token."""

    settings = AppSettings()
    FileTokenStore(resolve_token_file(settings)).clear_token()
    _console.print("[green]Logged out.[/green]")


@app.command()
def whoami() -> None:
    """Validate the stored token and show the current user."""

    async def _whoami(client: ApiClient) -> bool:
        assert client.token_store is not None
        user = await AuthService(client, client.token_store).restore_session()
        if user is None:
            _console.print("[yellow]Not logged in.[/yellow]")
            return False
        _console.print(build_user_panel(user))
        return True

    if not _run(_whoami):
        raise typer.Exit(code=1)


@app.command(name="list")
def list_resource(resource: Resource = typer.Argument(..., help="Collection to list.")) -> None:
    """List a collection as a table."""

    async def _list(client: ApiClient) -> None:
        items = await _query_cache.fetch((resource.value,), _RESOURCE_APIS[resource](client).list_all)
        _console.print(build_resource_table(items, client.asset_url))

    _run(_list)


@app.command()
def delete(
    resource: Resource = typer.Argument(..., help="Collection the item belongs to."),
    item_id: str = typer.Argument(..., help="Identifier of the item."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete one item."""

    if not yes:
        typer.confirm(f"Delete {resource.value}/{item_id}?", abort=True)

    async def _delete(client: ApiClient) -> None:
        await _query_cache.mutate(
            lambda: _RESOURCE_APIS[resource](client).delete(item_id),
            invalidate=[(resource.value,)],
        )

    _run(_delete)
    _console.print(f"[green]Deleted[/green] {resource.value}/{item_id}")


@app.command(name="cordless-add")
def cordless_add(
    title: str = typer.Option(..., help="Item title."),
    description: str = typer.Option("", help="Short description."),
    link: str = typer.Option(..., help="Target URL."),
) -> None:
    """Create a cordless item."""

    async def _create(client: ApiClient) -> None:
        item = await _query_cache.mutate(
            lambda: CordlessApi(client).create(
                CreateCordlessInput(title=title, description=description, link=link)
            ),
            invalidate=[(Resource.CORDLESS.value,)],
        )
        _console.print(f"[green]Created[/green] cordless/{item.id}")

    _run(_create)


@app.command(name="category-add")
def category_add(
    name: str = typer.Option(..., help="Category name."),
    image: Path = typer.Option(..., exists=True, dir_okay=False, readable=True, help="Image file to upload."),
) -> None:
    """Create a category with its image (multipart upload)."""

    upload = UploadFile.from_path(image)

    async def _create(client: ApiClient) -> None:
        category = await _query_cache.mutate(
            lambda: CategoryApi(client).create(CreateCategoryInput(name=name, file=upload)),
            invalidate=[(Resource.CATEGORIES.value,)],
        )
        _console.print(f"[green]Created[/green] categories/{category.id}")

    _run(_create)


def run() -> None:
    app()
