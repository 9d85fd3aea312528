"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Callable, Sequence

import httpx
from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import ApiError, AuthenticationError
from core.domain.models import (
    Article,
    Catalog,
    Category,
    CordlessItem,
    InstagramGalleryImage,
    Product,
    User,
    WebGalleryImage,
)

GENERIC_ERROR_MESSAGE = "Something went wrong"

AssetResolver = Callable[[str | None], str]


def describe_error(exc: BaseException) -> str:
    """Mensaje para el usuario: el del backend si es conocido, genérico si no."""

    if isinstance(exc, (ApiError, AuthenticationError)):
        return str(exc) or GENERIC_ERROR_MESSAGE
    if isinstance(exc, httpx.TransportError):
        return f"Backend unreachable ({type(exc).__name__})"
    return GENERIC_ERROR_MESSAGE


def print_error(console: Console, exc: BaseException) -> None:
    console.print(f"[red]Error:[/red] {describe_error(exc)}")


def build_user_panel(user: User) -> Panel:
    body = Text()
    body.append(f"{user.name}\n", style="bold")
    body.append(user.email, style="dim")
    return Panel(body, title="Session", border_style="green")


def _table(title: str, columns: Sequence[tuple[str, str]]) -> Table:
    table = Table(title=title)
    for header, style in columns:
        table.add_column(header, style=style, no_wrap=header == "ID")
    return table


def build_resource_table(items: Sequence[BaseModel], resolve_asset: AssetResolver) -> Table:
    """Tabla Rich para cualquier lista de entidades soportada."""

    if not items:
        return _table("No results", [("ID", "cyan")])

    first = items[0]
    if isinstance(first, Category):
        table = _table("Categories", [("ID", "cyan"), ("Name", "white"), ("Image", "magenta")])
        for item in items:
            assert isinstance(item, Category)
            table.add_row(item.id, item.name, resolve_asset(item.image))
        return table

    if isinstance(first, Product):
        table = _table(
            "Products",
            [("ID", "cyan"), ("Name", "white"), ("Category", "green"), ("Images", "magenta")],
        )
        for item in items:
            assert isinstance(item, Product)
            category = item.category.name if item.category else item.category_id
            images = "\n".join(resolve_asset(path) for path in item.images)
            table.add_row(item.id, item.name, category, images)
        return table

    if isinstance(first, Catalog):
        table = _table("Catalogues", [("ID", "cyan"), ("Title", "white"), ("Category", "green"), ("File", "magenta")])
        for item in items:
            assert isinstance(item, Catalog)
            category = item.category.name if item.category else item.category_id
            table.add_row(item.id, item.title, category, resolve_asset(item.file))
        return table

    if isinstance(first, CordlessItem):
        table = _table("Cordless", [("ID", "cyan"), ("Title", "white"), ("Description", "dim"), ("Link", "magenta")])
        for item in items:
            assert isinstance(item, CordlessItem)
            table.add_row(item.id, item.title, item.description, item.link)
        return table

    if isinstance(first, (WebGalleryImage, InstagramGalleryImage)):
        table = _table("Gallery", [("ID", "cyan"), ("Title", "white"), ("Type", "green"), ("Image", "magenta")])
        for item in items:
            assert isinstance(item, (WebGalleryImage, InstagramGalleryImage))
            table.add_row(item.id, item.title, item.type, resolve_asset(item.image))
        return table

    if isinstance(first, Article):
        table = _table("Articles", [("ID", "cyan"), ("Title", "white"), ("Slug", "dim"), ("Published", "green")])
        for item in items:
            assert isinstance(item, Article)
            table.add_row(item.id, item.title, item.slug, item.published_at or "draft")
        return table

    raise TypeError(f"Unsupported entity type: {type(first).__name__}")
