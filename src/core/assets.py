"""Resolución de URLs de assets (imágenes/PDFs) servidos por el backend.

El backend devuelve rutas relativas (`/uploads/x.png`) o URLs absolutas;
la consola necesita siempre una URL absoluta.
"""

from __future__ import annotations


def is_absolute_url(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


def get_asset_url(asset_path: str | None, base_url: str) -> str:
    """Convierte una ruta de asset en URL absoluta contra `base_url`.

    - URL absoluta: se devuelve tal cual.
    - Vacío/None: cadena vacía.
    - Relativa: `base_url` + exactamente una `/` + ruta.
    """

    if not asset_path:
        return ""
    if is_absolute_url(asset_path):
        return asset_path
    separator = "" if asset_path.startswith("/") else "/"
    return f"{base_url}{separator}{asset_path}"


def build_request_url(path: str, base_url: str) -> str:
    """URL final de una petición: absolutas pasan, relativas se unen al origen."""

    if path.startswith("http"):
        return path
    return f"{base_url}{path}"
