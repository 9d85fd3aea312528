"""Almacenes de token (implementaciones de `TokenStore`).

- `FileTokenStore`: JSON en el directorio de config del usuario, clave `auth-token`.
- `MemoryTokenStore`: para tests y uso embebido.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.interfaces.token_store import AUTH_TOKEN_KEY

logger = logging.getLogger(__name__)


class MemoryTokenStore:
    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear_token(self) -> None:
        self._token = None


class FileTokenStore:
    """Persistencia clave-valor en un archivo JSON.

    El archivo se relee en cada `get_token`, así otro proceso (p.ej. `logout`)
    afecta a las peticiones siguientes.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Ignoring unreadable session file: %s", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")

    def get_token(self) -> str | None:
        token = self._read().get(AUTH_TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def set_token(self, token: str) -> None:
        data = self._read()
        data[AUTH_TOKEN_KEY] = token
        self._write(data)

    def clear_token(self) -> None:
        data = self._read()
        if data.pop(AUTH_TOKEN_KEY, None) is not None:
            self._write(data)
