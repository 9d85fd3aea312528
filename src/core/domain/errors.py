"""Errores tipados del cliente.

Por qué una sola clase:
- Fallos HTTP (4xx/5xx) y fallos de negocio dentro de un 2xx se tratan igual
  aguas arriba (cache, consola).
- Los fallos de transporte (red) NO se envuelven: se propagan como `httpx`.
"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Respuesta clasificada como fallida (status, mensaje y detalles opcionales)."""

    def __init__(self, status_code: int, message: str, details: Any | None = None) -> None:
        super().__init__(message)
        self._status_code = status_code
        self._message = message
        self._details = details

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def details(self) -> Any | None:
        return self._details

    @property
    def is_client_error(self) -> bool:
        return 400 <= self._status_code < 500

    def __repr__(self) -> str:
        return f"ApiError(status_code={self._status_code!r}, message={self._message!r})"


class AuthenticationError(Exception):
    """Login rechazado por el backend."""
