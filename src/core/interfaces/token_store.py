"""Contrato del almacén de credenciales.

Por qué Protocol:
- El cliente HTTP recibe el almacén por inyección (sin estado global).
- El token se lee en cada petición: un logout afecta solo a las siguientes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

AUTH_TOKEN_KEY = "auth-token"


@runtime_checkable
class TokenStore(Protocol):
    """Slot clave-valor persistente que guarda el bearer token."""

    def get_token(self) -> str | None:
        """Devuelve el token actual o `None` si no hay sesión."""

        ...

    def set_token(self, token: str) -> None:
        ...

    def clear_token(self) -> None:
        ...
