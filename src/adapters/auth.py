"""Flujo de autenticación (login/logout/validación de sesión).

Responsabilidad:
- Obtener el token en `/auth/login` y guardarlo en el `TokenStore`.
- Validar un token persistido al arrancar; si no vale, se borra.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import ApiClient
from core.domain.errors import ApiError, AuthenticationError
from core.domain.models import LoginResult, TokenValidation, User
from core.interfaces.token_store import TokenStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client: ApiClient, token_store: TokenStore) -> None:
        self._client = client
        self._token_store = token_store

    @property
    def is_authenticated(self) -> bool:
        return self._token_store.get_token() is not None

    async def login(self, email: str, password: str) -> User:
        """Autentica contra el backend y persiste el token.

        Raises:
            AuthenticationError: el backend rechazó las credenciales.
        """

        try:
            response = await self._client.post("/auth/login", {"email": email, "password": password})
        except ApiError as exc:
            raise AuthenticationError(exc.message or "Authentication failed") from exc

        result = LoginResult.model_validate(response.data)
        self._token_store.set_token(result.token)
        logger.info("Logged in as %s", result.user.email)
        return result.user

    def logout(self) -> None:
        self._token_store.clear_token()

    async def restore_session(self) -> User | None:
        """Valida el token guardado; lo elimina si el backend no lo acepta."""

        if self._token_store.get_token() is None:
            return None

        try:
            response = await self._client.get("/auth/validate-token")
            data = response.data if isinstance(response.data, dict) else {}
            validation = TokenValidation.model_validate(data)
        except (ApiError, httpx.HTTPError, ValidationError) as exc:
            logger.info("Stored token rejected: %s", exc)
            self._token_store.clear_token()
            return None

        if not validation.valid or validation.user is None:
            self._token_store.clear_token()
            return None
        return validation.user
