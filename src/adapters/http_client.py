"""Cliente HTTP del backend de contenidos (wrapper de httpx).

Por qué un wrapper:
- Estandariza headers, timeouts y auth (bearer) para todos los recursos.
- Normaliza las respuestas del backend: sobre JSON `{statusCode, message,
  data, meta?}` o texto plano.
- Convierte fallos HTTP y fallos de negocio (statusCode >= 400 dentro de un
  200) en un único `ApiError`.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

No reintenta: la política de reintentos vive en la cache de queries.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from core.assets import build_request_url, get_asset_url
from core.config import AppSettings, resolve_base_url
from core.domain.errors import ApiError
from core.domain.forms import FormData
from core.domain.models import ApiResponse, EnvelopePayload
from core.interfaces.token_store import TokenStore

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del proyecto.

    Por qué un builder:
    - Centraliza headers/timeouts para que todos los recursos se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, Any] = {"follow_redirects": True, "headers": headers}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


@dataclass(frozen=True)
class StructuredPayload:
    """Cuerpo JSON (posiblemente malformado -> campos ausentes)."""

    envelope: EnvelopePayload


@dataclass(frozen=True)
class RawPayload:
    """Cuerpo no-JSON: el texto completo es `data`."""

    text: str


Payload = StructuredPayload | RawPayload


def is_json_response(response: httpx.Response) -> bool:
    return JSON_CONTENT_TYPE in response.headers.get("content-type", "").lower()


def parse_payload(response: httpx.Response) -> Payload:
    """Lee el cuerpo una sola vez y lo clasifica según el content-type."""

    if not is_json_response(response):
        return RawPayload(text=response.text)

    try:
        raw = json.loads(response.content) if response.content else None
    except ValueError:
        logger.debug("Malformed JSON body from %s", response.request.url)
        raw = None

    if not isinstance(raw, dict):
        return StructuredPayload(envelope=EnvelopePayload())
    try:
        return StructuredPayload(envelope=EnvelopePayload.model_validate(raw))
    except ValidationError:
        return StructuredPayload(envelope=EnvelopePayload())


def normalize_response(response: httpx.Response, payload: Payload) -> ApiResponse[Any, Any]:
    """Aplica la doble verificación (transporte + sobre) y arma el resultado.

    Raises:
        ApiError: status de transporte >= 400, o `statusCode` del sobre >= 400.
    """

    transport_ok = response.status_code < 400
    reason = response.reason_phrase

    if isinstance(payload, RawPayload):
        if not transport_ok:
            raise ApiError(response.status_code, reason)
        return ApiResponse[Any, Any](
            status_code=response.status_code,
            message=reason,
            data=payload.text,
        )

    envelope = payload.envelope
    status_code = envelope.status_code if envelope.status_code is not None else response.status_code
    message = envelope.message if envelope.message is not None else reason

    if not transport_ok or status_code >= 400:
        raise ApiError(status_code, message, envelope.data)

    return ApiResponse[Any, Any](
        status_code=status_code,
        message=message,
        data=envelope.data,
        meta=envelope.meta,
    )


def _has_header(headers: Mapping[str, str] | None, name: str) -> bool:
    if not headers:
        return False
    lowered = name.lower()
    return any(key.lower() == lowered for key in headers)


class ApiClient:
    """Cliente del backend con helpers por verbo.

    El almacén de tokens se inyecta; sin almacén, la inyección de auth es no-op.
    """

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        token_store: TokenStore | None = None,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._token_store = token_store
        self._base_url = base_url if base_url is not None else resolve_base_url(self._settings)
        self._http = http_client or build_async_client(self._settings)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token_store(self) -> TokenStore | None:
        return self._token_store

    def asset_url(self, asset_path: str | None) -> str:
        return get_asset_url(asset_path, self._base_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _auth_headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        merged: dict[str, str] = dict(headers or {})
        if self._token_store is None or _has_header(merged, "Authorization"):
            return merged
        token = self._token_store.get_token()
        if token:
            merged["Authorization"] = f"Bearer {token}"
        return merged

    async def api_fetch(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse[Any, Any]:
        """Despacha una petición y devuelve el resultado normalizado.

        Body:
        - `FormData` -> multipart tal cual (httpx pone el boundary).
        - `None` -> sin cuerpo.
        - Otro -> JSON (`Content-Type: application/json` si el llamador no lo fijó).

        Los errores de transporte (`httpx.TransportError`) se propagan sin envolver.
        """

        url = build_request_url(path, self._base_url)
        merged = self._auth_headers(headers)

        request_kwargs: dict[str, Any] = {}
        if isinstance(body, FormData):
            request_kwargs["files"] = body.to_httpx_files()
        elif body is not None:
            request_kwargs["content"] = json.dumps(body).encode("utf-8")
            if not _has_header(merged, "Content-Type"):
                merged["Content-Type"] = JSON_CONTENT_TYPE

        logger.debug("%s %s", method, url)
        response = await self._http.request(method, url, headers=merged, **request_kwargs)
        payload = parse_payload(response)
        logger.debug("%s %s -> %s", method, url, response.status_code)

        try:
            return normalize_response(response, payload)
        except ApiError as exc:
            logger.debug("%s %s failed: %s %s", method, url, exc.status_code, exc.message)
            raise

    async def get(self, path: str, *, headers: Mapping[str, str] | None = None) -> ApiResponse[Any, Any]:
        return await self.api_fetch("GET", path, headers=headers)

    async def post(
        self, path: str, body: Any = None, *, headers: Mapping[str, str] | None = None
    ) -> ApiResponse[Any, Any]:
        return await self.api_fetch("POST", path, body=body, headers=headers)

    async def put(
        self, path: str, body: Any = None, *, headers: Mapping[str, str] | None = None
    ) -> ApiResponse[Any, Any]:
        return await self.api_fetch("PUT", path, body=body, headers=headers)

    async def patch(
        self, path: str, body: Any = None, *, headers: Mapping[str, str] | None = None
    ) -> ApiResponse[Any, Any]:
        return await self.api_fetch("PATCH", path, body=body, headers=headers)

    async def delete(self, path: str, *, headers: Mapping[str, str] | None = None) -> ApiResponse[Any, Any]:
        return await self.api_fetch("DELETE", path, headers=headers)
