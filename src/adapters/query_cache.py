"""Cache de lecturas con política de reintentos (capa de datos de la consola).

Por qué aquí y no en `ApiClient`:
- El cliente HTTP nunca reintenta; decidir cuándo reintentar y cuándo
  invalidar es responsabilidad de quien consume los datos.

Política:
- Queries: no se reintentan errores 4xx; el resto hasta 2 reintentos con
  backoff exponencial.
- Mutaciones: sin reintentos; al terminar bien invalidan claves.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable, Iterable, TypeVar

from core.domain.errors import ApiError

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryKey = tuple[Hashable, ...]


def should_retry_query(failure_count: int, error: BaseException) -> bool:
    """`failure_count` es el número de fallos previos al actual (0 en el primero)."""

    if isinstance(error, ApiError) and error.is_client_error:
        return False
    return failure_count < 2


def default_retry_delay(failure_count: int) -> float:
    """Backoff exponencial: 1s, 2s, 4s... con tope de 30s."""

    return min(1.0 * 2 ** (failure_count - 1), 30.0)


@dataclass
class _Entry:
    value: Any
    fetched_at: float


class QueryCache:
    def __init__(
        self,
        *,
        stale_time: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
        retry_delay: Callable[[int], float] = default_retry_delay,
    ) -> None:
        self._stale_time = stale_time
        self._clock = clock
        self._retry_delay = retry_delay
        self._entries: dict[QueryKey, _Entry] = {}

    def get_cached(self, key: QueryKey) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.fetched_at >= self._stale_time:
            return None
        return entry.value

    async def fetch(self, key: QueryKey, fn: Callable[[], Awaitable[T]]) -> T:
        entry = self._entries.get(key)
        if entry is not None and self._clock() - entry.fetched_at < self._stale_time:
            return entry.value

        failure_count = 0
        while True:
            try:
                value = await fn()
            except Exception as exc:
                if not should_retry_query(failure_count, exc):
                    raise
                failure_count += 1
                delay = self._retry_delay(failure_count)
                logger.debug("Retrying query %r in %.1fs after failure %d: %s", key, delay, failure_count, exc)
                await asyncio.sleep(delay)
                continue
            self._entries[key] = _Entry(value=value, fetched_at=self._clock())
            return value

    def invalidate(self, prefix: QueryKey) -> int:
        """Elimina todas las claves que empiezan por `prefix`."""

        stale = [key for key in self._entries if key[: len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]
        return len(stale)

    async def mutate(
        self,
        fn: Callable[[], Awaitable[T]],
        *,
        invalidate: Iterable[QueryKey] = (),
    ) -> T:
        result = await fn()
        for prefix in invalidate:
            self.invalidate(prefix)
        return result
