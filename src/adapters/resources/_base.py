"""Base común de los recursos del backend."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter

from adapters.http_client import ApiClient

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceApi:
    """Recurso REST bajo `path` (`/category`, `/product`, ...)."""

    path: str = ""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def _item_path(self, item_id: str) -> str:
        return f"{self.path}/{item_id}"

    @staticmethod
    def _parse_one(model: type[ModelT], data: Any) -> ModelT:
        return model.model_validate(data)

    @staticmethod
    def _parse_many(model: type[ModelT], data: Any) -> list[ModelT]:
        return TypeAdapter(list[model]).validate_python(data or [])  # type: ignore[valid-type]
