"""Recurso: lista plana "cordless" (`/cordless`). Cuerpos JSON, sin archivos."""

from __future__ import annotations

from pydantic import BaseModel, Field

from adapters.resources._base import ResourceApi
from core.domain.models import CordlessItem


class CreateCordlessInput(BaseModel):
    title: str = Field(..., min_length=1)
    description: str
    link: str


class UpdateCordlessInput(CreateCordlessInput):
    id: str


class CordlessApi(ResourceApi):
    path = "/cordless"

    async def list_all(self) -> list[CordlessItem]:
        response = await self._client.get(self.path)
        return self._parse_many(CordlessItem, response.data)

    async def create(self, payload: CreateCordlessInput) -> CordlessItem:
        response = await self._client.post(self.path, payload.model_dump())
        return self._parse_one(CordlessItem, response.data)

    async def update(self, payload: UpdateCordlessInput) -> CordlessItem:
        # El backend recibe el objeto completo, id incluido.
        response = await self._client.patch(self._item_path(payload.id), payload.model_dump())
        return self._parse_one(CordlessItem, response.data)

    async def delete(self, item_id: str) -> object:
        response = await self._client.delete(self._item_path(item_id))
        return response.data
