"""Recurso: catálogos PDF (`/catalogue`), asociados a una categoría."""

from __future__ import annotations

from pydantic import BaseModel, Field

from adapters.resources._base import ResourceApi
from core.domain.forms import FormData, UploadFile
from core.domain.models import Catalog


class CreateCatalogInput(BaseModel):
    title: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    file: UploadFile


class UpdateCatalogInput(BaseModel):
    id: str
    title: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    file: UploadFile | None = None


class CatalogApi(ResourceApi):
    path = "/catalogue"

    async def list_all(self) -> list[Catalog]:
        response = await self._client.get(self.path)
        return self._parse_many(Catalog, response.data)

    async def get(self, catalog_id: str) -> Catalog:
        response = await self._client.get(self._item_path(catalog_id))
        return self._parse_one(Catalog, response.data)

    async def create(self, payload: CreateCatalogInput) -> Catalog:
        form = FormData()
        form.append("title", payload.title)
        form.append("categoryId", payload.category_id)
        form.append("file", payload.file)

        response = await self._client.post(self.path, form)
        return self._parse_one(Catalog, response.data)

    async def update(self, payload: UpdateCatalogInput) -> Catalog:
        form = FormData()
        form.append("title", payload.title)
        form.append("categoryId", payload.category_id)
        if payload.file is not None:
            form.append("file", payload.file)

        response = await self._client.patch(self._item_path(payload.id), form)
        return self._parse_one(Catalog, response.data)

    async def delete(self, catalog_id: str) -> object:
        response = await self._client.delete(self._item_path(catalog_id))
        return response.data
