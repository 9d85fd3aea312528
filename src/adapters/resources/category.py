"""Recurso: categorías (`/category`). Altas y ediciones van en multipart."""

from __future__ import annotations

from pydantic import BaseModel, Field

from adapters.resources._base import ResourceApi
from core.domain.forms import FormData, UploadFile
from core.domain.models import Category


class CreateCategoryInput(BaseModel):
    name: str = Field(..., min_length=1)
    file: UploadFile


class UpdateCategoryInput(BaseModel):
    id: str
    name: str = Field(..., min_length=1)
    file: UploadFile | None = None


class CategoryApi(ResourceApi):
    path = "/category"

    async def list_all(self) -> list[Category]:
        response = await self._client.get(self.path)
        return self._parse_many(Category, response.data)

    async def get(self, category_id: str) -> Category:
        response = await self._client.get(self._item_path(category_id))
        return self._parse_one(Category, response.data)

    async def create(self, payload: CreateCategoryInput) -> Category:
        form = FormData()
        form.append("name", payload.name)
        form.append("file", payload.file)

        response = await self._client.post(self.path, form)
        return self._parse_one(Category, response.data)

    async def update(self, payload: UpdateCategoryInput) -> Category:
        form = FormData()
        form.append("name", payload.name)
        if payload.file is not None:
            form.append("file", payload.file)

        response = await self._client.patch(self._item_path(payload.id), form)
        return self._parse_one(Category, response.data)

    async def delete(self, category_id: str) -> object:
        response = await self._client.delete(self._item_path(category_id))
        return response.data
