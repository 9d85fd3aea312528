"""Recurso: productos (`/product`).

Notas:
- Varias imágenes por producto: cada archivo se envía como campo `files`.
- En la edición, `files` solo se envía si hay imágenes nuevas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from adapters.resources._base import ResourceApi
from core.domain.forms import FormData, UploadFile
from core.domain.models import Product


class CreateProductInput(BaseModel):
    name: str = Field(..., min_length=1)
    description: str
    category_id: str = Field(..., min_length=1)
    files: list[UploadFile] = Field(default_factory=list)
    store_url: str | None = None


class UpdateProductInput(BaseModel):
    id: str
    name: str = Field(..., min_length=1)
    description: str
    category_id: str = Field(..., min_length=1)
    files: list[UploadFile] | None = None
    store_url: str | None = None


def _product_form(
    *, name: str, description: str, category_id: str, store_url: str | None, files: list[UploadFile] | None
) -> FormData:
    form = FormData()
    form.append("name", name)
    form.append("description", description)
    form.append("categoryId", category_id)
    if store_url:
        form.append("storeUrl", store_url)
    for upload in files or []:
        form.append("files", upload)
    return form


class ProductApi(ResourceApi):
    path = "/product"

    async def list_all(self) -> list[Product]:
        response = await self._client.get(self.path)
        return self._parse_many(Product, response.data)

    async def get(self, product_id: str) -> Product:
        response = await self._client.get(self._item_path(product_id))
        return self._parse_one(Product, response.data)

    async def create(self, payload: CreateProductInput) -> Product:
        form = _product_form(
            name=payload.name,
            description=payload.description,
            category_id=payload.category_id,
            store_url=payload.store_url,
            files=payload.files,
        )
        response = await self._client.post(self.path, form)
        return self._parse_one(Product, response.data)

    async def update(self, payload: UpdateProductInput) -> Product:
        form = _product_form(
            name=payload.name,
            description=payload.description,
            category_id=payload.category_id,
            store_url=payload.store_url,
            files=payload.files,
        )
        response = await self._client.patch(self._item_path(payload.id), form)
        return self._parse_one(Product, response.data)

    async def delete(self, product_id: str) -> object:
        response = await self._client.delete(self._item_path(product_id))
        return response.data
