"""Recurso: galería de imágenes.

Dos colecciones con el mismo ciclo de vida:
- web (`/gallery`): título + imagen.
- instagram (`/instagram`): título + link al post + imagen.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from adapters.http_client import ApiClient
from adapters.resources._base import ResourceApi
from core.domain.forms import FormData, UploadFile
from core.domain.models import InstagramGalleryImage, WebGalleryImage


class CreateWebImageInput(BaseModel):
    title: str = Field(..., min_length=1)
    file: UploadFile


class UpdateWebImageInput(BaseModel):
    id: str
    title: str = Field(..., min_length=1)
    file: UploadFile | None = None


class CreateInstagramImageInput(BaseModel):
    title: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)
    file: UploadFile


class UpdateInstagramImageInput(BaseModel):
    id: str
    title: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)
    file: UploadFile | None = None


class WebGalleryApi(ResourceApi):
    path = "/gallery"

    async def list_all(self) -> list[WebGalleryImage]:
        response = await self._client.get(self.path)
        return self._parse_many(WebGalleryImage, response.data)

    async def create(self, payload: CreateWebImageInput) -> WebGalleryImage:
        form = FormData()
        form.append("title", payload.title)
        form.append("file", payload.file)

        response = await self._client.post(self.path, form)
        return self._parse_one(WebGalleryImage, response.data)

    async def update(self, payload: UpdateWebImageInput) -> WebGalleryImage:
        form = FormData()
        form.append("title", payload.title)
        if payload.file is not None:
            form.append("file", payload.file)

        response = await self._client.patch(self._item_path(payload.id), form)
        return self._parse_one(WebGalleryImage, response.data)

    async def delete(self, image_id: str) -> object:
        response = await self._client.delete(self._item_path(image_id))
        return response.data


class InstagramGalleryApi(ResourceApi):
    path = "/instagram"

    async def list_all(self) -> list[InstagramGalleryImage]:
        response = await self._client.get(self.path)
        return self._parse_many(InstagramGalleryImage, response.data)

    async def create(self, payload: CreateInstagramImageInput) -> InstagramGalleryImage:
        form = FormData()
        form.append("title", payload.title)
        form.append("link", payload.link)
        form.append("file", payload.file)

        response = await self._client.post(self.path, form)
        return self._parse_one(InstagramGalleryImage, response.data)

    async def update(self, payload: UpdateInstagramImageInput) -> InstagramGalleryImage:
        form = FormData()
        form.append("title", payload.title)
        form.append("link", payload.link)
        if payload.file is not None:
            form.append("file", payload.file)

        response = await self._client.patch(self._item_path(payload.id), form)
        return self._parse_one(InstagramGalleryImage, response.data)

    async def delete(self, image_id: str) -> object:
        response = await self._client.delete(self._item_path(image_id))
        return response.data


class GalleryApi:
    """Fachada con ambas colecciones."""

    def __init__(self, client: ApiClient) -> None:
        self.web = WebGalleryApi(client)
        self.instagram = InstagramGalleryApi(client)
