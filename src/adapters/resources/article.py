"""Recurso: artículos (`/article`).

Multipart en alta y edición:
- `publishedAt` se omite si es None.
- Campos SEO vacíos se omiten.
- `metaTags` viaja como JSON serializado dentro de un campo de texto.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, Field

from adapters.resources._base import ResourceApi
from core.domain.forms import FormData, UploadFile
from core.domain.models import Article, ArticleMetaTags


class CreateArticleInput(BaseModel):
    title: str = Field(..., min_length=1)
    excerpt: str
    content_html: str
    file: UploadFile | None = None
    published_at: str | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    seo_keywords: str | None = None
    meta_tags: ArticleMetaTags | None = None


class UpdateArticleInput(CreateArticleInput):
    id: str


def build_article_form(payload: CreateArticleInput) -> FormData:
    form = FormData()
    form.append("title", payload.title)
    form.append("excerpt", payload.excerpt)
    form.append("contentHtml", payload.content_html)
    if payload.file is not None:
        form.append("file", payload.file)
    if payload.published_at is not None:
        form.append("publishedAt", payload.published_at)
    if payload.seo_title:
        form.append("seoTitle", payload.seo_title)
    if payload.seo_description:
        form.append("seoDescription", payload.seo_description)
    if payload.seo_keywords:
        form.append("seoKeywords", payload.seo_keywords)
    if payload.meta_tags is not None:
        form.append("metaTags", json.dumps(payload.meta_tags.model_dump(exclude_none=True)))
    return form


class ArticleApi(ResourceApi):
    path = "/article"

    async def list_all(self) -> list[Article]:
        response = await self._client.get(self.path)
        return self._parse_many(Article, response.data)

    async def get(self, article_id: str) -> Article:
        response = await self._client.get(self._item_path(article_id))
        return self._parse_one(Article, response.data)

    async def create(self, payload: CreateArticleInput) -> Article:
        response = await self._client.post(self.path, build_article_form(payload))
        return self._parse_one(Article, response.data)

    async def update(self, payload: UpdateArticleInput) -> Article:
        response = await self._client.patch(self._item_path(payload.id), build_article_form(payload))
        return self._parse_one(Article, response.data)

    async def delete(self, article_id: str) -> object:
        response = await self._client.delete(self._item_path(article_id))
        return response.data
