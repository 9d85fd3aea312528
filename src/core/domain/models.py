"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El backend usa camelCase; los alias mantienen snake_case en Python.

Nota:
- Las entidades pertenecen al backend; el cliente solo las lee y las cachea.
"""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

TData = TypeVar("TData")
TMeta = TypeVar("TMeta")


class EnvelopePayload(BaseModel):
    """Decodificación tolerante del sobre JSON `{statusCode, message, data, meta?}`.

    Por qué tolerante:
    - Un campo con tipo incorrecto equivale a "campo ausente"; el llamador
      rellena con el status/reason del transporte.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status_code: int | None = Field(
        default=None,
        alias="statusCode",
        description="Status de negocio reportado por el backend.",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje legible del backend.",
    )
    data: Any = Field(
        default=None,
        description="Carga útil (o detalles del error si statusCode >= 400).",
    )
    meta: Any = Field(
        default=None,
        description="Metadatos opcionales (paginación, totales).",
    )

    @field_validator("status_code", mode="before")
    @classmethod
    def _status_or_absent(cls, value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @field_validator("message", mode="before")
    @classmethod
    def _message_or_absent(cls, value: Any) -> str | None:
        if isinstance(value, str):
            return value
        # Errores de validación: lista de mensajes.
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return ", ".join(value)
        return None


class ApiResponse(BaseModel, Generic[TData, TMeta]):
    """Resultado normalizado de una petición exitosa."""

    status_code: int = Field(..., description="Status efectivo (sobre o transporte).")
    message: str = Field(default="", description="Mensaje efectivo (sobre o reason phrase).")
    data: TData = Field(..., description="Carga útil decodificada.")
    meta: TMeta | None = Field(default=None, description="Metadatos, si el backend los envía.")


class _Entity(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class User(_Entity):
    id: str
    name: str
    email: str


class Category(_Entity):
    id: str
    name: str
    image: str = Field(default="", description="Ruta del asset de la categoría.")


class ProductCategory(_Entity):
    id: str
    name: str


class Product(_Entity):
    id: str
    name: str
    description: str = ""
    images: list[str] = Field(default_factory=list, description="Rutas de las imágenes.")
    store_url: str | None = Field(default=None, alias="storeUrl")
    category_id: str = Field(..., alias="categoryId")
    category: ProductCategory | None = None


class CatalogCategory(_Entity):
    id: str
    name: str
    image: str = ""


class Catalog(_Entity):
    id: str
    title: str
    file: str = Field(default="", description="Ruta del PDF del catálogo.")
    category_id: str = Field(..., alias="categoryId")
    category: CatalogCategory | None = None


class CordlessItem(_Entity):
    id: str
    title: str
    description: str = ""
    link: str = ""


class WebGalleryImage(_Entity):
    id: str
    title: str
    image: str
    type: Literal["web"] = "web"


class InstagramGalleryImage(_Entity):
    id: str
    title: str
    link: str
    image: str
    type: Literal["instagram"] = "instagram"


GalleryImage = WebGalleryImage | InstagramGalleryImage


class ArticleMetaTags(_Entity):
    title: str | None = None
    keywords: str | None = None
    description: str | None = None


class Article(_Entity):
    id: str
    title: str
    slug: str = ""
    excerpt: str = ""
    content_html: str = Field(default="", alias="contentHtml")
    primary_image: str | None = Field(default=None, alias="primaryImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    seo_title: str | None = Field(default=None, alias="seoTitle")
    seo_description: str | None = Field(default=None, alias="seoDescription")
    seo_keywords: str | None = Field(default=None, alias="seoKeywords")
    meta_tags: ArticleMetaTags | None = Field(default=None, alias="metaTags")


class TokenValidation(_Entity):
    valid: bool = False
    user: User | None = None


class LoginResult(_Entity):
    token: str = Field(..., min_length=1)
    user: User
