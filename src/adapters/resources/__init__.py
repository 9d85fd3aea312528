"""Recursos REST del backend de contenidos.

Por qué un paquete:
- Un módulo por entidad; todos comparten `ApiClient` y devuelven modelos del dominio.
"""

from adapters.resources.article import ArticleApi
from adapters.resources.catalog import CatalogApi
from adapters.resources.category import CategoryApi
from adapters.resources.cordless import CordlessApi
from adapters.resources.gallery import GalleryApi, InstagramGalleryApi, WebGalleryApi
from adapters.resources.product import ProductApi

__all__ = [
	"ArticleApi",
	"CatalogApi",
	"CategoryApi",
	"CordlessApi",
	"GalleryApi",
	"InstagramGalleryApi",
	"ProductApi",
	"WebGalleryApi",
]
