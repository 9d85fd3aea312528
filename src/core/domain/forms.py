"""Payloads multipart.

Por qué un tipo propio:
- Los helpers HTTP deciden JSON vs multipart por tipo (`isinstance(body, FormData)`).
- Mantiene el orden de los campos y permite claves repetidas (`files`).
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class UploadFile:
    """Archivo a subir (imagen/PDF) ya leído en memoria."""

    filename: str
    content: bytes
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: Path) -> "UploadFile":
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(filename=path.name, content=path.read_bytes(), content_type=guessed)


@dataclass
class FormData:
    """Formulario multipart: campos de texto y archivos, en orden de inserción."""

    parts: list[tuple[str, str | UploadFile]] = field(default_factory=list)

    def append(self, name: str, value: str | UploadFile) -> None:
        self.parts.append((name, value))

    def get_all(self, name: str) -> list[str | UploadFile]:
        return [value for key, value in self.parts if key == name]

    def to_httpx_files(self) -> list[tuple[str, tuple[str | None, bytes, str | None]]]:
        """Representación para `httpx` (`files=`).

        Los campos de texto van como partes sin filename; así httpx siempre
        construye un multipart aunque no haya archivos.
        """

        out: list[tuple[str, tuple[str | None, bytes, str | None]]] = []
        for name, value in self.parts:
            if isinstance(value, UploadFile):
                out.append((name, (value.filename, value.content, value.content_type)))
            else:
                out.append((name, (None, value.encode("utf-8"), None)))
        return out
