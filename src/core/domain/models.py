"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El payload JSON de la API de contenidos se valida en un único sitio.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class FetchStatus(str, Enum):
    """Resultado de un intento de descarga o listado."""

    FETCHED = "fetched"
    NOT_FOUND = "not_found"
    ERROR = "error"


class RemoteFile(BaseModel):
    """Un fichero remoto que se intentará descargar (siempre opcional)."""

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre del fichero (también el nombre local).",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="URL de descarga directa.",
    )


class ListingEntry(BaseModel):
    """Entrada devuelta por el endpoint `contents` de GitHub."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    path: str = Field(default="")
    type: str = Field(
        ...,
        description="'file', 'dir', 'symlink' o 'submodule'.",
    )
    download_url: str | None = Field(
        default=None,
        description="URL raw; GitHub la deja a null para directorios.",
    )

    @property
    def is_file(self) -> bool:
        return self.type == "file" and bool(self.download_url)

    def as_remote_file(self) -> RemoteFile:
        return RemoteFile(name=self.name, url=self.download_url or "")


class FetchOutcome(BaseModel):
    """Resultado de descargar un `RemoteFile`.

    Por qué un tipo de resultado:
    - Un 404 es esperado (fichero opcional) y se ignora en silencio.
    - Un error transitorio (red, 5xx) no se confunde con un 404: se reporta.
    """

    url: str
    status: FetchStatus
    content: bytes | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.FETCHED and self.content is not None


class ListingOutcome(BaseModel):
    url: str
    status: FetchStatus
    entries: list[ListingEntry] = Field(default_factory=list)
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.FETCHED


class InstalledItem(BaseModel):
    label: str = Field(
        ...,
        min_length=1,
        description="Tipo de componente o nombre de fichero instalado.",
    )
    destination: Path = Field(
        ...,
        description="Directorio local donde se escribió.",
    )
    files: int = Field(default=1, ge=1)


class InstallationResult(BaseModel):
    """Agregado de una ejecución de `install`.

    Invariante: `total_files` solo cuenta escrituras que terminaron bien.
    """

    theme: str = Field(..., min_length=1)
    total_files: int = Field(default=0, ge=0)
    installed: list[InstalledItem] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.total_files > 0
