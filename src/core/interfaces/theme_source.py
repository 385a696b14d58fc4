"""Contrato de la fuente remota de temas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El instalador no sabe nada de GitHub ni de httpx; los tests pueden pasar
  cualquier objeto que cumpla el contrato.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import FetchOutcome, ListingOutcome, RemoteFile


@runtime_checkable
class ThemeSource(Protocol):
    """Proveedor opaco de listados y descargas de ficheros de un tema.

    Reglas de diseño:
    - Los métodos son asíncronos porque hacen I/O (HTTP).
    - Nunca lanzan por un fichero ausente o un fallo de red: devuelven un
      outcome con `status` `not_found` o `error`.
    """

    def file_url(self, theme: str, *parts: str) -> str:
        """URL de descarga directa de `<theme>/<parts...>`."""

        ...

    async def list_directory(self, theme: str, *parts: str) -> ListingOutcome:
        """Lista el directorio `<theme>/<parts...>` del repositorio remoto."""

        ...

    async def fetch_file(self, remote: RemoteFile) -> FetchOutcome:
        """Descarga el contenido bruto de `remote.url`."""

        ...
