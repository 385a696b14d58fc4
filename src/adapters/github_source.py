"""Fuente de temas: repositorio de GitHub.

Dos endpoints:
- raw (`raw.githubusercontent.com`) para descargar ficheros por URL directa.
- API REST `contents` para listar un directorio (estrategia `listing`).

Está en adapters porque es I/O puro (HTTP). Cualquier fallo por fichero se
devuelve como outcome; el instalador decide qué hacer con él.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client, github_api_headers
from core.config import AppSettings
from core.domain.models import (
    FetchOutcome,
    FetchStatus,
    ListingEntry,
    ListingOutcome,
    RemoteFile,
)
from core.interfaces.theme_source import ThemeSource


def _join(*segments: str) -> str:
    return "/".join(quote(s.strip("/")) for s in segments if s.strip("/"))


class GitHubThemeSource(ThemeSource):
    """Implementación de `ThemeSource` sobre GitHub.

    Uso:
        async with GitHubThemeSource(settings) as source:
            outcome = await source.fetch_file(remote)
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubThemeSource":
        self._client = build_async_client(self._settings, transport=self._transport)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("GitHubThemeSource must be used as an async context manager")
        return self._client

    def file_url(self, theme: str, *parts: str) -> str:
        return f"{self._settings.raw_themes_url}/{_join(theme, *parts)}"

    def listing_url(self, theme: str, *parts: str) -> str:
        path = _join(self._settings.themes_root, theme, *parts)
        return f"{self._settings.contents_api_url}/{path}"

    async def list_directory(self, theme: str, *parts: str) -> ListingOutcome:
        url = self.listing_url(theme, *parts)
        try:
            resp = await self.client.get(
                url,
                params={"ref": self._settings.github_ref},
                headers=github_api_headers(self._settings),
            )
        except httpx.HTTPError as exc:
            return ListingOutcome(url=url, status=FetchStatus.ERROR, detail=str(exc) or exc.__class__.__name__)

        if resp.status_code == 404:
            return ListingOutcome(url=url, status=FetchStatus.NOT_FOUND, detail="HTTP 404")
        if resp.status_code != 200:
            return ListingOutcome(url=url, status=FetchStatus.ERROR, detail=f"HTTP {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError:
            return ListingOutcome(url=url, status=FetchStatus.ERROR, detail="invalid JSON payload")

        # Un fichero (no directorio) devuelve un objeto en vez de una lista.
        if not isinstance(payload, list):
            return ListingOutcome(url=url, status=FetchStatus.ERROR, detail="not a directory listing")

        entries: list[ListingEntry] = []
        for raw in payload:
            if not isinstance(raw, dict):
                continue
            try:
                entries.append(ListingEntry.model_validate(raw))
            except ValidationError:
                continue
        return ListingOutcome(url=url, status=FetchStatus.FETCHED, entries=entries)

    async def fetch_file(self, remote: RemoteFile) -> FetchOutcome:
        try:
            resp = await self.client.get(remote.url)
        except httpx.HTTPError as exc:
            return FetchOutcome(url=remote.url, status=FetchStatus.ERROR, detail=str(exc) or exc.__class__.__name__)

        if resp.status_code == 404:
            return FetchOutcome(url=remote.url, status=FetchStatus.NOT_FOUND, detail="HTTP 404")
        if not resp.is_success:
            return FetchOutcome(url=remote.url, status=FetchStatus.ERROR, detail=f"HTTP {resp.status_code}")
        return FetchOutcome(url=remote.url, status=FetchStatus.FETCHED, content=resp.content)
