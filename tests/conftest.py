from __future__ import annotations

from dataclasses import dataclass, field

import httpx
import pytest

from adapters.github_source import GitHubThemeSource
from core.config import AppSettings

RAW = "https://raw.githubusercontent.com/honu-ai/honu-saas-themes/main/components"
API = "https://api.github.com/repos/honu-ai/honu-saas-themes/contents/components"


@dataclass
class FakeRemote:
    """In-memory stand-in for raw.githubusercontent.com and the contents API.

    Keys are URLs without query string. Anything unknown answers 404.
    """

    files: dict[str, bytes] = field(default_factory=dict)
    listings: dict[str, list[dict]] = field(default_factory=dict)
    statuses: dict[str, int] = field(default_factory=dict)
    broken: set[str] = field(default_factory=set)
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        if url in self.broken:
            raise httpx.ConnectError("connection refused", request=request)
        if url in self.statuses:
            return httpx.Response(self.statuses[url])
        if url in self.listings:
            return httpx.Response(200, json=self.listings[url])
        if url in self.files:
            return httpx.Response(200, content=self.files[url])
        return httpx.Response(404)

    def serve(self, path: str, content: bytes | str) -> str:
        url = f"{RAW}/{path}"
        self.files[url] = content.encode("utf-8") if isinstance(content, str) else content
        return url

    def list_dir(self, path: str, names: list[str]) -> str:
        url = f"{API}/{path}"
        self.listings[url] = [
            {
                "name": name,
                "path": f"components/{path}/{name}",
                "type": "file",
                "download_url": self.serve(f"{path}/{name}", f"// {name}"),
            }
            for name in names
        ]
        return url

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def make_source(settings: AppSettings, remote: FakeRemote):
    def _make() -> GitHubThemeSource:
        return GitHubThemeSource(settings, transport=httpx.MockTransport(remote.handler))

    return _make
