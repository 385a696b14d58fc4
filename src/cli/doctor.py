"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client, github_api_headers
from core.config import AppSettings, write_user_env_vars
from core.domain.catalog import DEFAULT_CATALOG

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, *, settings: AppSettings, headers: dict[str, str] | None = None) -> tuple[bool, str]:
    try:
        async with build_async_client(settings, extra_headers=headers) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Show the effective configuration and check both remote endpoints."""

    settings = AppSettings()
    probe_theme = DEFAULT_CATALOG.themes[0]

    table = Table(title="honu-saas-cli Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Repository", "OK", f"{settings.github_owner}/{settings.github_repo}@{settings.github_ref}")
    table.add_row("Raw base", "OK", settings.raw_themes_url)
    if settings.github_token:
        table.add_row("GitHub token", "OK", "Authenticated API requests")
    else:
        table.add_row("GitHub token", "OPTIONAL", "Anonymous API requests (low rate limit)")

    raw_url = f"{settings.raw_themes_url}/{probe_theme}/{DEFAULT_CATALOG.app_files[0]}"
    ok_raw, detail_raw = asyncio.run(_check_http(raw_url, settings=settings))
    table.add_row("Raw download", "OK" if ok_raw else "FAIL", detail_raw)

    api_url = f"{settings.contents_api_url}/{settings.themes_root}?ref={settings.github_ref}"
    ok_api, detail_api = asyncio.run(
        _check_http(api_url, settings=settings, headers=github_api_headers(settings))
    )
    table.add_row("Contents API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] `--strategy listing` needs the contents API; "
            "run `doctor setup-token` if you are rate limited."
        )


@app.command(name="setup-token")
def setup_token() -> None:
    """Store a GitHub token in the user config .env (used for the contents API)."""

    token = typer.prompt("GitHub token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars({"HONU_SAAS_GITHUB_TOKEN": token})
    _console.print(f"[green]Saved GitHub token to:[/green] {env_path}")
