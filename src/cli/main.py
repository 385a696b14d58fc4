"""CLI principal (Typer).

Comandos:
- `add <theme-name>`: copia componentes, app files y página del tema al proyecto.
- `list`: muestra la allow-list de temas.
- `doctor`: diagnósticos de entorno (ver `cli.doctor`).

La CLI solo orquesta y presenta; la lógica vive en
`core.services.theme_installer`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from adapters.github_source import GitHubThemeSource
from cli import doctor
from cli.ui_components import build_summary_table, print_banner, print_theme_list
from core.config import AppSettings
from core.domain.catalog import DEFAULT_CATALOG, ComponentLayout, DiscoveryStrategy
from core.domain.models import InstallationResult
from core.errors import ThemeInstallerError, UnknownThemeError
from core.services.theme_installer import (
    InstallHooks,
    InstallRequest,
    install,
    resolve_theme,
)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Install Honu SaaS themes (components, layout and pages) into your project.",
)
app.add_typer(doctor.app, name="doctor")

console = Console()


@app.command(name="list")
def list_themes() -> None:
    """List all available themes."""

    print_theme_list(console, DEFAULT_CATALOG.themes)
    console.print("\n[yellow]Use: [bold]honu-saas-cli add <theme-name>[/bold] to install a theme[/yellow]")


async def _install(settings: AppSettings, request: InstallRequest, hooks: InstallHooks) -> InstallationResult:
    async with GitHubThemeSource(settings) as source:
        return await install(source=source, request=request, hooks=hooks)


@app.command()
def add(
    theme_name: str = typer.Argument(..., metavar="THEME-NAME", help="Theme to install."),
    dest: Path = typer.Option(
        Path("."),
        "--dest",
        "-d",
        file_okay=False,
        help="Project root to install into (default: current directory).",
    ),
    strategy: Optional[DiscoveryStrategy] = typer.Option(
        None,
        "--strategy",
        case_sensitive=False,
        help="How component files are discovered: fixed-name or listing.",
    ),
    layout: Optional[ComponentLayout] = typer.Option(
        None,
        "--layout",
        case_sensitive=False,
        help="nested (components/<type>/) or flat (components/).",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Add a new theme by copying its components into your project."""

    try:
        theme = resolve_theme(theme_name)
    except UnknownThemeError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        print_theme_list(console, exc.available, title_style="yellow")
        raise typer.Exit(code=1)

    settings = AppSettings()
    root = dest.resolve()
    request = InstallRequest(
        theme=theme,
        destination=root,
        strategy=strategy or settings.default_strategy,
        layout=layout or settings.default_layout,
    )

    if not no_banner:
        print_banner(console)

    with console.status(f"[blue]Fetching theme '{theme}'...[/blue]") as status:
        hooks = InstallHooks(
            progress=lambda text: status.update(f"[blue]{text}[/blue]"),
            warning=lambda message: console.print(f"[yellow]  Warning: {escape(message)}[/yellow]"),
        )
        try:
            result = asyncio.run(_install(settings, request, hooks))
        except (ThemeInstallerError, OSError, httpx.HTTPError) as exc:
            console.print(f"[red]Error: {escape(str(exc))}[/red]")
            raise typer.Exit(code=1)

    if not result.succeeded:
        console.print(f"[red]✖ No components found for theme '{theme}'[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✔ Theme '{theme}' installed successfully![/green]")
    console.print(build_summary_table(result, root=root))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
