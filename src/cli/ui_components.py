"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `add`, `list` y `doctor`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import InstallationResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("HONU SAAS", style="bold cyan")
    subtitle = Text("Themes • Components • Pages", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_theme_list(
    console: Console,
    themes: Iterable[str],
    *,
    title: str = "Available themes:",
    title_style: str = "green",
) -> None:
    console.print(title, style=title_style)
    for theme in themes:
        console.print(f"[cyan]  • {theme}[/cyan]")


def _display_path(path: Path, root: Path | None) -> str:
    if root is not None:
        try:
            return str(path.relative_to(root)) or "."
        except ValueError:
            pass
    return str(path)


def build_summary_table(result: InstallationResult, *, root: Path | None = None) -> Table:
    """Tabla con cada elemento instalado y su destino."""

    table = Table(title=f"{result.total_files} files copied")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Files", style="white", justify="right")
    table.add_column("Destination", style="magenta")
    for item in result.installed:
        table.add_row(item.label, str(item.files), _display_path(item.destination, root))
    return table
