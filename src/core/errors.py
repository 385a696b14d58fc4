"""Errores del Core.

Solo los errores fatales son excepciones; los fallos por fichero se modelan
como `FetchOutcome`/`ListingOutcome` y nunca llegan aquí.
"""

from __future__ import annotations

from typing import Iterable


class ThemeInstallerError(Exception):
    """Base de los errores que abortan una instalación."""


class UnknownThemeError(ThemeInstallerError):
    def __init__(self, theme: str, available: Iterable[str]) -> None:
        self.theme = theme
        self.available = tuple(available)
        super().__init__(f"Theme '{theme}' not found.")


class InstallError(ThemeInstallerError):
    """Fallo sistémico (p.ej. no se puede crear un directorio destino)."""
