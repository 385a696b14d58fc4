"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los adaptadores (HTTP/GitHub) lean la config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.catalog import ComponentLayout, DiscoveryStrategy


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "honu-saas-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "honu-saas-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "honu-saas-cli"
    return Path.home() / ".config" / "honu-saas-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves con valor `None` se ignoran; el resto se mezcla con lo existente.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# honu-saas-cli user config (.env)"]
    for key in sorted(existing):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="HONU_SAAS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    github_owner: str = Field(
        default="honu-ai",
        min_length=1,
        description="Owner del repositorio de temas en GitHub.",
    )
    github_repo: str = Field(
        default="honu-saas-themes",
        min_length=1,
        description="Nombre del repositorio de temas.",
    )
    github_ref: str = Field(
        default="main",
        min_length=1,
        description="Rama/ref desde la que se descargan los temas.",
    )
    themes_root: str = Field(
        default="components",
        description="Carpeta raíz de los temas dentro del repositorio.",
    )
    raw_base_url: str = Field(
        default="https://raw.githubusercontent.com",
        min_length=8,
        description="Host de descarga directa de contenido (raw).",
    )
    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL de la API REST de GitHub (listado de directorios).",
    )
    github_token: str | None = Field(
        default=None,
        description="Token opcional para la API de GitHub (rate limit).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="honu-saas-cli/0.1",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )

    default_strategy: DiscoveryStrategy = Field(
        default=DiscoveryStrategy.default(),
        description="Estrategia de descubrimiento de ficheros por defecto.",
    )
    default_layout: ComponentLayout = Field(
        default=ComponentLayout.default(),
        description="Disposición local de los componentes por defecto.",
    )

    @property
    def raw_themes_url(self) -> str:
        """URL raw de la carpeta que contiene todos los temas."""

        parts = [
            self.raw_base_url.rstrip("/"),
            self.github_owner,
            self.github_repo,
            self.github_ref,
        ]
        root = self.themes_root.strip("/")
        if root:
            parts.append(root)
        return "/".join(parts)

    @property
    def contents_api_url(self) -> str:
        """Endpoint `contents` de la API para el repositorio de temas."""

        return f"{self.api_base_url.rstrip('/')}/repos/{self.github_owner}/{self.github_repo}/contents"
