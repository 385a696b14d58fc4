"""Static theme catalog.

Everything the installer knows in advance lives here: the allow-listed theme
names, the ordered component types, and the fixed app/page files fetched from
the theme root. The catalog is frozen and built once; nothing mutates it at
runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiscoveryStrategy(str, Enum):
    """How the files of a component type are discovered on the remote."""

    FIXED_NAME = "fixed-name"
    LISTING = "listing"

    @classmethod
    def default(cls) -> "DiscoveryStrategy":
        return cls.FIXED_NAME


class ComponentLayout(str, Enum):
    """Where component files land below `components/`."""

    NESTED = "nested"
    FLAT = "flat"

    @classmethod
    def default(cls) -> "ComponentLayout":
        return cls.NESTED


def to_pascal_case(value: str) -> str:
    """Convert a kebab-case tag into PascalCase (`hero-section` -> `HeroSection`)."""

    return "".join(word[:1].upper() + word[1:] for word in value.split("-") if word)


@dataclass(frozen=True)
class ThemeCatalog:
    themes: tuple[str, ...]
    component_types: tuple[str, ...]
    app_files: tuple[str, ...]
    page_files: tuple[str, ...]
    extension: str = "tsx"

    components_dir: str = "components"
    app_dir: str = "app"
    page_dir: str = "(dashboard)"

    def is_known_theme(self, theme: str) -> bool:
        return theme in self.themes

    def component_filenames(self, component_type: str) -> tuple[str, str, str]:
        """Expected files for a component type: index, component, stories."""

        name = to_pascal_case(component_type)
        return (
            f"index.{self.extension}",
            f"{name}.{self.extension}",
            f"{name}.stories.{self.extension}",
        )


DEFAULT_CATALOG = ThemeCatalog(
    themes=("minimal", "corporate", "playful", "friendly", "technical"),
    component_types=(
        "hero-section",
        "problem-section",
        "solution-section",
        "benefits-section",
        "faq-section",
        "cta-section",
        "footer",
    ),
    app_files=("globals.css", "layout.tsx"),
    page_files=("page.tsx",),
)
