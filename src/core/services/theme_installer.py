"""Theme installation orchestration.

The installer walks the static catalog in declared order and copies every
remote file it can find into the local project:

1. each component type (fixed-name triplet or remote directory listing)
2. the app files from the theme root into `app/`
3. the page files from the theme root into `app/(dashboard)/`

Work is strictly sequential: one fetch, then one write. Per-file problems
are recorded as warnings and never abort the run; only a failure to create a
destination directory does. The CLI owns printing and exit codes, this module
only reports through `InstallHooks` and the returned `InstallationResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable

from core.domain.catalog import (
    DEFAULT_CATALOG,
    ComponentLayout,
    DiscoveryStrategy,
    ThemeCatalog,
)
from core.domain.models import (
    FetchStatus,
    InstallationResult,
    InstalledItem,
    RemoteFile,
)
from core.errors import InstallError, UnknownThemeError
from core.interfaces.theme_source import ThemeSource


@dataclass
class InstallRequest:
    """Parameters that control a single installation."""

    theme: str
    destination: Path = field(default_factory=Path.cwd)
    strategy: DiscoveryStrategy = DiscoveryStrategy.default()
    layout: ComponentLayout = ComponentLayout.default()
    catalog: ThemeCatalog = DEFAULT_CATALOG


@dataclass
class InstallHooks:
    """Optional callbacks for UI layers (spinner text, inline warnings)."""

    progress: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None


def resolve_theme(theme: str, catalog: ThemeCatalog = DEFAULT_CATALOG) -> str:
    """Check a theme name against the allow-list (exact match)."""

    if not catalog.is_known_theme(theme):
        raise UnknownThemeError(theme, catalog.themes)
    return theme


def component_files(
    source: ThemeSource,
    theme: str,
    component_type: str,
    catalog: ThemeCatalog = DEFAULT_CATALOG,
) -> list[RemoteFile]:
    """Expected files of a component type for the fixed-name strategy."""

    return [
        RemoteFile(name=filename, url=source.file_url(theme, component_type, filename))
        for filename in catalog.component_filenames(component_type)
    ]


def ensure_dir(path: Path) -> Path:
    """Create `path` (and parents) if missing; fine if it already exists."""

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallError(f"Cannot create directory {path}: {exc.strerror or exc}") from exc
    return path


class _Run:
    """Mutable state of one `install` call."""

    def __init__(self, source: ThemeSource, request: InstallRequest, hooks: InstallHooks) -> None:
        self.source = source
        self.request = request
        self.hooks = hooks
        self.result = InstallationResult(theme=request.theme)
        # target path -> label of the item that wrote it first
        self.written: dict[Path, str] = {}

    def progress(self, text: str) -> None:
        if self.hooks.progress:
            self.hooks.progress(text)

    def warn(self, message: str) -> None:
        self.result.warnings.append(message)
        if self.hooks.warning:
            self.hooks.warning(message)

    async def copy(self, remote: RemoteFile, dest_dir: Path, label: str) -> bool:
        """Fetch one file and write it under `dest_dir`.

        Returns True only for a newly installed path. A path already written
        earlier in this run (flat layout) is overwritten but not counted again.
        """

        outcome = await self.source.fetch_file(remote)
        if outcome.status is FetchStatus.NOT_FOUND:
            return False
        if not outcome.ok:
            self.warn(f"Could not fetch {remote.url}: {outcome.detail or 'unknown error'}")
            return False

        target = dest_dir / remote.name
        try:
            target.write_bytes(outcome.content or b"")
        except OSError as exc:
            self.warn(f"Could not write {target}: {exc.strerror or exc}")
            return False

        previous = self.written.get(target)
        if previous is not None:
            self.warn(f"Overwrote {target} (also provided by '{previous}')")
            return False
        self.written[target] = label
        self.result.total_files += 1
        return True

    def component_dir(self, component_type: str) -> Path:
        base = self.request.destination / self.request.catalog.components_dir
        if self.request.layout is ComponentLayout.FLAT:
            return base
        return base / component_type

    async def discover(self, component_type: str) -> list[RemoteFile] | None:
        theme = self.request.theme
        if self.request.strategy is DiscoveryStrategy.FIXED_NAME:
            return component_files(self.source, theme, component_type, self.request.catalog)

        listing = await self.source.list_directory(theme, component_type)
        if not listing.ok:
            reason = "not found" if listing.status is FetchStatus.NOT_FOUND else listing.detail
            self.warn(f"Skipping component '{component_type}': listing failed ({reason})")
            return None
        return [entry.as_remote_file() for entry in listing.entries if entry.is_file]

    async def install_component(self, component_type: str) -> None:
        self.progress(f"Fetching {component_type} components...")
        files = await self.discover(component_type)
        if files is None:
            return

        self.progress(f"Installing {component_type} components...")
        dest_dir = ensure_dir(self.component_dir(component_type))

        found = 0
        for remote in files:
            if await self.copy(remote, dest_dir, component_type):
                found += 1

        if found:
            self.result.installed.append(
                InstalledItem(label=component_type, destination=dest_dir, files=found)
            )
        else:
            self.warn(f"No files found for component '{component_type}' in theme '{self.request.theme}'")

    async def install_root_files(self, filenames: Iterable[str], dest_dir: Path) -> None:
        ensure_dir(dest_dir)
        for filename in filenames:
            self.progress(f"Installing {filename}...")
            remote = RemoteFile(name=filename, url=self.source.file_url(self.request.theme, filename))
            if await self.copy(remote, dest_dir, filename):
                self.result.installed.append(InstalledItem(label=filename, destination=dest_dir))


async def install(
    *,
    source: ThemeSource,
    request: InstallRequest,
    hooks: InstallHooks | None = None,
) -> InstallationResult:
    """Install every file of `request.theme` that the remote can provide.

    Raises `UnknownThemeError` before any I/O when the theme is not
    allow-listed, and `InstallError` when a destination directory cannot be
    created. Everything else is reported in the returned result.
    """

    catalog = request.catalog
    request = replace(request, theme=resolve_theme(request.theme, catalog))
    run = _Run(source, request, hooks or InstallHooks())

    for component_type in catalog.component_types:
        await run.install_component(component_type)

    app_dir = request.destination / catalog.app_dir
    run.progress("Fetching theme app files...")
    await run.install_root_files(catalog.app_files, app_dir)

    run.progress("Fetching theme page file...")
    await run.install_root_files(catalog.page_files, app_dir / catalog.page_dir)

    return run.result
