"""
Code editor — the narrow interface the host editor drives, and its Zed
implementation.

The host calls in with "open this path at this line/column" or "these
assets changed"; it gets a bool back. Everything host-specific (how it
finds the project root, where it keeps preferences, how it enumerates
assemblies) is injected, so the logic runs and tests without Unity.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import BaseModel

from zedunity.adapters.base import AssemblySource
from zedunity.core.persistence.preferences_file import PreferencesStore
from zedunity.core.services.project_generation import generate_all, needs_sync
from zedunity.core.services.zed_discovery import (
    EDITOR_NAME,
    PlatformProbe,
    build_open_file_args,
    build_open_project_args,
    is_zed_path,
    list_installations,
)
from zedunity.core.services.zed_launch import launch

logger = logging.getLogger(__name__)


class Installation(BaseModel):
    """An editor the host can offer in its external-editor picker."""

    name: str
    path: str


class ExternalCodeEditor(ABC):
    """What the host needs from an external script editor."""

    @property
    @abstractmethod
    def installations(self) -> list[Installation]:
        """Editors found on this machine."""

    @abstractmethod
    def try_get_installation_for_path(self, editor_path: str) -> Installation | None:
        """Installation for *editor_path* if this editor owns it, else None."""

    @abstractmethod
    def initialize(self, editor_installation_path: str) -> None:
        """Called by the host when this editor becomes the active one."""

    @abstractmethod
    def open_project(self, file_path: str = "", line: int = -1, column: int = -1) -> bool:
        """Open the project, or a file in it. True if the editor was launched."""

    @abstractmethod
    def sync_all(self) -> int:
        """Regenerate every project file. Returns the project count."""

    @abstractmethod
    def sync_if_needed(
        self,
        added: Iterable[str],
        deleted: Iterable[str],
        moved: Iterable[str],
        moved_from: Iterable[str],
        imported: Iterable[str],
    ) -> bool:
        """Regenerate if the changes matter. True if regeneration ran."""


class ZedCodeEditor(ExternalCodeEditor):
    """Zed as Unity's external script editor."""

    def __init__(
        self,
        project_root: Path,
        assembly_source: AssemblySource,
        preferences: PreferencesStore,
        probe: PlatformProbe | None = None,
        launcher: Callable[[str, str], bool] = launch,
    ):
        self.project_root = project_root
        self.assembly_source = assembly_source
        self.preferences = preferences
        self.probe = probe
        self._launcher = launcher
        self._editor_path = ""
        self.last_sync_count: int | None = None

    # ── Installations ───────────────────────────────────────────

    @property
    def installations(self) -> list[Installation]:
        return [
            Installation(name=EDITOR_NAME, path=path)
            for path in list_installations(self.probe)
        ]

    def try_get_installation_for_path(self, editor_path: str) -> Installation | None:
        if not is_zed_path(editor_path):
            return None
        return Installation(name=EDITOR_NAME, path=editor_path)

    def initialize(self, editor_installation_path: str) -> None:
        self._editor_path = editor_installation_path or ""

    # ── Open ────────────────────────────────────────────────────

    def resolve_editor_path(self) -> str | None:
        """Executable to launch, or None.

        Order: the path given to initialize(), the configured editor
        path, the host's current editor path if it is a Zed executable,
        then the first discovered installation.
        """
        if self._editor_path:
            return self._editor_path

        prefs = self.preferences.load()
        if prefs.editor_path:
            return prefs.editor_path

        if prefs.current_editor_path and is_zed_path(prefs.current_editor_path):
            return prefs.current_editor_path

        return next(iter(list_installations(self.probe)), None)

    def open_project(self, file_path: str = "", line: int = -1, column: int = -1) -> bool:
        if not self.preferences.load().enabled:
            logger.error("Zed integration is disabled in preferences; not opening.")
            return False

        editor_path = self.resolve_editor_path()
        if not editor_path:
            logger.error(
                "Could not find Zed executable. Make sure Zed is installed "
                "and set as the external script editor in Preferences."
            )
            return False

        # The project root always goes first so the file opens in that workspace
        args = build_open_project_args(str(self.project_root))
        if file_path:
            args = f"{args} {build_open_file_args(file_path, line, column)}"

        return self._launcher(editor_path, args)

    # ── Project sync ────────────────────────────────────────────

    def sync_all(self) -> int:
        self.last_sync_count = generate_all(
            self.assembly_source.get_assemblies(), self.project_root
        )
        return self.last_sync_count

    def sync_if_needed(
        self,
        added: Iterable[str] = (),
        deleted: Iterable[str] = (),
        moved: Iterable[str] = (),
        moved_from: Iterable[str] = (),
        imported: Iterable[str] = (),
    ) -> bool:
        if not self.preferences.load().enabled:
            logger.debug("Zed integration disabled; skipping sync")
            return False

        if not needs_sync(added, deleted, moved, moved_from, imported):
            logger.debug("No script or assembly definition changes; skipping sync")
            return False

        self.sync_all()
        return True
