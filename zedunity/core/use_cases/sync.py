"""
Sync use case — regenerate project files for a Unity project.

Ties together project root discovery, the manifest assembly source,
preferences and the Zed code editor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from zedunity.adapters.manifest import ManifestAssemblySource
from zedunity.core.config.loader import (
    ConfigError,
    default_manifest_path,
    default_preferences_path,
    find_project_root,
)
from zedunity.core.context import get_project_root
from zedunity.core.persistence.preferences_file import PreferencesStore
from zedunity.core.services.code_editor import ZedCodeEditor

logger = logging.getLogger(__name__)


@dataclass
class ChangeSet:
    """Asset paths the host reported as changed."""

    added: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    moved: list[str] = field(default_factory=list)
    moved_from: list[str] = field(default_factory=list)
    imported: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(
            len(g) for g in (self.added, self.deleted, self.moved, self.moved_from, self.imported)
        )


@dataclass
class SyncResult:
    """Result of the sync use case."""

    project_root: Path | None = None
    manifest_path: Path | None = None
    regenerated: bool = False
    project_count: int = 0
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "project_root": str(self.project_root),
            "manifest": str(self.manifest_path),
            "regenerated": self.regenerated,
            "projects": self.project_count,
        }


def resolve_project_root(project_root: Path | None = None) -> Path:
    """Explicit root, else the registered process root, else discovery from cwd.

    Raises:
        ConfigError: If no Unity project can be found.
    """
    if project_root is not None:
        return project_root.resolve()
    found = get_project_root() or find_project_root()
    if found is None:
        raise ConfigError(
            "No Unity project found (no Assets/ directory here or above). "
            "Run from inside a project, or pass --project."
        )
    return found


def make_editor(
    project_root: Path,
    manifest_path: Path | None = None,
    prefs_path: Path | None = None,
) -> ZedCodeEditor:
    """ZedCodeEditor wired to the manifest source and preferences file."""
    return ZedCodeEditor(
        project_root=project_root,
        assembly_source=ManifestAssemblySource(
            manifest_path or default_manifest_path(project_root)
        ),
        preferences=PreferencesStore(prefs_path or default_preferences_path()),
    )


def run_sync(
    project_root: Path | None = None,
    manifest_path: Path | None = None,
    prefs_path: Path | None = None,
    changes: ChangeSet | None = None,
) -> SyncResult:
    """Regenerate project files.

    Args:
        project_root: Unity project root (default: discovered from cwd).
        manifest_path: Assembly manifest (default: under Library/).
        prefs_path: Preferences file (default: user config dir).
        changes: When given, regenerate only if they touch scripts or
            assembly definitions; when None, regenerate unconditionally.

    Returns:
        SyncResult; I/O and configuration failures land in ``error``.
    """
    result = SyncResult()

    try:
        root = resolve_project_root(project_root)
        result.project_root = root
        result.manifest_path = manifest_path or default_manifest_path(root)
        editor = make_editor(root, result.manifest_path, prefs_path)

        if changes is None:
            result.project_count = editor.sync_all()
            result.regenerated = True
        else:
            result.regenerated = editor.sync_if_needed(
                changes.added,
                changes.deleted,
                changes.moved,
                changes.moved_from,
                changes.imported,
            )
            result.project_count = editor.last_sync_count or 0
    except ConfigError as e:
        result.error = str(e)
    except OSError as e:
        logger.error("Project generation failed: %s", e)
        result.error = f"Project generation failed: {e}"

    return result
