"""
Status use case — everything the preferences panel would show.

Project root, manifest, preferences, discovered installations, the
editor that would be launched, and which generated files exist.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from zedunity.core.config.loader import (
    ConfigError,
    default_manifest_path,
    default_preferences_path,
)
from zedunity.core.models.preferences import EditorPreferences
from zedunity.core.services.generators.csproj import PROJECT_EXTENSION
from zedunity.core.services.generators.solution import solution_file_name
from zedunity.core.services.generators.workspace_config import (
    OMNISHARP_JSON,
    zed_settings_path,
)
from zedunity.core.services.zed_discovery import EXECUTABLE_NAME
from zedunity.core.use_cases.sync import make_editor, resolve_project_root


@dataclass
class StatusResult:
    """Aggregated integration status."""

    project_root: Path | None = None
    manifest_path: Path | None = None
    preferences_path: Path | None = None
    preferences: EditorPreferences | None = None
    installations: list[dict] = field(default_factory=list)
    resolved_editor: str | None = None
    files: dict[str, bool] = field(default_factory=dict)
    project_files: int = 0
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "project_root": str(self.project_root),
            "manifest": {
                "path": str(self.manifest_path),
                "exists": bool(self.manifest_path and self.manifest_path.is_file()),
            },
            "preferences": {
                "path": str(self.preferences_path),
                **(self.preferences.model_dump() if self.preferences else {}),
            },
            "installations": self.installations,
            "resolved_editor": self.resolved_editor,
            "files": self.files,
            "project_files": self.project_files,
        }


def describe_installation(path: str) -> dict:
    """Installation entry; the bare command name is checked against PATH."""
    entry: dict = {"path": path}
    if path == EXECUTABLE_NAME:
        entry["on_path"] = shutil.which(path)
    return entry


def get_status(
    project_root: Path | None = None,
    manifest_path: Path | None = None,
    prefs_path: Path | None = None,
) -> StatusResult:
    """Collect the integration status for a Unity project."""
    result = StatusResult()

    try:
        root = resolve_project_root(project_root)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.project_root = root
    result.manifest_path = manifest_path or default_manifest_path(root)
    result.preferences_path = prefs_path or default_preferences_path()

    editor = make_editor(root, result.manifest_path, result.preferences_path)
    result.preferences = editor.preferences.load()
    result.installations = [describe_installation(i.path) for i in editor.installations]
    result.resolved_editor = editor.resolve_editor_path()

    result.files = {
        name: (root / name).is_file()
        for name in (solution_file_name(root), OMNISHARP_JSON, zed_settings_path())
    }
    result.project_files = sum(1 for _ in root.glob(f"*{PROJECT_EXTENSION}"))

    return result
