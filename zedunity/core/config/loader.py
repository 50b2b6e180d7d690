"""
Configuration loader — locates the Unity project and reads the assembly manifest.

The host editor exports its compilation pipeline's assembly list to a
manifest (YAML or JSON, YAML being a superset). This module finds that
manifest, parses it with PyYAML and validates every entry against
AssemblyDescriptor.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from zedunity.core.models.assembly import AssemblyDescriptor

logger = logging.getLogger(__name__)

# A Unity project root is the directory that holds Assets/
ASSETS_DIR = "Assets"

# Manifest location, relative to the project root
MANIFEST_PATH = Path("Library") / "ZedUnity" / "assemblies.yml"

PREFS_ENV = "ZEDUNITY_PREFS"


class ConfigError(Exception):
    """Raised when project configuration is invalid or missing."""


def find_project_root(start_dir: Path | None = None) -> Path | None:
    """Walk up from *start_dir* (default: cwd) to the first Unity project root.

    Returns:
        The directory containing ``Assets/``, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):
        if (current / ASSETS_DIR).is_dir():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def default_manifest_path(project_root: Path) -> Path:
    """Where the host writes the assembly manifest for *project_root*."""
    return project_root / MANIFEST_PATH


def default_preferences_path() -> Path:
    """Preferences file: $ZEDUNITY_PREFS, else ~/.config/zedunity/preferences.json."""
    override = os.environ.get(PREFS_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "zedunity" / "preferences.json"


def load_manifest(path: Path) -> list[AssemblyDescriptor]:
    """Load and validate an assembly manifest.

    Accepted shapes::

        assemblies:
          - name: Assembly-CSharp
            sourceFiles: [...]

    or a bare top-level list of assembly mappings.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if not path.is_file():
        raise ConfigError(
            f"Assembly manifest not found: {path}. "
            "Export it from the Unity editor, or pass --manifest."
        )

    logger.debug("Loading assembly manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        entries: list = []
    elif isinstance(data, dict):
        entries = data.get("assemblies") or []
    elif isinstance(data, list):
        entries = data
    else:
        raise ConfigError(
            f"Expected a mapping or list in {path}, got {type(data).__name__}"
        )

    if not isinstance(entries, list):
        raise ConfigError(f"'assemblies' in {path} must be a list")

    try:
        assemblies = [AssemblyDescriptor.model_validate(e) for e in entries]
    except ValidationError as e:
        raise ConfigError(f"Invalid assembly manifest {path}: {e}") from e

    names = [a.name for a in assemblies]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ConfigError(f"Duplicate assembly names in {path}: {', '.join(duplicates)}")

    logger.info("Loaded %d assemblies from %s", len(assemblies), path)
    return assemblies
