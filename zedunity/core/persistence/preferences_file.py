"""
Preferences store — the explicit stand-in for the host's preference storage.

Preferences are one small JSON document. Reads never fail (a missing or
corrupt file means "defaults"); writes are atomic (temp file in the same
directory, then rename) so a crash never leaves half a document behind.

The store is an object handed to the code editor, not a global, so tests
and embedders decide where it lives.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from zedunity.core.models.preferences import EditorPreferences

logger = logging.getLogger(__name__)


class PreferencesStore:
    """Key/value access to EditorPreferences persisted at *path*."""

    def __init__(self, path: Path):
        self.path = path

    def __repr__(self) -> str:
        return f"<PreferencesStore path={str(self.path)!r}>"

    def load(self) -> EditorPreferences:
        """Read preferences; defaults when the file is absent or unreadable."""
        if not self.path.is_file():
            logger.debug("No preferences at %s — using defaults", self.path)
            return EditorPreferences()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return EditorPreferences.model_validate(data)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt preferences file %s: %s — using defaults", self.path, e)
        except (OSError, ValidationError) as e:
            logger.warning("Cannot load preferences from %s: %s — using defaults", self.path, e)
        return EditorPreferences()

    def save(self, prefs: EditorPreferences) -> None:
        """Write *prefs* atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(prefs.model_dump(mode="json"), indent=2) + "\n"

        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=".prefs_",
                suffix=".tmp",
            )
            tmp = Path(tmp_name)
            try:
                with open(fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
                tmp.replace(self.path)
                logger.debug("Preferences saved to %s", self.path)
            except Exception:
                tmp.unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to save preferences to %s: %s", self.path, e)
            raise

    def get(self, key: str) -> Any:
        """Value of one preference. Unknown keys raise KeyError."""
        prefs = self.load()
        if key not in EditorPreferences.model_fields:
            raise KeyError(key)
        return getattr(prefs, key)

    def set(self, key: str, value: Any) -> EditorPreferences:
        """Update one preference and persist. Unknown keys raise KeyError."""
        if key not in EditorPreferences.model_fields:
            raise KeyError(key)
        data = self.load().model_dump()
        data[key] = value
        prefs = EditorPreferences.model_validate(data)
        self.save(prefs)
        return prefs

    def reset(self) -> None:
        """Forget every preference."""
        self.path.unlink(missing_ok=True)
