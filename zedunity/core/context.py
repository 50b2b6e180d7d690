"""
Project context — which Unity project this process is working on.

The root is set ONCE at startup by the entry point:

    - CLI:    main.py   → context.set_project_root(root)
    - Tests:  fixtures  → context.set_project_root(tmp_path)

get_project_root() returns None when unset; callers that require a
root fall back to discovery from the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_project_root: Optional[Path] = None


def set_project_root(root: Path | None) -> None:
    """Register the project root for the current process."""
    global _project_root
    _project_root = root


def get_project_root() -> Optional[Path]:
    """Return the current project root, or None if not yet set."""
    return _project_root
