"""
OmniSharp command — how Zed should start the C# language server for a
Unity workspace.

Binary selection, in order:
    1. ``lsp.omnisharp.binary.path`` (+ ``arguments``) in .zed/settings.json
    2. ``omnisharp`` on PATH

OmniSharp runs in language-server (stdio) mode and is pointed at the
generated solution when one exists, so every assembly project is
loaded at once; otherwise at the project root.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from zedunity.core.services.generators.solution import SOLUTION_EXTENSION
from zedunity.core.services.generators.workspace_config import zed_settings_path

logger = logging.getLogger(__name__)

DEFAULT_BINARY = "omnisharp"

UNITY_OPTIONS = ("RoslynExtensionsOptions:EnableImportCompletion=true",)


def find_solution(root: Path) -> Path | None:
    """First ``*.sln`` directly under *root*, by name."""
    if not root.is_dir():
        return None
    solutions = sorted(p for p in root.glob(f"*{SOLUTION_EXTENSION}") if p.is_file())
    return solutions[0] if solutions else None


def read_lsp_binary(root: Path) -> tuple[str | None, list[str]]:
    """User-configured OmniSharp binary and extra arguments, if any."""
    settings_file = root / zed_settings_path()
    if not settings_file.is_file():
        return None, []

    try:
        data = json.loads(settings_file.read_text(encoding="utf-8-sig"))
    except (OSError, json.JSONDecodeError) as e:
        # Zed accepts comments in settings.json; we only read plain JSON
        logger.debug("Cannot read %s: %s", settings_file, e)
        return None, []

    binary = data
    for key in ("lsp", "omnisharp", "binary"):
        binary = binary.get(key) if isinstance(binary, dict) else None
    if not isinstance(binary, dict):
        return None, []

    path = binary.get("path") or None
    arguments = binary.get("arguments") or []
    if not isinstance(arguments, list):
        arguments = []
    return path, [str(a) for a in arguments]


def language_server_command(root: Path) -> dict:
    """Command line for OmniSharp in *root*.

    Returns:
        {"command": "...", "args": [...], "solution": "..." | None}
    """
    binary, args = read_lsp_binary(root)

    solution = find_solution(root)
    target = str(solution) if solution else str(root)

    args += ["--languageserver", "-s", target, *UNITY_OPTIONS]

    return {
        "command": binary or DEFAULT_BINARY,
        "args": args,
        "solution": str(solution) if solution else None,
    }
