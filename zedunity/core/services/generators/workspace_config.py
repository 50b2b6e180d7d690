"""
Workspace configuration — omnisharp.json and .zed/settings.json.

Both are write-once-if-absent (``overwrite=False``): the first sync
creates them with these defaults, and from then on the user's copy is
never touched again, even if the defaults below change.
"""

from __future__ import annotations

import json

from zedunity.core.models.template import GeneratedFile

OMNISHARP_JSON = "omnisharp.json"
ZED_SETTINGS_DIR = ".zed"
ZED_SETTINGS_FILE = "settings.json"

OMNISHARP_DEFAULTS: dict = {
    "RoslynExtensionsOptions": {
        "enableDecompilationSupport": False,
        "enableImportCompletion": True,
        "enableAnalyzersSupport": True,
    },
    "FormattingOptions": {
        "enableEditorConfigSupport": True,
        "useTabs": False,
        "tabSize": 4,
        "indentationSize": 4,
    },
    "MsBuildOptions": {
        "loadProjectsOnDemand": False,
    },
    "Plugins": {
        "locationPaths": [],
    },
}

ZED_SETTINGS_DEFAULTS: dict = {
    "languages": {
        "C#": {
            "language_servers": ["omnisharp"],
            "format_on_save": "off",
        },
    },
    "lsp": {
        "omnisharp": {
            "initialization_options": {
                "RoslynExtensionsOptions": {
                    "enableDecompilationSupport": False,
                    "enableImportCompletion": True,
                },
            },
        },
    },
}


def zed_settings_path() -> str:
    """Relative path of the Zed workspace settings file."""
    return f"{ZED_SETTINGS_DIR}/{ZED_SETTINGS_FILE}"


def generate_omnisharp_json() -> GeneratedFile:
    """Default OmniSharp options: completion, formatting, project loading, plugins."""
    return GeneratedFile(
        path=OMNISHARP_JSON,
        content=json.dumps(OMNISHARP_DEFAULTS, indent=2) + "\n",
        overwrite=False,
        reason="OmniSharp defaults for Unity projects",
    )


def generate_zed_settings() -> GeneratedFile:
    """Default Zed workspace settings: C# served by OmniSharp, no format-on-save."""
    return GeneratedFile(
        path=zed_settings_path(),
        content=json.dumps(ZED_SETTINGS_DEFAULTS, indent=2) + "\n",
        overwrite=False,
        reason="Zed workspace settings for C#",
    )
