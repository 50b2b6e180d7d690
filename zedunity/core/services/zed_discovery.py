"""
Zed discovery — where Zed is installed, and how to address it on the CLI.

One probe per platform family lists the fixed install locations for
that OS. ``select_probe()`` picks the probe once from the running
system; ``list_installations()`` filters its candidates by existence
every time it is iterated, so nothing is cached between calls.

The bare command name ``zed`` is always offered last without checking
it: whether it resolves through PATH is only known at launch time.

Zed's command line:

    zed <project-root>
    zed <project-root> <file>[:<line>[:<column>]]
"""

from __future__ import annotations

import logging
import os
import platform
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

EDITOR_NAME = "Zed"
EXECUTABLE_NAME = "zed"


# ── Platform probes ─────────────────────────────────────────────────


class PlatformProbe(ABC):
    """Fixed list of candidate Zed executables for one OS family."""

    name: str = ""

    @abstractmethod
    def candidates(self) -> list[str]:
        """Candidate paths in preference order, bare command name last."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class WindowsProbe(PlatformProbe):
    """Installer, self-update bundle, and scoop locations."""

    name = "windows"

    def __init__(self, local_app_data: str | None = None, user_profile: str | None = None):
        self.local_app_data = (
            local_app_data if local_app_data is not None else os.environ.get("LOCALAPPDATA", "")
        )
        self.user_profile = (
            user_profile if user_profile is not None else os.environ.get("USERPROFILE", "")
        )

    def candidates(self) -> list[str]:
        paths: list[str] = []
        if self.local_app_data:
            # %LOCALAPPDATA%\Programs\Zed\zed.exe (installer)
            paths.append(os.path.join(self.local_app_data, "Programs", "Zed", "zed.exe"))
            # %LOCALAPPDATA%\Zed\bin\zed.exe (self-updating bundle)
            paths.append(os.path.join(self.local_app_data, "Zed", "bin", "zed.exe"))
        if self.user_profile:
            paths.append(
                os.path.join(self.user_profile, "scoop", "apps", "zed", "current", "zed.exe")
            )
            paths.append(os.path.join(self.user_profile, "scoop", "shims", "zed.exe"))
        paths.append(EXECUTABLE_NAME)
        return paths


class MacOSProbe(PlatformProbe):
    """Stable and Preview application bundles."""

    name = "macos"

    APP_BUNDLES = (
        "/Applications/Zed.app/Contents/MacOS/zed",
        "/Applications/Zed Preview.app/Contents/MacOS/zed",
    )

    def candidates(self) -> list[str]:
        # Homebrew installs land on PATH
        return [*self.APP_BUNDLES, EXECUTABLE_NAME]


class UnixProbe(PlatformProbe):
    """User-local bin, then system-wide and snap locations."""

    name = "unix"

    SYSTEM_PATHS = (
        "/usr/local/bin/zed",
        "/usr/bin/zed",
        "/snap/bin/zed",
    )

    def __init__(self, home: str | Path | None = None):
        self.home = Path(home) if home is not None else Path.home()

    def candidates(self) -> list[str]:
        return [
            str(self.home / ".local" / "bin" / EXECUTABLE_NAME),
            *self.SYSTEM_PATHS,
            EXECUTABLE_NAME,
        ]


def select_probe(system: str | None = None) -> PlatformProbe:
    """Probe for *system* (default: ``platform.system()``)."""
    system = (system or platform.system()).lower()
    if system == "windows":
        return WindowsProbe()
    if system == "darwin":
        return MacOSProbe()
    return UnixProbe()


# ── Discovery ───────────────────────────────────────────────────────


def list_installations(probe: PlatformProbe | None = None) -> Iterator[str]:
    """Yield the candidates that exist, plus the bare command name.

    Lazy: the filesystem is probed as the iterator is consumed, and
    again on every new call.
    """
    probe = probe or select_probe()
    for path in probe.candidates():
        if not path:
            continue
        if path == EXECUTABLE_NAME or os.path.isfile(path):
            yield path
        else:
            logger.debug("Zed not found at %s", path)


def is_zed_path(path: str | None) -> bool:
    """True if *path* names a Zed executable (``zed``, ``zed.exe``, ``Zed``...)."""
    if not path:
        return False
    filename = path.replace("\\", "/").rsplit("/", 1)[-1]
    return os.path.splitext(filename)[0].lower() == EXECUTABLE_NAME


# ── Argument construction ───────────────────────────────────────────


def quote(value: str) -> str:
    """Wrap *value* in double quotes if it contains a space."""
    return f'"{value}"' if " " in value else value


def build_open_file_args(file_path: str, line: int = -1, column: int = -1) -> str:
    """``path``, ``path:line`` or ``path:line:column``, quoted if needed.

    The column is only emitted together with a line.
    """
    file_path = file_path.replace("\\", "/")

    if line < 1:
        return quote(file_path)

    if column < 1:
        return quote(f"{file_path}:{line}")

    return quote(f"{file_path}:{line}:{column}")


def build_open_project_args(project_path: str) -> str:
    """Project root argument, forward slashes, quoted if needed."""
    return quote(project_path.replace("\\", "/"))
