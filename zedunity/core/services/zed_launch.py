"""
Zed launch — start the editor and walk away.

Fire-and-forget: the process is detached into its own session, its
output goes nowhere, and nobody waits for it. A failure to start is
logged with its reason and reported as False; it never raises.

macOS application bundles (``Zed.app``) are not executables. They are
started through the binary inside the bundle, or through ``open -a``
when the bundle has no binary where we expect one.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess

logger = logging.getLogger(__name__)

APP_BUNDLE_SUFFIX = ".app"
APP_BUNDLE_BINARY = os.path.join("Contents", "MacOS", "zed")


def split_args(args: str) -> list[str]:
    """Split an argument string built by ``zed_discovery`` into argv items.

    Only whitespace and double quotes are syntax. Apostrophes,
    backslashes and ``#`` are ordinary path characters.
    """
    lexer = shlex.shlex(args, posix=True)
    lexer.whitespace_split = True
    lexer.quotes = '"'
    lexer.escape = ""
    lexer.commenters = ""
    return list(lexer)


def command_for(executable: str, argv: list[str]) -> list[str]:
    """Full command line for *executable*, resolving app bundles."""
    if executable.rstrip("/").lower().endswith(APP_BUNDLE_SUFFIX) and os.path.isdir(executable):
        binary = os.path.join(executable, APP_BUNDLE_BINARY)
        if os.path.isfile(binary):
            return [binary, *argv]
        return ["open", "-a", executable, "--args", *argv]
    return [executable, *argv]


def launch(executable: str, args: str = "") -> bool:
    """Start *executable* with *args*.

    A bare command name (``zed``) is resolved through PATH by the OS.

    Returns:
        True once the process has been started, False if it could not be.
    """
    try:
        argv = command_for(executable, split_args(args))
    except ValueError as exc:
        logger.error("Failed to launch Zed: bad arguments %r: %s", args, exc)
        return False

    try:
        proc = subprocess.Popen(
            argv,
            start_new_session=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        # FileNotFoundError, PermissionError, exec format errors...
        logger.error("Failed to launch Zed (%s): %s", executable, exc)
        return False

    logger.info("Launched %s (pid %s) with: %s", argv[0], proc.pid, args)
    return True
