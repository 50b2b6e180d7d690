"""
Logging configuration — one setup call for every entry point.

main.py calls setup_logging() once; every module then logs through
``logger = logging.getLogger(__name__)``.

Level precedence:
    --debug / --verbose / --quiet  >  ZEDUNITY_LOG_LEVEL  >  WARNING

A log file can be added with ZEDUNITY_LOG_FILE (and an independent
threshold with ZEDUNITY_LOG_FILE_LEVEL).  Console records carry the
``[ZedUnity]`` tag so they stand out when the host editor captures
our stderr into its own console.
"""

from __future__ import annotations

import logging
import os
import sys

# ── Console formats, keyed by the most verbose level they serve ──

_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: (
        "%(asctime)s %(levelname)-5s [ZedUnity] %(name)s:%(lineno)d — %(message)s",
        "%H:%M:%S",
    ),
    logging.INFO: ("%(asctime)s [ZedUnity] %(message)s", "%H:%M:%S"),
    logging.WARNING: ("[ZedUnity] %(message)s", None),
}

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Library loggers kept at WARNING unless we are debugging.
_NOISY_LOGGERS = ("asyncio",)

ENV_LEVEL = "ZEDUNITY_LOG_LEVEL"
ENV_FILE = "ZEDUNITY_LOG_FILE"
ENV_FILE_LEVEL = "ZEDUNITY_LOG_FILE_LEVEL"


def level_from_flags(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick a level name from CLI flags, falling back to the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of an additional log file.
        log_file_level: Level for the file handler; defaults to ``level``.
        quiet_third_party: Hold library loggers at WARNING unless ``level``
            is DEBUG.
    """
    console_level = _parse_level(level)

    root = logging.getLogger()
    root.handlers.clear()

    fmt, datefmt = _console_format(console_level)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    root.addHandler(console)

    root_level = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _console_format(numeric_level: int) -> tuple[str, str | None]:
    for threshold in sorted(_CONSOLE_FORMATS):
        if numeric_level <= threshold:
            return _CONSOLE_FORMATS[threshold]
    return _CONSOLE_FORMATS[logging.WARNING]


def _parse_level(level: str | None) -> int:
    """Level name → numeric constant; anything unknown means WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
