"""
Tests for logging configuration.
"""

import logging

import pytest

from zedunity.core.observability.logging_config import (
    ENV_LEVEL,
    level_from_flags,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    raise_exceptions = logging.raiseExceptions
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.raiseExceptions = raise_exceptions


# ═══════════════════════════════════════════════════════════════════
#  Level selection
# ═══════════════════════════════════════════════════════════════════


class TestLevelFromFlags:
    def test_debug_wins(self):
        assert level_from_flags(debug=True, verbose=True, quiet=True) == "DEBUG"

    def test_verbose(self):
        assert level_from_flags(verbose=True) == "INFO"

    def test_quiet(self):
        assert level_from_flags(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv(ENV_LEVEL, "INFO")
        assert level_from_flags() == "INFO"

    def test_default_warning(self, monkeypatch):
        monkeypatch.delenv(ENV_LEVEL, raising=False)
        assert level_from_flags() == "WARNING"


# ═══════════════════════════════════════════════════════════════════
#  Handlers
# ═══════════════════════════════════════════════════════════════════


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_unknown_level_is_warning(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_tagged_console_format(self):
        setup_logging("WARNING")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "[ZedUnity]" in fmt

    def test_file_handler_with_own_level(self, tmp_path):
        log_file = tmp_path / "zedunity.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("zedunity.test").debug("written to file only")
        for handler in root.handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")

    def test_third_party_quieted(self):
        setup_logging("INFO")
        assert logging.getLogger("asyncio").level == logging.WARNING

    def test_repeat_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.getLogger().handlers) == 1
