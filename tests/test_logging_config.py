"""Tests for CLI logging setup."""

import logging

import pytest

from activitytext import logging_config
from activitytext.logging_config import setup_logging


@pytest.fixture
def restore_root():
    """Undo changes to the root logger."""
    root = logging.getLogger()
    level = root.level
    yield root
    if logging_config._handler is not None:
        root.removeHandler(logging_config._handler)
        logging_config._handler = None
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self, restore_root):
        """Test the root level follows the argument."""
        setup_logging("INFO")
        assert restore_root.level == logging.INFO

    def test_unknown_level_defaults_to_warning(self, restore_root):
        """Test an unknown level name falls back to WARNING."""
        setup_logging("chatty")
        assert restore_root.level == logging.WARNING

    def test_repeated_calls_replace_handler(self, restore_root):
        """Test only one handler is installed across calls."""
        setup_logging("INFO")
        first = logging_config._handler
        setup_logging("DEBUG")

        assert first not in restore_root.handlers
        assert logging_config._handler in restore_root.handlers

    def test_quiets_third_party(self, restore_root):
        """Test boto loggers stay at WARNING above DEBUG."""
        setup_logging("INFO")
        assert logging.getLogger("botocore").level == logging.WARNING
