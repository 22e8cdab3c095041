"""Logging configuration for the command line entry point.

Library modules only do ``logger = logging.getLogger(__name__)``; this
module is called once by the CLI to attach a handler.
"""

import logging
import sys

# WARNING level: message only
_FMT_MINIMAL = "%(message)s"

# INFO and below: timestamped with module context
_FMT_VERBOSE = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
_DATEFMT = "%H:%M:%S"

# Third-party loggers that are noisy at INFO/DEBUG
_NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "s3transfer")

# Handler installed by setup_logging; replaced on repeated calls
_handler = None


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging to stderr for the whole process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = _parse_level(level)
    fmt = _FMT_MINIMAL if numeric_level >= logging.WARNING else _FMT_VERBOSE

    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT))
    root.addHandler(_handler)
    root.setLevel(numeric_level)

    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def _parse_level(level: str) -> int:
    """Convert a level name to its numeric value, WARNING if unknown."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING
