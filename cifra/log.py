"""Logging setup for Cifra.

Levels (ascending):
    TRACE =  5  — every character that falls through the lookup table
    DEBUG = 10  — translations, direction switches, config decisions
    INFO  = 20  — startup/shutdown, GUI lifecycle (default)

Usage:
    import cifra.log  # must be imported once before any logger is used
    logger = logging.getLogger(__name__)
    logger.trace("very noisy message")

Entry points call :func:`setup_logging` once to attach the rotating file
handler and the stderr handler to the ``cifra`` logger.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_LOG_FILE = "~/.cifra.log"
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


# Patch Logger class once at import time
logging.Logger.trace = _trace  # type: ignore[attr-defined]

_configured: logging.Logger | None = None


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Attach file and console handlers to the ``cifra`` logger.

    Args:
        debug:    Log DEBUG to the console too (WARNING otherwise).
        log_file: Path to the log file (default: ``~/.cifra.log``).

    Calling it again returns the already configured logger untouched.
    """
    global _configured

    if _configured is not None:
        return _configured

    logger = logging.getLogger("cifra")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = Path(os.path.expanduser(log_file or DEFAULT_LOG_FILE))
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    _configured = logger
    return logger


def reset_logging() -> None:
    """Detach handlers installed by :func:`setup_logging` (used by tests)."""
    global _configured

    logger = logging.getLogger("cifra")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    _configured = None
