"""
Logging configuration for the lifecycle dispatcher.

Only the ``sssd`` package logger is configured; the host application's root
logger, its handlers and its level are left alone. Diagnostics go to stdout so
that a daemonized child, whose stdout and stderr are redirected to
logs/<app>.log, records them in the same file as the workload's own output.
"""

import logging
import sys
import threading
from typing import Optional

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_HANDLER_NAME = "sssd-console"

PACKAGE_LOGGER_NAME = "sssd"
TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
TECHNICAL_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _find_console_handler(package_logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in package_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def _build_console_handler(level: int) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(TECHNICAL_FORMAT, TECHNICAL_DATEFMT))
    console_handler.setLevel(level)
    return console_handler


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the ``sssd`` logger once; later calls only adjust the level."""

    with _config_lock:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

        existing = _find_console_handler(package_logger)
        if existing is not None:
            existing.setLevel(level)
            package_logger.setLevel(level)
            return

        package_logger.addHandler(_build_console_handler(level))
        package_logger.setLevel(level)
        _MODULE_LOGGER.debug("Logging configured at %s", logging.getLevelName(level))
