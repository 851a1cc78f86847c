"""
Logging for the storefront package.

Handlers hang off the ``storefront`` logger, configured once on first use
from the environment:
  LOG_LEVEL       default INFO
  LOG_TO_CONSOLE  default true; writes to stderr so stdout stays free for output
  LOG_TO_FILE     default false
  LOG_FILE        default logs/storefront.log (rotated)
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

PACKAGE_LOGGER = "storefront"

_configured = False


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def setup_logging():
    global _configured
    if _configured:
        return

    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handlers = []
        if _flag("LOG_TO_CONSOLE", "true"):
            handlers.append(logging.StreamHandler(sys.stderr))

        if _flag("LOG_TO_FILE", "false"):
            log_file = os.getenv("LOG_FILE", "logs/storefront.log")
            try:
                os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
                handlers.append(RotatingFileHandler(
                    log_file,
                    maxBytes=int(os.getenv("LOG_MAX_BYTES", str(1024 * 1024))),
                    backupCount=int(os.getenv("LOG_BACKUPS", "3")),
                ))
            except OSError as e:
                package_logger.warning("Failed to initialize file logging: %s", e)

        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            package_logger.addHandler(handler)

    _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
