# ca_extractor/utils/logger.py

"""
Centralized logger configuration for ca_extractor.

Provides `get_logger(name)` and `set_level(level)`. The first call configures
a single StreamHandler to stderr on the base "ca_extractor" logger:
  - Format: "YYYY-MM-DD HH:MM:SS LEVEL [logger_name] message"
  - Level: INFO, or the value of the CA_EXTRACTOR_LOG environment variable
Module loggers are children of the base logger and propagate to it.
"""

import logging
import os
from typing import Optional, Union

from ca_extractor.utils.settings import ENV_LOG_LEVEL

BASE_LOGGER = "ca_extractor"
HANDLER_MARKER = "_ca_extractor"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _own_handlers(base: logging.Logger):
    return [h for h in base.handlers if getattr(h, HANDLER_MARKER, False)]


def _configure_base() -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER)
    # Handlers added by others (e.g. test harnesses) do not count
    if _own_handlers(base):
        return base

    handler = logging.StreamHandler()
    setattr(handler, HANDLER_MARKER, True)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, datefmt=_DATEFMT))
    base.addHandler(handler)

    env_level = os.getenv(ENV_LOG_LEVEL, "").upper()
    base.setLevel(getattr(logging, env_level) if env_level in _VALID_LEVELS else logging.INFO)

    # Do not double-log through the root logger
    base.propagate = False
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger named `ca_extractor.<name>` (or the base logger when
    `name` is empty). Module names that already start with the package
    name are used as-is.
    """
    _configure_base()
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if not name.startswith(BASE_LOGGER + "."):
        name = f"{BASE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_level(level: Union[int, str]) -> None:
    """Change the level of every ca_extractor logger at once."""
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    _configure_base().setLevel(level)
