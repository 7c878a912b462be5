"""
Shared logging configuration for the Superset SDK.

This module centralizes logging setup so that all components
(serializer, HTTP transport, auth, services) log in a consistent way.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import LoggingConfig


ROOT_LOGGER_NAME = "superset_sdk"


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure logging for the ``superset_sdk`` logger hierarchy.

    This function is idempotent: calling it multiple times will not
    re-add handlers if they already exist.
    """

    if config is None:
        config = LoggingConfig()

    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)

    if getattr(sdk_logger, "_superset_logging_configured", False):
        return

    sdk_logger.setLevel(config.log_level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s [%(message)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level.upper())
    console_handler.setFormatter(formatter)
    sdk_logger.addHandler(console_handler)

    if config.log_file:
        log_dir = os.path.dirname(config.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        sdk_logger.addHandler(file_handler)

    sdk_logger._superset_logging_configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    """
    Convenience helper to get a logger for a given module or subsystem.
    """

    return logging.getLogger(name)
