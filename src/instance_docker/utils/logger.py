"""
Logging configuration for instance-docker.

This module provides centralized logging configuration for the plugin.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

SERVICE_NAME = "instance-docker"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name. If None, uses the default service name.

    Returns:
        Configured logger instance.
    """
    if name is None:
        name = SERVICE_NAME

    logger_instance = logging.getLogger(name)

    # Only configure if not already configured
    if not logger_instance.handlers:
        configure_logger(logger_instance)

    return logger_instance


def configure_logger(logger_instance: logging.Logger) -> None:
    """
    Configure a logger instance with console and optional file handlers.

    The level comes from LOG_LEVEL (default INFO). A file handler is added
    only when LOG_FILE is set.

    Args:
        logger_instance: Logger instance to configure.
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logger_instance.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(
        '[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s'
    )

    log_file = os.environ.get("LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            logger_instance.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, just use console
            print(f"Warning: Could not set up file logging: {e}", file=sys.stderr)

    # Console handler (always add)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger_instance.addHandler(console_handler)


# Default logger for the service
logger = get_logger(SERVICE_NAME)


__all__ = ["get_logger", "logger", "configure_logger", "SERVICE_NAME"]
