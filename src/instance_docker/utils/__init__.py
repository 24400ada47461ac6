"""
Utilities module for instance-docker.

This module provides common utilities like logging configuration.
"""

from __future__ import annotations

from instance_docker.utils.logger import get_logger, logger

__all__ = ["get_logger", "logger"]
