"""
Core plugin logic for instance-docker.

This module contains the tag reconciliation, request translation and
instance description logic.
"""

from __future__ import annotations

from instance_docker.core.plugin import DockerInstancePlugin, InstancePlugin

__all__ = ["DockerInstancePlugin", "InstancePlugin"]
