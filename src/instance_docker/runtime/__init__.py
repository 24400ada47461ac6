"""
Container runtime adapters for instance-docker.

The plugin core talks to the container engine only through ContainerRuntime.
"""

from __future__ import annotations

from instance_docker.runtime.docker_runtime import DockerRuntime
from instance_docker.runtime.interface import ContainerRuntime

__all__ = ["ContainerRuntime", "DockerRuntime"]
