"""
instance-docker - Docker instance plugin for an orchestration layer.

This package provides:
- Provisioning of instances as Docker containers, labelled with merged tags
- Pinning of instances to a logical address on a Docker network
- Description of the live containers of a group, scoped by namespace tags
- A FastAPI surface and command line for serving the plugin
"""

from __future__ import annotations

__version__ = "0.3.0"

# Core exports
from instance_docker.core.plugin import DockerInstancePlugin, InstancePlugin
from instance_docker.runtime.docker_runtime import DockerRuntime
from instance_docker.utils.logger import get_logger

__all__ = [
    "DockerInstancePlugin",
    "DockerRuntime",
    "InstancePlugin",
    "get_logger",
    "__version__",
]
