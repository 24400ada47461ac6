"""
Pytest configuration for instance-docker tests.
"""

import os
import sys
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

# Add the src directory to the Python path
src_path = os.path.join(os.path.dirname(__file__), '..', 'src')
sys.path.insert(0, os.path.abspath(src_path))

from instance_docker.core.plugin import DockerInstancePlugin  # noqa: E402

CONTAINER_ID = "4f2b9d0c7a1e"


def _pull_events(image):
    yield {"status": f"Pulling from {image}"}
    yield {"status": "Downloading", "progressDetail": {"current": 1, "total": 2}}
    yield {"status": f"Status: Downloaded newer image for {image}"}


@pytest.fixture
def runtime() -> MagicMock:
    """ContainerRuntime stand-in with a successful pull and create."""
    mock = MagicMock()
    mock.pull_image.side_effect = _pull_events
    mock.create_container.return_value = CONTAINER_ID
    mock.list_containers.return_value = []
    return mock


@pytest.fixture
def namespace_tags() -> Dict[str, str]:
    return {"infrakit.namespace": "test"}


@pytest.fixture
def plugin(runtime: MagicMock, namespace_tags: Dict[str, str]) -> DockerInstancePlugin:
    return DockerInstancePlugin(runtime, namespace_tags)


@pytest.fixture
def properties() -> Dict[str, Any]:
    """Decoded CreateInstanceRequest payload."""
    return {
        "Tags": {"tier": "web", "shared": "request"},
        "Config": {
            "Image": "nginx:alpine",
            "Env": ["MODE=test"],
            "Labels": {"stale": "label"},
        },
        "HostConfig": {"Memory": 67108864},
    }


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "requires_docker: marks tests that require Docker to be running"
    )
