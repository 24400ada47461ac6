from __future__ import annotations

import time
from contextlib import closing
from typing import Any, Dict, Iterator, List, Mapping, Optional

import docker
from docker.errors import DockerException
from requests.exceptions import ConnectionError as RequestsConnectionError

from instance_docker.core.errors import ImagePullError
from instance_docker.runtime.interface import ContainerRuntime
from instance_docker.utils.logger import logger


class DockerRuntime(ContainerRuntime):
    """ContainerRuntime backed by the Docker Engine API (docker SDK low-level client).

    Only this module talks to the docker SDK. Docker exceptions are not
    translated: callers see `docker.errors.APIError` and friends unchanged.
    """

    def __init__(self, client: docker.APIClient) -> None:
        self.client = client

    @classmethod
    def connect(cls, base_url: Optional[str] = None, max_retries: int = 3) -> "DockerRuntime":
        """Connect to the Docker daemon with retry logic.

        Without `base_url` the connection settings come from the environment
        (DOCKER_HOST, DOCKER_TLS_VERIFY, DOCKER_CERT_PATH).
        """
        for attempt in range(max_retries):
            client = None
            try:
                if base_url:
                    client = docker.APIClient(base_url=base_url, version="auto")
                else:
                    client = docker.from_env(version="auto").api
                client.ping()  # Test connection
                logger.info("Docker client initialized successfully")
                return cls(client)
            except (DockerException, RequestsConnectionError) as e:
                logger.warning(f"Docker client initialization attempt {attempt + 1}/{max_retries} failed: {e}")
                if client is not None:
                    client.close()
                if attempt < max_retries - 1:
                    time.sleep(2 ** attempt)  # Exponential backoff
                else:
                    logger.error(f"Failed to initialize Docker client after {max_retries} attempts: {e}")
                    raise RuntimeError(f"Cannot connect to Docker daemon: {e}") from e
        raise RuntimeError("Cannot connect to Docker daemon: no connection attempts made")

    def pull_image(self, image: str) -> Iterator[Dict[str, Any]]:
        logger.info(f"Pulling image {image}...")
        with closing(self.client.pull(image, stream=True, decode=True)) as stream:
            for event in stream:
                if event.get("error"):
                    raise ImagePullError(f"failed to pull image {image}: {event['error']}")
                yield event
        logger.info(f"Successfully pulled image {image}")

    def create_container(
        self,
        config: Dict[str, Any],
        host_config: Optional[Dict[str, Any]],
        networking_config: Optional[Dict[str, Any]],
        name: Optional[str] = None,
    ) -> str:
        body = dict(config)
        if host_config is not None:
            body["HostConfig"] = host_config
        if networking_config is not None:
            body["NetworkingConfig"] = networking_config
        logger.debug(f"Container create body: {body}")

        response = self.client.create_container_from_config(body, name=name or None)
        for warning in (response or {}).get("Warnings") or []:
            logger.warning(f"Docker create warning: {warning}")
        return (response or {}).get("Id") or ""

    def remove_container(
        self,
        container_id: str,
        *,
        force: bool = False,
        remove_volumes: bool = False,
        remove_links: bool = False,
    ) -> None:
        self.client.remove_container(container_id, v=remove_volumes, link=remove_links, force=force)

    def list_containers(self, filters: Mapping[str, List[str]]) -> List[Dict[str, Any]]:
        # all=True so containers in the "created" state are reported too
        return self.client.containers(all=True, filters=dict(filters))


__all__ = ["DockerRuntime"]
