from __future__ import annotations

from contextlib import closing
from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from instance_docker import __version__
from instance_docker.core.describe import describe_group_request, description_from_container
from instance_docker.core.errors import (
    MissingInputError,
    OperationNotImplementedError,
    RuntimeProtocolError,
)
from instance_docker.core.models import (
    InstanceDescription,
    InstanceID,
    InstanceSpec,
    VendorInfo,
)
from instance_docker.core.request import (
    decode_request,
    example_request,
    validate_properties,
    with_labels,
    with_logical_address,
)
from instance_docker.core.tags import merge_tags
from instance_docker.runtime.interface import ContainerRuntime
from instance_docker.utils.logger import logger

PLUGIN_NAME = "infrakit-instance-docker"
PLUGIN_URL = "https://github.com/docker/infrakit.docker"


@runtime_checkable
class InstancePlugin(Protocol):
    """Instance-management contract offered to the orchestration layer.

    Implementations provision, destroy and enumerate instances on one
    backend. All methods raise on failure; none retry.
    """

    def provision(self, spec: InstanceSpec) -> InstanceID:  # pragma: no cover - protocol
        ...

    def destroy(self, instance_id: InstanceID) -> None:  # pragma: no cover - protocol
        ...

    def describe_instances(self, tags: Optional[Mapping[str, str]]) -> List[InstanceDescription]:  # pragma: no cover - protocol
        """List live instances carrying all of `tags`."""
        ...

    def label(self, instance_id: InstanceID, labels: Mapping[str, str]) -> None:  # pragma: no cover - protocol
        ...

    def validate(self, properties: Any) -> None:  # pragma: no cover - protocol
        """Check instance properties locally, without side effects."""
        ...

    def vendor_info(self) -> VendorInfo:  # pragma: no cover - protocol
        ...

    def example_properties(self) -> Dict[str, Any]:  # pragma: no cover - protocol
        ...


class DockerInstancePlugin(InstancePlugin):
    """InstancePlugin that runs each instance as a container on one Docker host.

    `namespace_tags` are fixed at construction and restrict every listing to
    the containers of this namespace.
    """

    def __init__(self, runtime: ContainerRuntime, namespace_tags: Optional[Mapping[str, str]] = None) -> None:
        self._runtime = runtime
        self._namespace_tags: Dict[str, str] = dict(namespace_tags or {})

    @property
    def namespace_tags(self) -> Dict[str, str]:
        return dict(self._namespace_tags)

    # -------- public API --------

    def vendor_info(self) -> VendorInfo:
        return VendorInfo(name=PLUGIN_NAME, version=__version__, url=PLUGIN_URL)

    def example_properties(self) -> Dict[str, Any]:
        return example_request().to_wire()

    def validate(self, properties: Any) -> None:
        validate_properties(properties)

    def label(self, instance_id: InstanceID, labels: Mapping[str, str]) -> None:
        raise OperationNotImplementedError("Docker container label updates are not implemented yet")

    def provision(self, spec: InstanceSpec) -> InstanceID:
        if spec.properties is None:
            raise MissingInputError("Properties must be set")

        request = decode_request(spec.properties)
        if request.config is None:
            raise MissingInputError("Config should be set")

        _, all_tags = merge_tags(spec.tags, request.tags)
        request = with_labels(request, all_tags)

        if spec.logical_id is not None:
            request = with_logical_address(request, spec.logical_id)

        image = request.config.image
        if not image:
            raise MissingInputError("no image specified")

        self._pull(image)

        networking = request.networking_config.to_wire() if request.networking_config is not None else None
        container_id = self._runtime.create_container(
            request.config.to_wire(),
            request.host_config,
            networking,
            "",
        )
        if not container_id:
            raise RuntimeProtocolError("unexpected response")

        logger.info(f"Container created: {container_id} (image: {image}, logical id: {spec.logical_id})")
        return container_id

    def destroy(self, instance_id: InstanceID) -> None:
        logger.info(f"Destroying instance: {instance_id}")
        self._runtime.remove_container(
            instance_id,
            force=True,
            remove_volumes=True,
            remove_links=False,
        )

    def describe_instances(self, tags: Optional[Mapping[str, str]]) -> List[InstanceDescription]:
        filters = describe_group_request(self._namespace_tags, tags)
        logger.debug(f"Listing containers with filters: {filters}")
        containers = self._runtime.list_containers(filters)
        return [description_from_container(c) for c in containers]

    # -------- helpers --------

    def _pull(self, image: str) -> None:
        # The pull must finish before the container is created.
        with closing(self._runtime.pull_image(image)) as events:
            for _ in events:
                pass


__all__ = ["DockerInstancePlugin", "InstancePlugin", "PLUGIN_NAME", "PLUGIN_URL"]
