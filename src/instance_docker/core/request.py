"""Builders that turn an InstanceSpec into a Docker create request.

Each builder returns a new request; the input models are never modified.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import ValidationError

from instance_docker.core.errors import InvalidInputError, MissingInputError
from instance_docker.core.models import (
    DEFAULT_NETWORK,
    ContainerConfig,
    CreateInstanceRequest,
    EndpointSettings,
    NetworkingConfig,
)


def decode_request(properties: Any) -> CreateInstanceRequest:
    """Decode serialized instance properties into a CreateInstanceRequest.

    Accepts JSON text or bytes as well as an already decoded JSON object.
    Any decoding or schema failure raises InvalidInputError.
    """
    try:
        if isinstance(properties, (str, bytes, bytearray)):
            return CreateInstanceRequest.model_validate_json(properties)
        return CreateInstanceRequest.model_validate(properties)
    except ValidationError as exc:
        raise InvalidInputError(f"invalid input formatting: {exc}", cause=exc)


def validate_properties(properties: Any) -> None:
    """Decode `properties` and check that a container Config is present.

    `None` is accepted: there is nothing to check yet.
    """
    if properties is None:
        return
    request = decode_request(properties)
    if request.config is None:
        raise MissingInputError("Config should be set")


def example_request() -> CreateInstanceRequest:
    return CreateInstanceRequest(
        tags={"tag1": "value1", "tag2": "value2"},
        config=ContainerConfig(image="docker/dind", env=["var1=value1", "var2=value2"]),
        host_config={},
        networking_config=NetworkingConfig(),
    )


def with_labels(request: CreateInstanceRequest, labels: Mapping[str, str]) -> CreateInstanceRequest:
    """Replace the container label set."""
    if request.config is None:
        raise MissingInputError("Config should be set")
    config = request.config.model_copy(update={"labels": dict(labels)})
    return request.model_copy(update={"config": config})


def with_logical_address(request: CreateInstanceRequest, logical_id: str) -> CreateInstanceRequest:
    """Pin the container to `logical_id` on the request's target network.

    The target network defaults to Docker's bridge network. Missing levels of
    the networking config are created; other networks are carried over as-is.
    """
    network_name = request.network_name or DEFAULT_NETWORK

    networking = request.networking_config or NetworkingConfig()
    endpoints: Dict[str, EndpointSettings] = dict(networking.endpoints_config or {})
    endpoint = endpoints.get(network_name) or EndpointSettings()
    endpoints[network_name] = endpoint.model_copy(update={"ip_address": str(logical_id)})

    return request.model_copy(
        update={
            "network_name": network_name,
            "networking_config": networking.model_copy(update={"endpoints_config": endpoints}),
        }
    )


__all__ = [
    "decode_request",
    "example_request",
    "validate_properties",
    "with_labels",
    "with_logical_address",
]
