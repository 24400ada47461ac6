"""Data model shared by the plugin core, the runtime adapter and the API.

Field aliases follow the JSON names used on the wire (the plugin contract and
the Docker Engine API), so payloads round-trip with `model_dump(by_alias=True)`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Runtime-assigned container identity.
InstanceID = str

# Docker's default (unnamed) network.
DEFAULT_NETWORK = "bridge"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# -------- Plugin contract --------

class InstanceSpec(_WireModel):
    """Caller-supplied provisioning request."""

    properties: Optional[Any] = Field(
        default=None,
        alias="Properties",
        description="Serialized CreateInstanceRequest: JSON text, bytes or a decoded JSON object",
    )
    tags: Optional[Dict[str, str]] = Field(default=None, alias="Tags")
    logical_id: Optional[str] = Field(default=None, alias="LogicalID")


class InstanceDescription(_WireModel):
    id: InstanceID = Field(..., alias="ID")
    logical_id: Optional[str] = Field(default=None, alias="LogicalID")
    tags: Dict[str, str] = Field(default_factory=dict, alias="Tags")


class VendorInfo(_WireModel):
    name: str = Field(..., alias="Name")
    version: str = Field(..., alias="Version")
    url: str = Field(..., alias="URL")


# -------- Docker create payload --------

class ContainerConfig(_WireModel):
    """Subset of the Docker container Config; other Docker fields are kept as-is."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    image: str = Field(default="", alias="Image")
    env: Optional[List[str]] = Field(default=None, alias="Env")
    labels: Optional[Dict[str, str]] = Field(default=None, alias="Labels")


class EndpointSettings(_WireModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    ip_address: Optional[str] = Field(default=None, alias="IPAddress")


class NetworkingConfig(_WireModel):
    endpoints_config: Optional[Dict[str, EndpointSettings]] = Field(
        default=None, alias="EndpointsConfig"
    )


class CreateInstanceRequest(_WireModel):
    """Provider-specific payload carried in InstanceSpec.properties."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    tags: Optional[Dict[str, str]] = Field(default=None, alias="Tags")
    config: Optional[ContainerConfig] = Field(default=None, alias="Config")
    host_config: Optional[Dict[str, Any]] = Field(default=None, alias="HostConfig")
    networking_config: Optional[NetworkingConfig] = Field(default=None, alias="NetworkingConfig")
    network_name: str = Field(default="", alias="NetworkName")


__all__ = [
    "ContainerConfig",
    "CreateInstanceRequest",
    "DEFAULT_NETWORK",
    "EndpointSettings",
    "InstanceDescription",
    "InstanceID",
    "InstanceSpec",
    "NetworkingConfig",
    "VendorInfo",
]
