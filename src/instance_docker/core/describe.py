from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from instance_docker.core.models import InstanceDescription
from instance_docker.core.tags import merge_tags

# Container states counted as live instances
ALIVE_STATES = ("created", "running")


def describe_group_request(
    namespace_tags: Optional[Mapping[str, str]],
    tags: Optional[Mapping[str, str]],
) -> Dict[str, List[str]]:
    """Build the Docker list filter for the containers of a group.

    Namespace tags are merged last so they override group tags.
    """
    keys, all_tags = merge_tags(tags, namespace_tags)
    return {
        "status": list(ALIVE_STATES),
        "label": [f"{key}={all_tags[key]}" for key in keys],
    }


def _logical_id(record: Mapping[str, Any]) -> Optional[str]:
    # The lexicographically smallest network name decides.
    net = record.get("NetworkSettings") or {}
    networks = net.get("Networks") or {}
    if not networks:
        return None
    endpoint = networks[min(networks)] or {}
    return endpoint.get("IPAddress") or None


def description_from_container(record: Mapping[str, Any]) -> InstanceDescription:
    return InstanceDescription(
        id=record["Id"],
        logical_id=_logical_id(record),
        tags=dict(record.get("Labels") or {}),
    )


__all__ = ["ALIVE_STATES", "describe_group_request", "description_from_container"]
