from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ContainerRuntime(Protocol):
    """Container runtime used by the instance plugin.

    Container records returned by `list_containers` follow the Docker list
    API shape: `Id`, `Labels` and `NetworkSettings.Networks.<name>.IPAddress`.
    Runtime failures are raised as the runtime's own exceptions.
    """

    def pull_image(self, image: str) -> Iterator[Dict[str, Any]]:  # pragma: no cover - protocol
        """Pull `image`, yielding progress events until the pull completes."""
        ...

    def create_container(
        self,
        config: Dict[str, Any],
        host_config: Optional[Dict[str, Any]],
        networking_config: Optional[Dict[str, Any]],
        name: Optional[str] = None,
    ) -> str:  # pragma: no cover - protocol
        """Create (without starting) a container and return its ID."""
        ...

    def remove_container(
        self,
        container_id: str,
        *,
        force: bool = False,
        remove_volumes: bool = False,
        remove_links: bool = False,
    ) -> None:  # pragma: no cover - protocol
        ...

    def list_containers(self, filters: Mapping[str, List[str]]) -> List[Dict[str, Any]]:  # pragma: no cover - protocol
        """List containers matching the Docker-style `filters`."""
        ...


__all__ = ["ContainerRuntime"]
