"""Configuration for instance-docker.

Settings are read from environment variables; command-line flags override
them (see cli.py).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional

DEFAULT_PLUGIN_NAME = "instance-docker"
DEFAULT_LISTEN_HOST = "127.0.0.1"
DEFAULT_LISTEN_PORT = 8000
DEFAULT_CONNECT_RETRIES = 3


@dataclass(frozen=True)
class PluginSettings:
    name: str = DEFAULT_PLUGIN_NAME
    namespace_tags: Dict[str, str] = field(default_factory=dict)
    docker_host: Optional[str] = None
    listen_host: str = DEFAULT_LISTEN_HOST
    listen_port: int = DEFAULT_LISTEN_PORT
    socket_path: Optional[str] = None
    connect_retries: int = DEFAULT_CONNECT_RETRIES


def parse_tags(entries: Iterable[str]) -> Dict[str, str]:
    """Parse `key=value` entries into a mapping.

    Raises:
        ValueError: If an entry has no '=' or an empty key.
    """
    tags: Dict[str, str] = {}
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        key, sep, value = entry.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid tag {entry!r}, expected key=value")
        tags[key] = value.strip()
    return tags


def parse_tag_list(raw: Optional[str]) -> Dict[str, str]:
    """Parse a comma separated `k=v,k2=v2` string."""
    if not raw:
        return {}
    return parse_tags(raw.split(","))


def _int_value(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {value!r}, expected an integer")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> PluginSettings:
    """Build settings from the environment (os.environ by default)."""
    env = os.environ if environ is None else environ
    return PluginSettings(
        name=env.get("INSTANCE_DOCKER_NAME") or DEFAULT_PLUGIN_NAME,
        namespace_tags=parse_tag_list(env.get("INSTANCE_DOCKER_NAMESPACE_TAGS")),
        docker_host=env.get("INSTANCE_DOCKER_DOCKER_URL") or None,
        listen_host=env.get("INSTANCE_DOCKER_HOST") or DEFAULT_LISTEN_HOST,
        listen_port=_int_value(env, "INSTANCE_DOCKER_PORT", DEFAULT_LISTEN_PORT),
        socket_path=env.get("INSTANCE_DOCKER_SOCKET") or None,
        connect_retries=_int_value(env, "INSTANCE_DOCKER_CONNECT_RETRIES", DEFAULT_CONNECT_RETRIES),
    )


__all__ = ["PluginSettings", "load_settings", "parse_tag_list", "parse_tags"]
