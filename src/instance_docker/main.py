"""
Main entry point for the instance-docker plugin server.

This module connects to Docker, builds the plugin and serves its API.
"""

from __future__ import annotations

from typing import Optional

from instance_docker.config import PluginSettings, load_settings


def build_plugin(settings: PluginSettings):
    """Connect to the Docker daemon and build the instance plugin."""
    from instance_docker.core.plugin import DockerInstancePlugin
    from instance_docker.runtime.docker_runtime import DockerRuntime

    runtime = DockerRuntime.connect(settings.docker_host, max_retries=settings.connect_retries)
    return DockerInstancePlugin(runtime, settings.namespace_tags)


def run(settings: Optional[PluginSettings] = None) -> None:
    """
    Start the plugin server.

    Listens on the unix socket when one is configured, otherwise on TCP.
    """
    from instance_docker.api import create_app, run_server
    from instance_docker.utils.logger import logger

    settings = settings or load_settings()
    logger.info(f"Starting {settings.name}...")
    if settings.namespace_tags:
        logger.info(f"Namespace tags: {settings.namespace_tags}")

    plugin = build_plugin(settings)
    app = create_app(plugin)

    if settings.socket_path:
        logger.info(f"Listening on unix socket {settings.socket_path}")
    else:
        logger.info(f"Listening on {settings.listen_host}:{settings.listen_port}")
    run_server(
        app,
        host=settings.listen_host,
        port=settings.listen_port,
        socket_path=settings.socket_path,
    )


if __name__ == "__main__":
    run()
