"""
API module for instance-docker.

This module provides the FastAPI-based HTTP surface of the instance plugin.
"""

from __future__ import annotations

from instance_docker.api.app import create_app

__all__ = ["create_app", "run_server"]


def run_server(app, host: str = "127.0.0.1", port: int = 8000, socket_path=None) -> None:
    """Run the API server on a TCP address or, when given, a unix socket."""
    import uvicorn

    if socket_path:
        uvicorn.run(app, uds=socket_path, log_level="info")
    else:
        uvicorn.run(app, host=host, port=port, log_level="info")
