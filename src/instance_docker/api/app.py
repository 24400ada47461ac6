from __future__ import annotations

from typing import Any, Dict, List, Optional

from docker.errors import DockerException, NotFound
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from requests.exceptions import RequestException

from instance_docker import __version__
from instance_docker.core.errors import (
    CollaboratorError,
    InstancePluginError,
    InvalidInputError,
    MissingInputError,
    OperationNotImplementedError,
    RuntimeProtocolError,
)
from instance_docker.core.models import InstanceSpec
from instance_docker.core.plugin import InstancePlugin
from instance_docker.utils.logger import logger

# -------- Request schemas --------

class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ValidateBody(_Body):
    properties: Optional[Any] = Field(default=None, alias="Properties")


class DestroyBody(_Body):
    id: str = Field(..., alias="ID", min_length=1)


class DescribeBody(_Body):
    tags: Optional[Dict[str, str]] = Field(default=None, alias="Tags")


class LabelBody(_Body):
    id: str = Field(..., alias="ID", min_length=1)
    labels: Dict[str, str] = Field(default_factory=dict, alias="Labels")


# -------- Error mapping --------

def _status_for(exc: Exception) -> int:
    if isinstance(exc, (MissingInputError, InvalidInputError)):
        return 400
    if isinstance(exc, OperationNotImplementedError):
        return 501
    if isinstance(exc, NotFound):
        return 404
    # RequestException: daemon unreachable at the transport level
    if isinstance(exc, (RuntimeProtocolError, CollaboratorError, DockerException, RequestException)):
        return 502
    return 500


def create_app(plugin: InstancePlugin) -> FastAPI:
    """Build the HTTP surface of an instance plugin."""
    app = FastAPI(title="instance-docker", version=__version__)

    @app.exception_handler(InstancePluginError)
    @app.exception_handler(DockerException)
    @app.exception_handler(RequestException)
    async def plugin_error_handler(request: Request, exc: Exception):
        status = _status_for(exc)
        if status >= 500:
            logger.error(f"{request.url.path} failed: {exc}")
        else:
            logger.warning(f"{request.url.path} rejected: {exc}")
        return JSONResponse(status_code=status, content={"error": type(exc).__name__, "detail": str(exc)})

    @app.get("/health")
    def health():
        """Basic health check - just returns OK if the service is running"""
        return {"status": "OK"}

    @app.get("/info/vendor")
    def vendor_info():
        return plugin.vendor_info().to_wire()

    @app.get("/info/example")
    def example_properties():
        return plugin.example_properties()

    @app.post("/instance/validate")
    def validate(body: ValidateBody):
        plugin.validate(body.properties)
        return {"OK": True}

    @app.post("/instance/provision")
    def provision(spec: InstanceSpec):
        instance_id = plugin.provision(spec)
        return {"ID": instance_id}

    @app.post("/instance/destroy")
    def destroy(body: DestroyBody):
        plugin.destroy(body.id)
        return {"OK": True}

    @app.post("/instance/describe")
    def describe(body: DescribeBody):
        descriptions: List[Dict[str, Any]] = [
            d.to_wire() for d in plugin.describe_instances(body.tags)
        ]
        return {"Descriptions": descriptions}

    @app.post("/instance/label")
    def label(body: LabelBody):
        plugin.label(body.id, body.labels)
        return {"OK": True}

    return app


__all__ = ["create_app"]
