"""Error taxonomy for the instance plugin.

Errors raised by the Docker SDK itself are not wrapped: they reach the
caller unchanged. The classes here cover conditions the plugin detects.
"""

from __future__ import annotations

from typing import Optional


class InstancePluginError(Exception):
    """Base class for errors raised by the instance plugin."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


class MissingInputError(InstancePluginError):
    """A required field of the request is absent."""


class InvalidInputError(InstancePluginError):
    """The serialized instance properties could not be decoded."""


class RuntimeProtocolError(InstancePluginError):
    """The container runtime returned a structurally invalid response."""


class CollaboratorError(InstancePluginError):
    """The container runtime reported a failure outside of its own exceptions."""


class ImagePullError(CollaboratorError):
    """An image pull stream carried an error event."""


class OperationNotImplementedError(InstancePluginError, NotImplementedError):
    """The requested operation is not supported by this plugin."""


__all__ = [
    "CollaboratorError",
    "ImagePullError",
    "InstancePluginError",
    "InvalidInputError",
    "MissingInputError",
    "OperationNotImplementedError",
    "RuntimeProtocolError",
]
