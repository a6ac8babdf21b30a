"""
Gemserver Schemas

Request descriptors and the error taxonomy shared across the client.
"""

from .errors import (
    ErrorCodes,
    GemserverError,
    GemserverException,
    HostResolutionError,
    HttpError,
    UnsupportedVerbError,
    ConfigError,
)
from .request import HttpVerb, RequestDescriptor

__all__ = [
    "ErrorCodes",
    "GemserverError",
    "GemserverException",
    "HostResolutionError",
    "HttpError",
    "UnsupportedVerbError",
    "ConfigError",
    "HttpVerb",
    "RequestDescriptor",
]
