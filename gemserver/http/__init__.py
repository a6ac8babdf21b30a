"""
HTTP Client Module

Synchronous requests-based transport used by the backend facade.
"""

from .client import HttpClient, HttpResponse, base_url_for_host
from gemserver.schemas.request import HttpVerb

__all__ = [
    "HttpClient",
    "HttpResponse",
    "HttpVerb",
    "base_url_for_host",
]
