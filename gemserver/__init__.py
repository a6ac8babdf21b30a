"""
Gemserver Admin

Client for the management API of a private gem server.

Usage:
    from gemserver import Backend

    backend = Backend("my-gemserver.appspot.com")
    key = backend.create_key("read")
"""

from .backend import Backend, KEY_ENDPOINT, STATS_ENDPOINT

__version__ = "0.1.0"

__all__ = [
    "Backend",
    "KEY_ENDPOINT",
    "STATS_ENDPOINT",
]
