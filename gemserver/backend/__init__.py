"""
Backend Module

Client facade for key management and stats on a gemserver.
"""

from .backend import Backend, KEY_ENDPOINT, STATS_ENDPOINT

__all__ = [
    "Backend",
    "KEY_ENDPOINT",
    "STATS_ENDPOINT",
]
