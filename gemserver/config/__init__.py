"""
Runtime Configuration Module

Provides configuration loading and management for the gemserver client.
"""

from .runtime import (
    ENV_PREFIX,
    GemserverConfig,
    HttpConfig,
    ResolverConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "ENV_PREFIX",
    "GemserverConfig",
    "HttpConfig",
    "ResolverConfig",
    "get_default_config",
    "set_default_config",
]
