"""
Host Resolver Module

Resolvers that name the gemserver host when none is given explicitly.
"""

from .gcloud import (
    DEFAULT_HOSTNAME_FIELD,
    GcloudHostResolver,
    HostResolver,
    StaticHostResolver,
    parse_default_hostname,
)

__all__ = [
    "DEFAULT_HOSTNAME_FIELD",
    "GcloudHostResolver",
    "HostResolver",
    "StaticHostResolver",
    "parse_default_hostname",
]
