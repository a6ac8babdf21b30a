"""
Deployment Host Resolver

Finds the hostname of a deployed gemserver when none is configured,
by asking the App Engine tooling to describe the current app.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Any, Callable, Optional, Protocol, runtime_checkable

import yaml

from gemserver.schemas.errors import HostResolutionError


logger = logging.getLogger(__name__)

# Field of `gcloud app describe` output holding the app's hostname
DEFAULT_HOSTNAME_FIELD = "defaultHostname"


@runtime_checkable
class HostResolver(Protocol):
    """Anything that can name the default gemserver host."""

    def resolve_default_host(self) -> str:
        ...


class StaticHostResolver:
    """Resolver that always returns the same host."""

    def __init__(self, host: str) -> None:
        self.host = host

    def resolve_default_host(self) -> str:
        return self.host


class GcloudHostResolver:
    """
    Resolve the gemserver host with `gcloud app describe`.

    The command prints the app description as YAML; the host is read
    from its `defaultHostname` field. The call blocks until gcloud exits.

    Usage:
        resolver = GcloudHostResolver(project="my-project")
        host = resolver.resolve_default_host()
    """

    def __init__(
        self,
        command: str = "gcloud",
        project: Optional[str] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        """
        Args:
            command: gcloud executable name or path
            project: Cloud project to describe (gcloud's active project if None)
            runner: subprocess.run compatible callable
        """
        self.command = command
        self.project = project
        self._runner = runner

    def build_command(self) -> list[str]:
        cmd = [self.command, "app", "describe", "--format=yaml"]
        if self.project:
            cmd.append(f"--project={self.project}")
        return cmd

    def resolve_default_host(self) -> str:
        """
        Run gcloud and return the app's default hostname.

        Raises:
            HostResolutionError: If gcloud is missing or fails, or its output
                has no usable `defaultHostname`.
        """
        cmd = self.build_command()
        logger.info(f"Resolving gemserver host with: {' '.join(cmd)}")

        try:
            completed = self._runner(
                cmd,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise HostResolutionError(
                f"{self.command} not found; install the Cloud SDK or pass a host",
                command=cmd,
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise HostResolutionError(
                f"{' '.join(cmd)} exited with status {e.returncode}",
                command=cmd,
                details={"stderr": stderr} if stderr else None,
            ) from e

        host = parse_default_hostname(completed.stdout)
        logger.info(f"Resolved gemserver host: {host}")
        return host


def parse_default_hostname(output: str) -> str:
    """
    Extract `defaultHostname` from `gcloud app describe` YAML output.

    Raises:
        HostResolutionError: If the output is not a YAML mapping or lacks
            a non-empty `defaultHostname`.
    """
    try:
        description: Any = yaml.safe_load(output)
    except yaml.YAMLError as e:
        raise HostResolutionError(f"Could not parse app description: {e}") from e

    if not isinstance(description, dict):
        raise HostResolutionError(
            "App description is not a mapping",
            details={"type": type(description).__name__},
        )

    host = description.get(DEFAULT_HOSTNAME_FIELD)
    if not isinstance(host, str) or not host.strip():
        raise HostResolutionError(
            f"App description has no {DEFAULT_HOSTNAME_FIELD} field",
            details={"fields": sorted(str(k) for k in description)},
        )
    return host.strip()
