"""
Backend

Sends key management and stats requests to a gemserver. Gem operations
themselves go through the `gem` command and are not handled here.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from gemserver.config.runtime import GemserverConfig, get_default_config
from gemserver.http.client import HttpClient, base_url_for_host
from gemserver.resolver.gcloud import GcloudHostResolver, HostResolver
from gemserver.schemas.request import HttpVerb, RequestDescriptor


logger = logging.getLogger(__name__)

KEY_ENDPOINT = "/api/v1/key"
STATS_ENDPOINT = "/api/v1/stats"


class Backend:
    """
    Client facade for the gemserver management API.

    Every operation returns the raw response body. Status codes are not
    inspected unless `http.raise_for_status` is enabled in the config.

    Usage:
        backend = Backend("my-gemserver.appspot.com")
        print(backend.stats())

        # Without a host the app's hostname is looked up with gcloud
        backend = Backend()
    """

    def __init__(
        self,
        host: Optional[str] = None,
        *,
        resolver: Optional[HostResolver] = None,
        config: Optional[GemserverConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Resolve the gemserver host and build the HTTP client for it.

        Args:
            host: gemserver host; looked up when omitted
            resolver: Host resolver used when no host is given; without one the
                configured host, then gcloud, is used
            config: Runtime configuration (default: from environment)
            session: requests session to send requests with
        """
        self.config = config or get_default_config()
        self.host = host if host is not None else self._default_host(resolver)
        self.http = HttpClient(
            base_url_for_host(self.host),
            timeout=self.config.http.timeout,
            default_headers={"User-Agent": self.config.http.user_agent},
            session=session,
        )

    def _default_host(self, resolver: Optional[HostResolver]) -> str:
        # A resolver passed by the caller outranks the configured host
        if resolver is not None:
            return resolver.resolve_default_host()
        if self.config.host:
            return self.config.host
        resolver = GcloudHostResolver(
            command=self.config.resolver.command,
            project=self.config.resolver.project,
        )
        return resolver.resolve_default_host()

    def create_key(self, permissions: Optional[str] = None) -> str:
        """
        Create a key with the given permissions.

        Args:
            permissions: "read", "write" or both; left to the server's
                default when None

        Returns:
            Response body, normally the new key
        """
        return self._send_req("post", KEY_ENDPOINT, {"permissions": permissions})

    def delete_key(self, key: str) -> str:
        """
        Delete a key.

        The API removes keys with a PUT to the key endpoint, not a DELETE.
        """
        return self._send_req("put", KEY_ENDPOINT, {"key": key})

    def stats(self) -> str:
        """Fetch information about stored private gems and cached gem dependencies."""
        return self._send_req("get", STATS_ENDPOINT)

    def _send_req(
        self,
        verb: Any,
        endpoint: str,
        params: Optional[Mapping[str, Optional[str]]] = None,
    ) -> str:
        """
        Make a request to the gemserver and return the response body.

        Args:
            verb: POST, PUT or GET (any case)
            endpoint: Path on the gemserver
            params: Form fields for POST and PUT; ignored for GET

        Raises:
            UnsupportedVerbError: For any other verb, before anything is sent
            HttpError: If the request fails, or the status is not 2xx while
                `http.raise_for_status` is enabled
        """
        req = RequestDescriptor(
            verb=HttpVerb.parse(verb),
            endpoint=endpoint,
            params=dict(params) if params is not None else None,
        )
        response = self.http.request(req.verb, req.endpoint, data=req.form_body())
        if self.config.http.raise_for_status:
            response.raise_for_status()
        return response.text

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Backend":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Backend(host={self.host!r})"
