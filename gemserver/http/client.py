"""
HTTP Client

Synchronous HTTP transport for talking to a single gemserver host.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urljoin

import requests

from gemserver.schemas.errors import HttpError
from gemserver.schemas.request import HttpVerb


logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """
    Response from an HTTP request.
    """
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """Get response content as text."""
        return self.content.decode("utf-8", errors="replace")

    def raise_for_status(self) -> None:
        """Raise exception if status is not 2xx."""
        if not self.ok:
            raise HttpError(
                f"HTTP {self.status_code} from {self.url}",
                status_code=self.status_code,
                response=self,
            )


def base_url_for_host(host: str) -> str:
    """
    Build the base URL for a gemserver host.

    Bare hostnames (optionally with a port) are addressed over plain HTTP.
    A host that already carries a scheme is used as given.
    """
    host = host.strip()
    if "://" not in host:
        host = f"http://{host}"
    return host.rstrip("/") + "/"


class HttpClient:
    """
    HTTP client bound to one gemserver host.

    The underlying requests session is created on first use, so no
    connection is opened until a request is sent.

    Usage:
        client = HttpClient("http://gems.example.com")

        response = client.request(HttpVerb.GET, "/api/v1/stats")
        print(response.text)
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        default_headers: Optional[dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            base_url: Scheme and host requests are sent to
            timeout: Default request timeout in seconds (None waits indefinitely)
            default_headers: Headers to include in all requests
            session: Pre-built session, e.g. a test double
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.default_headers = default_headers or {}
        self._session = session

    def _get_session(self) -> requests.Session:
        """Lazy-load requests session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def url_for(self, endpoint: str) -> str:
        """Absolute URL for an endpoint path."""
        return urljoin(self.base_url, endpoint.lstrip("/"))

    def request(
        self,
        verb: HttpVerb,
        endpoint: str,
        *,
        data: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """
        Make an HTTP request.

        Args:
            verb: HTTP verb
            endpoint: Path on the host
            data: Form fields, sent url-encoded as the body
            timeout: Request timeout overriding the client default

        Returns:
            HttpResponse with status, content, and headers

        Raises:
            HttpError: If the request could not be sent or no response arrived
        """
        session = self._get_session()
        url = self.url_for(endpoint)
        effective_timeout = timeout if timeout is not None else self.timeout

        kwargs: dict[str, Any] = {"timeout": effective_timeout}
        if self.default_headers:
            kwargs["headers"] = dict(self.default_headers)
        if data is not None:
            kwargs["data"] = data

        logger.debug("%s %s", verb.value, url)

        try:
            response = session.request(verb.value, url, **kwargs)
        except requests.RequestException as e:
            logger.debug("%s %s failed: %s", verb.value, url, e)
            raise HttpError(str(e)) from e

        result = HttpResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
            url=str(response.url),
            elapsed_ms=response.elapsed.total_seconds() * 1000,
        )
        logger.debug(
            "%s %s -> %d (%.1f ms)",
            verb.value, url, result.status_code, result.elapsed_ms,
        )
        return result

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
