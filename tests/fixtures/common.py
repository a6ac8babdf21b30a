"""
Common test fixtures shared by all test modules.

Provides test doubles for the gemserver client's collaborators:
- FakeSession / FakeResponse: stand-ins for requests.Session and Response
- CountingResolver: HostResolver that records how often it is asked
- make_backend: Backend wired to a FakeSession
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional

from gemserver.backend import Backend
from gemserver.config import GemserverConfig


@dataclass
class FakeResponse:
    """Minimal requests.Response stand-in."""
    status_code: int = 200
    content: bytes = b"OK"
    headers: dict[str, str] = field(default_factory=lambda: {"Content-Type": "text/plain"})
    url: str = ""
    elapsed: timedelta = field(default_factory=lambda: timedelta(milliseconds=5))


@dataclass
class SentRequest:
    """A request captured by FakeSession."""
    method: str
    url: str
    kwargs: dict[str, Any]

    @property
    def data(self) -> Optional[dict[str, str]]:
        return self.kwargs.get("data")


class FakeSession:
    """
    requests.Session stand-in that records requests and replies with a
    canned response.
    """

    def __init__(
        self,
        body: bytes | str = b"OK",
        status_code: int = 200,
        error: Optional[Exception] = None,
    ) -> None:
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code
        self.error = error
        self.requests: list[SentRequest] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append(SentRequest(method=method, url=url, kwargs=kwargs))
        if self.error is not None:
            raise self.error
        return FakeResponse(status_code=self.status_code, content=self.body, url=url)

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> SentRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]


class CountingResolver:
    """HostResolver that returns a fixed host and counts calls."""

    def __init__(self, host: str = "resolved.example.com") -> None:
        self.host = host
        self.calls = 0

    def resolve_default_host(self) -> str:
        self.calls += 1
        return self.host


def make_backend(
    session: Optional[FakeSession] = None,
    host: Optional[str] = "gems.example.com",
    config: Optional[GemserverConfig] = None,
    resolver: Any = None,
) -> Backend:
    """Create a Backend that sends through a FakeSession."""
    return Backend(
        host,
        resolver=resolver,
        config=config or GemserverConfig(),
        session=session if session is not None else FakeSession(),
    )


def make_completed_process(
    stdout: str = "",
    returncode: int = 0,
    stderr: str = "",
) -> subprocess.CompletedProcess:
    """Build the result of a gcloud invocation."""
    return subprocess.CompletedProcess(
        args=["gcloud", "app", "describe"],
        returncode=returncode,
        stdout=stdout,
        stderr=stderr,
    )


APP_DESCRIPTION_YAML = """\
authDomain: gmail.com
codeBucket: staging.my-gemserver.appspot.com
defaultBucket: my-gemserver.appspot.com
defaultHostname: my-gemserver.appspot.com
featureSettings:
  splitHealthChecks: true
id: my-gemserver
locationId: us-central
name: apps/my-gemserver
servingStatus: SERVING
"""
