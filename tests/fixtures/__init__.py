"""
Test fixtures package for gemserver client tests.

Usage:
    from fixtures import FakeSession, make_backend

    def test_something():
        session = FakeSession(body="OK")
        backend = make_backend(session)
"""

from .common import (
    APP_DESCRIPTION_YAML,
    CountingResolver,
    FakeResponse,
    FakeSession,
    SentRequest,
    make_backend,
    make_completed_process,
)

__all__ = [
    "APP_DESCRIPTION_YAML",
    "CountingResolver",
    "FakeResponse",
    "FakeSession",
    "SentRequest",
    "make_backend",
    "make_completed_process",
]
