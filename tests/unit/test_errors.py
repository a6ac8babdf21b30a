"""
Error Taxonomy Unit Tests
Tests for gemserver/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from gemserver.schemas.errors import (
    ConfigError,
    ErrorCodes,
    GemserverError,
    GemserverException,
    HostResolutionError,
    HttpError,
    UnsupportedVerbError,
)


@pytest.mark.parametrize("exc,code", [
    (HostResolutionError("no host"), ErrorCodes.HOST_RESOLUTION_FAILED),
    (HttpError("refused"), ErrorCodes.HTTP_ERROR),
    (UnsupportedVerbError("patch"), ErrorCodes.UNSUPPORTED_VERB),
    (ConfigError("bad file"), ErrorCodes.CONFIG_ERROR),
])
def test_exception_codes(exc, code):
    assert isinstance(exc, GemserverException)
    assert exc.code == code


def test_error_model_round_trip():
    exc = HttpError("HTTP 500", status_code=500)

    model = exc.to_error_model()
    assert model.code == ErrorCodes.HTTP_ERROR
    assert model.details == {"status_code": 500}

    again = model.to_exception()
    assert again.code == exc.code
    assert again.message == "HTTP 500"


def test_error_model_forbids_extra():
    with pytest.raises(ValidationError):
        GemserverError(code="X", message="m", retryable=True)


def test_unsupported_verb_message():
    exc = UnsupportedVerbError("delete")

    assert str(exc) == "Unsupported HTTP verb: 'delete'"
    assert exc.details == {"verb": "delete"}


def test_host_resolution_details():
    exc = HostResolutionError("failed", command=["gcloud", "app", "describe"], details={"stderr": "boom"})

    assert exc.details == {"stderr": "boom", "command": "gcloud app describe"}


def test_repr():
    exc = ConfigError("bad file", path="gemserver.yaml")

    assert repr(exc) == "ConfigError(code='CONFIG_ERROR', message='bad file')"
    assert exc.details == {"path": "gemserver.yaml"}
