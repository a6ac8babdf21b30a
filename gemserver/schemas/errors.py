"""
Gemserver Schemas
File: errors.py

Purpose: Error taxonomy for the gemserver admin client.
Defines a Pydantic model for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from gemserver.http.client import HttpResponse


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used by the client."""

    GEMSERVER_ERROR = "GEMSERVER_ERROR"

    # Host resolution
    HOST_RESOLUTION_FAILED = "HOST_RESOLUTION_FAILED"

    # Transport
    HTTP_ERROR = "HTTP_ERROR"

    # Programmer errors
    UNSUPPORTED_VERB = "UNSUPPORTED_VERB"

    # Configuration
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class GemserverError(BaseModel):
    """
    Structured error model.

    Used by the CLI to report failures in machine-readable form
    without inspecting exception classes.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.HOST_RESOLUTION_FAILED],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "GemserverException":
        """Convert this error model to a raisable exception."""
        return GemserverException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class GemserverException(Exception):
    """
    Base exception for all gemserver client errors.

    Carries structured error information and can be converted
    to a GemserverError model.
    """

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.GEMSERVER_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> GemserverError:
        """Convert this exception to a GemserverError model."""
        return GemserverError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class HostResolutionError(GemserverException):
    """Raised when the default gemserver host cannot be determined."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if command:
            full_details["command"] = " ".join(command)
        super().__init__(
            message=message,
            code=ErrorCodes.HOST_RESOLUTION_FAILED,
            details=full_details,
        )


class HttpError(GemserverException):
    """HTTP request error (connection failure or rejected status)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional["HttpResponse"] = None,
    ) -> None:
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message=message,
            code=ErrorCodes.HTTP_ERROR,
            details=details,
        )
        self.status_code = status_code
        self.response = response


class UnsupportedVerbError(GemserverException):
    """Raised when a request is dispatched with a verb the API does not use."""

    def __init__(self, verb: Any) -> None:
        super().__init__(
            message=f"Unsupported HTTP verb: {verb!r}",
            code=ErrorCodes.UNSUPPORTED_VERB,
            details={"verb": str(verb)},
        )
        self.verb = verb


class ConfigError(GemserverException):
    """Raised when a configuration file is missing or malformed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if path:
            details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=details,
        )
