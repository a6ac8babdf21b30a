"""
Gemserver Schemas
File: request.py

Purpose: Request descriptor passed from the backend facade to the transport.
A descriptor lives only for the duration of a single call.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import UnsupportedVerbError


class HttpVerb(str, Enum):
    """HTTP verbs used by the gemserver management API."""

    POST = "POST"
    PUT = "PUT"
    GET = "GET"

    @property
    def has_body(self) -> bool:
        """Whether requests with this verb carry a form body."""
        return self in (HttpVerb.POST, HttpVerb.PUT)

    @classmethod
    def parse(cls, value: Any) -> "HttpVerb":
        """
        Coerce a verb name (any case) to an HttpVerb.

        Raises:
            UnsupportedVerbError: If the value is not one of POST, PUT, GET.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise UnsupportedVerbError(value)


class RequestDescriptor(BaseModel):
    """
    A single request to the gemserver.

    Params map field names to optional values. A value of None means the
    field is absent and is left out of the body; an empty string is sent
    as an empty field.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    verb: HttpVerb = Field(
        ...,
        description="HTTP verb",
    )
    endpoint: str = Field(
        ...,
        description="Path on the gemserver, e.g. /api/v1/key",
        min_length=1,
    )
    params: Optional[dict[str, Optional[str]]] = Field(
        default=None,
        description="Form parameters (ignored for GET)",
    )

    @field_validator("endpoint")
    @classmethod
    def _endpoint_is_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"endpoint must start with '/': {v!r}")
        return v

    def form_body(self) -> Optional[dict[str, str]]:
        """
        Form fields to encode as the request body.

        Returns None for GET requests and when no field has a value.
        """
        if not self.verb.has_body or not self.params:
            return None
        form = {name: value for name, value in self.params.items() if value is not None}
        return form or None
