"""HTTP-shaped request and response values exchanged with the gateway.

Handlers only see these two types, so the same handler serves the FastAPI
app and API-Gateway proxy events.
"""

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class GatewayRequest:
    """One inbound invocation.

    Attributes:
        method: Upper-case HTTP verb
        query: Query string parameters; a key may map to None or ""
        body: Raw request body, if any
    """

    method: str
    query: Mapping[str, str | None] = field(default_factory=dict)
    body: str | bytes | None = None

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "GatewayRequest":
        """Build a request from an API-Gateway proxy event.

        Args:
            event: Event with ``httpMethod``, ``queryStringParameters`` and
                ``body`` (base64 when ``isBase64Encoded`` is true)

        Raises:
            ValueError: If a base64 body is not valid base64
        """
        body = event.get("body")
        if body is not None and event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True)
        return cls(
            method=event.get("httpMethod") or "",
            query=event.get("queryStringParameters") or {},
            body=body,
        )


@dataclass(frozen=True)
class GatewayResponse:
    """One outbound response: JSON on success, plain text on error."""

    status_code: int
    body: str
    content_type: str = TEXT_CONTENT_TYPE

    @classmethod
    def json(cls, status_code: int, body: str) -> "GatewayResponse":
        return cls(status_code=status_code, body=body, content_type=JSON_CONTENT_TYPE)

    @classmethod
    def text(cls, status_code: int, message: str) -> "GatewayResponse":
        return cls(status_code=status_code, body=message, content_type=TEXT_CONTENT_TYPE)

    def to_event(self) -> dict[str, Any]:
        """Convert to an API-Gateway proxy response."""
        return {
            "statusCode": self.status_code,
            "headers": {"Content-Type": self.content_type},
            "body": self.body,
        }
