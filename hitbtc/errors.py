"""
Exception hierarchy raised by the HitBTC client.

Every failure aborts the in-flight call and surfaces as a single
``HitbtcClientError`` subclass wrapping the originating cause.
"""

from __future__ import annotations

from typing import Any, Optional


class HitbtcClientError(RuntimeError):
    """Base class for all client failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class HitbtcTransportError(HitbtcClientError):
    """Connection failure, timeout or TLS error from the HTTP transport."""


class HitbtcSerializationError(HitbtcClientError):
    """A request parameter could not be encoded; no request was sent."""


class HitbtcDecodeError(HitbtcClientError):
    """The response body is not JSON or does not match the expected schema."""

    def __init__(
        self,
        message: str,
        *,
        body: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.body = body


class HitbtcApiError(HitbtcClientError):
    """Raised when HitBTC answers with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        payload: Optional[dict] = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.payload = payload or {}
        error: Any = self.payload.get("error")
        if not isinstance(error, dict):
            error = {}
        self.code = error.get("code")
        self.message = error.get("message") or message
        self.description = error.get("description")
