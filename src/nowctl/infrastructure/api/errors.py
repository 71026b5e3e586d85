"""Exceptions raised by the API transport."""

from __future__ import annotations

from typing import Any


class APIError(Exception):
    """A non-2xx response from the platform API.

    Attributes:
        status: HTTP status code (0 when the request never got a response).
        code: Machine-readable error code from the response body.
        message: Human-readable message from the response body.
        payload: Extra keys from the error body (e.g. the owning ``project``).
    """

    def __init__(
        self,
        status: int,
        message: str,
        *,
        code: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.message = message
        self.payload = payload or {}

    @classmethod
    def from_response(cls, status: int, body: Any, reason: str = "") -> APIError:
        """Build an APIError from a decoded ``{"error": {...}}`` body."""
        error: dict[str, Any] = {}
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error = dict(body["error"])
        code = error.pop("code", None)
        status_text = f"{status} {reason}" if reason else str(status)
        message = error.pop("message", None) or f"Response Error ({status_text})"
        return cls(status, message, code=code, payload=error)

    @property
    def is_client_error(self) -> bool:
        return 0 < self.status < 500

    def __repr__(self) -> str:
        return f"APIError(status={self.status}, code={self.code!r}, message={self.message!r})"
