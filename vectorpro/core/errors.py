"""
vectorpro.core.errors
──────────────────────
Error taxonomy for the SDK. Every non-2xx API response is raised as a
VectorProError carrying the status code and the full error envelope;
callers classify failures through its predicates instead of parsing
status codes or messages themselves.

Network-level failures (DNS, refused connections) are NOT wrapped: they
surface as the underlying httpx exception.
"""
from __future__ import annotations

from typing import Any, Mapping

from vectorpro.core.http import HTTP


# ── Base error ────────────────────────────────────────────────────────────────

class VectorProSDKError(Exception):
    """
    Base class for all errors raised by the SDK itself. Every error has:
    - code: stable machine-readable string (snake_case)
    - message: human-readable description
    """

    code: str = "sdk_error"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.code = code or self.__class__.code
        self.message = message
        super().__init__(message)


class ConfigurationError(VectorProSDKError):
    """Client constructed without a usable configuration (e.g. no API key)."""
    code = "configuration_error"


# ── API error ─────────────────────────────────────────────────────────────────

class VectorProError(VectorProSDKError):
    """
    A failed API call. One instance classifies exactly one response.

    Usage::

        try:
            await client.create_site({"partner_customer_id": "c1"})
        except VectorProError as exc:
            if exc.is_validation_error():
                print(exc.first_error())
    """

    code = "api_error"

    def __init__(self, status_code: int, response_body: Mapping[str, Any] | None = None) -> None:
        self.status_code = status_code
        self.response_body: dict[str, Any] = dict(response_body or {})
        super().__init__(self.response_body.get("message") or f"HTTP {status_code}")

    def __repr__(self) -> str:
        return f"VectorProError(status_code={self.status_code}, message={self.message!r})"

    # ── Status predicates ─────────────────────────────────────────────────────

    def is_authentication_error(self) -> bool:
        return self.status_code == HTTP.UNAUTHORIZED

    def is_authorization_error(self) -> bool:
        return self.status_code == HTTP.FORBIDDEN

    def is_not_found_error(self) -> bool:
        return self.status_code == HTTP.NOT_FOUND

    def is_validation_error(self) -> bool:
        return self.status_code == HTTP.UNPROCESSABLE_ENTITY

    def is_server_error(self) -> bool:
        return HTTP.is_server_error(self.status_code)

    # ── Validation detail ─────────────────────────────────────────────────────

    def get_validation_errors(self) -> dict[str, list[str]]:
        """Field name → messages, or an empty dict when the envelope has none."""
        return self.response_body.get("errors") or {}

    def first_error(self) -> str | None:
        """First message of the first field, in the server's field order."""
        errors = self.get_validation_errors()
        first_field = next(iter(errors), None)
        if first_field is None:
            return None
        messages = errors[first_field]
        return messages[0] if messages else None

    def errors_for(self, field: str) -> list[str]:
        return list(self.get_validation_errors().get(field) or [])

    def has_error_for(self, field: str) -> bool:
        return len(self.errors_for(field)) > 0


__all__ = [
    "VectorProSDKError",
    "ConfigurationError",
    "VectorProError",
]
