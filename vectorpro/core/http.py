"""
vectorpro.core.http
────────────────────
HTTP primitives shared by every endpoint method: status codes, request
construction, and unwrapping of the API's JSON envelopes.

Success envelope:  {"data": ..., "message": str, "http_status": int,
                    "links": {...}?, "meta": {...}?}
Error envelope:    {"data": {...}, "message": str, "http_status": int,
                    "errors": {field: [message, ...]}?}
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Mapping, TypeVar
from urllib.parse import quote

import httpx

T = TypeVar("T")

API_PREFIX = "/api/v1/vector"

Scalar = str | int | float | bool
Query = Mapping[str, Scalar | None] | Iterable[tuple[str, Scalar | None]]


# ── Status code constants ──────────────────────────────────────────────────

class HTTP:
    """Status codes the error classifier distinguishes."""

    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    @staticmethod
    def is_success(status_code: int) -> bool:
        return 200 <= status_code < 300

    @staticmethod
    def is_server_error(status_code: int) -> bool:
        return 500 <= status_code < 600


# ── Request construction ───────────────────────────────────────────────────

@dataclass(frozen=True)
class RequestDescriptor:
    """A fully built request, ready to hand to the transport."""
    method: str
    url: str
    headers: dict[str, str]
    content: str | None = None


def api_path(*segments: Any) -> str:
    """
    Join path segments under the API prefix, percent-encoding each one.

    Identifiers such as hostnames or IPv6 addresses may contain reserved
    characters, so every segment is quoted with no safe characters. A
    segment of "." or ".." has its dots encoded so URL normalization
    cannot collapse it; an empty segment raises ValueError.

        api_path("sites", "s-1", "waf", "blocked-ips", "::1")
        # → "/api/v1/vector/sites/s-1/waf/blocked-ips/%3A%3A1"
    """
    return API_PREFIX + "".join("/" + _quote_segment(s) for s in segments)


def _quote_segment(segment: Any) -> str:
    text = str(segment)
    if not text:
        raise ValueError("path segment must not be empty")
    if text in (".", ".."):
        return "%2E" * len(text)
    return quote(text, safe="")


def _stringify(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(query: Query | None) -> list[tuple[str, str]]:
    """Drop absent entries and coerce the rest to strings, keeping call order."""
    if not query:
        return []
    items = query.items() if isinstance(query, Mapping) else query
    return [(key, _stringify(value)) for key, value in items if value is not None]


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


def build_request(
    base_url: str,
    api_key: str,
    method: str,
    path: str,
    *,
    query: Query | None = None,
    body: Any = None,
) -> RequestDescriptor:
    """
    Turn (method, path, query, body) into a RequestDescriptor.

    The body is serialized only when one is supplied; GET and DELETE calls
    normally pass none.
    """
    url = httpx.URL(base_url.rstrip("/") + path, params=encode_query(query) or None)
    return RequestDescriptor(
        method=method.upper(),
        url=str(url),
        headers=build_headers(api_key),
        content=json.dumps(body, separators=(",", ":")) if body is not None else None,
    )


def parse_body(response: httpx.Response) -> Any:
    """Decode a JSON body, returning None when the body is not valid JSON."""
    try:
        return response.json()
    except ValueError:
        return None


# ── Response envelopes ─────────────────────────────────────────────────────

@dataclass
class PaginatedResponse(Generic[T]):
    """One page of a list endpoint. links and meta are always present."""
    data: list[T] = field(default_factory=list)
    links: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    def __iter__(self):
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def current_page(self) -> int | None:
        return self.meta.get("current_page")

    @property
    def last_page(self) -> int | None:
        return self.meta.get("last_page")

    @property
    def has_next(self) -> bool:
        return bool(self.links.get("next"))


def unwrap(body: Any) -> Any:
    """Return the envelope's ``data`` exactly as received."""
    if isinstance(body, Mapping):
        return body.get("data")
    return None


def unwrap_paginated(body: Any) -> PaginatedResponse[Any]:
    """Build a PaginatedResponse, defaulting missing data/links/meta."""
    envelope: Mapping[str, Any] = body if isinstance(body, Mapping) else {}
    return PaginatedResponse(
        data=envelope.get("data") or [],
        links=envelope.get("links") or {},
        meta=envelope.get("meta") or {},
    )


__all__ = [
    "API_PREFIX",
    "HTTP",
    "RequestDescriptor",
    "PaginatedResponse",
    "api_path",
    "encode_query",
    "build_headers",
    "build_request",
    "parse_body",
    "unwrap",
    "unwrap_paginated",
]
