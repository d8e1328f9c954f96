"""
vectorpro.api.base
───────────────────
The request pipeline every endpoint method goes through:

    build_request → _send (one httpx call) → unwrap / unwrap_paginated
                                          ↘ VectorProError on non-2xx

There is no retry, no timeout and no connection reuse policy. Each call
opens its own httpx.AsyncClient, so concurrent calls share nothing but the
frozen ClientConfig. Connection failures propagate as httpx exceptions.
"""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from vectorpro.core.config import ClientConfig, resolve_config
from vectorpro.core.errors import VectorProError
from vectorpro.core.http import (
    HTTP,
    PaginatedResponse,
    Query,
    RequestDescriptor,
    build_request,
    parse_body,
    unwrap,
    unwrap_paginated,
)
from vectorpro.core.logging import get_logger
from vectorpro.core.redact import redact

log = get_logger(__name__)


class BaseClient:
    """
    Owns the configuration and the single transport routine. Resource
    mixins in vectorpro.api build on the helpers below.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = resolve_config(api_key, base_url)
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    # ── Pipeline ──────────────────────────────────────────────────────────────

    def _build(
        self,
        method: str,
        path: str,
        *,
        query: Query | None = None,
        body: Any = None,
    ) -> RequestDescriptor:
        return build_request(
            self._config.base_url,
            self._config.api_key,
            method,
            path,
            query=query,
            body=body,
        )

    async def _send(self, request: RequestDescriptor) -> Any:
        """Perform exactly one HTTP call and return the parsed body."""
        log.debug("vector.request", method=request.method, url=request.url)

        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            response = await client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
            )

        body = parse_body(response)
        if not HTTP.is_success(response.status_code):
            log.warning(
                "vector.request.failed",
                method=request.method,
                url=request.url,
                status_code=response.status_code,
                body=redact(body),
            )
            raise VectorProError(response.status_code, body if isinstance(body, dict) else None)

        log.debug(
            "vector.response",
            method=request.method,
            url=request.url,
            status_code=response.status_code,
        )
        return body

    async def _request(
        self,
        method: str,
        path: str,
        *,
        query: Query | None = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the envelope's ``data``."""
        request = self._build(method, path, query=query, body=body)
        return unwrap(await self._send(request))

    async def _request_page(
        self,
        path: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        query: Query | None = None,
    ) -> PaginatedResponse[Any]:
        """GET a list endpoint and return its page with links/meta filled in."""
        params: list[tuple[str, Any]] = [("page", page), ("per_page", per_page)]
        if query:
            params.extend(query.items() if isinstance(query, Mapping) else query)
        request = self._build("GET", path, query=params)
        return unwrap_paginated(await self._send(request))


__all__ = ["BaseClient"]
