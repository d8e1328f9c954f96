"""
vectorpro.api.catalog
──────────────────────
Read-only reference data: supported PHP versions and the account event feed.
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import PaginatedResponse, api_path
from vectorpro.types import Event, PhpVersion


class CatalogApi(BaseClient):

    async def get_php_versions(self) -> list[PhpVersion]:
        return await self._request("GET", api_path("php-versions"))

    async def get_events(
        self,
        page: int | None = None,
        per_page: int | None = None,
        *,
        from_: str | None = None,
        to: str | None = None,
        event: str | None = None,
    ) -> PaginatedResponse[Event]:
        """
        List account events, newest first. ``from_``/``to`` bound the time
        range (ISO-8601) and ``event`` filters by event name, e.g.
        ``vector.site.created``.
        """
        return await self._request_page(
            api_path("events"),
            page=page,
            per_page=per_page,
            query={"from": from_, "to": to, "event": event},
        )
