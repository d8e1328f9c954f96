"""
vectorpro.api.sites
────────────────────
Site lifecycle: create, clone, suspend, credential resets, cache purges
and log queries.
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import PaginatedResponse, api_path
from vectorpro.types import (
    CloneSiteRequest,
    CreateSiteRequest,
    LogsResponse,
    PasswordResetResponse,
    PurgeCacheRequest,
    PurgeCacheResponse,
    Site,
    UpdateSiteRequest,
)


class SitesApi(BaseClient):

    async def get_sites(
        self, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[Site]:
        return await self._request_page(api_path("sites"), page=page, per_page=per_page)

    async def get_site(self, site_id: str) -> Site:
        return await self._request("GET", api_path("sites", site_id))

    async def create_site(self, data: CreateSiteRequest) -> Site:
        """Create a site. The response includes one-time dev credentials."""
        return await self._request("POST", api_path("sites"), body=data)

    async def update_site(self, site_id: str, data: UpdateSiteRequest) -> Site:
        return await self._request("PUT", api_path("sites", site_id), body=data)

    async def delete_site(self, site_id: str) -> Site:
        return await self._request("DELETE", api_path("sites", site_id))

    async def clone_site(self, site_id: str, data: CloneSiteRequest | None = None) -> Site:
        return await self._request("POST", api_path("sites", site_id, "clone"), body=data)

    async def suspend_site(self, site_id: str) -> Site:
        return await self._request("PUT", api_path("sites", site_id, "suspend"))

    async def unsuspend_site(self, site_id: str) -> Site:
        return await self._request("PUT", api_path("sites", site_id, "unsuspend"))

    async def reset_site_sftp_password(self, site_id: str) -> PasswordResetResponse:
        return await self._request("POST", api_path("sites", site_id, "sftp", "reset-password"))

    async def reset_site_database_password(self, site_id: str) -> PasswordResetResponse:
        return await self._request(
            "POST", api_path("sites", site_id, "database", "reset-password")
        )

    async def purge_site_cache(
        self, site_id: str, data: PurgeCacheRequest | None = None
    ) -> PurgeCacheResponse:
        """Purge the CDN cache, optionally narrowed to one cache tag or URL."""
        return await self._request("POST", api_path("sites", site_id, "purge-cache"), body=data)

    async def get_site_logs(
        self,
        site_id: str,
        *,
        start_time: str | None = None,
        end_time: str | None = None,
        limit: int | None = None,
        environment: str | None = None,
        deployment_id: str | None = None,
    ) -> LogsResponse:
        """
        Query site logs. Times are ISO-8601 strings; unset filters are not
        sent, leaving the server defaults in place.
        """
        return await self._request(
            "GET",
            api_path("sites", site_id, "logs"),
            query={
                "start_time": start_time,
                "end_time": end_time,
                "limit": limit,
                "environment": environment,
                "deployment_id": deployment_id,
            },
        )
