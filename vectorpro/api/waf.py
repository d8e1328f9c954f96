"""
vectorpro.api.waf
──────────────────
Per-site web application firewall rules: referrer allow/block lists,
blocked IPs and path rate limits.

Hostnames and IPs are interpolated into paths, so they go through
api_path's percent-encoding (IPv6 colons, for one, must not reach the
URL raw).
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import api_path
from vectorpro.types import (
    AllowedReferrer,
    BlockedIp,
    BlockedReferrer,
    CreateRateLimitRequest,
    RateLimit,
    UpdateRateLimitRequest,
)


def _waf_path(site_id: str, *rest: str) -> str:
    return api_path("sites", site_id, "waf", *rest)


class WafApi(BaseClient):

    # ── Referrers ─────────────────────────────────────────────────────────────

    async def get_allowed_referrers(self, site_id: str) -> list[AllowedReferrer]:
        return await self._request("GET", _waf_path(site_id, "allowed-referrers"))

    async def add_allowed_referrer(self, site_id: str, hostname: str) -> AllowedReferrer:
        return await self._request(
            "POST", _waf_path(site_id, "allowed-referrers"), body={"hostname": hostname}
        )

    async def remove_allowed_referrer(self, site_id: str, hostname: str) -> AllowedReferrer:
        return await self._request("DELETE", _waf_path(site_id, "allowed-referrers", hostname))

    async def get_blocked_referrers(self, site_id: str) -> list[BlockedReferrer]:
        return await self._request("GET", _waf_path(site_id, "blocked-referrers"))

    async def add_blocked_referrer(self, site_id: str, hostname: str) -> BlockedReferrer:
        return await self._request(
            "POST", _waf_path(site_id, "blocked-referrers"), body={"hostname": hostname}
        )

    async def remove_blocked_referrer(self, site_id: str, hostname: str) -> BlockedReferrer:
        return await self._request("DELETE", _waf_path(site_id, "blocked-referrers", hostname))

    # ── Blocked IPs ───────────────────────────────────────────────────────────

    async def get_blocked_ips(self, site_id: str) -> list[BlockedIp]:
        return await self._request("GET", _waf_path(site_id, "blocked-ips"))

    async def add_blocked_ip(self, site_id: str, ip: str, note: str | None = None) -> BlockedIp:
        body: BlockedIp = {"ip": ip}
        if note is not None:
            body["note"] = note
        return await self._request("POST", _waf_path(site_id, "blocked-ips"), body=body)

    async def remove_blocked_ip(self, site_id: str, ip: str) -> BlockedIp:
        return await self._request("DELETE", _waf_path(site_id, "blocked-ips", ip))

    # ── Rate limits ───────────────────────────────────────────────────────────

    async def get_rate_limits(self, site_id: str) -> list[RateLimit]:
        return await self._request("GET", _waf_path(site_id, "rate-limits"))

    async def get_rate_limit(self, site_id: str, rate_limit_id: str) -> RateLimit:
        return await self._request("GET", _waf_path(site_id, "rate-limits", rate_limit_id))

    async def create_rate_limit(self, site_id: str, data: CreateRateLimitRequest) -> RateLimit:
        return await self._request("POST", _waf_path(site_id, "rate-limits"), body=data)

    async def update_rate_limit(
        self, site_id: str, rate_limit_id: str, data: UpdateRateLimitRequest
    ) -> RateLimit:
        return await self._request(
            "PUT", _waf_path(site_id, "rate-limits", rate_limit_id), body=data
        )

    async def delete_rate_limit(self, site_id: str, rate_limit_id: str) -> RateLimit | None:
        return await self._request("DELETE", _waf_path(site_id, "rate-limits", rate_limit_id))
