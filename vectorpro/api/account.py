"""
vectorpro.api.account
──────────────────────
Account-level resources: the account summary, API keys, and SSH keys
(both account-wide and attached to a single site).
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import PaginatedResponse, api_path
from vectorpro.types import (
    AccountSummary,
    ApiKey,
    CreateApiKeyRequest,
    CreateSshKeyRequest,
    SshKey,
)


class AccountApi(BaseClient):

    async def get_account_summary(self) -> AccountSummary:
        return await self._request("GET", api_path("account"))

    # ── API keys ──────────────────────────────────────────────────────────────

    async def get_api_keys(
        self, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[ApiKey]:
        return await self._request_page(api_path("api-keys"), page=page, per_page=per_page)

    async def create_api_key(self, data: CreateApiKeyRequest) -> ApiKey:
        """Create an API key. ``token`` is only present in this response."""
        return await self._request("POST", api_path("api-keys"), body=data)

    async def delete_api_key(self, api_key_id: int | str) -> ApiKey:
        return await self._request("DELETE", api_path("api-keys", api_key_id))

    # ── SSH keys ──────────────────────────────────────────────────────────────

    async def get_ssh_keys(
        self, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[SshKey]:
        return await self._request_page(api_path("ssh-keys"), page=page, per_page=per_page)

    async def get_ssh_key(self, ssh_key_id: str) -> SshKey:
        return await self._request("GET", api_path("ssh-keys", ssh_key_id))

    async def create_ssh_key(self, data: CreateSshKeyRequest) -> SshKey:
        return await self._request("POST", api_path("ssh-keys"), body=data)

    async def delete_ssh_key(self, ssh_key_id: str) -> SshKey:
        return await self._request("DELETE", api_path("ssh-keys", ssh_key_id))

    async def get_site_ssh_keys(
        self, site_id: str, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[SshKey]:
        return await self._request_page(
            api_path("sites", site_id, "ssh-keys"), page=page, per_page=per_page
        )

    async def add_site_ssh_key(self, site_id: str, data: CreateSshKeyRequest) -> SshKey:
        return await self._request("POST", api_path("sites", site_id, "ssh-keys"), body=data)

    async def remove_site_ssh_key(self, site_id: str, ssh_key_id: str) -> SshKey:
        return await self._request("DELETE", api_path("sites", site_id, "ssh-keys", ssh_key_id))
