"""
vectorpro.api.secrets
──────────────────────
Environment-scoped secrets and account-wide global secrets. Secret values
are write-only: the API never returns them.
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import PaginatedResponse, api_path
from vectorpro.types import CreateSecretRequest, Secret, UpdateSecretRequest


def _secrets_path(site_id: str, environment_name: str, *rest: str) -> str:
    return api_path("sites", site_id, "environments", environment_name, "secrets", *rest)


class SecretsApi(BaseClient):

    async def get_secrets(
        self,
        site_id: str,
        environment_name: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> PaginatedResponse[Secret]:
        return await self._request_page(
            _secrets_path(site_id, environment_name), page=page, per_page=per_page
        )

    async def get_secret(self, site_id: str, environment_name: str, secret_id: str) -> Secret:
        return await self._request("GET", _secrets_path(site_id, environment_name, secret_id))

    async def create_secret(
        self, site_id: str, environment_name: str, data: CreateSecretRequest
    ) -> Secret:
        return await self._request("POST", _secrets_path(site_id, environment_name), body=data)

    async def update_secret(
        self,
        site_id: str,
        environment_name: str,
        secret_id: str,
        data: UpdateSecretRequest,
    ) -> Secret:
        return await self._request(
            "PUT", _secrets_path(site_id, environment_name, secret_id), body=data
        )

    async def delete_secret(self, site_id: str, environment_name: str, secret_id: str) -> Secret:
        return await self._request(
            "DELETE", _secrets_path(site_id, environment_name, secret_id)
        )

    # ── Global secrets ────────────────────────────────────────────────────────

    async def get_global_secrets(
        self, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[Secret]:
        return await self._request_page(
            api_path("global-secrets"), page=page, per_page=per_page
        )

    async def get_global_secret(self, secret_id: str) -> Secret:
        return await self._request("GET", api_path("global-secrets", secret_id))

    async def create_global_secret(self, data: CreateSecretRequest) -> Secret:
        return await self._request("POST", api_path("global-secrets"), body=data)

    async def update_global_secret(self, secret_id: str, data: UpdateSecretRequest) -> Secret:
        return await self._request("PUT", api_path("global-secrets", secret_id), body=data)

    async def delete_global_secret(self, secret_id: str) -> Secret:
        return await self._request("DELETE", api_path("global-secrets", secret_id))
