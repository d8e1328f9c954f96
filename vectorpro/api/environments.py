"""
vectorpro.api.environments
───────────────────────────
Environments of a site, addressed by name ("production", "staging", ...),
plus their deployments, SSL state and database credentials.
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import PaginatedResponse, api_path
from vectorpro.types import (
    CreateEnvironmentRequest,
    Deployment,
    Environment,
    EnvironmentPasswordResetResponse,
    NudgeSslRequest,
    RollbackDeploymentRequest,
    SslStatus,
    UpdateEnvironmentRequest,
)


def _env_path(site_id: str, environment_name: str, *rest: str) -> str:
    return api_path("sites", site_id, "environments", environment_name, *rest)


class EnvironmentsApi(BaseClient):

    async def get_environments(
        self, site_id: str, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[Environment]:
        return await self._request_page(
            api_path("sites", site_id, "environments"), page=page, per_page=per_page
        )

    async def get_environment(self, site_id: str, environment_name: str) -> Environment:
        return await self._request("GET", _env_path(site_id, environment_name))

    async def create_environment(
        self, site_id: str, data: CreateEnvironmentRequest
    ) -> Environment:
        return await self._request(
            "POST", api_path("sites", site_id, "environments"), body=data
        )

    async def update_environment(
        self, site_id: str, environment_name: str, data: UpdateEnvironmentRequest
    ) -> Environment:
        return await self._request("PUT", _env_path(site_id, environment_name), body=data)

    async def delete_environment(self, site_id: str, environment_name: str) -> Environment:
        return await self._request("DELETE", _env_path(site_id, environment_name))

    async def reset_environment_database_password(
        self, site_id: str, environment_name: str
    ) -> EnvironmentPasswordResetResponse:
        return await self._request(
            "POST", _env_path(site_id, environment_name, "database", "reset-password")
        )

    # ── SSL ───────────────────────────────────────────────────────────────────

    async def get_ssl_status(self, site_id: str, environment_name: str) -> SslStatus:
        return await self._request("GET", _env_path(site_id, environment_name, "ssl"))

    async def nudge_ssl(
        self, site_id: str, environment_name: str, data: NudgeSslRequest | None = None
    ) -> SslStatus:
        """Ask the platform to re-check certificate provisioning."""
        return await self._request(
            "POST", _env_path(site_id, environment_name, "ssl", "nudge"), body=data
        )

    # ── Deployments ───────────────────────────────────────────────────────────

    async def get_deployments(
        self,
        site_id: str,
        environment_name: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> PaginatedResponse[Deployment]:
        return await self._request_page(
            _env_path(site_id, environment_name, "deployments"),
            page=page,
            per_page=per_page,
        )

    async def get_deployment(
        self, site_id: str, environment_name: str, deployment_id: str
    ) -> Deployment:
        return await self._request(
            "GET", _env_path(site_id, environment_name, "deployments", deployment_id)
        )

    async def create_deployment(self, site_id: str, environment_name: str) -> Deployment:
        return await self._request(
            "POST", _env_path(site_id, environment_name, "deployments")
        )

    async def rollback_deployment(
        self,
        site_id: str,
        environment_name: str,
        data: RollbackDeploymentRequest | None = None,
    ) -> Deployment:
        """
        Roll the environment back. Without a target_deployment_id the server
        picks the previous successful deployment.
        """
        return await self._request(
            "POST", _env_path(site_id, environment_name, "rollback"), body=data
        )
