"""
vectorpro.api.webhooks
───────────────────────
Webhook subscriptions and their delivery logs.
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import PaginatedResponse, api_path
from vectorpro.types import (
    CreateWebhookRequest,
    UpdateWebhookRequest,
    Webhook,
    WebhookLog,
)


class WebhooksApi(BaseClient):

    async def get_webhooks(
        self, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[Webhook]:
        return await self._request_page(api_path("webhooks"), page=page, per_page=per_page)

    async def get_webhook(self, webhook_id: str) -> Webhook:
        return await self._request("GET", api_path("webhooks", webhook_id))

    async def create_webhook(self, data: CreateWebhookRequest) -> Webhook:
        """Create a webhook. The signing ``secret`` is returned once, here."""
        return await self._request("POST", api_path("webhooks"), body=data)

    async def update_webhook(self, webhook_id: str, data: UpdateWebhookRequest) -> Webhook:
        return await self._request("PUT", api_path("webhooks", webhook_id), body=data)

    async def delete_webhook(self, webhook_id: str) -> Webhook:
        return await self._request("DELETE", api_path("webhooks", webhook_id))

    async def rotate_webhook_secret(self, webhook_id: str) -> Webhook:
        return await self._request("POST", api_path("webhooks", webhook_id, "rotate-secret"))

    async def get_webhook_logs(
        self, webhook_id: str, page: int | None = None, per_page: int | None = None
    ) -> PaginatedResponse[WebhookLog]:
        return await self._request_page(
            api_path("webhooks", webhook_id, "logs"), page=page, per_page=per_page
        )
