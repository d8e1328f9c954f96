"""
vectorpro.client
─────────────────
VectorProClient: one async method per API endpoint.

Usage::

    client = VectorProClient(api_key="vp_...")
    sites = await client.get_sites(page=1, per_page=50)
    site = await client.create_site(
        {"partner_customer_id": "cust-1", "dev_php_version": "8.3"}
    )
"""
from __future__ import annotations

from vectorpro.api.account import AccountApi
from vectorpro.api.catalog import CatalogApi
from vectorpro.api.database import DatabaseApi
from vectorpro.api.environments import EnvironmentsApi
from vectorpro.api.secrets import SecretsApi
from vectorpro.api.sites import SitesApi
from vectorpro.api.waf import WafApi
from vectorpro.api.webhooks import WebhooksApi


class VectorProClient(
    SitesApi,
    EnvironmentsApi,
    SecretsApi,
    AccountApi,
    WebhooksApi,
    WafApi,
    DatabaseApi,
    CatalogApi,
):
    """
    Async client for the Vector Pro API.

    Args:
        api_key: Bearer token. Falls back to VECTORPRO_API_KEY.
        base_url: API root. Falls back to VECTORPRO_BASE_URL, then
            https://api.builtfast.com.
        transport: optional httpx transport, e.g. httpx.MockTransport in tests.

    Every method issues exactly one request. Non-2xx responses raise
    VectorProError; connection failures raise the underlying httpx error.
    """


__all__ = ["VectorProClient"]
