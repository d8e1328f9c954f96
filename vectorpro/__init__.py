"""
vectorpro
─────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from vectorpro.client import VectorProClient
from vectorpro.core.config import ClientConfig, get_config
from vectorpro.core.errors import (
    ConfigurationError,
    VectorProError,
    VectorProSDKError,
)
from vectorpro.core.http import HTTP, PaginatedResponse
from vectorpro.core.logging import get_logger
from vectorpro.types import (
    AccountSummary,
    AllowedReferrer,
    ApiKey,
    BlockedIp,
    BlockedReferrer,
    CreateApiKeyRequest,
    CreateEnvironmentRequest,
    CreateRateLimitRequest,
    CreateSecretRequest,
    CreateSiteRequest,
    CreateSshKeyRequest,
    CreateWebhookRequest,
    DbExport,
    DbImportSession,
    Deployment,
    Environment,
    ErrorEnvelope,
    Event,
    LogsResponse,
    PhpVersion,
    RateLimit,
    Secret,
    Site,
    SshKey,
    UpdateEnvironmentRequest,
    UpdateRateLimitRequest,
    UpdateSecretRequest,
    UpdateSiteRequest,
    UpdateWebhookRequest,
    Webhook,
    WebhookLog,
)

__version__ = "0.1.0"
__all__ = [
    # client
    "VectorProClient",
    # config
    "ClientConfig", "get_config",
    # errors
    "VectorProSDKError", "VectorProError", "ConfigurationError",
    # http
    "HTTP", "PaginatedResponse",
    # logging
    "get_logger",
    # sites & environments
    "Site", "CreateSiteRequest", "UpdateSiteRequest",
    "Environment", "CreateEnvironmentRequest", "UpdateEnvironmentRequest",
    "Deployment", "LogsResponse",
    # secrets
    "Secret", "CreateSecretRequest", "UpdateSecretRequest",
    # account
    "AccountSummary", "ApiKey", "CreateApiKeyRequest", "SshKey", "CreateSshKeyRequest",
    # webhooks
    "Webhook", "CreateWebhookRequest", "UpdateWebhookRequest", "WebhookLog",
    # waf
    "AllowedReferrer", "BlockedReferrer", "BlockedIp",
    "RateLimit", "CreateRateLimitRequest", "UpdateRateLimitRequest",
    # database
    "DbImportSession", "DbExport",
    # catalog
    "PhpVersion", "Event",
    # envelopes
    "ErrorEnvelope",
]
