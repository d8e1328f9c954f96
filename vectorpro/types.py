"""
vectorpro.types
────────────────
Wire shapes for the resources the API returns and the request bodies it
accepts. Every key is optional (``total=False``): responses are handed back
exactly as received, so a field the server omits is simply absent.
"""
from __future__ import annotations

from typing import Any, Literal, TypedDict

PhpVersionValue = Literal["7.2", "7.3", "7.4", "8.0", "8.1", "8.2", "8.3", "8.4", "8.5"]
SiteStatus = Literal["pending", "active", "suspended", "terminating", "terminated"]
EnvironmentStatus = Literal[
    "pending", "provisioning", "active", "suspended", "failed", "terminating", "terminated"
]
DeploymentStatus = Literal["pending", "deploying", "deployed", "failed"]
WebhookType = Literal["http", "slack"]


# ── Envelopes ───────────────────────────────────────────────────────────────

class PaginationLinks(TypedDict, total=False):
    first: str | None
    last: str | None
    prev: str | None
    next: str | None


class PaginationMeta(TypedDict, total=False):
    current_page: int
    last_page: int
    path: str
    per_page: int
    to: int
    total: int


class ErrorEnvelope(TypedDict, total=False):
    data: dict[str, Any]
    message: str
    http_status: int
    errors: dict[str, list[str]]


# ── Sites ───────────────────────────────────────────────────────────────────

class Environment(TypedDict, total=False):
    id: str
    vector_site_id: str
    partner_customer_id: str
    name: str
    is_production: bool
    status: EnvironmentStatus
    provisioning_step: str | None
    failure_reason: str | None
    php_version: str
    tags: list[str]
    fqdn: str
    custom_domain: str | None
    subdomain: str
    created_at: str
    updated_at: str


class Site(TypedDict, total=False):
    id: str
    account_id: int
    vector_cluster_id: str
    partner_customer_id: str
    status: SiteStatus
    tags: list[str]
    dev_domain: str
    dev_db_username: str
    dev_db_password: str
    dev_sftp_password: str
    environments: list[Environment]
    created_at: str
    updated_at: str


class CreateSiteRequest(TypedDict, total=False):
    partner_customer_id: str
    dev_php_version: PhpVersionValue
    tags: list[str]


class UpdateSiteRequest(TypedDict, total=False):
    partner_customer_id: str
    tags: list[str]


class CloneSiteRequest(TypedDict, total=False):
    partner_customer_id: str
    dev_php_version: PhpVersionValue
    tags: list[str]


class PasswordResetResponse(Site, total=False):
    pass


class PurgeCacheRequest(TypedDict, total=False):
    cache_tag: str
    url: str


class PurgeCacheResponse(TypedDict, total=False):
    cache_tag: str
    url: str


class LogColumn(TypedDict, total=False):
    name: str
    type: str


class LogTable(TypedDict, total=False):
    name: str
    columns: list[LogColumn]
    rows: list[list[Any]]


class LogsStatus(TypedDict, total=False):
    rowsExamined: int
    rowsMatched: int


class LogsResponse(TypedDict, total=False):
    tables: list[LogTable]
    status: LogsStatus


# ── Environments ────────────────────────────────────────────────────────────

class CreateEnvironmentRequest(TypedDict, total=False):
    name: str
    php_version: PhpVersionValue
    is_production: bool
    custom_domain: str | None
    tags: list[str]


class UpdateEnvironmentRequest(TypedDict, total=False):
    php_version: PhpVersionValue
    custom_domain: str | None
    tags: list[str]


class EnvironmentPasswordResetResponse(Environment, total=False):
    db_password: str


class SslStatus(Environment, total=False):
    pass


class NudgeSslRequest(TypedDict, total=False):
    retry: bool


# ── Deployments ─────────────────────────────────────────────────────────────

class Deployment(TypedDict, total=False):
    id: str
    vector_environment_id: str
    status: DeploymentStatus
    stdout: str | None
    stderr: str | None
    actor: str
    environment: Environment
    created_at: str
    updated_at: str


class RollbackDeploymentRequest(TypedDict, total=False):
    target_deployment_id: str


# ── Secrets ─────────────────────────────────────────────────────────────────

class Secret(TypedDict, total=False):
    id: str
    key: str
    created_at: str
    updated_at: str


class CreateSecretRequest(TypedDict, total=False):
    key: str
    value: str


class UpdateSecretRequest(TypedDict, total=False):
    key: str
    value: str


# ── Account ─────────────────────────────────────────────────────────────────

class ApiKey(TypedDict, total=False):
    id: int
    name: str
    token: str
    abilities: list[str]
    last_used_at: str | None
    expires_at: str | None
    created_at: str


class CreateApiKeyRequest(TypedDict, total=False):
    name: str
    abilities: list[str]


class SshKey(TypedDict, total=False):
    id: str
    account_id: int
    vector_site_id: str | None
    name: str
    fingerprint: str
    public_key_preview: str
    is_account_default: bool
    created_at: str
    updated_at: str


class CreateSshKeyRequest(TypedDict, total=False):
    name: str
    public_key: str


class AccountSummary(TypedDict, total=False):
    owner: dict[str, Any]
    account: dict[str, Any]
    cluster: dict[str, Any]
    domains: list[str]
    sites: dict[str, Any]
    environments: dict[str, Any]


# ── Webhooks ────────────────────────────────────────────────────────────────

class Webhook(TypedDict, total=False):
    id: str
    type: WebhookType
    url: str
    events: list[str]
    secret: str
    is_active: bool
    created_at: str
    updated_at: str


class CreateWebhookRequest(TypedDict, total=False):
    type: WebhookType
    url: str
    events: list[str]


class UpdateWebhookRequest(TypedDict, total=False):
    url: str
    events: list[str]
    is_active: bool


class WebhookLog(TypedDict, total=False):
    id: str
    webhook_id: str
    event_type: str
    payload: dict[str, Any]
    response_status: int
    response_body: str
    created_at: str


# ── WAF ─────────────────────────────────────────────────────────────────────

class AllowedReferrer(TypedDict, total=False):
    hostname: str


class BlockedReferrer(TypedDict, total=False):
    hostname: str


class BlockedIp(TypedDict, total=False):
    ip: str
    note: str


class RateLimit(TypedDict, total=False):
    id: str
    path_pattern: str
    requests_per_minute: int
    created_at: str
    updated_at: str


class CreateRateLimitRequest(TypedDict, total=False):
    path_pattern: str
    requests_per_minute: int


class UpdateRateLimitRequest(TypedDict, total=False):
    path_pattern: str
    requests_per_minute: int


# ── Database import / export ────────────────────────────────────────────────

class DbImportOptions(TypedDict, total=False):
    drop_tables: bool
    disable_foreign_keys: bool


class DirectImportResult(TypedDict, total=False):
    success: bool
    duration_ms: int


class CreateDbImportRequest(TypedDict, total=False):
    filename: str
    content_length: int
    content_md5: str
    options: DbImportOptions


class DbImportSession(TypedDict, total=False):
    id: str
    vector_site_id: str
    status: str
    filename: str
    content_length: int
    checksum: dict[str, str]
    options: DbImportOptions
    upload_url: str
    upload_expires_at: str
    duration_ms: int | str
    error_message: str
    created_at: str
    uploaded_at: str
    started_at: str
    completed_at: str


class CreateDbExportRequest(TypedDict, total=False):
    format: str


class DbExport(TypedDict, total=False):
    id: str
    vector_site_id: str
    status: str
    format: str
    size_bytes: int | str
    duration_ms: int | str
    error_message: str
    download_url: str
    download_expires_at: str
    created_at: str
    started_at: str
    completed_at: str


# ── Catalog ─────────────────────────────────────────────────────────────────

class PhpVersion(TypedDict, total=False):
    value: str
    label: str


class Event(TypedDict, total=False):
    id: str
    type: str
    actor: str
    data: dict[str, Any]
    created_at: str
