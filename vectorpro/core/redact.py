"""
vectorpro.core.redact
──────────────────────
Secret redaction for anything the SDK logs. Request bodies routinely carry
secret values, passwords and webhook secrets; headers carry the API key.
Field-level redaction handles structured data and regex scrubbing handles
free text such as URLs or exception messages.
"""
from __future__ import annotations

import re
from typing import Any

# ── Default redacted key names (case-insensitive) ─────────────────────────

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password", "secret", "token", "api_key", "apikey", "authorization",
    "value", "public_key", "private_key", "db_password", "database_password",
    "dev_db_password", "dev_sftp_password", "upload_url", "download_url",
})

# ── Regex patterns for inline scrubbing ───────────────────────────────────

_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    # Bearer tokens
    (re.compile(r"Bearer\s+[A-Za-z0-9\-._~+/|]+=*", re.I), "Bearer [REDACTED]"),
    # Generic key=value secrets
    (re.compile(
        r"(password|secret|token|api[_-]?key)\s*=\s*[^\s&\"']+",
        re.I,
    ), r"\1=[REDACTED]"),
]

REDACTED = "[REDACTED]"


# ── Public API ─────────────────────────────────────────────────────────────

def redact(data: Any, sensitive_keys: frozenset[str] | None = None) -> Any:
    """
    Return a copy of *data* with sensitive key values replaced by REDACTED.
    Recurses into nested dicts and lists and scrubs free-text strings;
    other values pass through.
    """
    keys = sensitive_keys if sensitive_keys is not None else SENSITIVE_KEYS
    if isinstance(data, dict):
        return {
            k: REDACTED if str(k).lower() in keys else redact(v, keys)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [redact(item, keys) for item in data]
    if isinstance(data, str):
        return scrub_string(data)
    return data


def scrub_string(text: str) -> str:
    """Apply regex-based scrubbing to an arbitrary string."""
    for pattern, replacement in _PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def structlog_redact_processor(
    logger: Any,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    structlog processor that redacts sensitive keys from the event dict.
    The event name itself is never touched.
    """
    event = event_dict.get("event")
    result = redact(event_dict)
    if event is not None:
        result["event"] = event
    return result


__all__ = [
    "REDACTED",
    "SENSITIVE_KEYS",
    "redact",
    "scrub_string",
    "structlog_redact_processor",
]
