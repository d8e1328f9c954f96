"""
vectorpro.core.config
──────────────────────
Typed client configuration with env layering. Reads from .env → environment
variables; explicit constructor arguments always win. The resulting config
is frozen: a client never changes its API key or base URL after creation.

Stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vectorpro.core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.builtfast.com"


class ClientConfig(BaseSettings):
    """Settings for a VectorProClient: the API key and the base URL."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    api_key: str = Field(default="", alias="VECTORPRO_API_KEY")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="VECTORPRO_BASE_URL")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip() or DEFAULT_BASE_URL
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "No API key configured. Pass api_key=... or set VECTORPRO_API_KEY."
            )
        return self.api_key


@lru_cache(maxsize=1)
def get_config() -> ClientConfig:
    """
    Return the environment-derived config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    return ClientConfig()


def _reset_config() -> None:
    """For tests — clear the config cache."""
    get_config.cache_clear()


def resolve_config(api_key: str | None = None, base_url: str | None = None) -> ClientConfig:
    """
    Merge explicit arguments over the environment and validate the result.
    Raises ConfigurationError when no API key is available from either.
    """
    overrides: dict[str, str] = {}
    if api_key is not None:
        overrides["VECTORPRO_API_KEY"] = api_key
    if base_url is not None:
        overrides["VECTORPRO_BASE_URL"] = base_url
    try:
        config = ClientConfig(**overrides) if overrides else get_config()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid client configuration: {exc}") from exc
    config.require_api_key()
    return config


__all__ = ["DEFAULT_BASE_URL", "ClientConfig", "get_config", "resolve_config"]
