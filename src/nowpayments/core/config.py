"""
Configuration management for the NOWPayments SDK.

Handles loading configuration from environment variables and validation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any

from nowpayments.core.exceptions import ConfigurationError
from nowpayments.core.logging import mask_secret

PRODUCTION_BASE_URL = "https://api.nowpayments.io/v1"
SANDBOX_BASE_URL = "https://api-sandbox.nowpayments.io/v1"

_TRUTHY = {"1", "true", "yes", "on"}


def _get_env_var(name: str, default: str | None = None, required: bool = False) -> str | None:
    """Get environment variable with optional default."""
    value = os.environ.get(name, default)
    if required and not value:
        raise ConfigurationError(f"Required environment variable {name} is not set")
    return value


@dataclass(frozen=True)
class Config:
    """SDK configuration."""

    api_key: str
    ipn_secret: str | bytes | None = None
    sandbox: bool = False
    # Overrides the sandbox/production selection when set
    base_url: str | None = None

    # Timeouts (seconds)
    request_timeout: float = 30.0
    connect_timeout: float = 10.0

    log_level: str = "INFO"
    user_agent: str = "nowpayments-python/0.1.0"

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("API key is required")
        if self.request_timeout <= 0 or self.connect_timeout <= 0:
            raise ConfigurationError("Timeouts must be positive")

    @property
    def api_base_url(self) -> str:
        """Base URL requests are issued against."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return SANDBOX_BASE_URL if self.sandbox else PRODUCTION_BASE_URL

    @property
    def has_ipn_secret(self) -> bool:
        return bool(self.ipn_secret)

    @classmethod
    def from_env(cls, **overrides: Any) -> Config:
        """Load configuration from environment variables."""
        api_key = overrides.pop("api_key", None) or _get_env_var(
            "NOWPAYMENTS_API_KEY", required=True
        )
        ipn_secret = overrides.pop("ipn_secret", None) or _get_env_var("NOWPAYMENTS_IPN_SECRET")

        if "sandbox" in overrides:
            sandbox = bool(overrides.pop("sandbox"))
        else:
            sandbox_str = _get_env_var("NOWPAYMENTS_SANDBOX", default="") or ""
            sandbox = sandbox_str.strip().lower() in _TRUTHY

        log_level = overrides.pop("log_level", None) or _get_env_var(
            "NOWPAYMENTS_LOG_LEVEL", default="INFO"
        )

        timeout_str = _get_env_var("NOWPAYMENTS_TIMEOUT")
        if "request_timeout" not in overrides and timeout_str:
            try:
                overrides["request_timeout"] = float(timeout_str)
            except ValueError:
                raise ConfigurationError(
                    f"NOWPAYMENTS_TIMEOUT must be a number, got {timeout_str!r}"
                ) from None

        return cls(
            api_key=api_key,  # type: ignore
            ipn_secret=ipn_secret,
            sandbox=sandbox,
            log_level=log_level,  # type: ignore
            **overrides,
        )

    def with_updates(self, **updates: Any) -> Config:
        """Create a new Config with updated values."""
        known = {f.name for f in fields(self)}
        unknown = set(updates) - known
        if unknown:
            raise ConfigurationError(f"Unknown config fields: {sorted(unknown)}")
        return replace(self, **updates)

    def masked_api_key(self) -> str:
        """Return API key with most characters masked for safe logging."""
        return mask_secret(self.api_key)

    def __repr__(self) -> str:
        return (
            f"Config(api_key={self.masked_api_key()!r}, "
            f"ipn_secret={'<set>' if self.has_ipn_secret else None}, "
            f"sandbox={self.sandbox}, api_base_url={self.api_base_url!r})"
        )
