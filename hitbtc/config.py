"""
Connection settings for the HitBTC REST API.

Values fall back to environment variables so sandbox deployments can be
targeted without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.hitbtc.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "hitbtc-client/0.1"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Configuration required to reach a HitBTC deployment."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @staticmethod
    def from_env() -> "ClientConfig":
        base_url = os.getenv("HITBTC_BASE_URL") or DEFAULT_BASE_URL
        raw_timeout = os.getenv("HITBTC_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ValueError(f"HITBTC_TIMEOUT must be a number, got {raw_timeout!r}") from exc
            if timeout <= 0:
                raise ValueError("HITBTC_TIMEOUT must be positive")
        return ClientConfig(base_url=base_url, timeout=timeout)

    def url_for(self, path: str) -> str:
        """Join the base URL with an API path."""
        return f"{self.base_url.rstrip('/')}{path}"
