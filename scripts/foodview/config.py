"""Application configuration with environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

TRUTHY = {"1", "true", "yes", "on"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Settings container; every field can be overridden from the environment."""

    base_url: str = field(
        default_factory=lambda: _get_env(
            "FOODFACTS_BASE_URL", "https://world.openfoodfacts.org"
        ).rstrip("/")
    )
    request_timeout: float = field(
        default_factory=lambda: float(_get_env("FOODFACTS_TIMEOUT", "20"))
    )
    user_agent: str = field(
        default_factory=lambda: _get_env(
            "FOODFACTS_USER_AGENT",
            "FoodFactsViewer/0.1 (+https://github.com/foodfacts-viewer)",
        )
    )
    page_size: int = field(
        default_factory=lambda: int(_get_env("FOODFACTS_PAGE_SIZE", "24"))
    )
    poll_interval: float = field(
        default_factory=lambda: float(_get_env("FOODFACTS_POLL_INTERVAL", "0.1"))
    )
    fence_stale_messages: bool = field(
        default_factory=lambda: _get_env("FOODFACTS_FENCE_STALE", "true").lower()
        in TRUTHY
    )
    log_level: str = field(default_factory=lambda: _get_env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _get_env("FOODFACTS_LOG_FILE", ""))

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the current environment."""
        return cls()


settings = Settings()
