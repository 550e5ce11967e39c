"""Configuration management for hookkit.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once per
process and is treated as immutable afterwards.
"""

import re
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DOTTED_PATH = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class Settings(BaseSettings):
    """hookkit configuration settings.

    Settings are loaded from environment variables (prefix ``HOOKKIT_``)
    and .env files. All values are validated on load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HOOKKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Host Settings
    host_base_path: str | None = Field(
        default=None,
        description="Installation path of the host. When set, the host plugin "
        "module is loaded on demand by the first registration.",
    )
    host_plugin_module: str = Field(
        default="hookkit.host.plugin",
        description="Dotted path of the module defining the host registration functions",
    )

    @field_validator("host_base_path", mode="before")
    @classmethod
    def blank_base_path_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty or whitespace-only base path as undefined."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("host_plugin_module")
    @classmethod
    def validate_plugin_module(cls, v: str) -> str:
        """Validate the plugin module is an importable dotted path."""
        if not _DOTTED_PATH.match(v):
            raise ValueError(f"Invalid module path: {v!r}")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once per process. Tests call
    ``get_settings.cache_clear()`` to pick up environment changes.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
