"""
Application settings with environment variable support.

Uses Pydantic Settings for type-safe configuration with automatic
environment variable loading and validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from triarb.config.constants import (
    ARBITRUM_RPC_URL,
    GAS_CACHE_TTL_SECONDS,
    MAX_RPC_RETRIES,
    PATH_DELAY_SECONDS,
    POLYGON_RPC_URL,
    POOL_CACHE_TTL_SECONDS,
    RPC_RETRY_DELAY_SECONDS,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    (e.g. ``ARBITRUM_RPC``, ``PORT``, ``SIMULATE``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Network Configuration
    # =========================================================================

    arbitrum_rpc: str = Field(
        default=ARBITRUM_RPC_URL,
        description="RPC endpoint for Arbitrum One",
    )
    polygon_rpc: str = Field(
        default=POLYGON_RPC_URL,
        description="RPC endpoint for Polygon PoS",
    )

    simulate: bool = Field(
        default=False,
        description="Answer chain reads from in-memory simulated pools",
    )

    # =========================================================================
    # HTTP Server
    # =========================================================================

    host: str = Field(
        default="0.0.0.0",
        description="Interface the API server binds to",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port the API server listens on",
    )

    # =========================================================================
    # RPC Behaviour
    # =========================================================================

    max_rpc_retries: int = Field(
        default=MAX_RPC_RETRIES,
        ge=0,
        le=10,
        description="Retries for a failed quote call",
    )
    rpc_retry_delay_ms: int = Field(
        default=int(RPC_RETRY_DELAY_SECONDS * 1000),
        ge=0,
        le=10_000,
        description="Base retry delay in milliseconds, multiplied by attempt number",
    )
    rpc_requests_per_second: float = Field(
        default=10.0,
        gt=0.0,
        le=1000.0,
        description="Token bucket refill rate for RPC calls",
    )

    # =========================================================================
    # Caching & Pacing
    # =========================================================================

    pool_cache_ttl_s: float = Field(
        default=POOL_CACHE_TTL_SECONDS,
        gt=0.0,
        description="Lifetime of pool validation entries in seconds",
    )
    gas_cache_ttl_s: float = Field(
        default=GAS_CACHE_TTL_SECONDS,
        gt=0.0,
        description="Lifetime of the gas price snapshot in seconds",
    )
    path_delay_ms: int = Field(
        default=int(PATH_DELAY_SECONDS * 1000),
        ge=0,
        le=5_000,
        description="Pause after each evaluated path in milliseconds",
    )
    max_concurrent_paths: int = Field(
        default=1,
        ge=1,
        le=16,
        description="Paths evaluated concurrently during a scan",
    )

    # =========================================================================
    # Operation Mode
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional file that receives a copy of the log output",
    )

    use_uvloop: bool = Field(
        default=True,
        description="Use uvloop for improved async performance",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("arbitrum_rpc", "polygon_rpc", mode="after")
    @classmethod
    def validate_rpc_url(cls, v: str) -> str:
        """Ensure RPC endpoints are HTTP(S) URLs."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"RPC endpoint must be an http(s) URL, got {v!r}")
        return v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def rpc_retry_delay(self) -> float:
        """Base retry delay in seconds."""
        return self.rpc_retry_delay_ms / 1000

    @property
    def path_delay(self) -> float:
        """Pause between paths in seconds."""
        return self.path_delay_ms / 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded only once.
    Clear cache with `get_settings.cache_clear()` if needed.
    """
    return Settings()
