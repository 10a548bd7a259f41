# mutant_dna/config/schema.py
"""Pydantic schema for the merged application config."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mutant_dna.storage.config import StorageConfig


class FingerprintConfig(BaseModel):
    """How DNA identity hashes are computed."""

    sort_rows: bool = Field(
        default=True,
        description="Sort rows before hashing (row-order-invariant identity)",
    )


class ServiceConfig(BaseModel):
    """Analysis service settings."""

    lock_shards: int = Field(
        default=64,
        ge=1,
        le=4096,
        description="Number of per-fingerprint lock shards",
    )


class ApiConfig(BaseModel):
    """REST server settings."""

    host: str = Field(default="127.0.0.1", description="Host to bind to")
    port: int = Field(default=8000, ge=1, le=65535, description="Port to bind to")


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")


class AppConfig(BaseModel):
    """Complete mutant-dna configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    fingerprint: FingerprintConfig = Field(default_factory=FingerprintConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "AppConfig",
    "ApiConfig",
    "FingerprintConfig",
    "LoggingConfig",
    "ServiceConfig",
]
