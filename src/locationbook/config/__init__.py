"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    CatalogConfig,
    ConnectivityConfig,
    get_catalog_config,
    get_connectivity_config,
)
from .env import require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .geocoding import GeocoderConfig, get_geocoder_config
from .http_resilience import NO_RETRY, CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "NO_RETRY",
    "CacheConfig",
    "CatalogConfig",
    "ConfigurationError",
    "ConnectivityConfig",
    "DatabaseConfig",
    "GeocoderConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_catalog_config",
    "get_connectivity_config",
    "get_database_config",
    "get_geocoder_config",
    "get_storage_config",
    "require_env_vars",
]
