"""Remote catalog and connectivity configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from .env import float_env_var, optional_env_var, require_env_vars
from .http_resilience import NO_RETRY, ResilienceConfig

DEFAULT_LOCATIONS_ENDPOINT = "/locations.json"
DEFAULT_EXPIRATION_DAYS = 30.0
DEFAULT_CATALOG_TIMEOUT_SECONDS = 10.0
DEFAULT_PROBE_TIMEOUT_SECONDS = 3.0


def catalog_resilience(
    timeout_seconds: float = DEFAULT_CATALOG_TIMEOUT_SECONDS,
) -> ResilienceConfig:
    # retry/fallback policy lives in the reconciliation engine
    return ResilienceConfig(name="catalog", timeout_seconds=timeout_seconds, retry=NO_RETRY)


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the catalog lives and how long fetched records stay valid."""

    base_url: str
    locations_endpoint: str = DEFAULT_LOCATIONS_ENDPOINT
    expiration_window: timedelta = timedelta(days=DEFAULT_EXPIRATION_DAYS)
    resilience: ResilienceConfig = field(default_factory=catalog_resilience)

    @property
    def locations_url(self) -> str:
        return self.base_url + self.locations_endpoint


@dataclass(frozen=True, slots=True)
class ConnectivityConfig:
    probe_url: str
    timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS


def get_catalog_config() -> CatalogConfig:
    values = require_env_vars(("LOCATIONBOOK_CATALOG_BASE_URL",))
    timeout = float_env_var("LOCATIONBOOK_CATALOG_TIMEOUT", DEFAULT_CATALOG_TIMEOUT_SECONDS)
    days = float_env_var("LOCATIONBOOK_EXPIRATION_DAYS", DEFAULT_EXPIRATION_DAYS)
    return CatalogConfig(
        base_url=values["LOCATIONBOOK_CATALOG_BASE_URL"].strip(),
        locations_endpoint=optional_env_var(
            "LOCATIONBOOK_CATALOG_ENDPOINT", DEFAULT_LOCATIONS_ENDPOINT
        ),
        expiration_window=timedelta(days=days),
        resilience=catalog_resilience(timeout),
    )


def get_connectivity_config(*, fallback_url: str | None = None) -> ConnectivityConfig:
    """Probe the explicit probe URL, else ``fallback_url``, else the catalog host."""

    probe_url = optional_env_var("LOCATIONBOOK_PROBE_URL", "")
    if not probe_url:
        probe_url = fallback_url or get_catalog_config().base_url
    return ConnectivityConfig(probe_url=probe_url)
