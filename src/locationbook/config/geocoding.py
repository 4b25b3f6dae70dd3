"""Geocoder configuration for location suggestions."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org"
DEFAULT_SUGGESTION_LIMIT = 10
USER_AGENT = "locationbook"


@dataclass(frozen=True, slots=True)
class GeocoderConfig:
    resilience: ResilienceConfig
    limit: int = DEFAULT_SUGGESTION_LIMIT


def get_geocoder_config() -> GeocoderConfig:
    base_url = optional_env_var("LOCATIONBOOK_GEOCODER_URL", DEFAULT_GEOCODER_URL)
    resilience = ResilienceConfig(
        name="geocoder",
        base_url=base_url,
        timeout_seconds=10.0,
        # public Nominatim allows one request per second
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        retry=RetryPolicy(total=2),
        cache=CacheConfig(enabled=True, backend="sqlite", default_ttl_seconds=86400.0),
        default_headers={"User-Agent": USER_AGENT},
    )
    return GeocoderConfig(resilience=resilience)
