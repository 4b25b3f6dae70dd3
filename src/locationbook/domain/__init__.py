"""Domain model, ports and reconciliation core."""

from __future__ import annotations

from .autocomplete import LocationAutocomplete
from .model import Location, LocationPreview, LocationSource, new_custom_location
from .ports import (
    ALL,
    AllLocations,
    ById,
    BySource,
    ConnectivityProbe,
    LocalCacheStore,
    LocationSuggester,
    QueryCriteria,
    RemoteCatalogClient,
)
from .reconciliation import ReconciliationEngine

__all__ = [
    "ALL",
    "AllLocations",
    "ById",
    "BySource",
    "ConnectivityProbe",
    "LocalCacheStore",
    "Location",
    "LocationAutocomplete",
    "LocationPreview",
    "LocationSource",
    "LocationSuggester",
    "QueryCriteria",
    "ReconciliationEngine",
    "RemoteCatalogClient",
    "new_custom_location",
]
