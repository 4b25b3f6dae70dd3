"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from locationbook.adapters.catalog import HttpCatalogClient, OfflineCatalogClient
from locationbook.adapters.connectivity import HttpConnectivityProbe, StaticConnectivityProbe
from locationbook.adapters.geocoding import HttpLocationSuggester
from locationbook.adapters.sqlalchemy import create_location_store
from locationbook.config import (
    get_catalog_config,
    get_connectivity_config,
    get_database_config,
    get_geocoder_config,
)
from locationbook.domain import LocationAutocomplete, ReconciliationEngine, new_custom_location

if TYPE_CHECKING:
    from uuid import UUID

    from locationbook.domain import (
        ConnectivityProbe,
        LocalCacheStore,
        Location,
        LocationPreview,
        RemoteCatalogClient,
    )

log = getLogger(__name__)


def build_engine(
    *,
    offline: bool = False,
    store: LocalCacheStore | None = None,
) -> ReconciliationEngine:
    """Wire the reconciliation engine from environment configuration.

    Offline engines never read the catalog settings, so local edits work without
    a configured catalog.
    """

    connectivity: ConnectivityProbe
    catalog: RemoteCatalogClient
    if offline:
        connectivity = StaticConnectivityProbe(connected=False)
        catalog = OfflineCatalogClient()
    else:
        catalog_config = get_catalog_config()
        probe_config = get_connectivity_config(fallback_url=catalog_config.base_url)
        connectivity = HttpConnectivityProbe(config=probe_config)
        catalog = HttpCatalogClient(config=catalog_config)
    effective_store = store or create_location_store(get_database_config().uri)
    return ReconciliationEngine(connectivity=connectivity, catalog=catalog, store=effective_store)


def build_autocomplete(*, connectivity: ConnectivityProbe | None = None) -> LocationAutocomplete:
    geocoder_config = get_geocoder_config()
    probe = connectivity or HttpConnectivityProbe(
        config=get_connectivity_config(fallback_url=geocoder_config.resilience.base_url)
    )
    return LocationAutocomplete(
        connectivity=probe,
        suggester=HttpLocationSuggester(config=geocoder_config),
    )


def list_locations(*, offline: bool = False) -> list[Location]:
    engine = build_engine(offline=offline)
    locations = asyncio.run(engine.list_locations())
    log.info("Listed %d locations (offline=%s)", len(locations), offline)
    return locations


def add_location(name: str, latitude: float, longitude: float) -> Location:
    engine = build_engine(offline=True)
    created = asyncio.run(engine.create_location(new_custom_location(name, latitude, longitude)))
    log.info("Added location %s (%s)", created.id, created.name)
    return created


def update_location(
    location_id: UUID,
    *,
    name: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
) -> Location:
    engine = build_engine(offline=True)

    async def run() -> Location:
        current = await engine.find_location(location_id)
        changed = current.with_changes(name=name, latitude=latitude, longitude=longitude)
        return await engine.update_location(changed)

    updated = asyncio.run(run())
    log.info("Updated location %s", updated.id)
    return updated


def remove_location(location_id: UUID) -> None:
    engine = build_engine(offline=True)

    async def run() -> None:
        current = await engine.find_location(location_id)
        await engine.remove_location(current)

    asyncio.run(run())
    log.info("Removed location %s", location_id)


def suggest_locations(query: str) -> list[LocationPreview]:
    return asyncio.run(build_autocomplete().suggest(query))
