"""Reconciliation of the remote catalog with the local location cache.

The engine answers "what is the current location list" once per call:

1) ask the connectivity probe whether the network is reachable
2) online: fetch the catalog and, only if that succeeds, replace every cached
   ``remote`` row with the fresh records; a failed fetch falls back to the
   non-expired cached ``remote`` rows without touching the cache
3) offline: sweep expired ``remote`` rows out of the cache, then read it back
4) merge with ``custom`` rows and sort by name

Mutations are gated by provenance: only ``custom`` records may be updated or
removed, and the check happens before any storage access. The store writes
are scoped to ``custom`` rows as well, so a record whose id belongs to a cached
``remote`` row is reported as not found instead of overwriting it.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .clock import Clock, utcnow
from .errors import (
    AddLocationFailed,
    CannotModifyOnlineRecord,
    CannotRemoveOnlineRecord,
    LoadingFailed,
    LocalStoreError,
    LocationNotFound,
    NotFound,
    RemoteCatalogError,
    RemoveRecordFailed,
    UpdateLocationFailed,
)
from .model import LocationSource, sort_by_name
from .ports import ALL, ById, BySource

if TYPE_CHECKING:
    from uuid import UUID

    from .model import Location
    from .ports import ConnectivityProbe, LocalCacheStore, RemoteCatalogClient

log = getLogger(__name__)

REMOTE_ONLY = BySource(LocationSource.REMOTE)
CUSTOM_ONLY = BySource(LocationSource.CUSTOM)


@dataclass(slots=True)
class ReconciliationEngine:
    """Merge the remote catalog with the local cache and guard mutations."""

    connectivity: ConnectivityProbe
    catalog: RemoteCatalogClient
    store: LocalCacheStore
    clock: Clock = utcnow
    _refresh_lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def list_locations(self) -> list[Location]:
        """Return the reconciled location list sorted ascending by name."""

        async with self._refresh_lock:
            connected = await self.connectivity.is_connected()
            log.debug("Listing locations (connected=%s)", connected)
            try:
                if connected:
                    working = await self._list_online()
                else:
                    working = await self._list_offline()
            except LocalStoreError as exc:
                raise LoadingFailed(exc.detail) from exc
        return sort_by_name(working)

    async def create_location(self, location: Location) -> Location:
        """Insert ``location`` into the cache; callers stamp ``source=custom``."""

        try:
            return await self.store.insert(location)
        except LocalStoreError as exc:
            raise AddLocationFailed(exc.detail) from exc

    async def update_location(self, location: Location) -> Location:
        if not location.is_custom:
            raise CannotModifyOnlineRecord(f"Location {location.id} comes from the catalog")
        try:
            return await self.store.update(location)
        except NotFound as exc:
            raise LocationNotFound(f"No cached location with id {location.id}") from exc
        except LocalStoreError as exc:
            raise UpdateLocationFailed(exc.detail) from exc

    async def remove_location(self, location: Location) -> None:
        if not location.is_custom:
            raise CannotRemoveOnlineRecord(f"Location {location.id} comes from the catalog")
        try:
            await self.store.delete(location.id, source=LocationSource.CUSTOM)
        except LocalStoreError as exc:
            raise RemoveRecordFailed(exc.detail) from exc

    async def find_location(self, location_id: UUID) -> Location:
        """Look up one cached record by id without reconciling."""

        try:
            found = await self.store.query(ById(location_id))
        except LocalStoreError as exc:
            raise LoadingFailed(exc.detail) from exc
        if not found:
            raise LocationNotFound(f"No cached location with id {location_id}")
        return found[0]

    async def _list_online(self) -> list[Location]:
        try:
            fetched = await self.catalog.fetch_catalog()
        except RemoteCatalogError as exc:
            log.warning("Catalog fetch failed, using cached records instead: %s", exc)
            now = self.clock()
            cached = await self.store.query(REMOTE_ONLY)
            working = [location for location in cached if not location.is_expired(now)]
        else:
            await self.store.replace_source(LocationSource.REMOTE, fetched)
            log.info("Refreshed catalog: %d remote locations cached", len(fetched))
            working = list(fetched)

        working.extend(await self.store.query(CUSTOM_ONLY))
        return working

    async def _list_offline(self) -> list[Location]:
        now = self.clock()
        cached = await self.store.query(REMOTE_ONLY)
        expired = [location.id for location in cached if location.is_expired(now)]
        if expired:
            log.info("Sweeping %d expired remote locations", len(expired))
            await self.store.delete_many(expired)
        return await self.store.query(ALL)


__all__ = ["ReconciliationEngine"]
