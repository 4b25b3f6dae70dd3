"""In-memory location cache."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from locationbook.domain.errors import InsertFailed, NotFound
from locationbook.domain.ports import ALL, matches

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from uuid import UUID

    from locationbook.domain.model import Location, LocationSource
    from locationbook.domain.ports import QueryCriteria


class InMemoryLocationStore:
    """Dictionary-backed cache keyed by location id, insertion ordered."""

    def __init__(self, locations: Iterable[Location] = ()) -> None:
        self._rows: dict[UUID, Location] = {}
        self._lock = asyncio.Lock()
        for location in locations:
            self._rows[location.id] = location

    async def query(self, criteria: QueryCriteria = ALL) -> list[Location]:
        async with self._lock:
            return [location for location in self._rows.values() if matches(criteria, location)]

    async def insert(self, location: Location) -> Location:
        async with self._lock:
            if location.id in self._rows:
                raise InsertFailed(f"Location {location.id} already exists")
            self._rows[location.id] = location
            return location

    async def update(self, location: Location) -> Location:
        async with self._lock:
            existing = self._rows.get(location.id)
            if existing is None or existing.source is not location.source:
                raise NotFound(f"No {location.source} location with id {location.id}")
            updated = existing.with_changes(
                name=location.name,
                latitude=location.latitude,
                longitude=location.longitude,
            )
            self._rows[location.id] = updated
            return updated

    async def delete(self, location_id: UUID, *, source: LocationSource | None = None) -> None:
        await self.delete_many((location_id,), source=source)

    async def delete_many(
        self,
        location_ids: Iterable[UUID],
        *,
        source: LocationSource | None = None,
    ) -> None:
        async with self._lock:
            for location_id in location_ids:
                existing = self._rows.get(location_id)
                if existing is not None and source in (None, existing.source):
                    del self._rows[location_id]

    async def replace_source(
        self,
        source: LocationSource,
        locations: Sequence[Location],
    ) -> None:
        async with self._lock:
            incoming = {location.id: location for location in locations}
            clashes = [
                location_id
                for location_id, existing in self._rows.items()
                if location_id in incoming and existing.source is not source
            ]
            if clashes:
                raise InsertFailed(f"Location ids already used by other sources: {clashes}")
            kept = {
                location_id: location
                for location_id, location in self._rows.items()
                if location.source is not source
            }
            kept.update(incoming)
            self._rows = kept
