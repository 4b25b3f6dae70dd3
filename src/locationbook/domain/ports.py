"""Ports implemented by adapters and consumed by the reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from uuid import UUID

    from .model import Location, LocationPreview, LocationSource


@dataclass(frozen=True, slots=True)
class AllLocations:
    """Query criterion matching every cached record."""


@dataclass(frozen=True, slots=True)
class BySource:
    """Query criterion matching records with the given provenance tag."""

    source: LocationSource


@dataclass(frozen=True, slots=True)
class ById:
    """Query criterion matching the record with the given identifier."""

    location_id: UUID


type QueryCriteria = AllLocations | BySource | ById

ALL = AllLocations()


def matches(criteria: QueryCriteria, location: Location) -> bool:
    """Evaluate ``criteria`` against a single record in memory."""

    match criteria:
        case AllLocations():
            return True
        case BySource(source=source):
            return location.source is source
        case ById(location_id=location_id):
            return location.id == location_id


@runtime_checkable
class ConnectivityProbe(Protocol):
    """Single-shot reachability check; offline is ``False``, never an error."""

    async def is_connected(self) -> bool: ...


@runtime_checkable
class RemoteCatalogClient(Protocol):
    """Fetch the full remote catalog; records come back tagged ``remote``."""

    async def fetch_catalog(self) -> list[Location]: ...


@runtime_checkable
class LocalCacheStore(Protocol):
    """Persistent cache of location records with serialized mutation.

    ``update`` matches on id and source together and raises ``NotFound`` when no row
    matches. Deletes given a ``source`` leave rows of other sources untouched.
    """

    async def query(self, criteria: QueryCriteria = ALL) -> list[Location]: ...

    async def insert(self, location: Location) -> Location: ...

    async def update(self, location: Location) -> Location: ...

    async def delete(
        self,
        location_id: UUID,
        *,
        source: LocationSource | None = None,
    ) -> None: ...

    async def delete_many(
        self,
        location_ids: Iterable[UUID],
        *,
        source: LocationSource | None = None,
    ) -> None: ...

    async def replace_source(
        self,
        source: LocationSource,
        locations: Sequence[Location],
    ) -> None: ...


@runtime_checkable
class LocationSuggester(Protocol):
    """Black-box "suggest places for a partial name" lookup."""

    async def suggest(self, query: str) -> list[LocationPreview]: ...


__all__ = [
    "ALL",
    "AllLocations",
    "ById",
    "BySource",
    "ConnectivityProbe",
    "LocalCacheStore",
    "LocationSuggester",
    "QueryCriteria",
    "RemoteCatalogClient",
    "matches",
]
