"""Domain model for bookmarked locations (pure, dependency-light)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum

from .clock import ensure_aware


class LocationSource(StrEnum):
    """Provenance tag; decides whether callers may mutate a record."""

    REMOTE = "remote"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Location:
    id: uuid.UUID
    name: str
    latitude: float
    longitude: float
    source: LocationSource
    expiration_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.source is LocationSource.CUSTOM and self.expiration_date is not None:
            raise ValueError("Custom locations never expire")
        if self.expiration_date is not None:
            object.__setattr__(self, "expiration_date", ensure_aware(self.expiration_date))

    @property
    def is_custom(self) -> bool:
        return self.source is LocationSource.CUSTOM

    def is_expired(self, now: datetime) -> bool:
        """Return whether a remote record has outlived its expiration date.

        Custom records and remote records without a date are never expired.
        """

        if self.expiration_date is None:
            return False
        return self.expiration_date < ensure_aware(now)

    def with_changes(
        self,
        *,
        name: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> Location:
        return replace(
            self,
            name=self.name if name is None else name,
            latitude=self.latitude if latitude is None else latitude,
            longitude=self.longitude if longitude is None else longitude,
        )


@dataclass(frozen=True, slots=True)
class LocationPreview:
    """Autocomplete suggestion; not persisted until turned into a custom location."""

    name: str
    latitude: float
    longitude: float
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def to_location(self) -> Location:
        return new_custom_location(self.name, self.latitude, self.longitude)


def new_custom_location(name: str, latitude: float, longitude: float) -> Location:
    """Build a user-created location with a fresh id and no expiration."""

    return Location(
        id=uuid.uuid4(),
        name=name,
        latitude=latitude,
        longitude=longitude,
        source=LocationSource.CUSTOM,
    )


def sort_by_name(locations: list[Location]) -> list[Location]:
    """Sort ascending by name using ordinal string comparison."""

    return sorted(locations, key=lambda location: location.name)


__all__ = [
    "Location",
    "LocationPreview",
    "LocationSource",
    "new_custom_location",
    "sort_by_name",
]
