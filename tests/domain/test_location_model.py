from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

import pytest

from locationbook.domain import (
    ALL,
    ById,
    BySource,
    Location,
    LocationPreview,
    LocationSource,
    new_custom_location,
)
from locationbook.domain.model import sort_by_name
from locationbook.domain.ports import matches
from tests.helpers.locations import NOW, make_custom, make_remote


def test_new_custom_location_is_custom_without_expiration() -> None:
    location = new_custom_location("Garden", 1.0, 2.0)

    assert location.source is LocationSource.CUSTOM
    assert location.expiration_date is None
    assert isinstance(location.id, uuid.UUID)
    assert new_custom_location("Garden", 1.0, 2.0).id != location.id


def test_custom_location_with_expiration_is_rejected() -> None:
    with pytest.raises(ValueError, match="never expire"):
        Location(
            id=uuid.uuid4(),
            name="Bad",
            latitude=0.0,
            longitude=0.0,
            source=LocationSource.CUSTOM,
            expiration_date=NOW,
        )


def test_naive_expiration_is_treated_as_utc() -> None:
    location = Location(
        id=uuid.uuid4(),
        name="Naive",
        latitude=0.0,
        longitude=0.0,
        source=LocationSource.REMOTE,
        expiration_date=datetime(2024, 1, 1, 12, 0),  # noqa: DTZ001
    )

    assert location.expiration_date == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def test_is_expired_compares_against_now() -> None:
    assert make_remote("Old", expires_in=timedelta(seconds=-1)).is_expired(NOW)
    assert not make_remote("New", expires_in=timedelta(seconds=1)).is_expired(NOW)
    assert not make_custom("Mine").is_expired(NOW + timedelta(days=3650))


def test_with_changes_keeps_identity_and_provenance() -> None:
    remote = make_remote("Museum")

    changed = remote.with_changes(name="Gallery")

    assert changed.id == remote.id
    assert changed.source is LocationSource.REMOTE
    assert changed.expiration_date == remote.expiration_date
    assert (changed.latitude, changed.longitude) == (remote.latitude, remote.longitude)


def test_sort_by_name_uses_ordinal_comparison() -> None:
    locations = [make_custom(name) for name in ("beta", "Alpha", "alpha", "Beta")]

    assert [loc.name for loc in sort_by_name(locations)] == ["Alpha", "Beta", "alpha", "beta"]


def test_preview_converts_to_custom_location() -> None:
    preview = LocationPreview(name="Delft", latitude=52.01, longitude=4.36)

    location = preview.to_location()

    assert (location.name, location.latitude, location.longitude) == ("Delft", 52.01, 4.36)
    assert location.source is LocationSource.CUSTOM


def test_query_criteria_matching() -> None:
    remote = make_remote("Remote")
    custom = make_custom("Custom")

    assert matches(ALL, remote)
    assert matches(BySource(LocationSource.REMOTE), remote)
    assert not matches(BySource(LocationSource.REMOTE), custom)
    assert matches(ById(custom.id), custom)
    assert not matches(ById(custom.id), remote)
