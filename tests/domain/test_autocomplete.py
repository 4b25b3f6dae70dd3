from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest

from locationbook.domain import LocationAutocomplete, LocationPreview
from locationbook.domain.errors import (
    InvalidResponse,
    LocationBookError,
    NoConnection,
    SuggestionsFailed,
)
from tests.helpers.locations import FakeConnectivity


@dataclass(slots=True)
class FakeSuggester:
    previews: list[LocationPreview] = field(default_factory=list[LocationPreview])
    error: LocationBookError | None = None
    queries: list[str] = field(default_factory=list[str])

    async def suggest(self, query: str) -> list[LocationPreview]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.previews)


def test_suggest_returns_previews_when_online() -> None:
    preview = LocationPreview(name="Leiden", latitude=52.16, longitude=4.49)
    suggester = FakeSuggester(previews=[preview])
    autocomplete = LocationAutocomplete(FakeConnectivity(connected=True), suggester)

    assert asyncio.run(autocomplete.suggest("Lei")) == [preview]
    assert suggester.queries == ["Lei"]


def test_suggest_offline_raises_no_connection_without_lookup() -> None:
    suggester = FakeSuggester()
    autocomplete = LocationAutocomplete(FakeConnectivity(connected=False), suggester)

    with pytest.raises(NoConnection):
        asyncio.run(autocomplete.suggest("Lei"))

    assert suggester.queries == []


def test_blank_query_short_circuits() -> None:
    probe = FakeConnectivity(connected=True)
    suggester = FakeSuggester()
    autocomplete = LocationAutocomplete(probe, suggester)

    assert asyncio.run(autocomplete.suggest("   ")) == []
    assert probe.calls == 0
    assert suggester.queries == []


def test_suggester_failure_surfaces_as_suggestions_failed() -> None:
    suggester = FakeSuggester(error=InvalidResponse(500))
    autocomplete = LocationAutocomplete(FakeConnectivity(connected=True), suggester)

    with pytest.raises(SuggestionsFailed) as excinfo:
        asyncio.run(autocomplete.suggest("Lei"))

    assert isinstance(excinfo.value.__cause__, InvalidResponse)
