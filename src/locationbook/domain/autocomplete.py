"""Connectivity-gated location suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import AutocompleteError, LocationBookError, NoConnection, SuggestionsFailed

if TYPE_CHECKING:
    from .model import LocationPreview
    from .ports import ConnectivityProbe, LocationSuggester

log = getLogger(__name__)


@dataclass(slots=True)
class LocationAutocomplete:
    connectivity: ConnectivityProbe
    suggester: LocationSuggester

    async def suggest(self, query: str) -> list[LocationPreview]:
        """Return suggestions for a partial place name.

        Blank queries short-circuit to an empty list. Offline lookups fail with
        ``NoConnection`` instead of reaching the suggester.
        """

        if not query.strip():
            return []
        if not await self.connectivity.is_connected():
            raise NoConnection("Suggestions need a network connection")
        try:
            return await self.suggester.suggest(query)
        except AutocompleteError:
            raise
        except LocationBookError as exc:
            log.warning("Suggestion lookup failed for %r: %s", query, exc)
            raise SuggestionsFailed(exc.detail) from exc


__all__ = ["LocationAutocomplete"]
