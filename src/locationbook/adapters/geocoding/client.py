"""Location suggestions from a Nominatim-compatible geocoder."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from locationbook.adapters.http_resilience import default_client_factory
from locationbook.domain.errors import InvalidResponse, InvalidURL, NetworkError, ParsingError
from locationbook.domain.model import LocationPreview

from .schema import GeocoderResults

if TYPE_CHECKING:
    from locationbook.adapters.http_resilience import ClientFactory
    from locationbook.config.geocoding import GeocoderConfig

log = getLogger(__name__)


class HttpLocationSuggester:
    def __init__(
        self,
        *,
        config: GeocoderConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or default_client_factory

    async def suggest(self, query: str) -> list[LocationPreview]:
        params = {"q": query, "format": "jsonv2", "limit": str(self._config.limit)}
        try:
            async with self._client_factory(self._config.resilience) as client:
                response = await client.get("/search", params=params)
        except httpx.InvalidURL as exc:
            raise InvalidURL(f"Cannot build geocoder URL: {exc}") from exc
        except httpx.HTTPError as exc:
            raise NetworkError(exc) from exc

        if not response.is_success:
            raise InvalidResponse(response.status_code)

        try:
            places = GeocoderResults.validate_json(response.content)
        except ValidationError as exc:
            raise ParsingError(str(exc)) from exc

        previews: list[LocationPreview] = []
        for place in places:
            label = place.label
            if label is None or place.latitude is None or place.longitude is None:
                continue
            previews.append(
                LocationPreview(name=label, latitude=place.latitude, longitude=place.longitude)
            )
        log.debug("Geocoder returned %d usable places for %r", len(previews), query)
        return previews

