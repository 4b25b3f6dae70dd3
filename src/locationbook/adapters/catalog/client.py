"""HTTP client for the remote location catalog."""

from __future__ import annotations

import uuid
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from locationbook.adapters.http_resilience import default_client_factory
from locationbook.domain.clock import utcnow
from locationbook.domain.errors import InvalidResponse, InvalidURL, NetworkError, ParsingError
from locationbook.domain.model import Location, LocationSource

from .schema import CatalogLocation, CatalogResponse

if TYPE_CHECKING:
    from datetime import datetime

    from locationbook.adapters.http_resilience import ClientFactory
    from locationbook.config.catalog import CatalogConfig
    from locationbook.domain.clock import Clock

log = getLogger(__name__)

_ALLOWED_SCHEMES = frozenset({"http", "https"})


class HttpCatalogClient:
    """Fetch the catalog and tag every record ``remote`` with a fresh expiration."""

    def __init__(
        self,
        *,
        config: CatalogConfig,
        client_factory: ClientFactory | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or default_client_factory
        self._clock = clock

    async def fetch_catalog(self) -> list[Location]:
        url = self._locations_url()
        log.debug("Fetching catalog from %s", url)
        try:
            async with self._client_factory(self._config.resilience) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise NetworkError(exc) from exc

        if not response.is_success:
            raise InvalidResponse(response.status_code)

        try:
            payload = CatalogResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise ParsingError(str(exc)) from exc

        expires_at = self._clock() + self._config.expiration_window
        locations = [_to_location(entry, expires_at) for entry in payload.locations]
        log.debug("Catalog returned %d locations", len(locations))
        return locations

    def _locations_url(self) -> httpx.URL:
        raw = self._config.locations_url
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise InvalidURL(f"Cannot build catalog URL from {raw!r}") from exc
        if url.scheme not in _ALLOWED_SCHEMES or not url.host:
            raise InvalidURL(f"Cannot build catalog URL from {raw!r}")
        return url


def _to_location(entry: CatalogLocation, expires_at: datetime) -> Location:
    return Location(
        id=uuid.uuid4(),
        name=entry.name,
        latitude=entry.latitude,
        longitude=entry.longitude,
        source=LocationSource.REMOTE,
        expiration_date=expires_at,
    )


class OfflineCatalogClient:
    """Catalog for commands that only work on the local cache."""

    async def fetch_catalog(self) -> list[Location]:
        raise NetworkError(ConnectionError("Catalog is not reachable in offline mode"))
