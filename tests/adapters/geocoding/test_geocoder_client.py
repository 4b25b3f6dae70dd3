from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from locationbook.adapters.geocoding import HttpLocationSuggester
from locationbook.adapters.http_resilience import ResilientClient
from locationbook.config import NO_RETRY, GeocoderConfig, ResilienceConfig
from locationbook.domain import LocationPreview, LocationSuggester
from locationbook.domain.errors import InvalidResponse, InvalidURL, NetworkError, ParsingError

if TYPE_CHECKING:
    from collections.abc import Callable

GEOCODER_URL = "https://geocoder.example.com"


def _suggester(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    base_url: str = GEOCODER_URL,
) -> HttpLocationSuggester:
    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    config = GeocoderConfig(
        resilience=ResilienceConfig(name="geocoder", base_url=base_url, retry=NO_RETRY),
        limit=5,
    )
    return HttpLocationSuggester(config=config, client_factory=factory)


def test_suggester_satisfies_the_port() -> None:
    assert isinstance(_suggester(lambda _r: httpx.Response(200)), LocationSuggester)


def test_suggest_queries_search_endpoint_and_maps_places() -> None:
    seen: list[httpx.Request] = []
    payload = [
        {"name": "Utrecht", "display_name": "Utrecht, Nederland", "lat": "52.09", "lon": "5.12"},
        {"name": "", "display_name": "Utrechtse Heuvelrug", "lat": "52.03", "lon": "5.38"},
        {"name": "Nowhere", "display_name": "Nowhere"},
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=payload)

    previews = asyncio.run(_suggester(handler).suggest("Utrec"))

    assert previews == [
        LocationPreview(name="Utrecht", latitude=52.09, longitude=5.12),
        LocationPreview(name="Utrechtse Heuvelrug", latitude=52.03, longitude=5.38),
    ]
    (request,) = seen
    assert request.url.path == "/search"
    assert request.url.params["q"] == "Utrec"
    assert request.url.params["format"] == "jsonv2"
    assert request.url.params["limit"] == "5"


def test_suggest_error_status_raises_invalid_response() -> None:
    with pytest.raises(InvalidResponse):
        asyncio.run(_suggester(lambda _r: httpx.Response(404)).suggest("x"))


def test_suggest_malformed_body_raises_parsing_error() -> None:
    with pytest.raises(ParsingError):
        asyncio.run(_suggester(lambda _r: httpx.Response(200, json={"x": 1})).suggest("x"))


def test_suggest_transport_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(NetworkError):
        asyncio.run(_suggester(handler).suggest("x"))


def test_suggest_malformed_base_url_raises_invalid_url() -> None:
    suggester = _suggester(lambda _r: httpx.Response(200, json=[]), base_url="http://geo:99999")

    with pytest.raises(InvalidURL):
        asyncio.run(suggester.suggest("x"))
