"""Geocoder adapter providing location suggestions."""

from __future__ import annotations

from .client import HttpLocationSuggester
from .schema import GeocoderPlace

__all__ = ["GeocoderPlace", "HttpLocationSuggester"]
