"""Remote catalog adapter."""

from __future__ import annotations

from .client import HttpCatalogClient, OfflineCatalogClient
from .schema import CatalogLocation, CatalogResponse

__all__ = ["CatalogLocation", "CatalogResponse", "HttpCatalogClient", "OfflineCatalogClient"]
