"""SQLAlchemy adapter for the location cache."""

from __future__ import annotations

from .mappings import create_all_tables, location_table, metadata
from .store import SqlAlchemyLocationStore, create_location_store, create_store_engine

__all__ = [
    "SqlAlchemyLocationStore",
    "create_all_tables",
    "create_location_store",
    "create_store_engine",
    "location_table",
    "metadata",
]
