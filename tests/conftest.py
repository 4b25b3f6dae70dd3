from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from locationbook.adapters.sqlalchemy import create_all_tables, create_store_engine

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_store_engine("sqlite+pysqlite:///:memory:")
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def catalog_payload() -> dict[str, object]:
    return {
        "locations": [
            {"name": "Amsterdam", "lat": 52.3547498, "long": 4.8339215},
            {"name": "Mumbai", "lat": 19.0823998, "long": 72.8111468},
            {"name": "Copenhagen", "lat": 55.6713442, "long": 12.523785},
            {"lat": 40.4380638, "long": -3.7495758},
        ]
    }
