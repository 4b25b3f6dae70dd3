"""SQLAlchemy table metadata for the location cache."""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Enum,
    Float,
    Index,
    MetaData,
    String,
    Table,
    TypeDecorator,
    Uuid,
)

from locationbook.domain.model import Location, LocationSource

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine, Row

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "pk": "pk_%(table_name)s",
    }
)

location_table = Table(
    "location",
    metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("name", String, nullable=False),
    Column("latitude", Float, nullable=False),
    Column("longitude", Float, nullable=False),
    # stored as the plain tag value so storage-level filters can match on it
    Column(
        "source",
        Enum(
            LocationSource,
            native_enum=False,
            length=16,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
    ),
    Column("expiration_date", UTCDateTime, nullable=True),
    Index(None, "source"),
)


def row_to_location(row: Row[tuple[object, ...]]) -> Location:
    mapping = row._mapping  # noqa: SLF001
    return Location(
        id=mapping["id"],
        name=mapping["name"],
        latitude=mapping["latitude"],
        longitude=mapping["longitude"],
        source=LocationSource(mapping["source"]),
        expiration_date=mapping["expiration_date"],
    )


def location_to_row(location: Location) -> dict[str, object]:
    return {
        "id": location.id,
        "name": location.name,
        "latitude": location.latitude,
        "longitude": location.longitude,
        "source": location.source,
        "expiration_date": location.expiration_date,
    }


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating location cache tables")
    metadata.create_all(engine)
