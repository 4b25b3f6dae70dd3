"""Location cache backed by a SQLAlchemy engine."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, delete, insert, select, update
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from locationbook.domain.errors import (
    DeleteFailed,
    FetchFailed,
    InsertFailed,
    NotFound,
    UpdateFailed,
)
from locationbook.domain.ports import ALL, AllLocations, ById, BySource

from .mappings import create_all_tables, location_table, location_to_row, row_to_location

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from uuid import UUID

    from sqlalchemy import ColumnElement, Select
    from sqlalchemy.engine import Engine

    from locationbook.domain.model import Location, LocationSource
    from locationbook.domain.ports import QueryCriteria

log = getLogger(__name__)


def _where(criteria: QueryCriteria) -> ColumnElement[bool] | None:
    match criteria:
        case AllLocations():
            return None
        case BySource(source=source):
            return location_table.c.source == source
        case ById(location_id=location_id):
            return location_table.c.id == location_id


class SqlAlchemyLocationStore:
    """Persist locations in the ``location`` table.

    Every operation runs under one ``asyncio.Lock`` so that a read never observes
    a half-applied mutation and ``replace_source`` is seen as a single step. The
    session work itself runs in a worker thread to keep the event loop free.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory: sessionmaker[Session] = sessionmaker(
            bind=engine, expire_on_commit=False
        )
        self._lock = asyncio.Lock()

    async def query(self, criteria: QueryCriteria = ALL) -> list[Location]:
        stmt = select(location_table)
        clause = _where(criteria)
        if clause is not None:
            stmt = stmt.where(clause)
        async with self._lock:
            return await asyncio.to_thread(self._select, stmt)

    async def insert(self, location: Location) -> Location:
        async with self._lock:
            await asyncio.to_thread(self._insert, location)
        return location

    async def update(self, location: Location) -> Location:
        async with self._lock:
            return await asyncio.to_thread(self._update, location)

    async def delete(self, location_id: UUID, *, source: LocationSource | None = None) -> None:
        await self.delete_many((location_id,), source=source)

    async def delete_many(
        self,
        location_ids: Iterable[UUID],
        *,
        source: LocationSource | None = None,
    ) -> None:
        ids = list(location_ids)
        if not ids:
            return
        async with self._lock:
            await asyncio.to_thread(self._delete, ids, source)

    async def replace_source(
        self,
        source: LocationSource,
        locations: Sequence[Location],
    ) -> None:
        rows = [location_to_row(location) for location in locations]
        async with self._lock:
            await asyncio.to_thread(self._replace, source, rows)
        log.debug("Replaced %s rows with %d records", source, len(rows))

    def _select(self, stmt: Select[tuple[object, ...]]) -> list[Location]:
        try:
            with self._session_factory() as session:
                rows = session.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise FetchFailed(str(exc)) from exc
        return [row_to_location(row) for row in rows]

    def _insert(self, location: Location) -> None:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(insert(location_table).values(**location_to_row(location)))
        except IntegrityError as exc:
            raise InsertFailed(f"Location {location.id} already exists") from exc
        except SQLAlchemyError as exc:
            raise InsertFailed(str(exc)) from exc

    def _update(self, location: Location) -> Location:
        # source is part of the match: an update never moves a row between sources
        matching_row = (location_table.c.id == location.id) & (
            location_table.c.source == location.source
        )
        try:
            with self._session_factory() as session, session.begin():
                result = session.execute(
                    update(location_table)
                    .where(matching_row)
                    .values(
                        name=location.name,
                        latitude=location.latitude,
                        longitude=location.longitude,
                    )
                )
                if result.rowcount == 0:
                    raise NotFound(f"No {location.source} location with id {location.id}")
                row = session.execute(select(location_table).where(matching_row)).one()
        except SQLAlchemyError as exc:
            raise UpdateFailed(str(exc)) from exc
        return row_to_location(row)

    def _delete(self, ids: list[UUID], source: LocationSource | None) -> None:
        stmt = delete(location_table).where(location_table.c.id.in_(ids))
        if source is not None:
            stmt = stmt.where(location_table.c.source == source)
        try:
            with self._session_factory() as session, session.begin():
                session.execute(stmt)
        except SQLAlchemyError as exc:
            raise DeleteFailed(str(exc)) from exc

    def _replace(self, source: LocationSource, rows: list[dict[str, object]]) -> None:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(location_table).where(location_table.c.source == source))
                if rows:
                    session.execute(insert(location_table), rows)
        except SQLAlchemyError as exc:
            raise InsertFailed(str(exc)) from exc


def create_store_engine(database_uri: str) -> Engine:
    """Create an engine whose connections may be used from worker threads.

    In-memory SQLite databases live inside a single connection, so they get a
    ``StaticPool`` shared by every thread.
    """

    url = make_url(database_uri)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(
            url,
            future=True,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_engine(url, future=True)


def create_location_store(database_uri: str) -> SqlAlchemyLocationStore:
    """Build a store for ``database_uri``, creating the schema if needed."""

    engine = create_store_engine(database_uri)
    create_all_tables(engine)
    return SqlAlchemyLocationStore(engine)
