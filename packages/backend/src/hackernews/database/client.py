"""
Per-request persistence client used by the GraphQL resolvers.

Each entity gets a delegate exposing the same small set of operations
(create / find_unique / find_unique_or_throw / find_many). Filters and
orderings are plain SQLAlchemy expressions handed in by the caller; the
delegate never inspects them.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Base, Comments, Links
from ..logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordNotFoundError(Exception):
    """Raised by find_unique_or_throw when no row matches the key."""

    def __init__(self, model: type[Base], key: Any):
        self.model = model
        self.key = key
        super().__init__(f"No {model.__tablename__} record found for key {key!r}")


class ModelDelegate(Generic[ModelT]):
    """Query and write operations for a single ORM model."""

    def __init__(self, session: AsyncSession, model: type[ModelT], lock: asyncio.Lock):
        self._session = session
        self._model = model
        # AsyncSession does not allow concurrent use; sibling resolvers share it
        self._lock = lock

    async def create(self, data: dict[str, Any]) -> ModelT:
        """Insert a row and return it with its generated columns loaded."""
        async with self._lock:
            record = self._model(**data)
            # A failed insert only unwinds its own savepoint, earlier writes
            # of the same request stay intact
            async with self._session.begin_nested():
                self._session.add(record)
            await self._session.refresh(record)
            return record

    async def find_unique(self, key: Any) -> ModelT | None:
        async with self._lock:
            return await self._session.get(self._model, key)

    async def find_unique_or_throw(self, key: Any) -> ModelT:
        record = await self.find_unique(key)
        if record is None:
            raise RecordNotFoundError(self._model, key)
        return record

    async def find_many(
        self,
        where: ColumnElement[bool] | None = None,
        skip: int | None = None,
        take: int | None = None,
        order_by: Sequence[ColumnElement[Any]] | None = None,
    ) -> list[ModelT]:
        """Select rows matching ``where``, optionally ordered and paginated."""
        stmt = select(self._model)
        if where is not None:
            stmt = stmt.where(where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)

        async with self._lock:
            result = await self._session.execute(stmt)
            return list(result.scalars().all())


class PersistenceClient:
    """Entity delegates bound to one request's session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        lock = asyncio.Lock()
        self.link: ModelDelegate[Links] = ModelDelegate(session, Links, lock)
        self.comment: ModelDelegate[Comments] = ModelDelegate(session, Comments, lock)
