"""SQL Record Store — RecordStore implementation over an async SQLAlchemy session.

Invariants:
    - Records are flat dicts of column name -> value (no ORM objects escape)
    - Filters are equality-only on mapped columns; unknown fields raise ValueError
    - Expanded relations hold only the requested fields, or None when dangling
    - Every SQLAlchemyError is rolled back and re-raised as DatabaseError
      naming the store operation (query, delete) that failed
    - delete_by_id commits before returning the prior record

Design Decisions:
    - Collection -> ORM model table kept here, not in core (core has no ORM imports)
    - Iteration order is the store's own; no implicit ORDER BY is added
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Sequence

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from imgmod.core.domain_types import Collection, Record
from imgmod.core.errors import ErrorContext
from imgmod.core.repository_protocols import RecordStore
from imgmod.db.base import Base
from imgmod.infrastructure.database import get_db, map_sqlalchemy_error
from imgmod.models.account import Account
from imgmod.models.image import Image

logger = logging.getLogger(__name__)

_MODELS: dict[Collection, type[Base]] = {
    Collection.ACCOUNTS: Account,
    Collection.IMAGES: Image,
}


def to_record(obj: Base, exclude: Sequence[str] = ()) -> Record:
    """Flatten an ORM instance into a record, dropping excluded columns."""
    return {
        column.key: getattr(obj, column.key)
        for column in obj.__mapper__.column_attrs
        if column.key not in exclude
    }


class SqlRecordStore:
    """RecordStore backed by one AsyncSession (one per request)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_filter(
        self, collection: Collection, filter: Mapping[str, Any],
    ) -> list[Record]:
        model = _MODELS[collection]
        query = select(model).where(*_conditions(model, filter))
        async with self._guard("query", collection):
            result = await self.db.execute(query)
            rows = result.scalars().all()
        return [to_record(row) for row in rows]

    async def find_by_filter_expanded(
        self,
        collection: Collection,
        filter: Mapping[str, Any],
        relation: str,
        fields: Sequence[str],
    ) -> list[Record]:
        model = _MODELS[collection]
        rel_attr = getattr(model, relation, None)
        if rel_attr is None or relation not in model.__mapper__.relationships:
            raise ValueError(f"{collection.value} has no relation '{relation}'")
        query = (
            select(model)
            .where(*_conditions(model, filter))
            .options(selectinload(rel_attr))
            .execution_options(populate_existing=True)
        )
        async with self._guard("query", collection):
            result = await self.db.execute(query)
            rows = result.scalars().all()

        records = []
        for row in rows:
            record = to_record(row)
            related = getattr(row, relation)
            record[relation] = (
                {f: getattr(related, f) for f in fields}
                if related is not None else None
            )
            records.append(record)
        return records

    async def find_all_projected(
        self, collection: Collection, exclude: Sequence[str],
    ) -> list[Record]:
        model = _MODELS[collection]
        async with self._guard("query", collection):
            result = await self.db.execute(select(model))
            rows = result.scalars().all()
        return [to_record(row, exclude) for row in rows]

    async def delete_by_id(
        self, collection: Collection, record_id: str,
    ) -> Record | None:
        model = _MODELS[collection]
        async with self._guard("delete", collection):
            obj = await self.db.get(model, record_id)
            if obj is None:
                return None
            record = to_record(obj)
            await self.db.delete(obj)
            await self.db.commit()
        logger.info(
            f"Deleted {collection.value} record {record_id}",
            extra={"collection": collection.value},
        )
        return record

    @asynccontextmanager
    async def _guard(
        self, operation: str, collection: Collection,
    ) -> AsyncIterator[None]:
        """Roll back and map SQLAlchemy failures for one store operation."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Store {operation} on {collection.value} failed: {e}",
                extra={"collection": collection.value},
            )
            raise map_sqlalchemy_error(
                e, ErrorContext(collection=collection.value), operation=operation,
            ) from e


def _conditions(model: type[Base], filter: Mapping[str, Any]) -> list:
    columns = model.__mapper__.columns
    unknown = [key for key in filter if key not in columns]
    if unknown:
        raise ValueError(
            f"Unknown filter field(s) for {model.__tablename__}: {', '.join(unknown)}",
        )
    return [columns[key] == value for key, value in filter.items()]


def get_record_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    """FastAPI dependency: RecordStore over the request's session."""
    return SqlRecordStore(db)
