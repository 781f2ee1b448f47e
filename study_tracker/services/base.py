"""Generic CRUD service with commit/rollback handling."""

import logging
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncIterator, Generic, Iterator, Optional, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    InvalidFilterError,
    RecordNotFoundError,
    RelatedRecordNotFoundError,
)
from study_tracker.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BaseService(Generic[T]):
    """CRUD operations for one model on a request-scoped session.

    Writes commit on success. On any SQLAlchemy error the session is rolled
    back and the error surfaces as DuplicateRecordError (integrity
    violations) or DatabaseConnectionError (everything else). Reads never
    commit.

    Usage:
        class ProfileService(BaseService[Profile]):
            model = Profile

        profile = await ProfileService(db).create(name="민준")
    """

    model: type[T]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def _log_failure(self, action: str, e: SQLAlchemyError, context: dict) -> None:
        logger.error(
            f"Failed to {action} {self.model_name}",
            extra={"model": self.model_name, "error": str(e), **context},
            exc_info=True,
        )

    @contextmanager
    def _reading(self, action: str, **context: Any) -> Iterator[None]:
        """Translate SQLAlchemy errors raised by a read."""
        try:
            yield
        except SQLAlchemyError as e:
            self._log_failure(action, e, context)
            raise DatabaseConnectionError(f"Database error during {action}: {e}") from e

    @asynccontextmanager
    async def _writing(self, action: str, **context: Any) -> AsyncIterator[None]:
        """Commit after the block, roll back and translate on failure."""
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self._log_failure(action, e, context)
            if isinstance(e, IntegrityError):
                raise DuplicateRecordError(
                    self.model_name, f"Integrity constraint violation: {e.orig}"
                ) from e
            raise DatabaseConnectionError(f"Database error during {action}: {e}") from e

    def _check_attributes(self, names: Sequence[str]) -> None:
        for name in names:
            if not hasattr(self.model, name):
                raise InvalidFilterError(
                    f"Invalid attribute '{name}' for model {self.model_name}"
                )

    def _filtered(self, query: Select, filters: dict[str, Any]) -> Select:
        self._check_attributes(list(filters))
        for name, value in filters.items():
            query = query.where(getattr(self.model, name) == value)
        return query

    async def ensure_exists(
        self, model: type[BaseModel], field: str, record_id: int
    ) -> None:
        """Raise RelatedRecordNotFoundError unless ``model`` has ``record_id``."""
        with self._reading("validate", field=field, id=record_id):
            found = await self.db.scalar(select(model.id).where(model.id == record_id))
        if found is None:
            raise RelatedRecordNotFoundError(field, record_id)

    async def create(self, **values: Any) -> T:
        """Insert a row and commit.

        Raises:
            DuplicateRecordError: On a unique or check constraint violation.
            DatabaseConnectionError: On any other database failure.
        """
        instance = self.model(**values)
        async with self._writing("create"):
            self.db.add(instance)
            await self.db.flush()
            await self.db.refresh(instance)
        logger.debug(
            f"Created {self.model_name}",
            extra={"model": self.model_name, "id": instance.id},
        )
        return instance

    async def get_by_id(self, record_id: int) -> Optional[T]:
        with self._reading("get", id=record_id):
            return await self.db.scalar(
                select(self.model).where(self.model.id == record_id)
            )

    async def get_by_id_or_fail(self, record_id: int) -> T:
        """Like get_by_id() but raises RecordNotFoundError instead of None."""
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(self.model_name, record_id)
        return record

    async def get_all(
        self, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> list[T]:
        query = select(self.model).order_by(self.model.id).offset(offset).limit(limit)
        with self._reading("get_all"):
            return list(await self.db.scalars(query))

    async def find(self, **filters: Any) -> list[T]:
        """Rows whose columns equal every given filter, ordered by id.

        Raises:
            InvalidFilterError: If a filter names an unknown attribute.
        """
        query = self._filtered(select(self.model), filters).order_by(self.model.id)
        with self._reading("find", filters=filters):
            return list(await self.db.scalars(query))

    async def count(self, **filters: Any) -> int:
        query = self._filtered(select(func.count(self.model.id)), filters)
        with self._reading("count", filters=filters):
            return await self.db.scalar(query)

    async def update(self, record_id: int, **values: Any) -> T:
        """Set attributes on an existing row and commit.

        Raises:
            RecordNotFoundError: If the row does not exist.
            InvalidFilterError: If an attribute is unknown.
            DuplicateRecordError: On a constraint violation.
        """
        self._check_attributes(list(values))
        record = await self.get_by_id_or_fail(record_id)
        async with self._writing("update", id=record_id):
            for name, value in values.items():
                setattr(record, name, value)
            await self.db.flush()
            await self.db.refresh(record)
        logger.debug(
            f"Updated {self.model_name}",
            extra={"model": self.model_name, "id": record_id},
        )
        return record

    async def delete(self, record_id: int) -> None:
        """Delete a row and commit. Raises RecordNotFoundError if missing."""
        record = await self.get_by_id_or_fail(record_id)
        async with self._writing("delete", id=record_id):
            await self.db.delete(record)
        logger.debug(
            f"Deleted {self.model_name}",
            extra={"model": self.model_name, "id": record_id},
        )
