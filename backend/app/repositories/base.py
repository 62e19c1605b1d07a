"""
Posts API — Generic Repository
================================

What:  Abstract repository interface plus its async SQLAlchemy implementation.
How:   Subclasses bind `model` to a mapped class with an `id` primary key.
       All statements run on the session handed in at construction, so a
       repository lives exactly as long as the request that created it.

Error Handling:
    SQLAlchemyError from any statement is logged and re-raised as
    DatabaseError (→ 500 with a generic body). Nothing is retried.

Transaction boundary:
    Repositories flush but never commit. The get_db_session dependency
    commits once the route handler returns.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class Repository(ABC, Generic[ModelType]):
    """
    Storage capabilities required by the service layer.

    Any backend (relational, document, in-memory) that implements these
    methods can serve a resource.
    """

    @abstractmethod
    async def save(self, entity: ModelType) -> ModelType:
        """Insert a new entity or persist changes to an existing one."""

    @abstractmethod
    async def find_by_id(self, entity_id: Any) -> Optional[ModelType]:
        """Return the entity with this id, or None."""

    @abstractmethod
    async def find_all(self) -> List[ModelType]:
        """Return every entity in default order."""

    @abstractmethod
    async def find_page(self, page: int, size: int) -> List[ModelType]:
        """Return the zero-indexed `page`-th slice of `size` entities."""

    @abstractmethod
    async def delete_by_id(self, entity_id: Any) -> None:
        """Remove the entity with this id. Missing ids are a no-op."""

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored entities."""


class SQLAlchemyRepository(Repository[ModelType]):
    """
    Repository over an AsyncSession.

    Default order is ascending primary key, so pages are stable as long
    as no rows are inserted or removed between requests.
    """

    model: Type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, entity: ModelType) -> ModelType:
        try:
            self.session.add(entity)
            # Flush assigns the primary key without committing
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            raise self._database_error("save", e)

    async def find_by_id(self, entity_id: Any) -> Optional[ModelType]:
        try:
            return await self.session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise self._database_error("find_by_id", e, entity_id=entity_id)

    async def find_all(self) -> List[ModelType]:
        try:
            result = await self.session.execute(
                select(self.model).order_by(self.model.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._database_error("find_all", e)

    async def find_page(self, page: int, size: int) -> List[ModelType]:
        try:
            result = await self.session.execute(
                select(self.model)
                .order_by(self.model.id)
                .offset(page * size)
                .limit(size)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._database_error("find_page", e, page=page, size=size)

    async def delete_by_id(self, entity_id: Any) -> None:
        try:
            await self.session.execute(
                delete(self.model).where(self.model.id == entity_id)
            )
            await self.session.flush()
        except SQLAlchemyError as e:
            raise self._database_error("delete_by_id", e, entity_id=entity_id)

    async def count(self) -> int:
        try:
            result = await self.session.execute(
                select(func.count()).select_from(self.model)
            )
            return int(result.scalar() or 0)
        except SQLAlchemyError as e:
            raise self._database_error("count", e)

    def _database_error(self, operation: str, error: Exception, **context: Any) -> DatabaseError:
        """Log a driver error server-side and wrap it for the global handler."""
        logger.error(
            "Database error in %s.%s: %s",
            self.model.__name__,
            operation,
            str(error),
            exc_info=True,
        )
        context = {key: str(value) for key, value in context.items()}
        context.update(
            model=self.model.__name__,
            operation=operation,
            error_type=type(error).__name__,
        )
        return DatabaseError(context=context)
