"""Shared CRUD repository over an async session."""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import StoreError
from ..models.base import BaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(Generic[ModelT]):
    """CRUD for one mapped table, keyed by integer id.

    Every mutating call commits; database failures are rolled back and
    re-raised as ``StoreError``.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fail(self, operation: str, exc: SQLAlchemyError, **context: Any) -> StoreError:
        logger.error(
            f"{self.model.__name__} {operation} failed: {exc}",
            exc_info=exc,
            extra={"table": self.model.__tablename__, **context},
        )
        try:
            await self.session.rollback()
        except SQLAlchemyError as rollback_error:
            logger.error(f"Rollback after failed {operation} also failed: {rollback_error}")
        return StoreError(operation, context={"table": self.model.__tablename__, **context})

    async def list_all(self) -> List[ModelT]:
        """All rows ordered by id."""
        stmt = select(self.model).order_by(self.model.id.asc())
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._fail("list", e) from e
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Row by primary key, or None."""
        stmt = select(self.model).where(self.model.id == entity_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._fail("get", e, entity_id=entity_id) from e
        return result.scalar_one_or_none()

    async def create(self, data: Dict[str, Any]) -> ModelT:
        """Insert a row and return it with its assigned id."""
        entity = self.model(**data)
        self.session.add(entity)
        try:
            await self.session.commit()
            await self.session.refresh(entity)
        except SQLAlchemyError as e:
            raise await self._fail("create", e) from e
        return entity

    async def update(self, entity: ModelT, data: Dict[str, Any]) -> ModelT:
        """Apply ``data`` to an already loaded row."""
        for key, value in data.items():
            setattr(entity, key, value)
        try:
            await self.session.commit()
            await self.session.refresh(entity)
        except SQLAlchemyError as e:
            raise await self._fail("update", e, entity_id=entity.id) from e
        return entity

    async def delete(self, entity: ModelT) -> None:
        """Remove an already loaded row."""
        entity_id = entity.id
        try:
            await self.session.delete(entity)
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("delete", e, entity_id=entity_id) from e
