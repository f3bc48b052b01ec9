from abc import ABC
from typing import Any, Generic, TypeVar, cast
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import BinaryExpression, ColumnElement, Select
from sqlmodel import SQLModel

from bingo.core.error import BingoDomainError, DomainErrorCode

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T], ABC):
    def __init__(
        self,
        session: AsyncSession,
        model_class: type[T],
        not_found_error_code: DomainErrorCode,
    ):
        self.session = session
        self.model_class = model_class
        self.not_found_error_code = not_found_error_code

    async def get_fresh_or_raise(self, uuid: UUID) -> T:
        """Load the row from the database, overwriting any cached instance."""
        result = await self.session.execute(
            select(self.model_class)
            .where(self.model_class.id == uuid)
            .execution_options(populate_existing=True),
        )
        entity = result.scalar_one_or_none()
        if entity is None:
            raise self._not_found(conditions={"id": str(uuid)})
        return cast(T, entity)

    async def create(self, entity: T) -> T:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update_where(
        self, uuid: UUID, *conditions: ColumnElement[bool], **values: Any
    ) -> bool:
        """Apply ``values`` to the row only while every condition holds.

        Returns False, leaving the row untouched, when a concurrent writer has
        already moved it out of the expected state.
        """
        stmt = (
            update(self.model_class)
            .where(self.model_class.id == uuid, *conditions)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return cast(int, result.rowcount) == 1

    async def compare_and_set(
        self,
        uuid: UUID,
        expected_version: int,
        *conditions: ColumnElement[bool],
        **values: Any,
    ) -> bool:
        """Apply ``values`` only if the row still has ``expected_version``.

        Bumps the version on success.
        """
        return await self.update_where(
            uuid,
            self.model_class.version == expected_version,
            *conditions,
            version=expected_version + 1,
            **values,
        )

    def _build_query(self, *filters: BinaryExpression, **kwargs: Any) -> Select:
        query = select(self.model_class)

        for filter_condition in filters:
            query = query.where(filter_condition)

        for key, value in kwargs.items():
            if hasattr(self.model_class, key):
                query = query.where(getattr(self.model_class, key) == value)

        return query

    async def filter(
        self,
        *filters: BinaryExpression,
        **kwargs: Any,
    ) -> list[T]:
        query = self._build_query(*filters, **kwargs)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def filter_one(self, *filters: BinaryExpression, **kwargs: Any) -> T | None:
        query = self._build_query(*filters, **kwargs)
        query = query.limit(1)

        result = await self.session.execute(query)
        return cast(T | None, result.scalar_one_or_none())

    async def filter_one_or_raise(self, *filters: BinaryExpression, **kwargs: Any) -> T:
        result = await self.filter_one(*filters, **kwargs)
        if not result:
            filter_details = {key: str(value) for key, value in kwargs.items()}
            raise self._not_found(
                filters=str(filters) if filters else None,
                conditions=filter_details,
            )
        return result

    async def count(self, *filters: BinaryExpression, **kwargs: Any) -> int:
        query = select(func.count()).select_from(self.model_class)

        for filter_condition in filters:
            query = query.where(filter_condition)

        for key, value in kwargs.items():
            if hasattr(self.model_class, key):
                query = query.where(getattr(self.model_class, key) == value)

        result = await self.session.execute(query)
        return cast(int, result.scalar_one())

    def _not_found(self, **details: Any) -> BingoDomainError:
        return BingoDomainError(
            code=self.not_found_error_code,
            message=f"{self.model_class.__name__} not found",
            details={"model": self.model_class.__name__, **details},
        )
