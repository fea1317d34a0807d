"""SQLAlchemyRepository - generic CRUD and pagination over one table.

Concrete repositories declare the model, the fields that may be written,
sorted and filtered, and how a row maps to a domain entity. Everything else
(pagination, conflict detection, not-found outcomes) lives here.

Repositories are cheap: build one per request around the request's session.
They never hold the engine and never cache rows between calls.

Reference:
    - crud_backbone/infrastructure/persistence/repositories/client_repository.py
"""

from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from crud_backbone.core.enums import ErrorCode
from crud_backbone.core.errors import ConflictError, NotFoundError
from crud_backbone.core.result import Failure, Result, Success
from crud_backbone.domain.value_objects.pagination import PaginationParams, SortOrder
from crud_backbone.infrastructure.persistence.base import BaseMutableModel, utc_now

ModelT = TypeVar("ModelT", bound=BaseMutableModel)
EntityT = TypeVar("EntityT")


class SQLAlchemyRepository(Generic[ModelT, EntityT]):
    """Generic repository over a BaseMutableModel table.

    Class attributes (set by subclasses):
        model: ORM model class.
        resource_type: Name used in NotFound/Conflict errors ("Client").
        writable_fields: Fields copied from input on insert and update.
        unique_fields: Fields guarded by a unique constraint, in report order.
        sortable_fields: Fields accepted as PaginationParams.order_by.
        filterable_fields: Fields accepted as PaginationParams.filters keys.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    model: ClassVar[type[Any]]
    resource_type: ClassVar[str]
    writable_fields: ClassVar[tuple[str, ...]] = ()
    unique_fields: ClassVar[tuple[str, ...]] = ()
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})
    filterable_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        """Find row by primary key.

        Args:
            entity_id: Identifier assigned by the database.

        Returns:
            Domain entity if found, None otherwise.
        """
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_field(self, field_name: str, value: Any) -> EntityT | None:
        """Find the first row whose field equals value.

        Used by uniqueness pre-checks, so at most one match is returned.

        Args:
            field_name: Column name (must be a mapped column).
            value: Value to compare with.

        Returns:
            Domain entity if found, None otherwise.

        Raises:
            ValueError: If field_name is not a column of the model.
        """
        column = self._column(field_name)
        stmt = select(self.model).where(column == value).order_by(self.model.id).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._to_domain(model)

    async def insert(self, values: Mapping[str, Any]) -> Result[EntityT, ConflictError]:
        """Create a row; the database assigns id and timestamps.

        Args:
            values: Field values; keys outside writable_fields are ignored.

        Returns:
            Success with the stored entity, Failure with ConflictError when a
            unique constraint rejects the row.
        """
        model = self.model(
            **{name: values[name] for name in self.writable_fields if name in values}
        )
        self.session.add(model)

        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            return Failure(error=self._conflict(exc))

        await self.session.refresh(model)
        return Success(value=self._to_domain(model))

    async def update(
        self, entity: EntityT
    ) -> Result[EntityT, NotFoundError | ConflictError]:
        """Overwrite the writable fields of an existing row.

        The row is re-read at call time, so a concurrent delete surfaces as
        NotFoundError. ``id`` and ``created_at`` are never written;
        ``updated_at`` is stamped with the current time.

        Args:
            entity: Domain entity carrying the identifier and new values.

        Returns:
            Success with the stored entity, or Failure with NotFoundError /
            ConflictError.
        """
        entity_id = getattr(entity, "id")
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return Failure(error=self._not_found(entity_id))

        for name in self.writable_fields:
            setattr(model, name, getattr(entity, name))
        model.updated_at = utc_now()

        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            return Failure(error=self._conflict(exc))

        await self.session.refresh(model)
        return Success(value=self._to_domain(model))

    async def delete(self, entity_id: int) -> Result[int, NotFoundError]:
        """Delete a row by primary key.

        Not idempotent: deleting an unknown id returns NotFoundError.

        Args:
            entity_id: Identifier of the row to delete.

        Returns:
            Success with the deleted id, Failure with NotFoundError.
        """
        stmt = delete(self.model).where(self.model.id == entity_id)
        result = await self.session.execute(stmt)

        if result.rowcount == 0:
            await self.session.rollback()
            return Failure(error=self._not_found(entity_id))

        await self.session.commit()
        return Success(value=entity_id)

    async def list(self, params: PaginationParams) -> tuple[list[EntityT], int]:
        """Return one page of rows and the total count of matching rows.

        ``count`` ignores the page window; rows are ordered by
        ``params.order_by`` in ``params.order`` with ties broken by id
        ascending (insertion order).

        Args:
            params: Page window, ordering and equality filters.

        Returns:
            Tuple of (rows, count).

        Raises:
            ValueError: If order_by or a filter key is not allowed.
        """
        if params.order_by not in self.sortable_fields:
            raise ValueError(f"Cannot sort {self.resource_type} by {params.order_by!r}")

        conditions = []
        for name, value in params.filters.items():
            if name not in self.filterable_fields:
                raise ValueError(f"Cannot filter {self.resource_type} by {name!r}")
            conditions.append(self._column(name) == value)

        count_stmt = select(func.count()).select_from(self.model)
        if conditions:
            count_stmt = count_stmt.where(*conditions)
        count = (await self.session.execute(count_stmt)).scalar_one()

        column = self._column(params.order_by)
        ordering = column.desc() if params.order == SortOrder.DESC else column.asc()

        stmt = select(self.model)
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = (
            stmt.order_by(ordering, self.model.id.asc())
            .offset(params.offset)
            .limit(params.size)
        )
        result = await self.session.execute(stmt)
        rows = [self._to_domain(model) for model in result.scalars().all()]

        return rows, count

    def _to_domain(self, model: ModelT) -> EntityT:
        """Convert database model to domain entity."""
        raise NotImplementedError

    def _column(self, field_name: str) -> InstrumentedAttribute[Any]:
        column = getattr(self.model, field_name, None)
        if not isinstance(column, InstrumentedAttribute):
            raise ValueError(f"{self.resource_type} has no field {field_name!r}")
        return column

    def _not_found(self, entity_id: Any) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=f"{self.resource_type} not found",
            resource_type=self.resource_type,
            resource_id=str(entity_id),
        )

    def _conflict(self, exc: IntegrityError) -> ConflictError:
        """Build ConflictError, naming the unique field the driver reported."""
        reason = str(exc.orig).lower()
        conflicting = next(
            (name for name in self.unique_fields if name in reason),
            self.unique_fields[0] if self.unique_fields else None,
        )
        return ConflictError(
            code=ErrorCode.RESOURCE_CONFLICT,
            message=f"{self.resource_type} with this {conflicting or 'value'} already exists",
            resource_type=self.resource_type,
            conflicting_field=conflicting,
        )
