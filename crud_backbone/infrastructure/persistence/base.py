"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Base for models that can be updated (combines above)

Timestamps are assigned in Python (UTC) rather than by the database so that
every dialect stores the same microsecond precision and ``updated_at`` is
strictly driven by the repository on each mutation.

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at via TimestampMixin)
            ├── ClientModel
            └── ApplicationModel
"""

from datetime import UTC, datetime
from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Current time in UTC (column default and update stamp)."""
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: Integer primary key assigned by the database on INSERT
    - created_at: Timestamp when record was created (UTC)

    Domain entities should not inherit from or depend on this class.
    """

    __abstract__ = True

    # Autoincrement keeps id order equal to insertion order (stable tie-break)
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Adds updated_at, set on INSERT and refreshed on every UPDATE.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - id: Integer primary key (from BaseModel)
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)

    Usage:
        class ClientModel(BaseMutableModel):
            __tablename__ = "clients"
            email: Mapped[str]
    """

    __abstract__ = True
