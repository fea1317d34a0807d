"""Application database model (API consumers and their access keys)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from crud_backbone.infrastructure.persistence.base import BaseMutableModel


class Application(BaseMutableModel):
    """Application table.

    Fields:
        key: Unique access key presented as ``Authorization: Bearer <key>``
        label: Unique human-readable name
    """

    __tablename__ = "applications"

    key: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        index=True,
        comment="Access key (unique)",
    )

    label: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Application label (unique)",
    )

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, label={self.label!r})>"
