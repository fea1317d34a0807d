"""Client database model."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from crud_backbone.infrastructure.persistence.base import BaseMutableModel


class Client(BaseMutableModel):
    """Client table.

    Fields:
        id: Integer primary key (from BaseMutableModel)
        created_at: Timestamp when client was created (from BaseMutableModel)
        updated_at: Timestamp when client last changed (from BaseMutableModel)
        name: Display name
        email: Unique e-mail address (the storage-level uniqueness guard)
        phone: Phone number
        status: Active flag

    Indexes:
        - ix_clients_email: unique, enforces one client per e-mail
    """

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Client display name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Client e-mail address (unique)",
    )

    phone: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Phone number, e.g. (34) 99999-9999",
    )

    status: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Active flag",
    )

    def __repr__(self) -> str:
        return (
            f"<Client("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"status={self.status}"
            f")>"
        )
