"""create_clients_and_applications

Revision ID: a1c3e5f7b9d1
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a1c3e5f7b9d1"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create clients and applications tables."""
    op.create_table(
        "clients",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Client display name",
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Client e-mail address (unique)",
        ),
        sa.Column(
            "phone",
            sa.String(length=32),
            nullable=False,
            comment="Phone number, e.g. (34) 99999-9999",
        ),
        sa.Column("status", sa.Boolean(), nullable=False, comment="Active flag"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_clients_email", "clients", ["email"], unique=True)
    op.create_index("ix_clients_name", "clients", ["name"], unique=False)

    op.create_table(
        "applications",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "key",
            sa.String(length=128),
            nullable=False,
            comment="Access key (unique)",
        ),
        sa.Column(
            "label",
            sa.String(length=255),
            nullable=False,
            comment="Application label (unique)",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("label"),
    )
    op.create_index("ix_applications_key", "applications", ["key"], unique=True)


def downgrade() -> None:
    """Drop clients and applications tables."""
    op.drop_index("ix_applications_key", table_name="applications")
    op.drop_table("applications")
    op.drop_index("ix_clients_name", table_name="clients")
    op.drop_index("ix_clients_email", table_name="clients")
    op.drop_table("clients")
