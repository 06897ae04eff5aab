"""Initial schema — users, purchases, carbon_footprints.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False, server_default=""),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "purchases",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("amount", sa.Float, nullable=False, server_default="0"),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("subcategory", sa.String(50), nullable=True),
        sa.Column("carbon_impact", sa.Float, nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_purchases_user_date", "purchases", ["user_id", "date"])

    op.create_table(
        "carbon_footprints",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("transport", sa.Float, nullable=False, server_default="0"),
        sa.Column("food", sa.Float, nullable=False, server_default="0"),
        sa.Column("energy", sa.Float, nullable=False, server_default="0"),
        sa.Column("shopping", sa.Float, nullable=False, server_default="0"),
        sa.Column("other", sa.Float, nullable=False, server_default="0"),
        sa.Column(
            "total", sa.Float,
            sa.Computed("transport + food + energy + shopping + other", persisted=True),
        ),
        sa.UniqueConstraint("user_id", "date", name="uq_carbon_footprints_user_date"),
    )


def downgrade() -> None:
    op.drop_table("carbon_footprints")
    op.drop_index("ix_purchases_user_date", table_name="purchases")
    op.drop_table("purchases")
    op.drop_table("users")
