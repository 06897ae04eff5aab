"""Purchase ORM — one logged purchase or journey.

Invariants:
    - Always belongs to a User (user_id FK)
    - category is a Category value (validated before insert)
    - carbon_impact >= 0, kg CO2e
    - Immutable once created: footprint rollups depend on it

Design Decisions:
    - Transport journeys stored as category "transport", amount 0, subcategory = mode
"""

import uuid
import datetime as dt

from sqlalchemy import String, Float, Date, DateTime, ForeignKey, Uuid, Index
from sqlalchemy.orm import Mapped, mapped_column

from ecosmart.db.base import Base


class Purchase(Base):
    __tablename__ = "purchases"
    __table_args__ = (
        Index("ix_purchases_user_date", "user_id", "date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    subcategory: Mapped[str | None] = mapped_column(
        String(50), nullable=True,
    )
    carbon_impact: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
