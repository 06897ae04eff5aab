"""CarbonFootprint ORM — the DailyFootprint rollup, one row per (user_id, date).

Invariants:
    - UNIQUE(user_id, date): the atomic upsert is keyed on it
    - total == transport + food + energy + shopping + other, always: it is a
      stored generated column (TOTAL_EXPRESSION), computed by the database
    - Columns only ever incremented (never read-modify-written in Python)

Design Decisions:
    - Category columns named exactly after Category values: the repository
      addresses them by enum value
    - No FK to users: footprints may be written by any event source, and
      pruning is an external concern
"""

import uuid
import datetime as dt

from sqlalchemy import Computed, String, Float, Date, Uuid, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ecosmart.db.base import Base

TOTAL_EXPRESSION = "transport + food + energy + shopping + other"


class CarbonFootprint(Base):
    __tablename__ = "carbon_footprints"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_carbon_footprints_user_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    transport: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    food: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    energy: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    shopping: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    other: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total: Mapped[float] = mapped_column(
        Float, Computed(TOTAL_EXPRESSION, persisted=True),
    )
