"""User ORM — local mirror of an identity-provider account.

Invariants:
    - id is the identity provider's opaque id (not generated here)
    - Created lazily on the user's first write (INSERT ... ON CONFLICT DO NOTHING)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ecosmart.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, default="",
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
