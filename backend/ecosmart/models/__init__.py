"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All rows scoped by user_id (identity provider's id)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all
      and Alembic autogenerate
    - No ORM relationships: purchases are read through the repository only
"""

from ecosmart.models.user import User  # noqa: F401
from ecosmart.models.purchase import Purchase  # noqa: F401
from ecosmart.models.carbon_footprint import CarbonFootprint  # noqa: F401
