"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - upsert_increment is a single atomic statement keyed on (user_id, day)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves —
      the shell orchestrates the async calls around the pure logic
"""

from datetime import date
from typing import Protocol

from ecosmart.core.domain_types import Category, CarbonKg, UserId


class FootprintLike(Protocol):
    """Structural contract for DailyFootprint rows.

    Satisfied by the ORM model and by plain dataclasses in tests.
    """
    date: date
    transport: float
    food: float
    energy: float
    shopping: float
    other: float
    total: float


class PurchaseLike(Protocol):
    """Structural contract for persisted purchases."""
    user_id: str
    amount: float
    description: str
    category: str
    subcategory: str | None
    carbon_impact: float
    date: date


class FootprintRepository(Protocol):
    """Contract for daily footprint persistence — implemented by shell."""
    async def find_by_user_and_range(
        self, user_id: UserId, start: date, end: date,
    ) -> list[FootprintLike]: ...
    async def upsert_increment(
        self, user_id: UserId, day: date, category: Category, delta: CarbonKg,
    ) -> FootprintLike: ...


class PurchaseRepository(Protocol):
    """Contract for purchase persistence — implemented by shell."""
    async def ensure_user(self, user_id: UserId) -> None: ...
    async def add(self, purchase_data: dict, user_id: UserId) -> PurchaseLike: ...
    async def find_by_user(
        self,
        user_id: UserId,
        *,
        category: Category | None = None,
        since: date | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[PurchaseLike]: ...
    async def count_by_user(
        self,
        user_id: UserId,
        *,
        category: Category | None = None,
        since: date | None = None,
    ) -> int: ...
