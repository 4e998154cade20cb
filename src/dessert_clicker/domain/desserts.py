"""Domain models for desserts and clicker sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DessertTier:
    """A dessert that goes on sale once enough units have been sold."""

    image_reference: str
    unit_price: int
    activation_threshold: int


@dataclass(frozen=True)
class SessionState:
    """Counters for a single clicker session and the dessert being sold."""

    units_sold: int
    total_revenue: int
    active_tier: DessertTier
