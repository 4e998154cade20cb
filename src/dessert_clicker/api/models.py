"""Pydantic models for API responses."""

from uuid import UUID

from pydantic import BaseModel

from dessert_clicker.domain.desserts import DessertTier, SessionState


class DessertView(BaseModel):
    """A catalog entry."""

    image_reference: str
    unit_price: int
    activation_threshold: int

    @classmethod
    def from_tier(cls, tier: DessertTier) -> "DessertView":
        return cls(
            image_reference=tier.image_reference,
            unit_price=tier.unit_price,
            activation_threshold=tier.activation_threshold,
        )


class SessionView(BaseModel):
    """Everything the clicker screen renders for a session."""

    session_id: UUID
    units_sold: int
    total_revenue: int
    revenue_display: str
    image_reference: str
    unit_price: int

    @classmethod
    def from_state(
        cls, session_id: UUID, state: SessionState, currency_symbol: str
    ) -> "SessionView":
        return cls(
            session_id=session_id,
            units_sold=state.units_sold,
            total_revenue=state.total_revenue,
            revenue_display=f"{state.total_revenue} {currency_symbol}",
            image_reference=state.active_tier.image_reference,
            unit_price=state.active_tier.unit_price,
        )


class ShareView(BaseModel):
    """Outcome of a share request."""

    shared: bool
    text: str
    notice: str | None = None
