"""Tier selection and the sale transition."""

from dessert_clicker.domain.catalog import Catalog
from dessert_clicker.domain.desserts import DessertTier, SessionState


def select_tier(catalog: Catalog, units_sold: int) -> DessertTier:
    """Return the most advanced dessert unlocked after ``units_sold`` sales."""
    selected = catalog[0]
    for tier in catalog:
        if units_sold >= tier.activation_threshold:
            selected = tier
        else:
            # Thresholds ascend, so nothing later is unlocked either.
            break
    return selected


def new_session(catalog: Catalog) -> SessionState:
    """Return the state of a session with nothing sold yet."""
    return SessionState(units_sold=0, total_revenue=0, active_tier=catalog[0])


def record_sale(catalog: Catalog, state: SessionState) -> SessionState:
    """Sell one unit of the active dessert and return the resulting state."""
    units_sold = state.units_sold + 1
    return SessionState(
        units_sold=units_sold,
        total_revenue=state.total_revenue + state.active_tier.unit_price,
        active_tier=select_tier(catalog, units_sold),
    )


def format_share_summary(
    units_sold: int, total_revenue: int, currency_symbol: str = "€"
) -> str:
    """Build the text shared when the user exports their progress."""
    return (
        f"I've sold {units_sold} desserts for a total of "
        f"{total_revenue} {currency_symbol} #DessertClicker"
    )
