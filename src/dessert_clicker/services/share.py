"""Sharing a session summary with an external target."""

import logging
from dataclasses import dataclass

from dessert_clicker.adapters.share_target import ShareTarget
from dessert_clicker.domain.desserts import SessionState
from dessert_clicker.domain.errors import SharingUnavailableError
from dessert_clicker.domain.sales import format_share_summary

logger = logging.getLogger(__name__)

SHARING_NOT_AVAILABLE = "Sharing not available"


@dataclass(frozen=True)
class ShareOutcome:
    """Result of a share attempt as shown to the user."""

    shared: bool
    text: str
    notice: str | None = None


@dataclass
class ShareService:
    """Formats session summaries and passes them to a share target."""

    target: ShareTarget
    currency_symbol: str = "€"

    async def share(self, state: SessionState) -> ShareOutcome:
        """Share the summary, or return a notice when sharing is unavailable."""
        text = format_share_summary(
            state.units_sold, state.total_revenue, self.currency_symbol
        )
        try:
            await self.target.send(text)
        except SharingUnavailableError as exc:
            logger.warning("Sharing unavailable: %s", exc)
            return ShareOutcome(shared=False, text=text, notice=SHARING_NOT_AVAILABLE)
        return ShareOutcome(shared=True, text=text)
