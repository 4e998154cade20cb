"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from dessert_clicker.adapters.share_target import (
    HttpxWebhookShareTarget,
    ShareTarget,
    UnavailableShareTarget,
)
from dessert_clicker.config import Settings
from dessert_clicker.domain.catalog import DEFAULT_CATALOG, Catalog
from dessert_clicker.services.sessions import InMemorySessionRepository, SessionService
from dessert_clicker.services.share import ShareService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: Catalog
    session_service: SessionService
    share_service: ShareService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, catalog: Catalog = DEFAULT_CATALOG
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    share_target: ShareTarget
    if resolved_settings.share_webhook_url:
        share_target = HttpxWebhookShareTarget.create(
            resolved_settings.share_webhook_url,
            timeout=resolved_settings.share_timeout_seconds,
        )
    else:
        share_target = UnavailableShareTarget()
    session_service = SessionService(
        catalog=catalog, repository=InMemorySessionRepository()
    )
    share_service = ShareService(
        target=share_target, currency_symbol=resolved_settings.currency_symbol
    )

    async def close_resources() -> None:
        await share_target.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        session_service=session_service,
        share_service=share_service,
        close_resources=close_resources,
    )
