"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from dessert_clicker.adapters.share_target import ShareTarget
from dessert_clicker.config import Settings
from dessert_clicker.containers import AppContainer
from dessert_clicker.domain.catalog import Catalog, build_catalog
from dessert_clicker.domain.desserts import DessertTier
from dessert_clicker.domain.errors import SharingUnavailableError
from dessert_clicker.services.sessions import InMemorySessionRepository, SessionService
from dessert_clicker.services.share import ShareService


@dataclass
class FakeShareTarget(ShareTarget):
    """Fake share target that records shared text."""

    available: bool = True
    sent: list[str] = field(default_factory=list)
    closed: bool = False

    async def send(self, text: str) -> None:
        if not self.available:
            raise SharingUnavailableError("no app can handle the share")
        self.sent.append(text)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def catalog() -> Catalog:
    return build_catalog(
        [
            DessertTier("cupcake", 5, 0),
            DessertTier("donut", 10, 5),
            DessertTier("eclair", 15, 10),
        ]
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_name="Dessert Clicker",
        currency_symbol="€",
        share_webhook_url=None,
        environment="test",
    )


@pytest.fixture
def share_target() -> FakeShareTarget:
    return FakeShareTarget()


@pytest.fixture
def session_service(catalog: Catalog) -> SessionService:
    return SessionService(catalog=catalog, repository=InMemorySessionRepository())


@pytest.fixture
def container(
    settings: Settings,
    catalog: Catalog,
    session_service: SessionService,
    share_target: FakeShareTarget,
) -> AppContainer:
    async def close_resources() -> None:
        await share_target.close()

    return AppContainer(
        settings=settings,
        catalog=catalog,
        session_service=session_service,
        share_service=ShareService(
            target=share_target, currency_symbol=settings.currency_symbol
        ),
        close_resources=close_resources,
    )
