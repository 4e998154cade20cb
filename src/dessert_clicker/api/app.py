"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from dessert_clicker.api.lifecycle import LifecycleEvent, log_lifecycle
from dessert_clicker.api.models import DessertView, SessionView, ShareView
from dessert_clicker.app_logging import configure_logging
from dessert_clicker.containers import AppContainer
from dessert_clicker.domain.errors import SessionNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    currency_symbol = container.settings.currency_symbol

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log_lifecycle(LifecycleEvent.CREATE)
        yield
        log_lifecycle(LifecycleEvent.DESTROY)
        await app.state.container.close_resources()

    app = FastAPI(title=container.settings.app_name, lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found(
        request: Request, exc: SessionNotFoundError
    ) -> JSONResponse:
        logger.info("Rejected request for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog")
    async def catalog(request: Request) -> list[DessertView]:
        """List desserts in the order they unlock."""
        state_container: AppContainer = request.app.state.container
        return [DessertView.from_tier(tier) for tier in state_container.catalog]

    @app.post("/sessions", status_code=status.HTTP_201_CREATED)
    async def start_session(request: Request) -> SessionView:
        """Open a clicker screen with nothing sold."""
        state_container: AppContainer = request.app.state.container
        session_id, state = state_container.session_service.start_session()
        return SessionView.from_state(session_id, state, currency_symbol)

    @app.get("/sessions/{session_id}")
    async def get_session(session_id: UUID, request: Request) -> SessionView:
        """Render the current state of a session."""
        state_container: AppContainer = request.app.state.container
        state = state_container.session_service.get_state(session_id)
        return SessionView.from_state(session_id, state, currency_symbol)

    @app.post("/sessions/{session_id}/sales")
    async def record_sale(session_id: UUID, request: Request) -> SessionView:
        """Handle a tap on the dessert image."""
        state_container: AppContainer = request.app.state.container
        state = state_container.session_service.record_sale(session_id)
        return SessionView.from_state(session_id, state, currency_symbol)

    @app.post("/sessions/{session_id}/share")
    async def share(session_id: UUID, request: Request) -> ShareView:
        """Share the session summary, reporting a notice if that isn't possible."""
        state_container: AppContainer = request.app.state.container
        state = state_container.session_service.get_state(session_id)
        outcome = await state_container.share_service.share(state)
        return ShareView(
            shared=outcome.shared, text=outcome.text, notice=outcome.notice
        )

    @app.post(
        "/sessions/{session_id}/lifecycle/{event}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    async def lifecycle(
        session_id: UUID, event: LifecycleEvent, request: Request
    ) -> Response:
        """Record a screen lifecycle callback."""
        state_container: AppContainer = request.app.state.container
        state_container.session_service.get_state(session_id)
        log_lifecycle(event, str(session_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def end_session(session_id: UUID, request: Request) -> Response:
        """Close a clicker screen and discard its counters."""
        state_container: AppContainer = request.app.state.container
        state_container.session_service.end_session(session_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app
