"""Session bookkeeping for clicker screens."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from dessert_clicker.domain.catalog import Catalog
from dessert_clicker.domain.desserts import SessionState
from dessert_clicker.domain.errors import SessionNotFoundError
from dessert_clicker.domain.sales import new_session, record_sale

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Storage interface for live session states."""

    def get(self, session_id: UUID) -> SessionState | None:
        """Return the state for a session, if present."""

    def put(self, session_id: UUID, state: SessionState) -> None:
        """Store the latest state for a session."""

    def delete(self, session_id: UUID) -> bool:
        """Remove a session and report whether it existed."""


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Keeps session states for the lifetime of the process."""

    _states: dict[UUID, SessionState]

    def __init__(self) -> None:
        self._states = {}

    def get(self, session_id: UUID) -> SessionState | None:
        return self._states.get(session_id)

    def put(self, session_id: UUID, state: SessionState) -> None:
        self._states[session_id] = state

    def delete(self, session_id: UUID) -> bool:
        return self._states.pop(session_id, None) is not None


@dataclass
class SessionService:
    """Owns every session's state and applies sales to it."""

    catalog: Catalog
    repository: SessionRepository

    def start_session(self) -> tuple[UUID, SessionState]:
        """Create a session with nothing sold and return its id and state."""
        session_id = uuid4()
        state = new_session(self.catalog)
        self.repository.put(session_id, state)
        logger.info("Session started", extra={"session_id": str(session_id)})
        return session_id, state

    def get_state(self, session_id: UUID) -> SessionState:
        """Return the current state of a session."""
        state = self.repository.get(session_id)
        if state is None:
            raise SessionNotFoundError(f"Unknown session {session_id}.")
        return state

    def record_sale(self, session_id: UUID) -> SessionState:
        """Sell one dessert in the session and return the new state."""
        previous = self.get_state(session_id)
        state = record_sale(self.catalog, previous)
        self.repository.put(session_id, state)
        if state.active_tier != previous.active_tier:
            logger.info(
                "Now selling %s",
                state.active_tier.image_reference,
                extra={"session_id": str(session_id)},
            )
        return state

    def end_session(self, session_id: UUID) -> None:
        """Discard a session's state."""
        if not self.repository.delete(session_id):
            raise SessionNotFoundError(f"Unknown session {session_id}.")
        logger.info("Session ended", extra={"session_id": str(session_id)})
