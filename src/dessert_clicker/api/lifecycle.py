"""Screen lifecycle hooks.

The hooks only log; no domain state changes when they fire.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class LifecycleEvent(str, Enum):
    """Lifecycle callbacks a clicker screen reports."""

    CREATE = "create"
    START = "start"
    RESUME = "resume"
    RESTART = "restart"
    PAUSE = "pause"
    STOP = "stop"
    DESTROY = "destroy"


def log_lifecycle(event: LifecycleEvent, session_id: str | None = None) -> str:
    """Log a lifecycle callback and return the logged message."""
    message = f"on{event.value.capitalize()} called"
    if session_id is None:
        logger.info(message)
    else:
        logger.info(message, extra={"session_id": session_id})
    return message
