"""Batch lifecycle states and the optional transition callback."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Coroutine

logger = logging.getLogger(__name__)


class BatchState(str, enum.Enum):
    IDLE = "idle"
    SESSION_STARTING = "session_starting"
    RUNNING = "running"
    DRAINING = "draining"
    SESSION_CLOSING = "session_closing"
    DONE = "done"


# Type alias for the state-transition callback used by the coordinator.
StateCallback = Callable[[BatchState, dict[str, Any]], Coroutine[Any, Any, None]]


async def emit_state(
    on_state: StateCallback | None,
    state: BatchState,
    data: dict[str, Any] | None = None,
) -> None:
    """Log a batch state transition and forward it to the callback, if any."""
    logger.debug("batch state changed", extra={"state": state.value, **(data or {})})
    if on_state:
        await on_state(state, data or {})
