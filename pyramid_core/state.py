from __future__ import annotations

from enum import Enum


class GameStatus(Enum):
    """Lifecycle of a game. STARTED is terminal; game over is derived, not a status."""
    NOT_STARTED = "Not Started"
    STARTED = "Started"
