from __future__ import annotations

import os

# Environment switches:
#   PYRAMID_ROWS / PYRAMID_DRAWS  default layout for new games
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
REMOVAL_TARGET = 13


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


DEFAULT_ROWS = _env_int("PYRAMID_ROWS", 7)
DEFAULT_DRAWS = _env_int("PYRAMID_DRAWS", 3)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_GAMES = _env_int("PYRAMID_MAX_GAMES", 1000)
