"""
Centralized configuration for the pickup team balancer.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


# Team generation defaults
DEFAULT_TEAM_SIZE = _parse_int("DEFAULT_TEAM_SIZE", 6)
DIVERSIFY_PAIRINGS = _parse_bool("DIVERSIFY_PAIRINGS", True)
PAIRING_HISTORY_WINDOW = _parse_int("PAIRING_HISTORY_WINDOW", 5)  # Most recent saved selections only

TEAM_GENERATOR_SETTINGS: dict[str, Any] = {
    # Fixed number of independent greedy attempts per generation.
    # Hardcoded - not configurable via env var (keeps seeded runs comparable)
    "attempts": 50,
    "rating_balance_weight": _parse_float("RATING_BALANCE_WEIGHT", 2.0),
    "position_balance_weight": _parse_float("POSITION_BALANCE_WEIGHT", 1.0),
    "pairing_penalty_weight": _parse_float("PAIRING_PENALTY_WEIGHT", 0.5),
}

# Player rating scale (star widget: 1-5 in half steps)
MIN_PLAYER_RATING = _parse_float("MIN_PLAYER_RATING", 1.0)
MAX_PLAYER_RATING = _parse_float("MAX_PLAYER_RATING", 5.0)
PLAYER_RATING_STEP = 0.5

# Saved team selection naming
SELECTION_NAME_MIN_LENGTH = _parse_int("SELECTION_NAME_MIN_LENGTH", 3)
SELECTION_NAME_MAX_LENGTH = _parse_int("SELECTION_NAME_MAX_LENGTH", 50)
