"""Centralized configuration for Captaincy Showdown.

All scoring constants and runtime settings in one place.
Environment variables can override the runtime settings.

Scoring Constants:
    DEFAULT_SCORING - Frozen ScoringConfig (weights, curves, defaults)
    FORM_RANGE, FIXTURE_RANGE, XGI_RANGE, MINUTES_RISK_RANGE - Valid inputs

Performance:
    PERFORMANCE_BUDGET_MS - Hard latency budget for one batch pass
    PERFORMANCE_TARGET_POOL - Representative pool size (full league)

FPL Constants:
    ELEMENT_TYPE_TO_POS - Map element_type (1-4) to position codes
    POSITION_LABELS - Position code to display label

Environment Variables:
    CAPTAINCY_PERF_BUDGET_MS - Override the 100 ms batch budget
    CAPTAINCY_LOG_LEVEL - Log level used by the CLI scripts
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Tuple

# Valid input ranges (inclusive). Anything outside falls back to the default.
FORM_RANGE = (0.0, 10.0)
FIXTURE_RANGE = (1.0, 5.0)
XGI_RANGE = (0.0, math.inf)
MINUTES_RISK_RANGE = (0.0, 100.0)


@dataclass(frozen=True)
class ScoringConfig:
    """Fixed heuristic constants for the captain score.

    Weights are not fitted; they are the product weighting and only change
    when the product owner revises it.
    """

    form_weight: float = 0.45
    xgi_weight: float = 0.35
    fixture_weight: float = 0.20
    xgi_ceiling: float = 2.5
    risk_penalty: float = 0.8
    # Multiplier per fixture difficulty 1..5 (index 0 is difficulty 1)
    fixture_multipliers: Tuple[float, ...] = (1.10, 1.05, 1.00, 0.95, 0.85)

    default_form: float = 5.0
    default_fixture_difficulty: int = 3
    default_xgi_per_90: float = 0.5
    default_minutes_risk: float = 0.0

    def fixture_multiplier(self, difficulty: int) -> float:
        """Get the fixture multiplier for a sanitized difficulty (1-5)."""
        return self.fixture_multipliers[difficulty - 1]


DEFAULT_SCORING = ScoringConfig()

# Score bounds
MIN_SCORE = 0.0
MAX_SCORE = 100.0
SCORE_DECIMALS = 1

# Performance budget (single batch pass)
PERFORMANCE_BUDGET_MS = float(os.environ.get("CAPTAINCY_PERF_BUDGET_MS", "100"))
PERFORMANCE_TARGET_POOL = 600

# Logging (CLI only; library modules never configure handlers)
LOG_LEVEL = os.environ.get("CAPTAINCY_LOG_LEVEL", "INFO")

# Position mapping (element_type -> position code)
ELEMENT_TYPE_TO_POS = {1: "GKP", 2: "DEF", 3: "MID", 4: "FWD"}
POSITION_LABELS = {
    "GKP": "Goalkeeper",
    "DEF": "Defender",
    "MID": "Midfielder",
    "FWD": "Forward",
}
