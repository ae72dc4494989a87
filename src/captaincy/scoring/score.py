"""Captain score function.

Maps one player's signals to a bounded 0-100 captain score.

Algorithm:
    1. Normalize: form/10, min(xgi/2.5, 1), (6 - difficulty)/5
    2. Weighted composite: 0.45*form + 0.35*xgi + 0.20*fixture, scaled x100
    3. Fixture adjustment: multiply by the per-difficulty multiplier
    4. Rotation risk: multiply by 1 - 0.8 * (risk/100)^2
    5. Clamp to [0, 100], round to 1 decimal

The scalar and array versions below must stay operation-for-operation
identical so the fast batch path returns the same floats.

Usage:
    from captaincy.scoring.score import calculate_captain_score

    score = calculate_captain_score({
        "form": 8.5, "fixture_difficulty": 2, "xgi_per_90": 1.8, "minutes_risk": 10,
    })
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from captaincy.config import (
    DEFAULT_SCORING,
    MAX_SCORE,
    MIN_SCORE,
    SCORE_DECIMALS,
    ScoringConfig,
)
from captaincy.data.schemas import PlayerSignal


def composite_score(
    form: float,
    fixture_difficulty: int,
    xgi_per_90: float,
    minutes_risk: float,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Unclamped, unrounded score from sanitized inputs."""
    form_norm = form / 10.0
    xgi_norm = min(xgi_per_90 / config.xgi_ceiling, 1.0)
    fixture_norm = (6 - fixture_difficulty) / 5.0

    base = (
        config.form_weight * form_norm
        + config.xgi_weight * xgi_norm
        + config.fixture_weight * fixture_norm
    )
    raw = base * 100.0

    adjusted = raw * config.fixture_multiplier(int(fixture_difficulty))

    risk_ratio = minutes_risk / 100.0
    return adjusted * (1.0 - config.risk_penalty * risk_ratio * risk_ratio)


def composite_scores(
    form: np.ndarray,
    fixture_difficulty: np.ndarray,
    xgi_per_90: np.ndarray,
    minutes_risk: np.ndarray,
    config: ScoringConfig = DEFAULT_SCORING,
) -> np.ndarray:
    """Array version of composite_score over sanitized float arrays."""
    form_norm = form / 10.0
    xgi_norm = np.minimum(xgi_per_90 / config.xgi_ceiling, 1.0)
    fixture_norm = (6 - fixture_difficulty) / 5.0

    base = (
        config.form_weight * form_norm
        + config.xgi_weight * xgi_norm
        + config.fixture_weight * fixture_norm
    )
    raw = base * 100.0

    multipliers = np.asarray(config.fixture_multipliers, dtype=float)
    adjusted = raw * multipliers[fixture_difficulty.astype(int) - 1]

    risk_ratio = minutes_risk / 100.0
    return adjusted * (1.0 - config.risk_penalty * risk_ratio * risk_ratio)


def finalize_score(value: float) -> float:
    """Clamp to [0, 100] and round to one decimal."""
    # float() first: numpy scalars round differently from builtin floats
    value = float(value)
    return round(min(max(value, MIN_SCORE), MAX_SCORE), SCORE_DECIMALS)


def finalize_scores(values: np.ndarray) -> list:
    """finalize_score over an array, returning builtin floats."""
    return [finalize_score(value) for value in values.tolist()]


def score_signal(signal: PlayerSignal, config: ScoringConfig = DEFAULT_SCORING) -> float:
    """Score an already-sanitized PlayerSignal."""
    raw = composite_score(
        signal.form,
        signal.fixture_difficulty,
        signal.xgi_per_90,
        signal.minutes_risk,
        config,
    )
    return finalize_score(raw)


def calculate_captain_score(signal: Any, config: ScoringConfig = DEFAULT_SCORING) -> float:
    """Calculate the captain score for one player. Never raises.

    Args:
        signal: PlayerSignal, or a mapping with keys form, fixture_difficulty,
            xgi_per_90, minutes_risk. Anything else scores as all-defaults.
        config: Scoring constants

    Returns:
        Score in [0, 100], one decimal place
    """
    if not isinstance(signal, PlayerSignal):
        values = signal if isinstance(signal, Mapping) else {}
        signal = PlayerSignal.from_values(values, config)
    return score_signal(signal, config)
