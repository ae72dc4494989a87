"""Batch captain scoring and top-N selection.

Applies the captain score across a candidate pool. Malformed elements
never raise and are never dropped: they map to a zero-score placeholder.

Key Functions:
    score_all - Score a list of candidate records (dicts or CaptainCandidate)
    top_n - Highest captain_score records, descending, stable on ties
    score_frame - Score a pandas DataFrame of candidates
    top_n_frame - DataFrame version of top_n

Ownership:
    Input records are never mutated unless in_place=True. By default every
    output record is a fresh copy with captain_score set.

Usage:
    from captaincy.scoring.batch import score_all, top_n

    scored = score_all(candidates)
    leaderboard = top_n(scored, 10)
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from typing import Any, Dict, Iterable, List, Mapping, MutableMapping, Optional

import numpy as np
import pandas as pd

from captaincy.config import DEFAULT_SCORING, MAX_SCORE, MIN_SCORE, ScoringConfig
from captaincy.data.schemas import (
    PLAYER_FIELDS,
    CaptainCandidate,
    PlayerSignal,
    read_field,
    signal_rules,
)
from captaincy.data.validation import is_numeric_dtype, sanitize_array, sanitize_value
from captaincy.scoring.score import composite_scores, finalize_scores, score_signal

logger = logging.getLogger(__name__)

SCORE_FIELD = "captain_score"
FALLBACK_SCORE = 0.0


def _fallback_record() -> Dict[str, float]:
    """Placeholder for an element that is not a player record."""
    return {SCORE_FIELD: FALLBACK_SCORE}


def _validate(element: Any, config: ScoringConfig) -> Optional[PlayerSignal]:
    """Validate one element into a PlayerSignal, or None if it is not a record."""
    if isinstance(element, CaptainCandidate):
        return element.signal(config)
    if isinstance(element, Mapping) and not PLAYER_FIELDS.isdisjoint(element.keys()):
        return PlayerSignal.from_record(element, config)
    return None


def _with_score(element: Any, score: float, in_place: bool) -> Any:
    """Attach a score to a well-formed record."""
    if isinstance(element, CaptainCandidate):
        if in_place:
            element.captain_score = score
            return element
        return element.model_copy(update={SCORE_FIELD: score})

    if in_place and isinstance(element, MutableMapping):
        element[SCORE_FIELD] = score
        return element
    return {**element, SCORE_FIELD: score}


def _score_guarded(
    elements: List[Any],
    in_place: bool,
    config: ScoringConfig,
) -> List[Any]:
    """Reference path: validate every element, then score it."""
    scored = []
    malformed = 0
    for element in elements:
        signal = _validate(element, config)
        if signal is None:
            malformed += 1
            scored.append(_fallback_record())
            continue
        scored.append(_with_score(element, score_signal(signal, config), in_place))

    if malformed:
        logger.debug(f"{malformed}/{len(elements)} elements were not player records, scored {FALLBACK_SCORE}")
    return scored


def _fast_columns(elements: List[Any]) -> Optional[Dict[str, np.ndarray]]:
    """Pull the signal columns as numeric arrays, or None if the batch is not clean."""
    if all(isinstance(element, CaptainCandidate) for element in elements):
        getter = getattr
    else:
        getter = operator.getitem

    columns = {}
    try:
        for name, key, *_ in signal_rules():
            values = [getter(element, key) for element in elements]
            # bools would pass as 0/1 in a numeric array
            if any(isinstance(value, (bool, np.bool_)) for value in values):
                return None
            column = np.array(values)
            if column.ndim != 1 or not is_numeric_dtype(column):
                return None
            columns[name] = column
    except (KeyError, TypeError, AttributeError, ValueError):
        return None
    return columns


def _score_fast(
    elements: List[Any],
    in_place: bool,
    config: ScoringConfig,
) -> Optional[List[Any]]:
    """Vectorized path for pre-validated pools. Returns None to request fallback."""
    columns = _fast_columns(elements)
    if columns is None:
        return None

    sanitized = {
        name: sanitize_array(columns[name], bounds, default, integral)
        for name, _, bounds, default, integral in signal_rules(config)
    }
    scores = finalize_scores(
        composite_scores(
            sanitized["form"],
            sanitized["fixture_difficulty"],
            sanitized["xgi_per_90"],
            sanitized["minutes_risk"],
            config,
        )
    )
    return [
        _with_score(element, score, in_place)
        for element, score in zip(elements, scores)
    ]


def score_all(
    records: Optional[Iterable[Any]],
    optimize: bool = False,
    in_place: bool = False,
    config: ScoringConfig = DEFAULT_SCORING,
) -> List[Any]:
    """Score every candidate in a pool. Never raises on bad elements.

    Args:
        records: Candidate records (dicts or CaptainCandidate). None and
            malformed elements are allowed.
        optimize: Caller promises clean numeric signals; enables the
            vectorized path. Results are identical to the guarded path.
        in_place: Write captain_score into the caller's records instead of
            copies.
        config: Scoring constants

    Returns:
        List of the same length and order as records. Malformed elements
        become {"captain_score": 0.0}.
    """
    elements = list(records) if records is not None else []
    if not elements:
        return []

    if optimize:
        scored = _score_fast(elements, in_place, config)
        if scored is not None:
            return scored
        logger.debug("Fast path preconditions not met, using guarded scoring")

    return _score_guarded(elements, in_place, config)


def _score_key(value: Any) -> float:
    """Ranking value of a captain_score: clamped to [0, 100], 0.0 when missing or non-finite."""
    score = sanitize_value(value, (-math.inf, math.inf), FALLBACK_SCORE)
    return min(max(score, MIN_SCORE), MAX_SCORE)


def _record_score_key(record: Any) -> float:
    return _score_key(read_field(record, SCORE_FIELD))


def _valid_n(n: Any) -> bool:
    return isinstance(n, numbers.Real) and not isinstance(n, bool) and n > 0


def top_n(records: Optional[Iterable[Any]], n: Any = 5) -> List[Any]:
    """Get the n highest-scoring records, descending.

    Ties keep their original relative order. n <= 0 (or not a number)
    returns []; n larger than the pool returns the whole pool sorted.
    """
    if records is None or not _valid_n(n):
        return []

    # sorted() is stable with reverse=True
    ranked = sorted(records, key=_record_score_key, reverse=True)
    if n >= len(ranked):
        return ranked
    return ranked[: int(n)]


def score_frame(
    df: pd.DataFrame,
    optimize: bool = True,
    config: ScoringConfig = DEFAULT_SCORING,
) -> pd.DataFrame:
    """Score a DataFrame of candidates.

    Every row counts as a player record. Missing signal columns use the
    defaults. Numeric columns are sanitized vectorized when optimize is
    set; other columns element-wise.

    Args:
        df: One row per candidate, columns as in CaptainCandidate
        optimize: Vectorize numeric columns
        config: Scoring constants

    Returns:
        Copy of df with a captain_score column
    """
    out = df.copy()
    n_rows = len(out)

    sanitized = {}
    for name, key, bounds, default, integral in signal_rules(config):
        if key not in out.columns:
            sanitized[name] = np.full(n_rows, float(default))
            continue
        values = out[key].to_numpy()
        if optimize and is_numeric_dtype(values):
            sanitized[name] = sanitize_array(values, bounds, default, integral)
        else:
            sanitized[name] = np.array(
                [sanitize_value(v, bounds, default, integral) for v in out[key].tolist()],
                dtype=float,
            )

    if n_rows == 0:
        out[SCORE_FIELD] = pd.Series(dtype=float)
        return out

    out[SCORE_FIELD] = finalize_scores(
        composite_scores(
            sanitized["form"],
            sanitized["fixture_difficulty"],
            sanitized["xgi_per_90"],
            sanitized["minutes_risk"],
            config,
        )
    )
    logger.debug(f"Scored DataFrame with {n_rows} candidates")
    return out


def top_n_frame(df: pd.DataFrame, n: Any = 5) -> pd.DataFrame:
    """DataFrame version of top_n (stable descending by captain_score).

    Ranks with the same key as top_n: scores clamped to [0, 100], missing
    or non-finite scores count as 0.
    """
    if SCORE_FIELD not in df.columns:
        raise ValueError(f"DataFrame has no '{SCORE_FIELD}' column; run score_frame first")
    if not _valid_n(n):
        return df.iloc[0:0]

    keys = np.array([_score_key(value) for value in df[SCORE_FIELD].tolist()], dtype=float)
    ranked = df.iloc[np.argsort(-keys, kind="stable")]
    if n >= len(ranked):
        return ranked
    return ranked.head(int(n))
