"""Captain decision and leaderboard helpers.

Decision Rule: Captain = argmax(captain_score)
Ties go to the candidate listed first.

Key Functions:
    pick_captain - Highest captain_score in a scored pool
    sort_candidates - Leaderboard ordering by score, price, ownership or form
    filter_candidates - Narrow a pool by position and name/team search

Usage:
    from captaincy.scoring import score_all
    from captaincy.decisions.captain import pick_captain, sort_candidates

    scored = score_all(candidates)
    captain = pick_captain(scored)
    by_price = sort_candidates(scored, by="price")
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from captaincy.config import POSITION_LABELS
from captaincy.data.schemas import read_field
from captaincy.data.validation import sanitize_value
from captaincy.scoring.batch import top_n

# Sort option -> record field
SORT_FIELDS = {
    "score": "captain_score",
    "price": "price",
    "ownership": "ownership",
    "form": "form_score",
}

_ANY_NUMBER = (float("-inf"), float("inf"))


def pick_captain(records: Optional[Iterable[Any]]) -> Optional[Any]:
    """Apply the decision rule: argmax(captain_score).

    Returns:
        The top record, or None for an empty pool
    """
    best = top_n(records, 1)
    return best[0] if best else None


def sort_candidates(records: Optional[Iterable[Any]], by: str = "score") -> List[Any]:
    """Sort candidates descending by a leaderboard key.

    Missing or non-numeric values sort as 0. Equal values keep their
    original order.

    Args:
        records: Candidate records
        by: One of score, price, ownership, form

    Raises:
        ValueError: Unknown sort key
    """
    key = by.lower() if isinstance(by, str) else None
    if key not in SORT_FIELDS:
        raise ValueError(f"Unknown sort key '{by}'. Expected one of: {sorted(SORT_FIELDS)}")
    field = SORT_FIELDS[key]

    if records is None:
        return []
    return sorted(
        records,
        key=lambda record: sanitize_value(read_field(record, field), _ANY_NUMBER, 0.0),
        reverse=True,
    )


def _position_code(position: str) -> Optional[str]:
    """Resolve a position code (MID) or label (Midfielder) to its code."""
    wanted = position.strip().lower()
    for code, label in POSITION_LABELS.items():
        if wanted in (code.lower(), label.lower()):
            return code
    return None


def filter_candidates(
    records: Optional[Iterable[Any]],
    position: Optional[str] = None,
    query: Optional[str] = None,
) -> List[Any]:
    """Filter candidates by position and a free-text search.

    Args:
        records: Candidate records
        position: Position code or label; None or "All" keeps everyone
        query: Case-insensitive substring matched against name or team

    Returns:
        Matching records in original order
    """
    if records is None:
        return []
    filtered = list(records)

    if position and position.strip().lower() != "all":
        code = _position_code(position)
        if code is None:
            return []
        filtered = [r for r in filtered if read_field(r, "position") == code]

    if query and query.strip():
        needle = query.strip().lower()
        filtered = [
            r for r in filtered
            if needle in str(read_field(r, "name") or "").lower()
            or needle in str(read_field(r, "team") or "").lower()
        ]

    return filtered
