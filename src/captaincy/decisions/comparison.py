"""Head-to-head captain comparison.

Compares two scored candidates the way the comparison view presents
them: which one has the better captain score, and the price and
ownership gaps.

Usage:
    from captaincy.decisions.comparison import compare_candidates

    result = compare_candidates(haaland, salah)
    print(result.better_name, result.score_diff)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from captaincy.data.schemas import read_field
from captaincy.data.validation import sanitize_value

_ANY_NUMBER = (float("-inf"), float("inf"))
TIE = "tie"


def _number(record: Any, field: str) -> float:
    return sanitize_value(read_field(record, field), _ANY_NUMBER, 0.0)


@dataclass
class CandidateComparison:
    """Result of comparing candidate A against candidate B.

    Differences are A minus B. Equal scores are a tie: better is "tie"
    and better_name is "Tie".
    """

    better: str
    better_name: str
    score_diff: float
    price_diff: float
    ownership_diff: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "better": self.better,
            "better_name": self.better_name,
            "score_diff": round(self.score_diff, 1),
            "price_diff": round(self.price_diff, 1),
            "ownership_diff": round(self.ownership_diff, 1),
        }


def compare_candidates(candidate_a: Any, candidate_b: Any) -> CandidateComparison:
    """Compare two scored candidates.

    Args:
        candidate_a: Scored record (dict or CaptainCandidate)
        candidate_b: Scored record

    Returns:
        CandidateComparison
    """
    score_diff = _number(candidate_a, "captain_score") - _number(candidate_b, "captain_score")
    if score_diff == 0:
        better, better_name = TIE, "Tie"
    else:
        better = "A" if score_diff > 0 else "B"
        winner = candidate_a if better == "A" else candidate_b
        better_name = str(read_field(winner, "name") or "Unknown")

    return CandidateComparison(
        better=better,
        better_name=better_name,
        score_diff=score_diff,
        price_diff=_number(candidate_a, "price") - _number(candidate_b, "price"),
        ownership_diff=_number(candidate_a, "ownership") - _number(candidate_b, "ownership"),
    )
