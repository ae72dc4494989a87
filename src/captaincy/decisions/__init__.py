"""Captain decision functions.

Built on the scoring engine; both the CLI and any UI call these.

Decision Rule:
- Captain: argmax(captain_score), first listed wins ties
"""

from .captain import filter_candidates, pick_captain, sort_candidates
from .comparison import CandidateComparison, compare_candidates

__all__ = [
    "pick_captain",
    "sort_candidates",
    "filter_candidates",
    "CandidateComparison",
    "compare_candidates",
]
