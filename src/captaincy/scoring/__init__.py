"""Captain scoring engine.

Score function, batch processor, top-N selection and benchmark.
Pure and stateless: no I/O, no caching, nothing retained between calls.

Public API:
    calculate_captain_score - One player's signals -> score in [0, 100]
    score_all - Score a candidate pool (never raises, never drops)
    top_n - Highest-scoring candidates, stable on ties
    score_frame, top_n_frame - DataFrame equivalents
    benchmark - Time one batch pass against the 100 ms budget
"""

from captaincy.scoring.score import calculate_captain_score, score_signal
from captaincy.scoring.batch import score_all, score_frame, top_n, top_n_frame
from captaincy.scoring.benchmark import BenchmarkResult, benchmark, generate_candidates

__all__ = [
    "calculate_captain_score",
    "score_signal",
    "score_all",
    "score_frame",
    "top_n",
    "top_n_frame",
    "BenchmarkResult",
    "benchmark",
    "generate_candidates",
]
