"""
Captaincy Showdown - Captain Scoring for Fantasy Premier League

One question per gameweek: who gets the armband?
One answer: a bounded 0-100 captain score per player.

Structure:
    config       - Fixed scoring constants and runtime settings
    data/        - Pydantic schemas and input sanitization
    scoring/     - Score function, batch processor, top-N, benchmark
    decisions/   - Captain pick, leaderboard sorting, head-to-head comparison

Usage:
    from captaincy.scoring import score_all, top_n
    from captaincy.decisions import pick_captain, compare_candidates
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
