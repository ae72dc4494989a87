#!/usr/bin/env python
"""Captain Leaderboard - CLI wrapper for the scoring engine.

Decision Rule: Captain = argmax(captain_score)

CONTRACT: This script MUST score through score_frame() and pick through
top_n_frame(). It does no scoring of its own.

Usage:
    PYTHONPATH=src python scripts/decisions/captain_cli.py --csv players.csv
    PYTHONPATH=src python scripts/decisions/captain_cli.py --csv players.csv --top 10 --position MID
    PYTHONPATH=src python scripts/decisions/captain_cli.py --benchmark 650
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

import pandas as pd

from captaincy.config import LOG_LEVEL
from captaincy.decisions import filter_candidates
from captaincy.scoring import benchmark, generate_candidates, score_frame, top_n_frame

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def run_benchmark(count: int, optimize: bool) -> int:
    result = benchmark(generate_candidates(count, seed=42), optimize=optimize)
    result.print_summary()
    return 0 if result.meets_performance_target else 1


def main():
    parser = argparse.ArgumentParser(description="Rank captain candidates for a gameweek")
    parser.add_argument("--csv", type=Path, default=None, help="Candidate CSV (one row per player)")
    parser.add_argument("--top", type=int, default=5, help="Number of candidates to show")
    parser.add_argument("--position", type=str, default=None, help="Position code or label (e.g. MID)")
    parser.add_argument("--optimize", action="store_true", help="Use the vectorized scoring path")
    parser.add_argument("--benchmark", type=int, default=None, metavar="N",
                        help="Benchmark scoring on N synthetic candidates instead")
    args = parser.parse_args()

    if args.benchmark is not None:
        return run_benchmark(args.benchmark, args.optimize)

    if args.csv is None:
        parser.error("--csv is required unless --benchmark is given")

    try:
        if not args.csv.exists():
            raise FileNotFoundError(f"Candidate file not found: {args.csv}")
        candidates = pd.read_csv(args.csv)
        scored = score_frame(candidates, optimize=args.optimize)
        if args.position:
            kept = filter_candidates(scored.to_dict("records"), position=args.position)
            scored = pd.DataFrame(kept, columns=scored.columns)
        leaderboard = top_n_frame(scored, args.top)
    except (ValueError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1

    logger.info(f"Scored {len(candidates)} candidates from {args.csv}")

    print("\n" + "=" * 70)
    print("CAPTAIN LEADERBOARD")
    print("=" * 70)

    if leaderboard.empty:
        print("\nNo candidates.")
        print("=" * 70 + "\n")
        return 0

    captain = leaderboard.iloc[0]
    print("\n" + "-" * 70)
    print(f"🎯 CAPTAIN: {captain.get('name', 'Unknown')}")
    print(f"   Captain Score: {captain['captain_score']:.1f}")
    print("-" * 70)

    print(f"\nTop {len(leaderboard)} Candidates:")
    print("-" * 50)
    for i, (_, row) in enumerate(leaderboard.iterrows(), 1):
        marker = "👑" if i == 1 else "  "
        name = str(row.get("name", "Unknown"))
        team = str(row.get("team", ""))
        print(f"{marker} {i}. {name:22} ({team:12}) {row['captain_score']:5.1f}")

    print("=" * 70 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
