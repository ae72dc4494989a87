"""Pytest fixtures/config for captain scoring tests."""

import os
import sys

import pytest


def pytest_sessionstart(session) -> None:  # type: ignore[unused-argument]
    repo_root = os.path.dirname(os.path.dirname(__file__))
    src_path = os.path.join(repo_root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture
def sample_players():
    """Four reference captain candidates for one gameweek."""
    return [
        {
            # In form, easy fixture
            "player_id": 1,
            "name": "Erling Haaland",
            "team": "Manchester City",
            "position": "FWD",
            "price": 14.5,
            "ownership": 85.5,
            "expected_ownership": 90.0,
            "form_score": 8.5,
            "fixture_difficulty": 2,
            "minutes_risk": 10,
            "xgi_per_90": 1.8,
            "captain_score": 0,
        },
        {
            # Tough fixture, nailed
            "player_id": 2,
            "name": "Mohamed Salah",
            "team": "Liverpool",
            "position": "MID",
            "price": 13.2,
            "ownership": 65.3,
            "expected_ownership": 68.0,
            "form_score": 7.0,
            "fixture_difficulty": 4,
            "minutes_risk": 5,
            "xgi_per_90": 1.2,
            "captain_score": 0,
        },
        {
            # Rotation risk
            "player_id": 3,
            "name": "Phil Foden",
            "team": "Manchester City",
            "position": "MID",
            "price": 10.5,
            "ownership": 25.0,
            "expected_ownership": 22.0,
            "form_score": 6.5,
            "fixture_difficulty": 3,
            "minutes_risk": 40,
            "xgi_per_90": 1.0,
            "captain_score": 0,
        },
        {
            # Out of form, nailed
            "player_id": 4,
            "name": "Harry Kane",
            "team": "Bayern Munich",
            "position": "FWD",
            "price": 12.8,
            "ownership": 45.0,
            "expected_ownership": 40.0,
            "form_score": 4.0,
            "fixture_difficulty": 3,
            "minutes_risk": 0,
            "xgi_per_90": 0.8,
            "captain_score": 0,
        },
    ]
