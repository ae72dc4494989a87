"""Tests for the captain score function.

CONTRACT:
    - Score is always a finite number in [0, 100], one decimal place
    - Missing/invalid signals fall back to defaults, never raise
    - More form never lowers the score; more minutes risk never raises it
"""

import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from captaincy.config import DEFAULT_SCORING, ScoringConfig
from captaincy.data.schemas import PlayerSignal
from captaincy.scoring.score import (
    calculate_captain_score,
    composite_score,
    composite_scores,
    finalize_score,
)

DEFAULT_SIGNAL_SCORE = 41.5  # form 5, fixture 3, xGI 0.5, risk 0


def _signal(form=5.0, fixture_difficulty=3, xgi_per_90=0.5, minutes_risk=0.0):
    return {
        "form": form,
        "fixture_difficulty": fixture_difficulty,
        "xgi_per_90": xgi_per_90,
        "minutes_risk": minutes_risk,
    }


class TestScoreValues:
    """Known inputs produce known scores."""

    def test_reference_players(self):
        haaland = calculate_captain_score(_signal(8.5, 2, 1.8, 10))
        salah = calculate_captain_score(_signal(7.0, 4, 1.2, 5))
        foden = calculate_captain_score(_signal(6.5, 3, 1.0, 40))
        kane = calculate_captain_score(_signal(4.0, 3, 0.8, 0))

        assert haaland == pytest.approx(82.8, abs=0.1)
        assert salah == pytest.approx(53.4, abs=0.1)
        assert foden == pytest.approx(48.2, abs=0.1)
        assert kane == pytest.approx(41.2, abs=0.1)

    def test_all_defaults(self):
        assert calculate_captain_score(_signal()) == pytest.approx(DEFAULT_SIGNAL_SCORE)

    def test_best_possible_inputs_clamp_to_100(self):
        """form 10, easiest fixture, capped xGI, nailed -> 110 before clamping."""
        assert calculate_captain_score(_signal(10.0, 1, 2.5, 0)) == 100.0

    def test_worst_valid_inputs_stay_positive(self):
        score = calculate_captain_score(_signal(0.0, 5, 0.0, 100))
        assert score == pytest.approx(0.7, abs=0.05)

    def test_result_has_one_decimal(self):
        score = calculate_captain_score(_signal(7.3, 2, 0.91, 17))
        assert score == round(score, 1)

    def test_xgi_is_capped_at_ceiling(self):
        capped = calculate_captain_score(_signal(xgi_per_90=2.5))
        above = calculate_captain_score(_signal(xgi_per_90=4.0))
        assert above == capped

    def test_easier_fixture_scores_higher(self):
        scores = [calculate_captain_score(_signal(fixture_difficulty=d)) for d in range(1, 6)]
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == 5

    def test_risk_can_cut_at_most_80_percent(self):
        nailed = composite_score(8.0, 2, 1.5, 0.0)
        absent = composite_score(8.0, 2, 1.5, 100.0)
        assert absent == pytest.approx(nailed * 0.2)

    def test_accepts_player_signal(self):
        signal = PlayerSignal(form=8.5, fixture_difficulty=2, xgi_per_90=1.8, minutes_risk=10)
        assert calculate_captain_score(signal) == calculate_captain_score(_signal(8.5, 2, 1.8, 10))


class TestScoreRobustness:
    """Invalid input degrades to defaults, never raises."""

    @pytest.mark.parametrize("bad_value", [
        None, float("nan"), float("inf"), float("-inf"), "invalid", "7", [], {}, True,
    ])
    def test_invalid_form_uses_default(self, bad_value):
        score = calculate_captain_score(_signal(form=bad_value))
        assert score == pytest.approx(DEFAULT_SIGNAL_SCORE)

    @pytest.mark.parametrize("form", [-0.1, 10.01, 100])
    def test_out_of_range_form_uses_default(self, form):
        assert calculate_captain_score(_signal(form=form)) == pytest.approx(DEFAULT_SIGNAL_SCORE)

    @pytest.mark.parametrize("difficulty", [0, 6, 2.5, "easy", None, float("nan")])
    def test_invalid_fixture_uses_default(self, difficulty):
        score = calculate_captain_score(_signal(fixture_difficulty=difficulty))
        assert score == pytest.approx(DEFAULT_SIGNAL_SCORE)

    def test_integral_float_fixture_is_valid(self):
        assert calculate_captain_score(_signal(fixture_difficulty=2.0)) == (
            calculate_captain_score(_signal(fixture_difficulty=2))
        )

    @pytest.mark.parametrize("xgi", [-0.5, float("nan"), "1.2", None])
    def test_invalid_xgi_uses_default(self, xgi):
        assert calculate_captain_score(_signal(xgi_per_90=xgi)) == pytest.approx(DEFAULT_SIGNAL_SCORE)

    @pytest.mark.parametrize("risk", [-1, 100.5, float("nan"), "high", None])
    def test_invalid_risk_uses_default(self, risk):
        assert calculate_captain_score(_signal(minutes_risk=risk)) == pytest.approx(DEFAULT_SIGNAL_SCORE)

    def test_all_fields_invalid(self):
        score = calculate_captain_score({
            "form": float("nan"),
            "fixture_difficulty": "invalid",
            "xgi_per_90": None,
        })
        assert isinstance(score, float)
        assert score == pytest.approx(DEFAULT_SIGNAL_SCORE)

    @pytest.mark.parametrize("signal", [None, 42, "player", [], {}])
    def test_non_mapping_signal_scores_as_defaults(self, signal):
        assert calculate_captain_score(signal) == pytest.approx(DEFAULT_SIGNAL_SCORE)

    def test_numpy_scalars_are_valid(self):
        native = calculate_captain_score(_signal(8.5, 2, 1.8, 10))
        numpy_typed = calculate_captain_score(
            _signal(np.float64(8.5), np.int64(2), np.float32(1.8), np.int32(10))
        )
        assert numpy_typed == pytest.approx(native, abs=0.1)


class TestScoreProperties:
    """Range, determinism and monotonicity over grids of inputs."""

    FORMS = [i / 2 for i in range(21)]
    RISKS = [float(r) for r in range(0, 101, 5)]

    @pytest.mark.parametrize("difficulty", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("xgi", [0.0, 0.4, 1.1, 2.5, 3.0])
    def test_range(self, difficulty, xgi):
        for form in self.FORMS:
            for risk in self.RISKS:
                score = calculate_captain_score(_signal(form, difficulty, xgi, risk))
                assert 0.0 <= score <= 100.0
                assert math.isfinite(score)

    def test_deterministic(self):
        signal = _signal(6.7, 4, 0.93, 33.3)
        assert calculate_captain_score(signal) == calculate_captain_score(signal)

    @pytest.mark.parametrize("difficulty,xgi,risk", [
        (1, 0.0, 0.0), (3, 0.8, 20.0), (5, 2.0, 75.0), (2, 3.0, 100.0),
    ])
    def test_monotone_in_form(self, difficulty, xgi, risk):
        scores = [calculate_captain_score(_signal(f, difficulty, xgi, risk)) for f in self.FORMS]
        assert all(a <= b for a, b in zip(scores, scores[1:]))

    @pytest.mark.parametrize("form,difficulty,xgi", [
        (0.0, 5, 0.0), (5.0, 3, 0.5), (8.5, 2, 1.8), (10.0, 1, 2.5),
    ])
    def test_monotone_in_risk(self, form, difficulty, xgi):
        scores = [calculate_captain_score(_signal(form, difficulty, xgi, r)) for r in self.RISKS]
        assert all(a >= b for a, b in zip(scores, scores[1:]))


class TestVectorizedParity:
    """Array math must match the scalar math exactly."""

    def test_composite_scores_match_scalar(self):
        rng = np.random.default_rng(3)
        form = rng.random(200) * 10
        difficulty = rng.integers(1, 6, 200).astype(float)
        xgi = rng.random(200) * 3
        risk = rng.random(200) * 100

        vector = composite_scores(form, difficulty, xgi, risk)
        for i in range(200):
            scalar = composite_score(
                float(form[i]), int(difficulty[i]), float(xgi[i]), float(risk[i])
            )
            assert finalize_score(vector[i]) == finalize_score(scalar)


class TestScoringConfig:
    """Scoring constants are one immutable value."""

    def test_weights_sum_to_one(self):
        cfg = DEFAULT_SCORING
        assert cfg.form_weight + cfg.xgi_weight + cfg.fixture_weight == pytest.approx(1.0)

    def test_default_config_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_SCORING.form_weight = 0.9  # type: ignore[misc]

    def test_custom_defaults_apply_to_missing_fields(self):
        cautious = ScoringConfig(default_minutes_risk=50.0)
        assert calculate_captain_score({}, cautious) < calculate_captain_score({})
