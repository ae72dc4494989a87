"""Pydantic schemas for captain scoring.

Models:
    PlayerSignal - The four scoring signals, sanitized on validation
    CaptainCandidate - Player record with identity fields and captain_score

Record layout (dicts and CaptainCandidate share it):
    identity: player_id, name, team, position, price, ownership, expected_ownership
    signals:  form_score, fixture_difficulty, xgi_per_90, minutes_risk
    output:   captain_score

Usage:
    from captaincy.data.schemas import CaptainCandidate, PlayerSignal

    candidate = CaptainCandidate.model_validate(row)
    signal = candidate.signal()
    print(signal.form, signal.fixture_difficulty)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from captaincy.config import (
    DEFAULT_SCORING,
    FIXTURE_RANGE,
    FORM_RANGE,
    MINUTES_RISK_RANGE,
    XGI_RANGE,
    ScoringConfig,
)
from captaincy.data.validation import sanitize_value

# Signal name -> key used on candidate records
SIGNAL_RECORD_KEYS = {
    "form": "form_score",
    "fixture_difficulty": "fixture_difficulty",
    "xgi_per_90": "xgi_per_90",
    "minutes_risk": "minutes_risk",
}


def _config(info: ValidationInfo) -> ScoringConfig:
    context = info.context or {}
    return context.get("config", DEFAULT_SCORING)


def read_field(record: Any, key: str, default: Any = None) -> Any:
    """Read a field from a dict-like record or a model instance."""
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


class PlayerSignal(BaseModel):
    """Sanitized scoring inputs for one player.

    Validation never fails on bad values: each field is replaced by the
    config default when missing, non-numeric, non-finite or out of range.
    """

    model_config = ConfigDict(frozen=True)

    form: float = DEFAULT_SCORING.default_form
    fixture_difficulty: int = DEFAULT_SCORING.default_fixture_difficulty
    xgi_per_90: float = DEFAULT_SCORING.default_xgi_per_90
    minutes_risk: float = DEFAULT_SCORING.default_minutes_risk

    @field_validator("form", mode="before")
    @classmethod
    def _sanitize_form(cls, value: Any, info: ValidationInfo) -> float:
        return sanitize_value(value, FORM_RANGE, _config(info).default_form)

    @field_validator("fixture_difficulty", mode="before")
    @classmethod
    def _sanitize_fixture(cls, value: Any, info: ValidationInfo) -> int:
        default = _config(info).default_fixture_difficulty
        return int(sanitize_value(value, FIXTURE_RANGE, default, integral=True))

    @field_validator("xgi_per_90", mode="before")
    @classmethod
    def _sanitize_xgi(cls, value: Any, info: ValidationInfo) -> float:
        return sanitize_value(value, XGI_RANGE, _config(info).default_xgi_per_90)

    @field_validator("minutes_risk", mode="before")
    @classmethod
    def _sanitize_risk(cls, value: Any, info: ValidationInfo) -> float:
        return sanitize_value(value, MINUTES_RISK_RANGE, _config(info).default_minutes_risk)

    @classmethod
    def from_values(
        cls,
        values: Mapping[str, Any],
        config: ScoringConfig = DEFAULT_SCORING,
    ) -> "PlayerSignal":
        """Build from a mapping keyed by signal name (form, xgi_per_90, ...)."""
        data = {name: values.get(name) for name in SIGNAL_RECORD_KEYS}
        return cls.model_validate(data, context={"config": config})

    @classmethod
    def from_record(
        cls,
        record: Any,
        config: ScoringConfig = DEFAULT_SCORING,
    ) -> "PlayerSignal":
        """Build from a candidate record (dict or CaptainCandidate)."""
        data = {
            name: read_field(record, key)
            for name, key in SIGNAL_RECORD_KEYS.items()
        }
        return cls.model_validate(data, context={"config": config})


class CaptainCandidate(BaseModel):
    """Captain candidate carried from data loading to the leaderboard.

    Identity fields are opaque to scoring. captain_score is overwritten
    by the batch processor.
    """

    model_config = ConfigDict(extra="allow")

    player_id: Optional[int] = None
    name: str = ""
    team: str = ""
    position: str = ""
    price: float = 0.0
    ownership: float = 0.0
    expected_ownership: Optional[float] = None
    # Raw signals, kept as given; PlayerSignal is the only sanitization step
    form_score: Optional[Any] = None
    fixture_difficulty: Optional[Any] = None
    minutes_risk: Optional[Any] = None
    xgi_per_90: Optional[Any] = None
    captain_score: float = 0.0

    def signal(self, config: ScoringConfig = DEFAULT_SCORING) -> PlayerSignal:
        """Get sanitized scoring signals for this candidate."""
        return PlayerSignal.from_record(self, config)


# Any of these keys marks a mapping as a player record
PLAYER_FIELDS = frozenset(CaptainCandidate.model_fields) - {"captain_score"}


def signal_rules(config: ScoringConfig = DEFAULT_SCORING):
    """Sanitization rule per signal.

    Returns:
        Tuple of (signal name, record key, bounds, default, integral)
    """
    return (
        ("form", "form_score", FORM_RANGE, config.default_form, False),
        ("fixture_difficulty", "fixture_difficulty", FIXTURE_RANGE,
         config.default_fixture_difficulty, True),
        ("xgi_per_90", "xgi_per_90", XGI_RANGE, config.default_xgi_per_90, False),
        ("minutes_risk", "minutes_risk", MINUTES_RISK_RANGE, config.default_minutes_risk, False),
    )
