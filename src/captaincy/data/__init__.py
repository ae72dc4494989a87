"""Data module - schemas and input sanitization.

Public API:
    PlayerSignal - Sanitized four-signal tuple used for scoring
    CaptainCandidate - Player record carried through the pipeline
    sanitize_value, sanitize_array - Default-on-invalid coercion
"""

from captaincy.data.schemas import (
    PLAYER_FIELDS,
    SIGNAL_RECORD_KEYS,
    CaptainCandidate,
    PlayerSignal,
    read_field,
    signal_rules,
)
from captaincy.data.validation import sanitize_array, sanitize_value

__all__ = [
    "PLAYER_FIELDS",
    "SIGNAL_RECORD_KEYS",
    "CaptainCandidate",
    "PlayerSignal",
    "read_field",
    "signal_rules",
    "sanitize_array",
    "sanitize_value",
]
