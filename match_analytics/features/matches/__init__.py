"""Matches feature module.

This module provides the match record model, per-match derived metrics
and extraction of records from Match-v5 payloads.
"""

from .models import MatchRecord, NormalizedMatch
from .normalizer import (
    calculate_kda,
    cs_per_min,
    display_role,
    is_arena,
    kill_participation,
    normalize_match,
)
from .transformers import MatchRecordTransformer

__all__ = [
    # Models
    "MatchRecord",
    "NormalizedMatch",
    # Normalizer
    "calculate_kda",
    "cs_per_min",
    "display_role",
    "is_arena",
    "kill_participation",
    "normalize_match",
    # Transformers
    "MatchRecordTransformer",
]
