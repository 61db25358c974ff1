"""
Match Analytics Package.

This package computes per-player performance analytics from match records
and resolves game-asset identifiers onto image references.
"""

from .core import get_global_settings, setup_logging
from .features.matches import MatchRecord, MatchRecordTransformer, normalize_match
from .features.player_analysis import (
    AggregateResult,
    ChampionStats,
    MatchAggregator,
    OverallStats,
    RecentGamesService,
    RoleStats,
    aggregate,
)
from .features.presentation import (
    MatchWindow,
    group_matches_by_date,
    sort_champion_stats,
)
from .features.static_data import (
    SENTINEL,
    ImageRef,
    ReferenceSnapshot,
    SnapshotHolder,
    SnapshotTransformer,
    resolve_champion,
    resolve_item,
    resolve_rune,
    resolve_spell,
)

__version__ = "1.0.0"

__all__ = [
    "get_global_settings",
    "setup_logging",
    "MatchRecord",
    "MatchRecordTransformer",
    "normalize_match",
    "AggregateResult",
    "ChampionStats",
    "MatchAggregator",
    "OverallStats",
    "RecentGamesService",
    "RoleStats",
    "aggregate",
    "MatchWindow",
    "group_matches_by_date",
    "sort_champion_stats",
    "SENTINEL",
    "ImageRef",
    "ReferenceSnapshot",
    "SnapshotHolder",
    "SnapshotTransformer",
    "resolve_champion",
    "resolve_item",
    "resolve_rune",
    "resolve_spell",
]
