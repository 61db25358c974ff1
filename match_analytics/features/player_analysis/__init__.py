"""Player analysis feature module.

This module aggregates match records into overall, per-role and
per-champion statistics and builds recent games summaries.
"""

from .aggregator import MatchAggregator, aggregate
from .models import (
    AggregateResult,
    ChampionStats,
    OverallStats,
    RecentGamesSummary,
    RoleStats,
)
from .service import RecentGamesService

__all__ = [
    # Aggregator
    "MatchAggregator",
    "aggregate",
    # Models
    "AggregateResult",
    "ChampionStats",
    "OverallStats",
    "RecentGamesSummary",
    "RoleStats",
    # Service
    "RecentGamesService",
]
