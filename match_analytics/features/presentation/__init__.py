"""Presentation feature module.

This module provides date grouping, column sorting, windowing and
display formatting for aggregates and match lists.
"""

from .formatting import (
    arena_placement,
    display_game_mode,
    format_game_duration,
    role_display_name,
)
from .selectors import (
    MatchWindow,
    group_matches_by_date,
    match_day,
    sort_champion_stats,
    sort_role_stats,
    top_champions,
    win_loss,
)

__all__ = [
    # Formatting
    "arena_placement",
    "display_game_mode",
    "format_game_duration",
    "role_display_name",
    # Selectors
    "MatchWindow",
    "group_matches_by_date",
    "match_day",
    "sort_champion_stats",
    "sort_role_stats",
    "top_champions",
    "win_loss",
]
