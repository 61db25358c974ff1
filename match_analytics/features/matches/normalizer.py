"""
Per-match derived metrics.

Every function here is total: zero durations, zero deaths and zero team
kills produce defined values instead of errors.
"""

from typing import Optional

from match_analytics.core.enums import DisplayRole, GameMode, QueueType
from match_analytics.utils.statistics import kda_ratio, per_minute, safe_divide
from .models import MatchRecord, NormalizedMatch

# Raw teamPosition / lane tags -> display bucket
POSITION_BUCKETS = {
    "TOP": DisplayRole.TOP,
    "JUNGLE": DisplayRole.JUNGLE,
    "MID": DisplayRole.MID,
    "MIDDLE": DisplayRole.MID,
    "BOT": DisplayRole.BOT,
    "BOTTOM": DisplayRole.BOT,
    "ADC": DisplayRole.BOT,
    "SUPPORT": DisplayRole.SUPPORT,
    "UTILITY": DisplayRole.SUPPORT,
}

ARENA_MODES = {GameMode.CHERRY.value, GameMode.ARENA.value}


def cs_per_min(total_minions_killed: int, game_duration: int) -> float:
    """CS per minute; 0 for a zero-length game."""
    return per_minute(total_minions_killed, game_duration)


def calculate_kda(kills: int, deaths: int, assists: int) -> float:
    """KDA with zero deaths treated as a denominator of 1."""
    return kda_ratio(kills, deaths, assists)


def kill_participation(kills: int, assists: int, team_kills: int) -> float:
    """Share of the team's kills the player took part in; 0 if the team had none."""
    return safe_divide(kills + assists, team_kills)


def is_arena(game_mode: Optional[str], queue_id: Optional[int] = None) -> bool:
    """Arena is reported as CHERRY, ARENA, or queue 1700 with any mode."""
    return (game_mode or "").upper() in ARENA_MODES or queue_id == QueueType.ARENA


def display_role(
    team_position: Optional[str],
    game_mode: Optional[str] = None,
    queue_id: Optional[int] = None,
) -> str:
    """
    Map a raw position tag onto its display bucket.

    Modes without lanes (ARAM, Arena) use the mode as the role. Unknown
    tags pass through unchanged; a missing tag becomes "Unknown".

    Args:
        team_position: Raw teamPosition / lane tag
        game_mode: Match game mode
        queue_id: Match queue id

    Returns:
        Display bucket name
    """
    if is_arena(game_mode, queue_id):
        return DisplayRole.ARENA.value
    if (game_mode or "").upper() == GameMode.ARAM:
        return DisplayRole.ARAM.value

    if not team_position:
        return DisplayRole.UNKNOWN.value

    bucket = POSITION_BUCKETS.get(team_position.upper())
    return bucket.value if bucket is not None else team_position


def normalize_match(record: MatchRecord) -> NormalizedMatch:
    """Attach the derived per-match metrics to a record."""
    if record.team_kills is not None:
        participation = kill_participation(record.kills, record.assists, record.team_kills)
    else:
        participation = record.kill_participation or 0.0

    return NormalizedMatch(
        **record.model_dump(),
        cs_per_min=cs_per_min(record.total_minions_killed, record.game_duration),
        kda=calculate_kda(record.kills, record.deaths, record.assists),
        display_role=display_role(record.team_position, record.game_mode, record.queue_id),
        kill_participation_ratio=participation,
    )
