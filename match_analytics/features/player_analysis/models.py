"""Pydantic models for aggregated player statistics."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from match_analytics.features.matches.models import MatchRecord


class OverallStats(BaseModel):
    """Aggregate over a set of matches.

    ``kda`` is computed from summed kills/deaths/assists; CS and gold per
    minute are time-weighted over the Classic games of the set.
    """

    games_played: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = Field(0.0, ge=0.0, le=100.0)

    total_kills: int = 0
    total_deaths: int = 0
    total_assists: int = 0
    avg_kills: float = 0.0
    avg_deaths: float = 0.0
    avg_assists: float = 0.0
    kda: float = 0.0

    avg_game_duration: float = 0.0
    total_game_time: int = 0
    avg_vision_score: float = 0.0
    avg_cs_per_min: float = 0.0
    avg_gold_per_min: float = 0.0
    avg_damage_to_champions: float = 0.0
    avg_kill_participation: float = 0.0

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class RoleStats(OverallStats):
    """Aggregate for one display role bucket."""

    role: str


class ChampionStats(OverallStats):
    """Aggregate for one champion."""

    champion_name: str
    champion_id: int = 0
    best_kda: float = 0.0
    worst_kda: float = 0.0
    last_played: int = Field(0, description="Most recent gameCreation, epoch ms")


class AggregateResult(BaseModel):
    """The three aggregate views over one match set."""

    overall: OverallStats = Field(default_factory=OverallStats)
    by_role: Dict[str, RoleStats] = Field(default_factory=dict)
    by_champion: Dict[str, ChampionStats] = Field(default_factory=dict)

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class RecentGamesSummary(BaseModel):
    """Dashboard summary of a player's recent games."""

    puuid: str
    region: str = ""
    riot_id: str = ""
    total_matches: int = 0
    overall_stats: OverallStats = Field(default_factory=OverallStats)
    role_stats: Dict[str, RoleStats] = Field(default_factory=dict)
    champion_stats: Dict[str, ChampionStats] = Field(default_factory=dict)
    recent_matches: List[MatchRecord] = Field(default_factory=list)
    last_updated: int = Field(0, description="Epoch seconds")

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )
