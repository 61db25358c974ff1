"""Pydantic models for per-player match records."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MatchRecord(BaseModel):
    """One player's performance in one match.

    Produced by the caller (or by ``MatchRecordTransformer``) and never
    mutated afterwards. Numeric fields are not range-checked here.
    """

    match_id: str = Field(..., alias="matchId")
    game_creation: int = Field(
        ..., alias="gameCreation", description="Epoch milliseconds"
    )
    game_duration: int = Field(..., alias="gameDuration", description="Seconds")
    game_mode: str = Field("", alias="gameMode")
    queue_id: int = Field(0, alias="queueId")

    champion_name: str = Field("", alias="championName")
    champion_id: int = Field(0, alias="championId")
    team_id: int = Field(0, alias="teamId")
    win: bool

    kills: int = 0
    deaths: int = 0
    assists: int = 0
    total_minions_killed: int = Field(
        0, alias="totalMinionsKilled", description="Lane plus neutral minions"
    )
    vision_score: int = Field(0, alias="visionScore")
    gold_earned: int = Field(0, alias="goldEarned")
    team_position: str = Field("", alias="teamPosition")

    items: Tuple[int, ...] = Field(default=(), description="Up to 7 slots, 0 = empty")
    summoner_spells: Tuple[int, ...] = Field(default=(), alias="summonerSpells")
    primary_rune: int = Field(0, alias="primaryRune")
    secondary_style: int = Field(0, alias="secondaryStyle")
    champ_level: int = Field(0, alias="champLevel")

    damage_to_champions: int = Field(0, alias="damageToChampions")
    damage_to_objectives: int = Field(0, alias="damageToObjectives")
    damage_to_turrets: int = Field(0, alias="damageToTurrets")
    total_damage_taken: int = Field(0, alias="totalDamageTaken")

    team_kills: Optional[int] = Field(
        None, alias="teamKills", description="Kills of the player's team, if known"
    )
    kill_participation: Optional[float] = Field(
        None,
        alias="killParticipation",
        description="Upstream kill participation ratio, used when team kills are unknown",
    )
    placement: Optional[int] = Field(
        None, description="Arena team placement, supplied by the caller"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class NormalizedMatch(MatchRecord):
    """A match record with its derived per-match metrics."""

    cs_per_min: float = Field(..., alias="csPerMin")
    kda: float
    display_role: str = Field(..., alias="displayRole")
    kill_participation_ratio: float = Field(..., alias="killParticipationRatio")
