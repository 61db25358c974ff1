"""Pydantic models for the Match-v5 payload fields the extractor reads."""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict


class ChallengesDTO(BaseModel):
    """Subset of participant challenge values."""

    kda: Optional[float] = None
    kill_participation: Optional[float] = Field(None, alias="killParticipation")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PerkSelectionDTO(BaseModel):
    """A selected perk."""

    perk: int

    model_config = ConfigDict(extra="ignore")


class PerkStyleDTO(BaseModel):
    """A perk style (primaryStyle or subStyle)."""

    description: str = ""
    style: int = 0
    selections: List[PerkSelectionDTO] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class PerksDTO(BaseModel):
    """Participant rune page."""

    styles: List[PerkStyleDTO] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class ParticipantDTO(BaseModel):
    """Match participant information."""

    puuid: str
    champion_id: int = Field(..., alias="championId")
    champion_name: str = Field("", alias="championName")
    team_id: int = Field(0, alias="teamId")
    win: bool

    kills: int = 0
    deaths: int = 0
    assists: int = 0
    total_minions_killed: int = Field(0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, alias="neutralMinionsKilled")
    vision_score: int = Field(0, alias="visionScore")
    gold_earned: int = Field(0, alias="goldEarned")
    champ_level: int = Field(0, alias="champLevel")

    team_position: Optional[str] = Field(None, alias="teamPosition")
    lane: Optional[str] = None

    item0: int = 0
    item1: int = 0
    item2: int = 0
    item3: int = 0
    item4: int = 0
    item5: int = 0
    item6: int = 0  # Trinket
    summoner1_id: int = Field(0, alias="summoner1Id")
    summoner2_id: int = Field(0, alias="summoner2Id")

    total_damage_dealt_to_champions: int = Field(
        0, alias="totalDamageDealtToChampions"
    )
    damage_dealt_to_objectives: int = Field(0, alias="damageDealtToObjectives")
    damage_dealt_to_turrets: int = Field(0, alias="damageDealtToTurrets")
    total_damage_taken: int = Field(0, alias="totalDamageTaken")

    placement: Optional[int] = None
    challenges: Optional[ChallengesDTO] = None
    perks: Optional[PerksDTO] = None

    @property
    def items(self) -> List[int]:
        """Item slots 0-6 in order."""
        return [
            self.item0,
            self.item1,
            self.item2,
            self.item3,
            self.item4,
            self.item5,
            self.item6,
        ]

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MatchInfoDTO(BaseModel):
    """Match information."""

    game_creation: int = Field(..., alias="gameCreation")
    game_duration: int = Field(..., alias="gameDuration")
    game_mode: str = Field("", alias="gameMode")
    queue_id: int = Field(0, alias="queueId")
    participants: List[ParticipantDTO]

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MatchMetadataDTO(BaseModel):
    """Match metadata."""

    match_id: str = Field(..., alias="matchId")
    participants: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MatchDTO(BaseModel):
    """Complete match data."""

    metadata: MatchMetadataDTO
    info: MatchInfoDTO

    @property
    def match_id(self) -> str:
        """Get match ID from metadata."""
        return self.metadata.match_id

    model_config = ConfigDict(extra="ignore")
