"""Data transformation utilities for converting match payloads into records.

This module turns an already-decoded Match-v5 payload into the
``MatchRecord`` of one participant.
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog
from pydantic import ValidationError

from match_analytics.core.exceptions import MatchExtractionError
from match_analytics.features.static_data.models import ReferenceSnapshot
from .models import MatchRecord
from .schemas import MatchDTO, ParticipantDTO, PerksDTO

logger = structlog.get_logger(__name__)


class MatchRecordTransformer:
    """Utility for extracting a player's record from match payloads."""

    @staticmethod
    def parse_match(payload: Dict[str, Any]) -> MatchDTO:
        """Validate a raw match payload.

        Raises:
            MatchExtractionError: If required fields are missing or mistyped
        """
        try:
            return MatchDTO.model_validate(payload)
        except ValidationError as e:
            match_id = None
            if isinstance(payload, dict):
                match_id = (payload.get("metadata") or {}).get("matchId")
            logger.warning(
                "Invalid match payload",
                match_id=match_id,
                error_count=e.error_count(),
            )
            raise MatchExtractionError(
                "match payload failed validation",
                match_id=match_id,
                original_error=e,
            ) from e

    @staticmethod
    def find_participant(match: MatchDTO, puuid: str) -> ParticipantDTO:
        """Find a participant by PUUID.

        Raises:
            MatchExtractionError: If the player did not take part in the match
        """
        for participant in match.info.participants:
            if participant.puuid == puuid:
                return participant
        raise MatchExtractionError(
            "player not found in match participants",
            match_id=match.match_id,
            puuid=puuid,
        )

    @staticmethod
    def team_kills(match: MatchDTO, team_id: int) -> int:
        """Total kills of one team."""
        return sum(p.kills for p in match.info.participants if p.team_id == team_id)

    @staticmethod
    def extract_runes(perks: Optional[PerksDTO]) -> Dict[str, int]:
        """Extract the keystone and the secondary style id.

        Example:
            >>> perks = PerksDTO(styles=[
            ...     {"description": "primaryStyle", "style": 8000,
            ...      "selections": [{"perk": 8005}]},
            ...     {"description": "subStyle", "style": 8400, "selections": []},
            ... ])
            >>> MatchRecordTransformer.extract_runes(perks)
            {'primary_rune': 8005, 'secondary_style': 8400}
        """
        runes = {"primary_rune": 0, "secondary_style": 0}
        if perks is None:
            return runes

        for style in perks.styles:
            if style.description == "primaryStyle" and style.selections:
                runes["primary_rune"] = style.selections[0].perk
            if style.description == "subStyle":
                runes["secondary_style"] = style.style
        return runes

    @staticmethod
    def resolve_champion_name(
        participant: ParticipantDTO, snapshot: Optional[ReferenceSnapshot]
    ) -> str:
        """Backfill an empty champion name from the snapshot when possible."""
        if participant.champion_name or snapshot is None:
            return participant.champion_name
        champion = snapshot.champions.get(str(participant.champion_id))
        return champion.name if champion is not None else ""

    @staticmethod
    def extract_record(
        payload: Dict[str, Any],
        puuid: str,
        snapshot: Optional[ReferenceSnapshot] = None,
    ) -> MatchRecord:
        """
        Build the MatchRecord of one player from a match payload.

        Args:
            payload: Decoded Match-v5 payload (``metadata`` + ``info``)
            puuid: Player PUUID
            snapshot: Reference snapshot used to backfill a missing champion name

        Returns:
            MatchRecord for the player

        Raises:
            MatchExtractionError: If the payload is invalid or the player is absent
        """
        match = MatchRecordTransformer.parse_match(payload)
        participant = MatchRecordTransformer.find_participant(match, puuid)

        upstream_kp = (
            participant.challenges.kill_participation
            if participant.challenges is not None
            else None
        )

        return MatchRecord(
            match_id=match.match_id,
            game_creation=match.info.game_creation,
            game_duration=match.info.game_duration,
            game_mode=match.info.game_mode,
            queue_id=match.info.queue_id,
            champion_name=MatchRecordTransformer.resolve_champion_name(
                participant, snapshot
            ),
            champion_id=participant.champion_id,
            team_id=participant.team_id,
            win=participant.win,
            kills=participant.kills,
            deaths=participant.deaths,
            assists=participant.assists,
            total_minions_killed=participant.total_minions_killed
            + participant.neutral_minions_killed,
            vision_score=participant.vision_score,
            gold_earned=participant.gold_earned,
            team_position=participant.team_position or "",
            items=tuple(participant.items),
            summoner_spells=(participant.summoner1_id, participant.summoner2_id),
            champ_level=participant.champ_level,
            damage_to_champions=participant.total_damage_dealt_to_champions,
            damage_to_objectives=participant.damage_dealt_to_objectives,
            damage_to_turrets=participant.damage_dealt_to_turrets,
            total_damage_taken=participant.total_damage_taken,
            team_kills=MatchRecordTransformer.team_kills(match, participant.team_id),
            kill_participation=upstream_kp,
            placement=participant.placement,
            **MatchRecordTransformer.extract_runes(participant.perks),
        )

    @staticmethod
    def extract_records(
        payloads: Iterable[Dict[str, Any]],
        puuid: str,
        snapshot: Optional[ReferenceSnapshot] = None,
    ) -> List[MatchRecord]:
        """Extract records from many payloads, skipping the ones that fail.

        Order of the input is preserved.
        """
        records: List[MatchRecord] = []
        for payload in payloads:
            try:
                records.append(
                    MatchRecordTransformer.extract_record(payload, puuid, snapshot)
                )
            except MatchExtractionError as e:
                logger.warning(
                    "Skipping match payload",
                    error=str(e),
                    **e.context,
                )
        return records
