"""Recent games summary built on top of the match aggregator."""

import time
from typing import Iterable, Optional

import structlog

from match_analytics.features.matches.models import MatchRecord
from .aggregator import MatchAggregator
from .models import RecentGamesSummary

logger = structlog.get_logger(__name__)


class RecentGamesService:
    """Builds dashboard summaries of a player's recent games."""

    def __init__(self, aggregator: Optional[MatchAggregator] = None):
        """
        Initialize the service.

        Args:
            aggregator: Aggregator to use; a default one when omitted
        """
        self.aggregator = aggregator or MatchAggregator()

    def build_summary(
        self,
        matches: Iterable[MatchRecord],
        puuid: str,
        region: str = "",
        riot_id: str = "",
        now: Optional[int] = None,
    ) -> RecentGamesSummary:
        """
        Summarize a player's recent matches.

        Args:
            matches: Player's match records, newest first
            puuid: Player PUUID
            region: Platform the player was looked up on
            riot_id: "GameName#TagLine"
            now: Epoch seconds to stamp as ``last_updated``; current time if omitted

        Returns:
            RecentGamesSummary with the three aggregate views and the match list
        """
        records = list(matches)
        result = self.aggregator.aggregate(records)

        summary = RecentGamesSummary(
            puuid=puuid,
            region=region,
            riot_id=riot_id,
            total_matches=len(records),
            overall_stats=result.overall,
            role_stats=result.by_role,
            champion_stats=result.by_champion,
            recent_matches=records,
            last_updated=int(time.time()) if now is None else now,
        )

        logger.info(
            "Recent games summary built",
            puuid=puuid,
            region=region,
            total_matches=summary.total_matches,
        )
        return summary
