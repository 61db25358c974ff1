"""
Aggregation of match records into overall, per-role and per-champion stats.

The aggregator holds no state between calls: the same records always give
the same result. Degenerate input (no matches, zero deaths, zero time)
yields zero-valued fields rather than errors.
"""

from typing import Any, Dict, Iterable, List, Sequence, Union

import structlog

from match_analytics.core.enums import GameMode
from match_analytics.features.matches.models import MatchRecord, NormalizedMatch
from match_analytics.features.matches.normalizer import normalize_match
from match_analytics.utils.statistics import (
    kda_ratio,
    per_minute,
    percentage,
    safe_mean,
)
from .models import AggregateResult, ChampionStats, OverallStats, RoleStats

logger = structlog.get_logger(__name__)

RecordLike = Union[MatchRecord, NormalizedMatch]


def _is_classic(match: NormalizedMatch) -> bool:
    return match.game_mode.upper() == GameMode.CLASSIC


class MatchAggregator:
    """Reduces normalized match records into aggregate statistics."""

    @staticmethod
    def normalize(records: Iterable[RecordLike]) -> List[NormalizedMatch]:
        """Normalize records, keeping ones that already carry derived metrics."""
        return [
            r if isinstance(r, NormalizedMatch) else normalize_match(r)
            for r in records
        ]

    @staticmethod
    def group_by(
        matches: Sequence[NormalizedMatch], attribute: str
    ) -> Dict[str, List[NormalizedMatch]]:
        """Group matches by an attribute, keeping first-seen key order."""
        groups: Dict[str, List[NormalizedMatch]] = {}
        for match in matches:
            groups.setdefault(getattr(match, attribute), []).append(match)
        return groups

    def _summarize(self, matches: Sequence[NormalizedMatch]) -> Dict[str, Any]:
        """
        Compute the fields shared by every aggregate.

        Args:
            matches: Matches of one group

        Returns:
            Keyword arguments for an OverallStats-shaped model
        """
        games = len(matches)
        if games == 0:
            return {}

        wins = sum(1 for m in matches if m.win)
        total_kills = sum(m.kills for m in matches)
        total_deaths = sum(m.deaths for m in matches)
        total_assists = sum(m.assists for m in matches)
        total_game_time = sum(m.game_duration for m in matches)

        # CS and gold only mean something on Summoner's Rift
        classic = [m for m in matches if _is_classic(m)]
        classic_time = sum(m.game_duration for m in classic)
        classic_cs = sum(m.total_minions_killed for m in classic)
        classic_gold = sum(m.gold_earned for m in classic)

        return {
            "games_played": games,
            "wins": wins,
            "losses": games - wins,
            "win_rate": percentage(wins, games),
            "total_kills": total_kills,
            "total_deaths": total_deaths,
            "total_assists": total_assists,
            "avg_kills": total_kills / games,
            "avg_deaths": total_deaths / games,
            "avg_assists": total_assists / games,
            "kda": kda_ratio(total_kills, total_deaths, total_assists),
            "avg_game_duration": total_game_time / games,
            "total_game_time": total_game_time,
            "avg_vision_score": sum(m.vision_score for m in matches) / games,
            # Total over total Classic time, not a mean of per-game rates
            "avg_cs_per_min": per_minute(classic_cs, classic_time),
            "avg_gold_per_min": per_minute(classic_gold, classic_time),
            "avg_damage_to_champions": sum(m.damage_to_champions for m in matches)
            / games,
            "avg_kill_participation": safe_mean(
                [m.kill_participation_ratio for m in matches]
            ),
        }

    def calculate_overall_stats(self, matches: Sequence[NormalizedMatch]) -> OverallStats:
        """Aggregate over the whole match set."""
        return OverallStats(**self._summarize(matches))

    def calculate_role_stats(
        self, matches: Sequence[NormalizedMatch]
    ) -> Dict[str, RoleStats]:
        """Aggregate per display role bucket."""
        return {
            role: RoleStats(role=role, **self._summarize(role_matches))
            for role, role_matches in self.group_by(matches, "display_role").items()
        }

    def calculate_champion_stats(
        self, matches: Sequence[NormalizedMatch]
    ) -> Dict[str, ChampionStats]:
        """Aggregate per champion name, with best/worst KDA and last played."""
        champion_stats: Dict[str, ChampionStats] = {}
        for name, champion_matches in self.group_by(matches, "champion_name").items():
            kdas = [m.kda for m in champion_matches]
            champion_stats[name] = ChampionStats(
                champion_name=name,
                champion_id=champion_matches[0].champion_id,
                best_kda=max(kdas),
                worst_kda=min(kdas),
                last_played=max(m.game_creation for m in champion_matches),
                **self._summarize(champion_matches),
            )
        return champion_stats

    def aggregate(self, records: Iterable[RecordLike]) -> AggregateResult:
        """
        Compute the overall, per-role and per-champion views.

        Args:
            records: Match records, raw or already normalized

        Returns:
            AggregateResult; zero-valued with empty groupings for no records
        """
        matches = self.normalize(records)
        result = AggregateResult(
            overall=self.calculate_overall_stats(matches),
            by_role=self.calculate_role_stats(matches),
            by_champion=self.calculate_champion_stats(matches),
        )

        logger.debug(
            "Match aggregation completed",
            match_count=len(matches),
            role_count=len(result.by_role),
            champion_count=len(result.by_champion),
            win_rate=result.overall.win_rate,
        )
        return result


def aggregate(records: Iterable[RecordLike]) -> AggregateResult:
    """Aggregate match records with a default MatchAggregator."""
    return MatchAggregator().aggregate(records)
