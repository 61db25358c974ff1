"""
Arranging aggregates and match lists for display.

Date grouping, column sorting and windowing. These functions only reorder
or slice what they are given; they never recompute statistics.
"""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

import structlog

from match_analytics.core.config import get_global_settings
from match_analytics.core.enums import SortColumn, SortDirection
from match_analytics.features.matches.models import MatchRecord
from match_analytics.features.player_analysis.models import ChampionStats, RoleStats

logger = structlog.get_logger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=MatchRecord)

# Sort column -> aggregate attribute
SORT_ATTRIBUTES = {
    SortColumn.GAMES_PLAYED: "games_played",
    SortColumn.WIN_RATE: "win_rate",
    SortColumn.KDA: "kda",
    SortColumn.CS_PER_MIN: "avg_cs_per_min",
    SortColumn.DAMAGE: "avg_damage_to_champions",
    SortColumn.LAST_PLAYED: "last_played",
}

# Extra keys tried on plain dict rows
ROW_KEY_ALIASES = {
    SortColumn.GAMES_PLAYED: ("games",),
    SortColumn.KDA: ("championKDA",),
    SortColumn.CS_PER_MIN: ("avgCSPerMin", "avgCsPerMin"),
    SortColumn.DAMAGE: ("avgDamageToChampions",),
}


def match_day(game_creation: int, tz: Optional[tzinfo] = None) -> date:
    """Calendar day of an epoch-millisecond timestamp in ``tz`` (host local if None)."""
    return datetime.fromtimestamp(game_creation / 1000, tz).date()


def group_matches_by_date(
    matches: Iterable[M], tz: Optional[tzinfo] = None
) -> Dict[date, List[M]]:
    """
    Partition matches into calendar-day buckets.

    Args:
        matches: Match records, typically newest first
        tz: Zone the days are taken in; configured display zone, else host local

    Returns:
        Day -> matches mapping. Keys are ordered newest day first; matches
        keep their input order inside each bucket.
    """
    zone = tz if tz is not None else get_global_settings().display_tz

    buckets: Dict[date, List[M]] = {}
    for match in matches:
        buckets.setdefault(match_day(match.game_creation, zone), []).append(match)

    return {day: buckets[day] for day in sorted(buckets, reverse=True)}


def win_loss(matches: Sequence[MatchRecord]) -> Tuple[int, int]:
    """Wins and losses of a bucket."""
    wins = sum(1 for m in matches if m.win)
    return wins, len(matches) - wins


def _group_name(row: Any) -> str:
    if isinstance(row, ChampionStats):
        return row.champion_name
    if isinstance(row, RoleStats):
        return row.role
    if isinstance(row, Mapping):
        for key in ("name", "championName", "champion_name", "role"):
            if key in row:
                return str(row[key])
        return ""
    return str(getattr(row, "name", ""))


def _sort_value(row: Any, column: SortColumn) -> Any:
    """Value of a column for an aggregate model or a plain dict row."""
    if column == SortColumn.NAME:
        return _group_name(row)

    attribute = SORT_ATTRIBUTES[column]
    if isinstance(row, Mapping):
        for key in (column.value, attribute, *ROW_KEY_ALIASES.get(column, ())):
            if key in row:
                return row[key]
        return 0
    return getattr(row, attribute)


def _coerce_column(column: Union[SortColumn, str]) -> SortColumn:
    try:
        return SortColumn(column)
    except ValueError:
        logger.warning("Unknown sort column, sorting by games played", column=column)
        return SortColumn.GAMES_PLAYED


def _coerce_direction(direction: Union[SortDirection, str]) -> SortDirection:
    try:
        return SortDirection(direction)
    except ValueError:
        logger.warning("Unknown sort direction, sorting descending", direction=direction)
        return SortDirection.DESC


def sort_champion_stats(
    stats: Union[Mapping[str, Any], Sequence[Any]],
    column: Union[SortColumn, str] = SortColumn.GAMES_PLAYED,
    direction: Union[SortDirection, str] = SortDirection.DESC,
    limit: Optional[int] = None,
) -> List[Any]:
    """
    Order champion aggregates by a table column.

    The sort is stable in both directions: entries with equal keys keep
    their input order.

    Args:
        stats: ChampionStats keyed by champion name, or a sequence of
            ChampionStats or camelCase dict rows
        column: Column to sort by; unknown columns fall back to games played
        direction: ``asc``/``ascending`` or ``desc``/``descending``; unknown
            values fall back to descending
        limit: Keep only the first ``limit`` rows

    Returns:
        Sorted list of rows
    """
    rows = list(stats.values()) if isinstance(stats, Mapping) else list(stats)
    sort_column = _coerce_column(column)
    descending = _coerce_direction(direction) == SortDirection.DESC

    ordered = sorted(
        rows, key=lambda row: _sort_value(row, sort_column), reverse=descending
    )
    return ordered[:limit] if limit is not None else ordered


def top_champions(
    stats: Union[Mapping[str, Any], Sequence[Any]],
    column: Union[SortColumn, str] = SortColumn.GAMES_PLAYED,
    direction: Union[SortDirection, str] = SortDirection.DESC,
) -> List[Any]:
    """Champion table rows, cut to the configured table size."""
    limit = get_global_settings().champion_table_limit
    return sort_champion_stats(stats, column, direction, limit=limit)


def sort_role_stats(stats: Mapping[str, RoleStats]) -> List[RoleStats]:
    """Roles with the most games first."""
    return sorted(stats.values(), key=lambda s: s.games_played, reverse=True)


@dataclass
class MatchWindow:
    """Growable visible window over an already ordered list."""

    size: int = 25
    step: int = 10

    @classmethod
    def from_settings(cls) -> "MatchWindow":
        """Create a window with the configured initial size and step."""
        settings = get_global_settings()
        return cls(size=settings.match_window_size, step=settings.match_window_step)

    def visible(self, items: Sequence[T]) -> List[T]:
        """Items in ``[0, size)``, clamped to the list length."""
        return list(items[: max(self.size, 0)])

    def has_more(self, items: Sequence[T]) -> bool:
        """Whether growing the window would show more items."""
        return len(items) > self.size

    def grow(self) -> int:
        """Extend the window by one step and return the new size."""
        self.size += self.step
        return self.size
