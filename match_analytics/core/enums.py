"""Shared enums used across features.

This module provides a single source of truth for enums used in both models and selectors.
"""

from enum import Enum


class DisplayRole(str, Enum):
    """Display buckets that raw position tags and special modes map onto."""

    TOP = "Top"
    JUNGLE = "Jungle"
    MID = "Mid"
    BOT = "Bot"
    SUPPORT = "Support"
    ARAM = "ARAM"
    ARENA = "Arena"
    UNKNOWN = "Unknown"


class GameMode(str, Enum):
    """Game modes with special handling."""

    CLASSIC = "CLASSIC"
    ARAM = "ARAM"
    CHERRY = "CHERRY"
    ARENA = "ARENA"


class QueueType(int, Enum):
    """Queue ids with special handling."""

    RANKED_SOLO_5X5 = 420
    RANKED_FLEX_5X5 = 440
    ARENA = 1700


class SortColumn(str, Enum):
    """Sortable columns of the champion table."""

    NAME = "name"
    GAMES_PLAYED = "gamesPlayed"
    WIN_RATE = "winRate"
    KDA = "kda"
    CS_PER_MIN = "csPerMin"
    DAMAGE = "damage"
    LAST_PLAYED = "lastPlayed"

    @classmethod
    def _missing_(cls, value):
        """Accept snake_case and the short column ids of the champion table."""
        if not isinstance(value, str):
            return None
        aliases = {
            "champion": cls.NAME,
            "games": cls.GAMES_PLAYED,
            "games_played": cls.GAMES_PLAYED,
            "winrate": cls.WIN_RATE,
            "win_rate": cls.WIN_RATE,
            "cs": cls.CS_PER_MIN,
            "cs_per_min": cls.CS_PER_MIN,
            "last_played": cls.LAST_PLAYED,
        }
        return aliases.get(value.lower())


class SortDirection(str, Enum):
    """Sort direction of the champion table."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def _missing_(cls, value):
        """Accept spelled-out and upper-case direction names."""
        if not isinstance(value, str):
            return None
        aliases = {
            "asc": cls.ASC,
            "ascending": cls.ASC,
            "desc": cls.DESC,
            "descending": cls.DESC,
        }
        return aliases.get(value.lower())


class AssetKind(str, Enum):
    """Kinds of static assets a reference can point at."""

    CHAMPION = "champion"
    ITEM = "item"
    SPELL = "spell"
    RUNE = "rune"
    PLACEHOLDER = "placeholder"
