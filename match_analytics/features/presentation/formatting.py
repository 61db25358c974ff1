"""Display formatting helpers for match cards and stat tables."""

from typing import Optional

from match_analytics.features.matches.models import MatchRecord
from match_analytics.features.matches.normalizer import is_arena

ROLE_DISPLAY_NAMES = {
    "TOP": "Top Lane",
    "JUNGLE": "Jungle",
    "MID": "Mid Lane",
    "MIDDLE": "Mid Lane",
    "BOT": "Bot Lane",
    "BOTTOM": "Bot Lane",
    "ADC": "Bot Lane",
    "SUPPORT": "Support",
    "UTILITY": "Support",
    "ARAM": "ARAM",
    "ARENA": "Arena",
}


def format_game_duration(seconds: int) -> str:
    """Format a duration as e.g. ``31m 05s``."""
    minutes, remainder = divmod(max(seconds, 0), 60)
    return f"{minutes}m {remainder:02d}s"


def display_game_mode(game_mode: str, queue_id: Optional[int] = None) -> str:
    """
    Human-readable game mode.

    Example:
        >>> display_game_mode("CHERRY")
        'Arena'
        >>> display_game_mode("ULTBOOK_MODE")
        'Ultbook mode'
    """
    if is_arena(game_mode, queue_id):
        return "Arena"
    return game_mode.replace("_", " ", 1).capitalize()


def role_display_name(role: Optional[str]) -> str:
    """Long display name of a role bucket or raw position tag."""
    if not role:
        return ""
    return ROLE_DISPLAY_NAMES.get(role.upper(), role)


def arena_placement(record: MatchRecord) -> Optional[int]:
    """Arena team placement as supplied with the record.

    Placement is never derived from other stats; None when the record has
    none or the match is not an Arena game.
    """
    if not is_arena(record.game_mode, record.queue_id):
        return None
    return record.placement
