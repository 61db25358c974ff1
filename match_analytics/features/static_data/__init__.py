"""Static data feature module.

This module provides the reference snapshot models, the snapshot builder
and the resource resolver that maps identifiers onto image references.
"""

from .models import (
    ChampionData,
    ImageDTO,
    ImageRef,
    ItemData,
    ReferenceSnapshot,
    RuneInfo,
    SENTINEL,
    SummonerSpellData,
)
from .resolver import (
    CHAMPION_NAME_RULES,
    image_url,
    match_champion_name,
    resolve_champion,
    resolve_item,
    resolve_rune,
    resolve_spell,
)
from .store import SnapshotHolder
from .transformers import SnapshotTransformer

__all__ = [
    # Models
    "ChampionData",
    "ImageDTO",
    "ImageRef",
    "ItemData",
    "ReferenceSnapshot",
    "RuneInfo",
    "SENTINEL",
    "SummonerSpellData",
    # Resolver
    "CHAMPION_NAME_RULES",
    "image_url",
    "match_champion_name",
    "resolve_champion",
    "resolve_item",
    "resolve_rune",
    "resolve_spell",
    # Store
    "SnapshotHolder",
    # Transformers
    "SnapshotTransformer",
]
