"""
Resource resolution against a reference snapshot.

Maps volatile identifiers (champion names in any spelling, numeric keys,
item/spell/rune ids) onto image references. Every entry point is total:
a failed lookup returns ``SENTINEL`` instead of raising.
"""

import re
from typing import Callable, Iterable, Optional, Tuple

import structlog

from match_analytics.core.config import get_global_settings
from match_analytics.core.enums import AssetKind
from .models import ChampionData, ImageRef, ReferenceSnapshot, SENTINEL

logger = structlog.get_logger(__name__)

ChampionRule = Tuple[str, Callable[[ChampionData, str], bool]]

_STRIP_PATTERN = re.compile(r"['\s]")


def _strip(value: str) -> str:
    """Lowercase and drop apostrophes and whitespace ("Cho'Gath" -> "chogath")."""
    return _STRIP_PATTERN.sub("", value.lower())


# Ordered by priority; the first rule that matches any entry wins.
CHAMPION_NAME_RULES: Tuple[ChampionRule, ...] = (
    ("exact_name", lambda champ, query: champ.name == query),
    ("casefold_name", lambda champ, query: champ.name.lower() == query.lower()),
    ("exact_id", lambda champ, query: champ.id == query),
    ("casefold_id", lambda champ, query: champ.id.lower() == query.lower()),
    ("stripped_name", lambda champ, query: _strip(champ.name) == _strip(query)),
    ("stripped_id", lambda champ, query: _strip(champ.id) == _strip(query)),
)


def match_champion_name(
    champions: Iterable[ChampionData],
    name: str,
    rules: Tuple[ChampionRule, ...] = CHAMPION_NAME_RULES,
) -> Optional[Tuple[str, ChampionData]]:
    """
    Find a champion by name using the ordered fallback rules.

    Rules are applied one at a time across all entries, so a stronger rule
    matching a later entry wins over a weaker rule matching an earlier one.
    Walking entries first and trying every rule on each would return the
    earlier entry instead.

    Args:
        champions: Champion descriptors to scan
        name: Name as reported upstream, in any spelling
        rules: Ordered ``(rule_name, predicate)`` pairs

    Returns:
        ``(rule_name, champion)`` for the first satisfied rule, or None
    """
    candidates = list(champions)
    for rule_name, predicate in rules:
        for champion in candidates:
            if predicate(champion, name):
                return rule_name, champion
    return None


def _champion_ref(snapshot: ReferenceSnapshot, champion: ChampionData) -> ImageRef:
    return ImageRef(
        kind=AssetKind.CHAMPION,
        key=champion.key,
        name=champion.name,
        path=f"{snapshot.version}/img/champion/{champion.image.full}",
    )


def resolve_champion(
    snapshot: Optional[ReferenceSnapshot],
    name: Optional[str] = None,
    champion_id: Optional[int] = None,
) -> ImageRef:
    """
    Resolve a champion image reference.

    A numeric id is tried first since it is unambiguous; the name fallback
    chain only runs when the id is missing or unknown.

    Args:
        snapshot: Current reference snapshot, or None if not loaded yet
        name: Champion name in any spelling
        champion_id: Numeric champion key

    Returns:
        Resolved ImageRef, or SENTINEL
    """
    if snapshot is None:
        return SENTINEL

    if champion_id:
        champion = snapshot.champions.get(str(champion_id))
        if champion is not None:
            return _champion_ref(snapshot, champion)
        logger.debug(
            "Champion id not in snapshot",
            champion_id=champion_id,
            version=snapshot.version,
        )

    if name:
        match = match_champion_name(snapshot.champions.values(), name)
        if match is not None:
            rule_name, champion = match
            logger.debug(
                "Champion resolved by name",
                query=name,
                rule=rule_name,
                champion=champion.id,
            )
            return _champion_ref(snapshot, champion)
        logger.debug("Champion name not in snapshot", query=name)

    return SENTINEL


def resolve_item(snapshot: Optional[ReferenceSnapshot], item_id: Optional[int]) -> ImageRef:
    """Resolve an item slot; id 0 is an empty slot."""
    if snapshot is None or not item_id:
        return SENTINEL

    item = snapshot.items.get(str(item_id))
    if item is None:
        logger.debug("Item id not in snapshot", item_id=item_id)
        return SENTINEL

    return ImageRef(
        kind=AssetKind.ITEM,
        key=str(item_id),
        name=item.name,
        path=f"{snapshot.version}/img/item/{item.image.full}",
    )


def resolve_spell(snapshot: Optional[ReferenceSnapshot], spell_id: Optional[int]) -> ImageRef:
    """Resolve a summoner spell by the numeric id used in match data."""
    if snapshot is None or not spell_id:
        return SENTINEL

    spell = snapshot.summoner_spells.get(str(spell_id))
    if spell is None:
        logger.debug("Summoner spell id not in snapshot", spell_id=spell_id)
        return SENTINEL

    return ImageRef(
        kind=AssetKind.SPELL,
        key=spell.key,
        name=spell.name,
        path=f"{snapshot.version}/img/spell/{spell.image.full}",
    )


def resolve_rune(snapshot: Optional[ReferenceSnapshot], rune_id: Optional[int]) -> ImageRef:
    """Resolve a rune or rune style; its icon path is used verbatim."""
    if snapshot is None or not rune_id:
        return SENTINEL

    rune = snapshot.runes.get(rune_id)
    if rune is None:
        logger.debug("Rune id not in snapshot", rune_id=rune_id)
        return SENTINEL

    return ImageRef(kind=AssetKind.RUNE, key=str(rune.id), name=rune.name, path=rune.icon)


def image_url(ref: ImageRef, base: Optional[str] = None) -> str:
    """Absolute URL of a reference under the configured CDN root."""
    return ref.url(base or get_global_settings().ddragon_cdn_base)
