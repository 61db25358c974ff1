"""Transformation utilities for building reference snapshots from Data Dragon payloads.

The caller fetches the raw documents (``champion.json``, ``item.json``,
``summoner.json``, ``runesReforged.json``); this module only re-keys and
validates them.
"""

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError

from match_analytics.core.exceptions import SnapshotBuildError
from .models import (
    ChampionData,
    ItemData,
    ReferenceSnapshot,
    RuneInfo,
    SummonerSpellData,
)

logger = structlog.get_logger(__name__)


class SnapshotTransformer:
    """Utility for turning Data Dragon documents into a ReferenceSnapshot."""

    @staticmethod
    def latest_version(versions: List[str]) -> str:
        """Pick the newest version from a ``versions.json`` list.

        Data Dragon lists versions newest first.

        Raises:
            SnapshotBuildError: If the list is empty
        """
        if not versions:
            raise SnapshotBuildError("versions list is empty")
        return versions[0]

    @staticmethod
    def _data_section(payload: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Get the ``data`` mapping of a Data Dragon document."""
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise SnapshotBuildError(
                f"{name} payload has no 'data' mapping",
                context={"document": name},
            )
        return data

    @staticmethod
    def champions_by_key(payload: Dict[str, Any]) -> Dict[str, ChampionData]:
        """Re-key champions from canonical id ("Aatrox") to numeric key ("266").

        Example:
            >>> payload = {"data": {"Aatrox": {"id": "Aatrox", "key": "266",
            ...     "name": "Aatrox", "image": {"full": "Aatrox.png"}}}}
            >>> list(SnapshotTransformer.champions_by_key(payload))
            ['266']
        """
        data = SnapshotTransformer._data_section(payload, "champion")
        champions: Dict[str, ChampionData] = {}
        for entry in data.values():
            champion = ChampionData.model_validate(entry)
            champions[champion.key] = champion
        return champions

    @staticmethod
    def items_by_id(payload: Dict[str, Any]) -> Dict[str, ItemData]:
        """Validate items; Data Dragon already keys them by item id."""
        data = SnapshotTransformer._data_section(payload, "item")
        return {
            str(item_id): ItemData.model_validate(entry)
            for item_id, entry in data.items()
        }

    @staticmethod
    def spells_by_key(payload: Dict[str, Any]) -> Dict[str, SummonerSpellData]:
        """Re-key summoner spells from "SummonerFlash" to the numeric key "4"."""
        data = SnapshotTransformer._data_section(payload, "summoner")
        spells: Dict[str, SummonerSpellData] = {}
        for entry in data.values():
            spell = SummonerSpellData.model_validate(entry)
            spells[spell.key] = spell
        return spells

    @staticmethod
    def flatten_runes(rune_paths: List[Dict[str, Any]]) -> Dict[int, RuneInfo]:
        """Flatten rune trees into a single id -> rune map.

        Styles (e.g. Precision, 8000) are included next to the individual
        runes so the secondary style of a match resolves too.
        """
        if not isinstance(rune_paths, list):
            raise SnapshotBuildError(
                "runesReforged payload must be a list of rune paths",
                context={"document": "runesReforged"},
            )

        runes: Dict[int, RuneInfo] = {}
        for path in rune_paths:
            style = RuneInfo.model_validate(path)
            runes[style.id] = style
            for slot in path.get("slots", []):
                for entry in slot.get("runes", []):
                    rune = RuneInfo.model_validate(entry)
                    runes[rune.id] = rune
        return runes

    @staticmethod
    def build_snapshot(
        version: str,
        champion_payload: Dict[str, Any],
        item_payload: Optional[Dict[str, Any]] = None,
        spell_payload: Optional[Dict[str, Any]] = None,
        rune_payload: Optional[List[Dict[str, Any]]] = None,
    ) -> ReferenceSnapshot:
        """Build a complete snapshot from already-fetched Data Dragon documents.

        Args:
            version: Data Dragon version the documents belong to
            champion_payload: Parsed ``champion.json``
            item_payload: Parsed ``item.json``
            spell_payload: Parsed ``summoner.json``
            rune_payload: Parsed ``runesReforged.json``

        Returns:
            A new, frozen ReferenceSnapshot

        Raises:
            SnapshotBuildError: If any document is malformed
        """
        try:
            snapshot = ReferenceSnapshot(
                version=version,
                champions=SnapshotTransformer.champions_by_key(champion_payload),
                items=(
                    SnapshotTransformer.items_by_id(item_payload)
                    if item_payload is not None
                    else {}
                ),
                summoner_spells=(
                    SnapshotTransformer.spells_by_key(spell_payload)
                    if spell_payload is not None
                    else {}
                ),
                runes=(
                    SnapshotTransformer.flatten_runes(rune_payload)
                    if rune_payload is not None
                    else {}
                ),
            )
        except ValidationError as e:
            logger.error(
                "Invalid static data payload",
                version=version,
                error_count=e.error_count(),
                error=str(e),
            )
            raise SnapshotBuildError(
                "payload failed validation",
                context={"version": version},
                original_error=e,
            ) from e

        logger.info(
            "Reference snapshot built",
            version=version,
            champions=len(snapshot.champions),
            items=len(snapshot.items),
            summoner_spells=len(snapshot.summoner_spells),
            runes=len(snapshot.runes),
        )
        return snapshot
