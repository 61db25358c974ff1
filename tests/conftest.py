"""Shared fixtures: a small Data Dragon snapshot and match record factories."""

from typing import Any, Callable, Dict, List

import pytest

from match_analytics.features.matches.models import MatchRecord
from match_analytics.features.static_data.models import ReferenceSnapshot
from match_analytics.features.static_data.transformers import SnapshotTransformer

DDRAGON_VERSION = "14.1.1"


@pytest.fixture
def champion_payload() -> Dict[str, Any]:
    return {
        "type": "champion",
        "version": DDRAGON_VERSION,
        "data": {
            "Aatrox": {
                "id": "Aatrox",
                "key": "266",
                "name": "Aatrox",
                "title": "the Darkin Blade",
                "image": {"full": "Aatrox.png", "sprite": "champion0.png", "group": "champion"},
            },
            "Chogath": {
                "id": "Chogath",
                "key": "31",
                "name": "Cho'Gath",
                "title": "the Terror of the Void",
                "image": {"full": "Chogath.png", "sprite": "champion0.png", "group": "champion"},
            },
            "MonkeyKing": {
                "id": "MonkeyKing",
                "key": "62",
                "name": "Wukong",
                "title": "the Monkey King",
                "image": {"full": "MonkeyKing.png", "sprite": "champion2.png", "group": "champion"},
            },
            "MissFortune": {
                "id": "MissFortune",
                "key": "21",
                "name": "Miss Fortune",
                "title": "the Bounty Hunter",
                "image": {"full": "MissFortune.png", "sprite": "champion2.png", "group": "champion"},
            },
        },
    }


@pytest.fixture
def item_payload() -> Dict[str, Any]:
    return {
        "type": "item",
        "version": DDRAGON_VERSION,
        "data": {
            "1001": {
                "name": "Boots",
                "plaintext": "Slightly increases Move Speed",
                "image": {"full": "1001.png"},
                "gold": {"base": 300, "total": 300},
            },
            "3340": {
                "name": "Stealth Ward",
                "image": {"full": "3340.png"},
            },
        },
    }


@pytest.fixture
def spell_payload() -> Dict[str, Any]:
    return {
        "type": "summoner",
        "version": DDRAGON_VERSION,
        "data": {
            "SummonerFlash": {
                "id": "SummonerFlash",
                "key": "4",
                "name": "Flash",
                "image": {"full": "SummonerFlash.png"},
            },
            "SummonerDot": {
                "id": "SummonerDot",
                "key": "14",
                "name": "Ignite",
                "image": {"full": "SummonerDot.png"},
            },
        },
    }


@pytest.fixture
def rune_payload() -> List[Dict[str, Any]]:
    return [
        {
            "id": 8000,
            "key": "Precision",
            "icon": "perk-images/Styles/7201_Precision.png",
            "name": "Precision",
            "slots": [
                {
                    "runes": [
                        {
                            "id": 8005,
                            "key": "PressTheAttack",
                            "icon": "perk-images/Styles/Precision/PressTheAttack/PressTheAttack.png",
                            "name": "Press the Attack",
                        }
                    ]
                }
            ],
        },
        {
            "id": 8400,
            "key": "Resolve",
            "icon": "perk-images/Styles/7204_Resolve.png",
            "name": "Resolve",
            "slots": [],
        },
    ]


@pytest.fixture
def snapshot(champion_payload, item_payload, spell_payload, rune_payload) -> ReferenceSnapshot:
    return SnapshotTransformer.build_snapshot(
        DDRAGON_VERSION, champion_payload, item_payload, spell_payload, rune_payload
    )


@pytest.fixture
def make_record() -> Callable[..., MatchRecord]:
    """Factory for match records with sensible Classic-mode defaults."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> MatchRecord:
        counter["n"] += 1
        fields: Dict[str, Any] = {
            "match_id": f"EUW1_{1000 + counter['n']}",
            "game_creation": 1_700_000_000_000,
            "game_duration": 1800,
            "game_mode": "CLASSIC",
            "queue_id": 420,
            "champion_name": "Aatrox",
            "champion_id": 266,
            "team_id": 100,
            "win": True,
            "kills": 5,
            "deaths": 2,
            "assists": 5,
            "total_minions_killed": 180,
            "vision_score": 20,
            "gold_earned": 12000,
            "team_position": "TOP",
            "items": (1001, 0, 0, 0, 0, 0, 3340),
            "summoner_spells": (4, 14),
            "damage_to_champions": 20000,
        }
        fields.update(overrides)
        return MatchRecord(**fields)

    return _make
