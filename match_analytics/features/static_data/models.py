"""Pydantic models for static reference data (Data Dragon snapshot)."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from match_analytics.core.enums import AssetKind

PLACEHOLDER_IMAGE = "placeholder.png"


class ImageDTO(BaseModel):
    """Image descriptor shared by champions, items and summoner spells."""

    full: str
    sprite: Optional[str] = None
    group: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class ChampionData(BaseModel):
    """Champion descriptor."""

    id: str  # canonical id, e.g. "Chogath"
    key: str  # numeric key as string, e.g. "31"
    name: str  # display name, e.g. "Cho'Gath"
    title: Optional[str] = None
    image: ImageDTO

    model_config = ConfigDict(frozen=True, extra="ignore")


class ItemData(BaseModel):
    """Item descriptor."""

    name: str
    plaintext: Optional[str] = None
    image: ImageDTO

    model_config = ConfigDict(frozen=True, extra="ignore")


class SummonerSpellData(BaseModel):
    """Summoner spell descriptor."""

    id: str  # e.g. "SummonerFlash"
    key: str  # numeric id used in match data, e.g. "4"
    name: str
    image: ImageDTO

    model_config = ConfigDict(frozen=True, extra="ignore")


class RuneInfo(BaseModel):
    """Rune (perk) or rune style descriptor."""

    id: int
    key: str
    name: str
    icon: str  # full relative path, e.g. "perk-images/Styles/..."

    model_config = ConfigDict(frozen=True, extra="ignore")


class ReferenceSnapshot(BaseModel):
    """One immutable version of static game reference data.

    Tables are keyed the way match data refers to them: champions and
    summoner spells by their numeric key (as string), items by item id
    (as string), runes by integer id. A new version replaces the whole
    snapshot; nothing is patched in place.
    """

    version: str
    champions: Dict[str, ChampionData] = Field(default_factory=dict)
    items: Dict[str, ItemData] = Field(default_factory=dict)
    summoner_spells: Dict[str, SummonerSpellData] = Field(default_factory=dict)
    runes: Dict[int, RuneInfo] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class ImageRef(BaseModel):
    """A resolved image reference, or the placeholder sentinel."""

    kind: AssetKind
    key: str = ""
    name: str = ""
    path: str = PLACEHOLDER_IMAGE

    model_config = ConfigDict(frozen=True)

    @property
    def is_sentinel(self) -> bool:
        """Whether this is the placeholder returned for failed lookups."""
        return self.kind == AssetKind.PLACEHOLDER

    def url(self, base: str) -> str:
        """Build an absolute URL under a CDN root.

        The placeholder is returned as is; rune icons live under ``img/``
        without a version segment.
        """
        if self.is_sentinel:
            return self.path
        base = base.rstrip("/")
        if self.kind == AssetKind.RUNE:
            return f"{base}/img/{self.path}"
        return f"{base}/{self.path}"


SENTINEL = ImageRef(kind=AssetKind.PLACEHOLDER)
