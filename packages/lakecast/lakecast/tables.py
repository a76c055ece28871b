"""Static catalog tables: species, weather, tackle, and season phases.

All tables are pure data. Species ordinals are dense (0..11) and double as
column indices into the per-season bonus rows, so the catalog and every
bonus row must stay the same length.
"""
from __future__ import annotations

from enum import Enum


class FishSpecies(Enum):
    """Fixed species catalog: (index, display name, min grams, max grams)."""

    BASS = (0, "Largemouth Bass", 800, 5200)
    TROUT = (1, "Rainbow Trout", 400, 3800)
    PIKE = (2, "Northern Pike", 1200, 7200)
    CARP = (3, "Common Carp", 1500, 9500)
    PERCH = (4, "Yellow Perch", 200, 2200)
    SALMON = (5, "Atlantic Salmon", 2000, 5500)
    CATFISH = (6, "Channel Catfish", 1000, 6800)
    TUNA = (7, "Bluefin Tuna", 8000, 22000)
    COD = (8, "Atlantic Cod", 1500, 4500)
    WALLEYE = (9, "Walleye", 600, 4800)
    STURGEON = (10, "Lake Sturgeon", 5000, 18000)
    MUSKELLUNGE = (11, "Muskellunge", 2500, 12000)

    def __init__(
        self, index: int, display_name: str, min_grams: int, max_grams: int
    ) -> None:
        self.index = index
        self.display_name = display_name
        self.min_grams = min_grams
        self.max_grams = max_grams

    @classmethod
    def from_index(cls, index: int) -> FishSpecies:
        """Look up a species by ordinal. Raises IndexError if out of range."""
        if not 0 <= index < len(SPECIES_BY_INDEX):
            raise IndexError(f"species index out of range: {index}")
        return SPECIES_BY_INDEX[index]

    def clamp_weight(self, grams: int) -> int:
        return min(max(grams, self.min_grams), self.max_grams)


SPECIES_BY_INDEX: tuple[FishSpecies, ...] = tuple(
    sorted(FishSpecies, key=lambda s: s.index)
)


class WeatherCondition(Enum):
    """Weather with its catch multiplier in (0, 1]."""

    CLEAR = ("clear", 1.00)
    CLOUDY = ("cloudy", 0.95)
    RAIN = ("rain", 0.85)
    FOG = ("fog", 0.80)
    STORM = ("storm", 0.60)

    def __init__(self, label: str, multiplier: float) -> None:
        self.label = label
        self.multiplier = multiplier


class TackleType(Enum):
    """Tackle with its weight multiplier."""

    BASIC = ("basic", 1.00)
    SPINNER = ("spinner", 1.05)
    FLY = ("fly", 1.08)
    BAITCASTER = ("baitcaster", 1.12)
    HEAVY = ("heavy", 1.20)

    def __init__(self, label: str, multiplier: float) -> None:
        self.label = label
        self.multiplier = multiplier


class SeasonPhase(Enum):
    SPRING = 0
    SUMMER = 1
    AUTUMN = 2
    WINTER = 3

    @classmethod
    def from_season_index(cls, season_index: int) -> SeasonPhase:
        return _PHASES[season_index % len(_PHASES)]

    def species_bonus(self, species: FishSpecies) -> float:
        """Multiplicative bonus for *species* in this phase (percent / 100)."""
        return _SEASON_BONUS_PERCENT[self][species.index] / 100.0


_PHASES: tuple[SeasonPhase, ...] = tuple(SeasonPhase)

# Columns follow FishSpecies.index:
#   BASS TROUT PIKE CARP PERCH SALMON CATFISH TUNA COD WALLEYE STURGEON MUSKIE
_SEASON_BONUS_PERCENT: dict[SeasonPhase, tuple[int, ...]] = {
    SeasonPhase.SPRING: (110, 115, 105, 100, 110, 95, 100, 90, 100, 115, 105, 100),
    SeasonPhase.SUMMER: (120, 90, 100, 115, 105, 90, 115, 110, 85, 100, 100, 110),
    SeasonPhase.AUTUMN: (100, 105, 115, 95, 100, 120, 95, 105, 110, 105, 110, 115),
    SeasonPhase.WINTER: (85, 100, 95, 85, 95, 100, 90, 95, 115, 100, 105, 90),
}

for _phase, _row in _SEASON_BONUS_PERCENT.items():
    if len(_row) != len(SPECIES_BY_INDEX):
        raise ValueError(
            f"{_phase.name} bonus row has {len(_row)} entries, "
            f"expected {len(SPECIES_BY_INDEX)}"
        )
del _phase, _row
