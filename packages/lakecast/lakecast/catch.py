"""Catch value objects and the resolution step that produces them."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lakecast.tables import FishSpecies, SeasonPhase, TackleType, WeatherCondition

if TYPE_CHECKING:
    from lakecast.lake import CatchSlot
    from lakecast.mixer import CastMixer

logger = logging.getLogger(__name__)

FULL_WEIGHT_CREDITS = 75
RARITY_MIN = 0.5
RARITY_MAX = 1.5
RARITY_BASE = 0.85
RARITY_SPREAD = 0.30


@dataclass(frozen=True, slots=True)
class Fish:
    """A caught fish. Weight and rarity are clamped at construction.

    Attributes:
        species: Catalog entry.
        weight_grams: Clamped to [species.min_grams, species.max_grams].
        rarity: Clamped to [0.5, 1.5].
    """

    species: FishSpecies
    weight_grams: int
    rarity: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "weight_grams", self.species.clamp_weight(int(self.weight_grams))
        )
        object.__setattr__(
            self, "rarity", min(max(float(self.rarity), RARITY_MIN), RARITY_MAX)
        )

    def bait_credits(self) -> int:
        """Uncapped credit value: floor(75 * weight/max * rarity)."""
        ratio = self.weight_grams / self.species.max_grams
        return math.floor(FULL_WEIGHT_CREDITS * ratio * self.rarity)


@dataclass(frozen=True, slots=True)
class CatchRecord:
    """Append-only history entry. Never mutated after creation."""

    block: int
    slot_id: str
    fish: Fish
    bait_credits: int
    weather: WeatherCondition
    tackle: TackleType


@dataclass(frozen=True, slots=True)
class CatchOutcome:
    fish: Fish
    raw_credits: int
    bait_credits: int


def resolve_catch(
    mixer: CastMixer,
    slot: CatchSlot,
    season_index: int,
    weather: WeatherCondition,
    tackle: TackleType,
    per_cast_cap: int,
) -> CatchOutcome:
    """Resolve one cast against *slot* using draws from *mixer*.

    Draw order is weight bucket first, rarity second. Swapping them changes
    every outcome for a given seed.
    """
    species = slot.species
    weight = species.clamp_weight(mixer.weight_bucket(slot.max_weight))

    bonus = SeasonPhase.from_season_index(season_index).species_bonus(species)
    adjusted = math.floor(weight * bonus * weather.multiplier * tackle.multiplier)

    rarity = RARITY_BASE + mixer.next_double() * RARITY_SPREAD
    fish = Fish(species, adjusted, rarity)

    raw = fish.bait_credits()
    awarded = min(max(raw, 0), per_cast_cap)
    if awarded != raw:
        logger.debug(
            f"Clamped bait for {species.name} in {slot.slot_id}: {raw} -> {awarded}"
        )
    return CatchOutcome(fish=fish, raw_credits=raw, bait_credits=awarded)
