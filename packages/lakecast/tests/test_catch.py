"""Tests for lakecast.catch — Fish, CatchRecord, resolve_catch."""
from __future__ import annotations

import dataclasses

import pytest

from lakecast.catch import CatchRecord, Fish, resolve_catch
from lakecast.lake import CatchSlot
from lakecast.mixer import CastMixer
from lakecast.tables import FishSpecies, TackleType, WeatherCondition


class ScriptedMixer:
    """Returns fixed draws and records the order they were requested in."""

    def __init__(self, bucket_grams: int, unit: float) -> None:
        self.bucket_grams = bucket_grams
        self.unit = unit
        self.calls: list[str] = []

    def weight_bucket(self, max_grams: int) -> int:
        self.calls.append("weight_bucket")
        return self.bucket_grams

    def next_double(self) -> float:
        self.calls.append("next_double")
        return self.unit


def _slot(species: FishSpecies = FishSpecies.CARP, max_weight: int | None = None) -> CatchSlot:
    return CatchSlot(
        slot_id=f"catch_x_{species.name.lower()}",
        species=species,
        max_weight=max_weight if max_weight is not None else species.max_grams,
    )


class TestFish:
    def test_weight_clamped_up_to_species_min(self) -> None:
        fish = Fish(FishSpecies.BASS, 10, 1.0)
        assert fish.weight_grams == 800

    def test_weight_clamped_down_to_species_max(self) -> None:
        fish = Fish(FishSpecies.BASS, 99999, 1.0)
        assert fish.weight_grams == 5200

    def test_rarity_clamped(self) -> None:
        assert Fish(FishSpecies.BASS, 1000, 2.0).rarity == 1.5
        assert Fish(FishSpecies.BASS, 1000, 0.1).rarity == 0.5

    def test_in_range_values_untouched(self) -> None:
        fish = Fish(FishSpecies.TROUT, 1234, 0.9)
        assert fish.weight_grams == 1234
        assert fish.rarity == 0.9

    def test_bait_credits_formula(self) -> None:
        assert Fish(FishSpecies.BASS, 5200, 1.0).bait_credits() == 75
        assert Fish(FishSpecies.BASS, 2600, 1.0).bait_credits() == 37

    def test_bait_credits_can_exceed_per_cast_cap(self) -> None:
        assert Fish(FishSpecies.BASS, 5200, 1.15).bait_credits() == 86

    def test_fish_is_immutable(self) -> None:
        fish = Fish(FishSpecies.BASS, 1000, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            fish.weight_grams = 5000  # type: ignore[misc]

    def test_catch_record_is_immutable(self) -> None:
        record = CatchRecord(
            block=3,
            slot_id="catch_0_bass",
            fish=Fish(FishSpecies.BASS, 1000, 1.0),
            bait_credits=14,
            weather=WeatherCondition.CLEAR,
            tackle=TackleType.BASIC,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.bait_credits = 75  # type: ignore[misc]


class TestResolveCatch:
    def test_neutral_multipliers_keep_bucket_weight(self) -> None:
        # CARP in spring has a 100% bonus; CLEAR and BASIC are neutral.
        mixer = ScriptedMixer(bucket_grams=2000, unit=0.5)
        outcome = resolve_catch(
            mixer, _slot(), 0, WeatherCondition.CLEAR, TackleType.BASIC, 75
        )
        assert outcome.fish.species is FishSpecies.CARP
        assert outcome.fish.weight_grams == 2000
        assert outcome.fish.rarity == pytest.approx(1.0)

    def test_weight_drawn_before_rarity(self) -> None:
        mixer = ScriptedMixer(bucket_grams=2000, unit=0.0)
        resolve_catch(mixer, _slot(), 0, WeatherCondition.CLEAR, TackleType.BASIC, 75)
        assert mixer.calls == ["weight_bucket", "next_double"]

    def test_rarity_range(self) -> None:
        low = resolve_catch(
            ScriptedMixer(2000, 0.0), _slot(), 0,
            WeatherCondition.CLEAR, TackleType.BASIC, 75,
        )
        high = resolve_catch(
            ScriptedMixer(2000, 0.999999), _slot(), 0,
            WeatherCondition.CLEAR, TackleType.BASIC, 75,
        )
        assert low.fish.rarity == pytest.approx(0.85)
        assert 1.14 < high.fish.rarity < 1.15

    def test_bucket_below_species_min_is_raised(self) -> None:
        mixer = ScriptedMixer(bucket_grams=100, unit=0.5)
        outcome = resolve_catch(
            mixer, _slot(), 0, WeatherCondition.CLEAR, TackleType.BASIC, 75
        )
        assert outcome.fish.weight_grams == FishSpecies.CARP.min_grams

    def test_multipliers_compose(self) -> None:
        # BASS in summer: 120%. STORM 0.6, BASIC 1.0 -> floor(2000 * 0.72).
        mixer = ScriptedMixer(bucket_grams=2000, unit=0.5)
        outcome = resolve_catch(
            mixer, _slot(FishSpecies.BASS), 1,
            WeatherCondition.STORM, TackleType.BASIC, 75,
        )
        assert outcome.fish.weight_grams in (1439, 1440)

    def test_bait_clamped_to_per_cast_cap(self) -> None:
        mixer = ScriptedMixer(bucket_grams=5044, unit=0.999)
        outcome = resolve_catch(
            mixer, _slot(FishSpecies.BASS), 1,
            WeatherCondition.CLEAR, TackleType.HEAVY, 75,
        )
        assert outcome.fish.weight_grams == 5200
        assert outcome.raw_credits == 86
        assert outcome.bait_credits == 75

    def test_smaller_cap_is_authoritative(self) -> None:
        mixer = ScriptedMixer(bucket_grams=5044, unit=0.5)
        outcome = resolve_catch(
            mixer, _slot(FishSpecies.BASS), 0,
            WeatherCondition.CLEAR, TackleType.BASIC, 10,
        )
        assert outcome.raw_credits > 10
        assert outcome.bait_credits == 10

    def test_real_mixer_is_deterministic(self) -> None:
        slot = _slot(FishSpecies.PIKE)

        def run():
            mixer = CastMixer.for_cast(77, 12, slot.slot_id, "A1", slot.species.index)
            return resolve_catch(
                mixer, slot, 0, WeatherCondition.RAIN, TackleType.FLY, 75
            )

        assert run() == run()

    def test_bounds_hold_across_many_casts(self) -> None:
        for species in FishSpecies:
            slot = _slot(species)
            for block in range(60):
                mixer = CastMixer.for_cast(5, block, slot.slot_id, "A1", species.index)
                for weather in WeatherCondition:
                    outcome = resolve_catch(
                        CastMixer(mixer.state), slot, block // 16,
                        weather, TackleType.HEAVY, 75,
                    )
                    fish = outcome.fish
                    assert species.min_grams <= fish.weight_grams <= species.max_grams
                    assert 0.5 <= fish.rarity <= 1.5
                    assert 0 <= outcome.bait_credits <= 75
