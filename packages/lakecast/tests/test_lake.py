"""Tests for CatchSlot, Lake, and the default slot table."""
from __future__ import annotations

import pytest

from lakecast.lake import CatchSlot, Lake, default_slots
from lakecast.mixer import seed_from_bytes
from lakecast.tables import FishSpecies


def _slot(slot_id: str, species: FishSpecies = FishSpecies.BASS, **kwargs) -> CatchSlot:
    return CatchSlot(slot_id=slot_id, species=species, max_weight=species.max_grams, **kwargs)


class TestCatchSlot:
    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError):
            CatchSlot(slot_id="", species=FishSpecies.BASS, max_weight=100)

    def test_non_positive_weight_rejected(self) -> None:
        with pytest.raises(ValueError):
            CatchSlot(slot_id="s", species=FishSpecies.BASS, max_weight=0)

    def test_defaults(self) -> None:
        slot = _slot("s")
        assert slot.filled is True
        assert slot.enlisted_block == 0


class TestDefaultSlots:
    def test_eighteen_unique_slots(self) -> None:
        slots = default_slots()
        assert len(slots) == 18
        assert len({s.slot_id for s in slots}) == 18

    def test_first_slot_is_bass(self) -> None:
        first = default_slots()[0]
        assert first.slot_id == "catch_0_bass"
        assert first.species is FishSpecies.BASS
        assert first.max_weight == 5200

    def test_every_species_present(self) -> None:
        assert {s.species for s in default_slots()} == set(FishSpecies)

    def test_shallows_lap_has_reduced_weight(self) -> None:
        slot = default_slots()[12]
        assert slot.slot_id == "catch_12_bass"
        assert slot.max_weight == 3900

    def test_enlisted_block(self) -> None:
        assert all(s.enlisted_block == 1024 for s in default_slots(1024))


class TestLake:
    def test_add_and_get(self) -> None:
        lake = Lake()
        slot = _slot("a")
        assert lake.add(slot) is True
        assert lake.get("a") is slot
        assert lake.has("a") is True
        assert len(lake) == 1

    def test_get_unknown_returns_none(self) -> None:
        assert Lake().get("nope") is None

    def test_rejects_none(self) -> None:
        lake = Lake()
        assert lake.add(None) is False
        assert len(lake) == 0

    def test_rejects_unfilled(self) -> None:
        lake = Lake()
        assert lake.add(_slot("a", filled=False)) is False
        assert lake.has("a") is False

    def test_rejects_duplicate_id(self) -> None:
        lake = Lake()
        first = _slot("a")
        lake.add(first)
        assert lake.add(_slot("a", FishSpecies.PIKE)) is False
        assert lake.get("a") is first

    def test_rejects_at_capacity(self) -> None:
        lake = Lake(capacity=2)
        assert lake.add(_slot("a")) is True
        assert lake.add(_slot("b")) is True
        assert lake.add(_slot("c")) is False
        assert lake.slot_ids() == ["a", "b"]

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError):
            Lake(capacity=0)

    def test_insertion_order(self) -> None:
        lake = Lake()
        for sid in ("z", "m", "a"):
            lake.add(_slot(sid))
        assert lake.slot_ids() == ["z", "m", "a"]
        assert [s.slot_id for s in lake.slots()] == ["z", "m", "a"]

    def test_base_seed_from_catch_seed(self) -> None:
        lake = Lake(b"\xde\xad\xbe\xef")
        assert lake.catch_seed == b"\xde\xad\xbe\xef"
        assert lake.base_seed == seed_from_bytes(b"\xde\xad\xbe\xef")
        assert lake.base_seed == 0xDEADBEEF00000000

    def test_snapshot_restore(self) -> None:
        lake = Lake(b"seed", capacity=10)
        for slot in default_slots()[:4]:
            lake.add(slot)

        other = Lake()
        other.restore(lake.snapshot())
        assert other.catch_seed == b"seed"
        assert other.capacity == 10
        assert other.slots() == lake.slots()
