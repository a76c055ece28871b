"""CatchSlot and the bounded Lake registry."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from lakecast.mixer import seed_from_bytes
from lakecast.tables import SPECIES_BY_INDEX, FishSpecies
from lakecast.types import SnapshotError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 96
DEFAULT_SLOT_COUNT = 18


@dataclass(frozen=True)
class CatchSlot:
    """A fishable spot bound to one species.

    Attributes:
        slot_id: Unique key within a lake.
        species: Species caught here.
        max_weight: Upper weight (grams) fed to the weight-bucket draw.
        enlisted_block: Block at which the slot was created.
        filled: Unfilled slots are rejected by the lake.
    """

    slot_id: str
    species: FishSpecies
    max_weight: int
    enlisted_block: int = 0
    filled: bool = True

    def __post_init__(self) -> None:
        if not self.slot_id:
            raise ValueError("CatchSlot slot_id must be non-empty")
        if self.max_weight <= 0:
            raise ValueError(f"max_weight must be > 0, got {self.max_weight}")


def default_slots(block: int = 0) -> list[CatchSlot]:
    """The built-in starter lake.

    One deep-water slot per species at full max weight, then a second lap of
    shallows for the first six species at three quarters of max weight.
    """
    slots: list[CatchSlot] = []
    for i in range(DEFAULT_SLOT_COUNT):
        species = SPECIES_BY_INDEX[i % len(SPECIES_BY_INDEX)]
        if i < len(SPECIES_BY_INDEX):
            max_weight = species.max_grams
        else:
            max_weight = species.max_grams * 3 // 4
        slots.append(
            CatchSlot(
                slot_id=f"catch_{i}_{species.name.lower()}",
                species=species,
                max_weight=max_weight,
                enlisted_block=block,
            )
        )
    return slots


class Lake:
    """Bounded, insertion-ordered slot registry plus the catch seed."""

    def __init__(self, catch_seed: bytes = b"", capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self._seed = bytes(catch_seed)
        self._base_seed = seed_from_bytes(self._seed)
        self._capacity = capacity
        self._slots: dict[str, CatchSlot] = {}
        self._order: list[str] = []

    @property
    def catch_seed(self) -> bytes:
        return self._seed

    @property
    def base_seed(self) -> int:
        return self._base_seed

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, slot: CatchSlot | None) -> bool:
        """Insert *slot*. Returns False if missing, unfilled, duplicate, or full."""
        if slot is None or not slot.filled:
            logger.debug(f"Rejected slot {slot!r}: empty")
            return False
        if slot.slot_id in self._slots:
            logger.debug(f"Rejected slot {slot.slot_id}: duplicate id")
            return False
        if len(self._order) >= self._capacity:
            logger.debug(f"Rejected slot {slot.slot_id}: lake at capacity")
            return False
        self._slots[slot.slot_id] = slot
        self._order.append(slot.slot_id)
        return True

    def get(self, slot_id: str) -> CatchSlot | None:
        return self._slots.get(slot_id)

    def has(self, slot_id: str) -> bool:
        return slot_id in self._slots

    def slot_ids(self) -> list[str]:
        """Slot ids in insertion order."""
        return list(self._order)

    def slots(self) -> list[CatchSlot]:
        return [self._slots[sid] for sid in self._order]

    def __len__(self) -> int:
        return len(self._order)

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        return {
            "catch_seed": self._seed.hex(),
            "capacity": self._capacity,
            "slots": [
                {
                    "slot_id": s.slot_id,
                    "species": s.species.name,
                    "max_weight": s.max_weight,
                    "enlisted_block": s.enlisted_block,
                }
                for s in self.slots()
            ],
        }

    def restore(self, data: dict[str, Any]) -> None:
        self._seed = bytes.fromhex(data["catch_seed"])
        self._base_seed = seed_from_bytes(self._seed)
        self._capacity = data["capacity"]
        self._slots.clear()
        self._order.clear()
        for slot_data in data.get("slots", []):
            try:
                species = FishSpecies[slot_data["species"]]
            except KeyError:
                raise SnapshotError(
                    f"Unknown species in slot {slot_data.get('slot_id')!r}: "
                    f"{slot_data.get('species')!r}"
                ) from None
            self.add(
                CatchSlot(
                    slot_id=slot_data["slot_id"],
                    species=species,
                    max_weight=slot_data["max_weight"],
                    enlisted_block=slot_data["enlisted_block"],
                )
            )
