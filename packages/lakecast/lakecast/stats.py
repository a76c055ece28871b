"""Aggregations over catch histories and top-N ranking."""
from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

from lakecast.catch import CatchRecord
from lakecast.tables import FishSpecies

T = TypeVar("T")


def species_counts(history: Iterable[CatchRecord]) -> dict[FishSpecies, int]:
    """Catches per species, keyed in first-caught order."""
    counts: dict[FishSpecies, int] = {}
    for record in history:
        species = record.fish.species
        counts[species] = counts.get(species, 0) + 1
    return counts


def total_weight(history: Iterable[CatchRecord]) -> int:
    return sum(record.fish.weight_grams for record in history)


def heaviest(history: Iterable[CatchRecord]) -> CatchRecord | None:
    best: CatchRecord | None = None
    for record in history:
        if best is None or record.fish.weight_grams > best.fish.weight_grams:
            best = record
    return best


def top_n(items: Sequence[T], key: Callable[[T], int], n: int) -> list[T]:
    """Highest *key* first. Ties keep the order of *items* (stable sort)."""
    if n <= 0:
        return []
    return sorted(items, key=key, reverse=True)[:n]
