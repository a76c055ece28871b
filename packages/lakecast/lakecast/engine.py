"""Engine - cast orchestration, world clock, queries, and lifecycle hooks."""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from lakecast import stats
from lakecast.anglers import Angler, AnglerState, RateLimiter
from lakecast.catch import CatchRecord, Fish, resolve_catch
from lakecast.clock import BlockClock
from lakecast.config import LakeConfig
from lakecast.lake import CatchSlot, Lake, default_slots
from lakecast.mixer import CastMixer
from lakecast.tables import FishSpecies, SeasonPhase, TackleType, WeatherCondition
from lakecast.types import CastError, SnapshotError

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1

CatchHook = Callable[[str, CatchRecord], None]
SeasonHook = Callable[[int, int], None]


@dataclass(frozen=True)
class CastResult:
    success: bool
    error: CastError | None = None
    record: CatchRecord | None = None
    bait_credits: int = 0

    @classmethod
    def failed(cls, error: CastError) -> CastResult:
        return cls(success=False, error=error)


class Engine:
    """Single-writer cast engine.

    Every public method runs under one re-entrant lock, and ``cast_line``
    holds it for the whole read-check-write sequence.
    """

    def __init__(
        self,
        genesis_block: int = 0,
        catch_seed: bytes = b"",
        slots: Iterable[CatchSlot] | None = None,
        config: LakeConfig | None = None,
    ) -> None:
        self._config = config if config is not None else LakeConfig()
        self._clock = BlockClock(genesis_block, self._config.season_blocks)
        self._lake = Lake(catch_seed, capacity=self._config.max_slots)
        self._limiter = RateLimiter(self._config)
        self._anglers: dict[str, Angler] = {}
        self._total_casts = 0
        self._total_bait_claimed = 0
        self._catch_hooks: list[CatchHook] = []
        self._season_hooks: list[SeasonHook] = []
        self._lock = threading.RLock()

        if slots is None:
            slots = default_slots(genesis_block)
        for slot in slots:
            self._lake.add(slot)

        logger.info(
            f"Engine ready at block {genesis_block} with {len(self._lake)} slots"
        )

    # -- Properties --

    @property
    def config(self) -> LakeConfig:
        return self._config

    @property
    def lake(self) -> Lake:
        return self._lake

    @property
    def block(self) -> int:
        with self._lock:
            return self._clock.block

    @property
    def season(self) -> int:
        with self._lock:
            return self._clock.season

    @property
    def season_phase(self) -> SeasonPhase:
        return SeasonPhase.from_season_index(self.season)

    @property
    def total_casts(self) -> int:
        with self._lock:
            return self._total_casts

    @property
    def total_bait_claimed(self) -> int:
        with self._lock:
            return self._total_bait_claimed

    # -- Hooks --

    def on_catch(self, hook: CatchHook) -> None:
        self._catch_hooks.append(hook)

    def on_season_change(self, hook: SeasonHook) -> None:
        self._season_hooks.append(hook)

    # -- Mutations --

    def add_slot(self, slot: CatchSlot | None) -> bool:
        with self._lock:
            return self._lake.add(slot)

    def cast_line(
        self,
        address: str,
        slot_id: str,
        weather: WeatherCondition = WeatherCondition.CLEAR,
        tackle: TackleType = TackleType.BASIC,
    ) -> CastResult:
        with self._lock:
            block = self._clock.block
            season = self._clock.season

            existing = self._anglers.get(address)
            # The season rollover runs on a copy and is committed only when
            # the result is not SLOT_EMPTY.
            angler = (
                dataclasses.replace(existing)
                if existing is not None
                else Angler(address=address)
            )

            if not self._limiter.check(angler, block, season):
                if existing is not None:
                    self._anglers[address] = angler
                return CastResult.failed(CastError.COOLDOWN_OR_CAP)

            slot = self._lake.get(slot_id)
            if slot is None or not slot.filled:
                return CastResult.failed(CastError.SLOT_EMPTY)

            mixer = CastMixer.for_cast(
                self._lake.base_seed, block, slot.slot_id, address, slot.species.index
            )
            outcome = resolve_catch(
                mixer, slot, season, weather, tackle, self._config.per_cast_cap
            )
            record = CatchRecord(
                block=block,
                slot_id=slot.slot_id,
                fish=outcome.fish,
                bait_credits=outcome.bait_credits,
                weather=weather,
                tackle=tackle,
            )

            self._limiter.record(angler, record)
            self._anglers[address] = angler
            self._total_casts += 1
            self._total_bait_claimed += record.bait_credits
            logger.debug(
                f"{address} cast {slot.slot_id} at block {block}: "
                f"{outcome.fish.species.name} {outcome.fish.weight_grams}g "
                f"-> {record.bait_credits} bait"
            )
            self._advance(1)

            for hook in self._catch_hooks:
                hook(address, record)
            return CastResult(
                success=True, record=record, bait_credits=record.bait_credits
            )

    def advance_blocks(self, n: int) -> int:
        with self._lock:
            return self._advance(n)

    def advance_season(self) -> int:
        with self._lock:
            before = self._clock.season
            after = self._clock.advance_season()
            self._season_changed(before, after)
            return after

    def _advance(self, n: int) -> int:
        before = self._clock.season
        block = self._clock.advance_blocks(n)
        if self._clock.season != before:
            self._season_changed(before, self._clock.season)
        return block

    def _season_changed(self, before: int, after: int) -> None:
        logger.info(
            f"Season {before} -> {after} "
            f"({SeasonPhase.from_season_index(after).name}) at block {self._clock.block}"
        )
        for hook in self._season_hooks:
            hook(before, after)

    # -- Angler queries --

    def anglers(self) -> list[str]:
        """Addresses in first-successful-cast order."""
        with self._lock:
            return list(self._anglers)

    def angler(self, address: str) -> Angler | None:
        """Copy of the angler ledger, or None if the address never cast."""
        with self._lock:
            angler = self._anglers.get(address)
            if angler is None:
                return None
            return dataclasses.replace(angler, history=list(angler.history))

    def balance(self, address: str) -> int:
        with self._lock:
            angler = self._anglers.get(address)
            return angler.balance if angler is not None else 0

    def history(self, address: str) -> list[CatchRecord]:
        with self._lock:
            angler = self._anglers.get(address)
            return list(angler.history) if angler is not None else []

    def species_counts(self, address: str) -> dict[FishSpecies, int]:
        return stats.species_counts(self.history(address))

    def total_weight(self, address: str) -> int:
        return stats.total_weight(self.history(address))

    def heaviest_catch(self, address: str) -> CatchRecord | None:
        return stats.heaviest(self.history(address))

    def angler_state(self, address: str) -> AnglerState:
        with self._lock:
            angler = self._anglers.get(address) or Angler(address=address)
            return self._limiter.state(angler, self._clock.block, self._clock.season)

    def cooldown_remaining(self, address: str) -> int:
        with self._lock:
            angler = self._anglers.get(address)
            if angler is None:
                return 0
            return self._limiter.cooldown_remaining(angler, self._clock.block)

    # -- Leaderboards --

    def top_by_balance(self, n: int) -> list[tuple[str, int]]:
        with self._lock:
            ranked = stats.top_n(
                list(self._anglers.values()), key=lambda a: a.balance, n=n
            )
            return [(a.address, a.balance) for a in ranked]

    def top_by_weight(self, n: int) -> list[tuple[str, int]]:
        with self._lock:
            weights = [
                (a.address, stats.total_weight(a.history))
                for a in self._anglers.values()
            ]
            return stats.top_n(weights, key=lambda item: item[1], n=n)

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "version": _SNAPSHOT_VERSION,
                "genesis_block": self._clock.genesis_block,
                "block": self._clock.block,
                "season": self._clock.season,
                "season_blocks": self._clock.season_blocks,
                "total_casts": self._total_casts,
                "total_bait_claimed": self._total_bait_claimed,
                "lake": self._lake.snapshot(),
                "anglers": [_angler_to_dict(a) for a in self._anglers.values()],
            }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )

        snap_season_blocks = data.get("season_blocks")
        if snap_season_blocks != self._config.season_blocks:
            raise SnapshotError(
                f"Season length mismatch: snapshot has {snap_season_blocks}, "
                f"engine has {self._config.season_blocks}"
            )

        with self._lock:
            anglers = {
                a_data["address"]: _angler_from_dict(a_data)
                for a_data in data.get("anglers", [])
            }
            lake = Lake(capacity=self._config.max_slots)
            lake.restore(data["lake"])
            clock = BlockClock(data["genesis_block"], self._config.season_blocks)
            clock.reset(data["block"], data["season"])
            total_casts = data["total_casts"]
            total_bait_claimed = data["total_bait_claimed"]

            self._lake = lake
            self._clock = clock
            self._anglers = anglers
            self._total_casts = total_casts
            self._total_bait_claimed = total_bait_claimed
            logger.info(
                f"Restored engine at block {self._clock.block} "
                f"with {len(self._anglers)} anglers"
            )


def new_engine(
    genesis_block: int = 0,
    catch_seed: bytes = b"",
    slots: Iterable[CatchSlot] | None = None,
    config: LakeConfig | None = None,
) -> Engine:
    """Build an engine seeded with *slots*, or the default 18-slot lake."""
    return Engine(
        genesis_block=genesis_block, catch_seed=catch_seed, slots=slots, config=config
    )


def _record_to_dict(record: CatchRecord) -> dict[str, Any]:
    return {
        "block": record.block,
        "slot_id": record.slot_id,
        "species": record.fish.species.name,
        "weight_grams": record.fish.weight_grams,
        "rarity": record.fish.rarity,
        "bait_credits": record.bait_credits,
        "weather": record.weather.name,
        "tackle": record.tackle.name,
    }


def _record_from_dict(data: dict[str, Any]) -> CatchRecord:
    try:
        species = FishSpecies[data["species"]]
        weather = WeatherCondition[data["weather"]]
        tackle = TackleType[data["tackle"]]
    except KeyError as exc:
        raise SnapshotError(f"Unknown catalog name in catch record: {exc}") from None
    return CatchRecord(
        block=data["block"],
        slot_id=data["slot_id"],
        fish=Fish(species, data["weight_grams"], data["rarity"]),
        bait_credits=data["bait_credits"],
        weather=weather,
        tackle=tackle,
    )


def _angler_to_dict(angler: Angler) -> dict[str, Any]:
    return {
        "address": angler.address,
        "balance": angler.balance,
        "last_cast_block": angler.last_cast_block,
        "last_season_index": angler.last_season_index,
        "claimed_this_season": angler.claimed_this_season,
        "history": [_record_to_dict(r) for r in angler.history],
    }


def _angler_from_dict(data: dict[str, Any]) -> Angler:
    return Angler(
        address=data["address"],
        balance=data["balance"],
        last_cast_block=data["last_cast_block"],
        last_season_index=data["last_season_index"],
        claimed_this_season=data["claimed_this_season"],
        history=[_record_from_dict(r) for r in data.get("history", [])],
    )
