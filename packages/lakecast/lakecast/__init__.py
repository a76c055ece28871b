"""lakecast - A deterministic cast-resolution engine for a seasonal fishing economy."""

from lakecast.anglers import Angler, AnglerState, RateLimiter
from lakecast.catch import CatchOutcome, CatchRecord, Fish, resolve_catch
from lakecast.clock import BlockClock
from lakecast.config import LakeConfig
from lakecast.engine import CastResult, Engine, new_engine
from lakecast.lake import CatchSlot, Lake, default_slots
from lakecast.mixer import CastMixer, seed_from_bytes, string_hash
from lakecast.tables import (
    SPECIES_BY_INDEX,
    FishSpecies,
    SeasonPhase,
    TackleType,
    WeatherCondition,
)
from lakecast.types import CastError, SnapshotError

__all__ = [
    "Engine",
    "new_engine",
    "CastResult",
    "CastError",
    "SnapshotError",
    "LakeConfig",
    "BlockClock",
    "Lake",
    "CatchSlot",
    "default_slots",
    "Angler",
    "AnglerState",
    "RateLimiter",
    "Fish",
    "CatchRecord",
    "CatchOutcome",
    "resolve_catch",
    "CastMixer",
    "seed_from_bytes",
    "string_hash",
    "FishSpecies",
    "SPECIES_BY_INDEX",
    "WeatherCondition",
    "TackleType",
    "SeasonPhase",
]
