"""Angler ledger and the per-angler cooldown / seasonal-cap limiter."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from lakecast.catch import CatchRecord
from lakecast.config import LakeConfig

logger = logging.getLogger(__name__)

NEVER = -1


class AnglerState(Enum):
    """Derived limiter state. Never stored, always computed from the ledger."""

    NO_HISTORY = "no-history"
    COOLING_DOWN = "cooling-down"
    ELIGIBLE = "eligible"
    CAPPED = "capped"


@dataclass
class Angler:
    """Mutable per-angler ledger.

    Attributes:
        address: Unique key.
        balance: Total bait credited. Only ever increases.
        last_cast_block: Block of the last successful cast, -1 if none.
        last_season_index: Last season the limiter rolled over into, -1 if none.
        claimed_this_season: Claim units consumed in the current season.
        history: Catch records in cast order.
    """

    address: str
    balance: int = 0
    last_cast_block: int = NEVER
    last_season_index: int = NEVER
    claimed_this_season: int = 0
    history: list[CatchRecord] = field(default_factory=list)


class RateLimiter:
    """Gates casts on cooldown and seasonal claim cap.

    The cap counts claim units, not bait earned: every successful cast
    reserves ``per_catch_claim`` units whatever it actually awarded.
    """

    def __init__(self, config: LakeConfig | None = None) -> None:
        self._config = config if config is not None else LakeConfig()

    @property
    def config(self) -> LakeConfig:
        return self._config

    # --- Transitions ---

    def roll_season(self, angler: Angler, season_index: int) -> bool:
        """Reset the claim counter if *season_index* is newer. Returns True on reset."""
        if season_index > angler.last_season_index:
            angler.last_season_index = season_index
            angler.claimed_this_season = 0
            return True
        return False

    def check(self, angler: Angler, block: int, season_index: int) -> bool:
        """Roll the season forward, then test cooldown and cap."""
        self.roll_season(angler, season_index)
        if self._cooling_down(angler, block):
            logger.debug(f"{angler.address} on cooldown at block {block}")
            return False
        if self._capped(angler.claimed_this_season):
            logger.debug(f"{angler.address} at seasonal cap in season {season_index}")
            return False
        return True

    def record(self, angler: Angler, record: CatchRecord) -> None:
        """Apply the bookkeeping of a successful cast."""
        angler.last_cast_block = record.block
        angler.claimed_this_season += self._config.per_catch_claim
        angler.balance += record.bait_credits
        angler.history.append(record)

    # --- Queries (no mutation) ---

    def state(self, angler: Angler, block: int, season_index: int) -> AnglerState:
        """Derived state as ``check`` would see it, without rolling the season."""
        claimed = angler.claimed_this_season
        if season_index > angler.last_season_index:
            claimed = 0
        if self._cooling_down(angler, block):
            return AnglerState.COOLING_DOWN
        if self._capped(claimed):
            return AnglerState.CAPPED
        if angler.last_cast_block == NEVER:
            return AnglerState.NO_HISTORY
        return AnglerState.ELIGIBLE

    def cooldown_remaining(self, angler: Angler, block: int) -> int:
        if angler.last_cast_block == NEVER:
            return 0
        return max(0, angler.last_cast_block + self._config.cooldown_blocks - block)

    # --- Internal helpers ---

    def _cooling_down(self, angler: Angler, block: int) -> bool:
        if angler.last_cast_block == NEVER:
            return False
        return block < angler.last_cast_block + self._config.cooldown_blocks

    def _capped(self, claimed: int) -> bool:
        return claimed + self._config.per_catch_claim > self._config.season_cap
