"""Lake configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LakeConfig:
    """Immutable tunables for the cast engine.

    Attributes:
        season_blocks: Blocks per season.
        cooldown_blocks: Blocks an angler must wait between casts.
        per_catch_claim: Claim units reserved by every successful cast.
        season_cap: Claim units an angler may consume per season.
        per_cast_cap: Maximum bait credits awarded for a single cast.
        max_slots: Lake capacity.
    """

    season_blocks: int = 512
    cooldown_blocks: int = 48
    per_catch_claim: int = 75
    season_cap: int = 750
    per_cast_cap: int = 75
    max_slots: int = 96

    def __post_init__(self) -> None:
        if self.season_blocks <= 0:
            raise ValueError(f"season_blocks must be > 0, got {self.season_blocks}")
        if self.cooldown_blocks < 0:
            raise ValueError(f"cooldown_blocks must be >= 0, got {self.cooldown_blocks}")
        if self.per_catch_claim <= 0:
            raise ValueError(f"per_catch_claim must be > 0, got {self.per_catch_claim}")
        if self.season_cap < 0:
            raise ValueError(f"season_cap must be >= 0, got {self.season_cap}")
        if self.per_cast_cap < 0:
            raise ValueError(f"per_cast_cap must be >= 0, got {self.per_cast_cap}")
        if self.max_slots <= 0:
            raise ValueError(f"max_slots must be > 0, got {self.max_slots}")

    @property
    def casts_per_season(self) -> int:
        """Successful casts an angler can make before the seasonal cap."""
        return self.season_cap // self.per_catch_claim
