"""Block clock with a monotonic season index."""
from __future__ import annotations


class BlockClock:
    def __init__(self, genesis_block: int = 0, season_blocks: int = 512) -> None:
        if season_blocks <= 0:
            raise ValueError("season_blocks must be positive")
        if genesis_block < 0:
            raise ValueError("genesis_block must be >= 0")
        self._season_blocks = season_blocks
        self._genesis = genesis_block
        self._block = genesis_block
        self._season = genesis_block // season_blocks

    @property
    def block(self) -> int:
        return self._block

    @property
    def season(self) -> int:
        return self._season

    @property
    def season_blocks(self) -> int:
        return self._season_blocks

    @property
    def genesis_block(self) -> int:
        return self._genesis

    def advance_blocks(self, n: int) -> int:
        """Move the block counter forward by *n*.

        The block-derived season never pulls the season index backward,
        so a manual ``advance_season`` survives later block advances.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        self._block += n
        self._season = max(self._season, self._block // self._season_blocks)
        return self._block

    def advance_season(self) -> int:
        self._season += 1
        return self._season

    def reset(self, block: int, season: int) -> None:
        self._block = block
        self._season = season
