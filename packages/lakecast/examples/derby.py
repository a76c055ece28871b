"""Derby demo -- a seeded multi-angler fishing derby over several seasons.

Each round, every angler picks a random slot, weather and tackle and casts.
Casts rejected by cooldown or the seasonal cap are counted, the clock is
advanced, and at the end both leaderboards are printed.

Run:
    python -m examples.derby [OPTIONS]

Options:
    --seed      Catch seed (hex string, default: 5eed)
    --anglers   Number of anglers (default: 6)
    --rounds    Casting rounds (default: 60)
    --gap       Blocks advanced between rounds (default: 24)
    --top       Leaderboard size (default: 5)
    -v          Debug logging
"""
from __future__ import annotations

import argparse
import logging
import random as _random_mod

from lakecast import (
    CastError,
    Engine,
    TackleType,
    WeatherCondition,
    new_engine,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Lake derby -- lakecast demo")
    p.add_argument("--seed", type=str, default="5eed", help="Catch seed as hex (default: 5eed)")
    p.add_argument("--anglers", type=int, default=6, help="Number of anglers (default: 6)")
    p.add_argument("--rounds", type=int, default=60, help="Casting rounds (default: 60)")
    p.add_argument("--gap", type=int, default=24, help="Blocks between rounds (default: 24)")
    p.add_argument("--top", type=int, default=5, help="Leaderboard size (default: 5)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()
    args.anglers = max(1, args.anglers)
    return args


def run_derby(engine: Engine, anglers: list[str], rounds: int, gap: int,
              rng: _random_mod.Random) -> dict[CastError, int]:
    rejected = {code: 0 for code in CastError}
    slot_ids = engine.lake.slot_ids()
    weathers = list(WeatherCondition)
    tackles = list(TackleType)
    for _ in range(rounds):
        weather = rng.choice(weathers)
        for address in anglers:
            result = engine.cast_line(
                address, rng.choice(slot_ids), weather, rng.choice(tackles)
            )
            if result.error is not None:
                rejected[result.error] += 1
        engine.advance_blocks(gap)
    return rejected


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = new_engine(genesis_block=0, catch_seed=bytes.fromhex(args.seed))
    anglers = [f"angler_{i}" for i in range(args.anglers)]
    rng = _random_mod.Random(args.seed)

    rejected = run_derby(engine, anglers, args.rounds, args.gap, rng)

    print(f"\nBlock {engine.block}, season {engine.season} ({engine.season_phase.name})")
    print(f"Casts: {engine.total_casts}  Bait claimed: {engine.total_bait_claimed}")
    for code, count in rejected.items():
        print(f"  rejected {code.value}: {count}")

    print("\nTop by balance")
    for rank, (address, balance) in enumerate(engine.top_by_balance(args.top), 1):
        print(f"  {rank}. {address:<12} {balance:>6} bait")

    print("\nTop by total weight")
    for rank, (address, grams) in enumerate(engine.top_by_weight(args.top), 1):
        counts = engine.species_counts(address)
        best = max(counts, key=counts.get).display_name if counts else "-"
        record = engine.heaviest_catch(address)
        biggest = (
            f"{record.fish.species.display_name} {record.fish.weight_grams}g"
            if record is not None else "-"
        )
        print(f"  {rank}. {address:<12} {grams / 1000:>8.1f} kg  (mostly {best}, biggest {biggest})")


if __name__ == "__main__":
    main()
