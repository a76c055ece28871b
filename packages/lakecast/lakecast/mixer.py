"""Deterministic per-cast mixer.

A ``CastMixer`` holds a single 64-bit state. ``mix`` folds a cast's identity
(block, slot, angler, species) into the state through an avalanche
finalizer; the draw methods then advance the state with a fixed LCG step.
Reproducibility depends on draw order, so callers must consume draws in a
fixed sequence.

Non-goals: cryptographic strength. This is only meant to be reproducible
and well-distributed.
"""
from __future__ import annotations

MASK64 = 0xFFFFFFFFFFFFFFFF

_BLOCK_MIX = 0x9E3779B97F4A7C15
_SPECIES_MIX = 0xC2B2AE3D27D4EB4F
_LCG_MULT = 6364136223846793005
_LCG_INC = 1442695040888963407
_DOUBLE_UNIT = 1.0 / (1 << 53)

# (percentile upper bound, fraction of max weight); anything above the last
# bound lands in the top bucket.
_WEIGHT_BUCKETS: tuple[tuple[int, float], ...] = (
    (15, 0.25),
    (45, 0.55),
    (80, 0.82),
)
_TOP_BUCKET = 0.97


def string_hash(text: str) -> int:
    """Stable signed 32-bit base-31 polynomial hash over UTF-16 code units.

    Characters outside the BMP contribute their two surrogate units, the
    same as Java's ``String.hashCode``. Python's built-in ``hash()`` is
    salted per process and cannot be used for reproducible seeds.
    """
    data = text.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return h


def seed_from_bytes(seed: bytes) -> int:
    """First 8 bytes of *seed*, big-endian, zero-padded on the right."""
    return int.from_bytes(bytes(seed[:8]).ljust(8, b"\x00"), "big")


def _avalanche(z: int) -> int:
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


class CastMixer:
    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & MASK64

    @classmethod
    def for_cast(
        cls,
        seed: int,
        block: int,
        slot_id: str,
        angler: str,
        species_index: int,
    ) -> CastMixer:
        """Fresh mixer with the cast identity already folded in."""
        mixer = cls(seed)
        mixer.mix(block, slot_id, angler, species_index)
        return mixer

    @property
    def state(self) -> int:
        return self._state

    def mix(self, block: int, slot_id: str, angler: str, species_index: int) -> int:
        z = self._state ^ ((block * _BLOCK_MIX) & MASK64)
        z ^= (string_hash(slot_id) ^ string_hash(angler)) & MASK64
        z = (z + species_index * _SPECIES_MIX) & MASK64
        self._state = _avalanche(z)
        return self._state

    def _step(self) -> int:
        self._state = (self._state * _LCG_MULT + _LCG_INC) & MASK64
        return self._state

    def next_int(self, bound: int) -> int:
        """Uniform-ish int in [0, bound). Returns 0 for bound <= 0."""
        if bound <= 0:
            return 0
        return (self._step() >> 33) % bound

    def next_double(self) -> float:
        """Float in [0.0, 1.0) from the top 53 bits of state."""
        return (self._step() >> 11) * _DOUBLE_UNIT

    def weight_bucket(self, max_grams: int) -> int:
        percentile = self.next_int(100)
        for bound, fraction in _WEIGHT_BUCKETS:
            if percentile < bound:
                return int(max_grams * fraction)
        return int(max_grams * _TOP_BUCKET)
