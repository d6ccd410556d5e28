"""Seed mixing and entropy collaborators.

``splitmix64`` diffuses a raw 64-bit seed into a well-distributed state word
so that small or adjacent seeds (0, 1, 2, ...) don't produce correlated
streams. It runs only at construction time.

Entropy and time are collaborators, not globals: generators built via
``from_entropy`` take an ``EntropySource`` and a ``Clock`` so tests can
substitute fixed stubs. When the entropy source reports ``0`` (unavailable),
the seed falls back to a mixed monotonic timestamp. That fallback varies
between runs but is weak; nothing here is suitable for security-sensitive
use.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Protocol

logger = logging.getLogger(__name__)

MASK64 = 0xFFFFFFFFFFFFFFFF
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX1 = 0xBF58476D1CE4E5B9
_MIX2 = 0x94D049BB133111EB
_CLOCK_SALT = 0xD1B54A32D192ED03


def splitmix64(x: int) -> int:
    z = (x + GOLDEN_GAMMA) & MASK64
    z = ((z ^ (z >> 30)) * _MIX1) & MASK64
    z = ((z ^ (z >> 27)) * _MIX2) & MASK64
    return z ^ (z >> 31)


class EntropySource(Protocol):
    def entropy64(self) -> int:
        """A u64 from the platform. 0 means unavailable."""
        ...


class Clock(Protocol):
    def monotonic_time_ns(self) -> int: ...


class OsEntropy:
    """Reads 8 bytes from the OS random source, little-endian."""

    def entropy64(self) -> int:
        try:
            raw = os.urandom(8)
        except (NotImplementedError, OSError):
            return 0
        return int.from_bytes(raw, "little")


class FixedEntropy:
    def __init__(self, value: int) -> None:
        self.value = value & MASK64

    def entropy64(self) -> int:
        return self.value


class MonotonicClock:
    def monotonic_time_ns(self) -> int:
        return time.monotonic_ns()


class FixedClock:
    def __init__(self, ns: int) -> None:
        self.ns = ns

    def monotonic_time_ns(self) -> int:
        return self.ns


def seed_from_entropy(
    entropy: EntropySource | None = None,
    clock: Clock | None = None,
) -> int:
    """Return a 64-bit seed from ``entropy``, or a clock-derived fallback.

    The fallback is ``splitmix64(monotonic_ns ^ 0xD1B54A32D192ED03)``. It is
    low quality: two processes started in the same nanosecond agree.
    """
    if entropy is None:
        entropy = OsEntropy()
    value = entropy.entropy64() & MASK64
    if value != 0:
        return value
    if clock is None:
        clock = MonotonicClock()
    logger.warning(
        "entropy source unavailable; seeding from monotonic clock (weak)"
    )
    return splitmix64((clock.monotonic_time_ns() & MASK64) ^ _CLOCK_SALT)
