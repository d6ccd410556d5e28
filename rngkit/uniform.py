"""Bounded integers and ranged uniform samples.

``u64_below`` is the primitive every integer-valued operation in this
package goes through (ranges, shuffles, choices, base62 strings). It uses
rejection sampling, so results are exactly uniform. The retry loop has no
worst-case bound, but each attempt is rejected with probability below
``bound / 2**64``, so the expected number of draws is effectively one.
"""

from __future__ import annotations

from .prng import BitSource
from .seeding import MASK64

U64_MAX = MASK64


def u64_below(rng: BitSource, bound: int) -> int:
    """Uniform integer in [0, bound). ``bound == 0`` returns 0 without drawing.

    Raises ValueError if ``bound`` is not a u64.
    """
    if bound < 0 or bound > U64_MAX:
        raise ValueError(f"bound must be in [0, 2**64), got {bound}")
    if bound == 0:
        return 0
    limit = U64_MAX - (U64_MAX % bound)
    while True:
        r = rng.next_u64()
        if r < limit:
            return r % bound


def i64_range(rng: BitSource, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi). Returns ``lo`` when the range is empty."""
    if hi <= lo:
        return lo
    return lo + u64_below(rng, hi - lo)


def f64_range(rng: BitSource, lo: float, hi: float) -> float:
    """Uniform float in [lo, hi). Returns ``lo`` unless ``hi > lo``."""
    if not hi > lo:
        return lo
    return lo + (hi - lo) * rng.next_f64()


def f32_range(rng: BitSource, lo: float, hi: float) -> float:
    """Like ``f64_range`` but with 24-bit resolution (one u32 draw)."""
    if not hi > lo:
        return lo
    return lo + (hi - lo) * rng.next_f32()


def bernoulli(rng: BitSource, p: float) -> bool:
    """True with probability ``p``. No draw when ``p`` is outside (0, 1)."""
    if not p > 0.0:
        return False
    if p >= 1.0:
        return True
    return rng.next_f64() < p
