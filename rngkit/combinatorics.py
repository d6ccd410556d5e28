"""Shuffle, choice, reservoir sampling and weighted selection.

All index draws go through ``u64_below``, so every operation here is
exactly uniform over its outcomes. The number and order of draws is part of
the contract: given the same generator state, each function consumes the
same words and returns the same result.
"""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence, TypeVar

from .prng import BitSource
from .uniform import u64_below

T = TypeVar("T")


def shuffle(rng: BitSource, xs: MutableSequence[T]) -> None:
    """Fisher–Yates (Durstenfeld) shuffle, in place.

    Draws ``len(xs) - 1`` indices; sequences shorter than 2 are untouched.
    """
    for i in range(len(xs) - 1, 0, -1):
        j = u64_below(rng, i + 1)
        xs[i], xs[j] = xs[j], xs[i]


def choose(rng: BitSource, xs: Sequence[T]) -> T | None:
    """One uniformly chosen element, or None if ``xs`` is empty."""
    if len(xs) == 0:
        return None
    return xs[u64_below(rng, len(xs))]


def sample_k(rng: BitSource, xs: Sequence[T], k: int) -> list[T]:
    """Uniform sample of ``min(k, len(xs))`` elements (reservoir algorithm).

    Every k-subset is equally likely. Order within the result is not
    meaningful.
    """
    n = len(xs)
    kk = max(0, min(k, n))
    result = list(xs[:kk])
    for i in range(kk, n):
        j = u64_below(rng, i + 1)
        if j < kk:
            result[j] = xs[i]
    return result


def weighted_index(rng: BitSource, weights: Sequence[float]) -> int | None:
    """Select an index with probability proportional to ``weights``.

    Returns None if there is nothing to select: empty input, a negative or
    non-finite (NaN or infinite) weight, or a total that isn't a positive
    finite number. Consumes one ``next_f64`` otherwise. If floating-point
    drift walks past the end, the last index is returned. Accepts any sized
    sequence, numpy arrays included.
    """
    if len(weights) == 0:
        return None
    total = 0.0
    for w in weights:
        if w < 0.0 or not math.isfinite(w):
            return None
        total += w
    if not (total > 0.0 and math.isfinite(total)):
        return None
    t = rng.next_f64() * total
    for i, w in enumerate(weights):
        if t < w:
            return i
        t -= w
    return len(weights) - 1
