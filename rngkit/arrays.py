"""numpy helpers for bulk sampling.

These fill arrays by calling the scalar operations in row-major order, so an
array is bit-identical to the same sequence of scalar calls on the same
generator. They trade speed for that guarantee; use numpy's own generators
when stream compatibility doesn't matter.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .distributions import NormalSampler
from .prng import BitSource
from .uniform import f64_range, i64_range

Size = int | tuple[int, ...]


def sample_array(
    draw: Callable[[], float], size: Size, dtype=np.float64
) -> np.ndarray:
    arr = np.empty(size, dtype=dtype)
    flat = arr.reshape(-1)
    for i in range(flat.size):
        flat[i] = draw()
    return arr


def uniform_array(
    rng: BitSource, size: Size, lo: float = 0.0, hi: float = 1.0
) -> np.ndarray:
    return sample_array(lambda: f64_range(rng, lo, hi), size)


def integers_array(
    rng: BitSource, lo: int, hi: int, size: Size
) -> np.ndarray:
    """Integers in [lo, hi) as int64. Empty ranges fill with ``lo``."""
    return sample_array(lambda: i64_range(rng, lo, hi), size, dtype=np.int64)


def normal_array(
    sampler: NormalSampler,
    size: Size,
    mean: float = 0.0,
    stddev: float = 1.0,
) -> np.ndarray:
    return sample_array(lambda: sampler.normal(mean, stddev), size)


def bytes_array(rng: BitSource, n: int) -> np.ndarray:
    buf = bytearray(max(0, n))
    rng.fill_bytes(buf)
    return np.frombuffer(bytes(buf), dtype=np.uint8).copy()
