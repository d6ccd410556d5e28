from __future__ import annotations

import numpy as np

from rngkit.arrays import (
    bytes_array,
    integers_array,
    normal_array,
    sample_array,
    uniform_array,
)
from rngkit.codec import random_bytes
from rngkit.distributions import NormalSampler
from rngkit.prng import PCG32, XorShift64Star
from rngkit.uniform import f64_range, i64_range


def test_sample_array_shape_and_order():
    counter = iter(range(100))
    arr = sample_array(lambda: next(counter), (2, 3))
    assert arr.shape == (2, 3)
    assert arr.tolist() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]


def test_uniform_array_matches_scalar_calls():
    a = XorShift64Star(12)
    b = XorShift64Star(12)
    arr = uniform_array(a, 20, -1.0, 1.0)
    expected = [f64_range(b, -1.0, 1.0) for _ in range(20)]
    assert arr.tolist() == expected


def test_integers_array():
    a = PCG32(1)
    b = PCG32(1)
    arr = integers_array(a, 3, 9, (4, 5))
    assert arr.dtype == np.int64
    assert arr.shape == (4, 5)
    assert ((arr >= 3) & (arr < 9)).all()
    assert arr.reshape(-1).tolist() == [i64_range(b, 3, 9) for _ in range(20)]


def test_normal_array_shares_sampler_cache():
    sampler = NormalSampler(PCG32(7))
    twin = NormalSampler(PCG32(7))
    arr = normal_array(sampler, 5, 1.0, 0.5)
    assert arr.tolist() == [twin.normal(1.0, 0.5) for _ in range(5)]
    # Odd count leaves a spare behind.
    assert sampler.has_spare


def test_bytes_array():
    a = XorShift64Star(2)
    b = XorShift64Star(2)
    arr = bytes_array(a, 13)
    assert arr.dtype == np.uint8
    assert arr.tobytes() == random_bytes(b, 13)
    arr[0] = 0  # writable copy
