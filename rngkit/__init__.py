"""Deterministic XorShift64* / PCG32 generators and sampling helpers."""

from .codec import random_bytes, string_base62
from .combinatorics import choose, sample_k, shuffle, weighted_index
from .distributions import MathOps, NormalSampler, exponential
from .prng import (
    PCG32,
    BitGenerator,
    BitSource,
    XorShift64Star,
    build_generator,
    pcg32_from_seed,
    xorshift64_from_seed,
)
from .seeding import splitmix64
from .types import GeneratorConfig
from .uniform import bernoulli, f32_range, f64_range, i64_range, u64_below

__all__ = [
    "BitGenerator",
    "BitSource",
    "GeneratorConfig",
    "MathOps",
    "NormalSampler",
    "PCG32",
    "XorShift64Star",
    "bernoulli",
    "build_generator",
    "choose",
    "exponential",
    "f32_range",
    "f64_range",
    "i64_range",
    "pcg32_from_seed",
    "random_bytes",
    "sample_k",
    "shuffle",
    "splitmix64",
    "string_base62",
    "u64_below",
    "weighted_index",
    "xorshift64_from_seed",
]
