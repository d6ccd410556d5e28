"""Bit generators: XorShift64* and PCG32.

Both generators produce raw 32/64-bit words and nothing else. Everything
built on top (bounded integers, shuffles, distributions, byte strings) lives
in the sibling modules and only talks to the ``BitSource`` protocol:
``next_u64``, ``next_u32``, ``next_f64``, ``next_f32`` and ``fill_bytes``.

  * **XorShift64*** — 64-bit state, three xor-shifts then an odd multiply
    on output. The state is never zero (zero is a fixed point).
  * **PCG32** — the PCG-XSH-RR variant (32-bit output, 64-bit LCG state).
    Reference: https://www.pcg-random.org/

Neither is suitable for security-sensitive use. Instances are not
thread-safe; give each thread its own generator.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from .seeding import (
    GOLDEN_GAMMA,
    MASK64,
    Clock,
    EntropySource,
    seed_from_entropy,
    splitmix64,
)
from .types import XORSHIFT64, GeneratorConfig

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF
_F64_SCALE = 1.0 / (1 << 53)
_F32_SCALE = 1.0 / (1 << 24)


class BitSource(Protocol):
    """What the sampling modules need from a generator."""

    def next_u64(self) -> int: ...

    def next_u32(self) -> int: ...

    def next_f64(self) -> float: ...

    def next_f32(self) -> float: ...

    def fill_bytes(self, dest: bytearray | memoryview) -> None: ...


class BitGenerator(ABC):
    """Float and byte shaping shared by the concrete generators.

    Subclasses provide ``next_u64`` and ``next_u32``; everything else here
    is written once against those two.
    """

    # Bytes produced per native draw in fill_bytes.
    _WORD_BYTES = 8

    @abstractmethod
    def next_u64(self) -> int: ...

    @abstractmethod
    def next_u32(self) -> int: ...

    def _next_word(self) -> int:
        return self.next_u64()

    def next_f64(self) -> float:
        """Uniform float in [0, 1) from the top 53 bits of a u64."""
        return (self.next_u64() >> 11) * _F64_SCALE

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next_f64()

    def next_f32(self) -> float:
        """Uniform float in [0, 1) with 24 bits of resolution."""
        return (self.next_u32() >> 8) * _F32_SCALE

    def fill_bytes(self, dest: bytearray | memoryview) -> None:
        """Overwrite ``dest`` with random bytes, words packed little-endian.

        A trailing partial word contributes its low-order bytes.
        """
        width = self._WORD_BYTES
        n = len(dest)
        i = 0
        while i < n:
            chunk = self._next_word().to_bytes(width, "little")
            take = min(width, n - i)
            dest[i : i + take] = chunk[:take]
            i += take


class XorShift64Star(BitGenerator):
    _MUL = 2685821657736338717  # 0x2545F4914F6CDD1D

    def __init__(self, seed: int) -> None:
        state = splitmix64(seed & MASK64)
        if state == 0:
            state = GOLDEN_GAMMA
        self._state: int = state

    @classmethod
    def from_seed(cls, seed: int) -> XorShift64Star:
        logger.debug("xorshift64 generator from explicit seed")
        return cls(seed)

    @classmethod
    def from_entropy(
        cls,
        entropy: EntropySource | None = None,
        clock: Clock | None = None,
    ) -> XorShift64Star:
        logger.debug("xorshift64 generator from entropy")
        return cls(seed_from_entropy(entropy, clock))

    @property
    def state(self) -> int:
        return self._state

    def next_u64(self) -> int:
        s = self._state
        s ^= s >> 12
        s ^= (s << 25) & MASK64
        s ^= s >> 27
        self._state = s
        return (s * self._MUL) & MASK64

    def next_u32(self) -> int:
        """High 32 bits of one u64 draw."""
        return self.next_u64() >> 32


class PCG32(BitGenerator):
    _MASK32 = _MASK32
    _MASK64 = MASK64
    _MUL = 6364136223846793005
    _WORD_BYTES = 4

    def __init__(self, seed: int, seq: int = 0) -> None:
        self._state: int = 0
        self._inc: int = ((seq << 1) | 1) & self._MASK64
        self._advance()
        self._state = (self._state + seed) & self._MASK64
        self._advance()

    @classmethod
    def from_seed(cls, seed: int, seq: int = 0) -> PCG32:
        logger.debug("pcg32 generator from explicit seed, sequence=%d", seq)
        return cls(seed, seq)

    @classmethod
    def from_entropy(
        cls,
        seq: int = 0,
        entropy: EntropySource | None = None,
        clock: Clock | None = None,
    ) -> PCG32:
        logger.debug("pcg32 generator from entropy, sequence=%d", seq)
        return cls(seed_from_entropy(entropy, clock), seq)

    @property
    def state(self) -> int:
        return self._state

    @property
    def inc(self) -> int:
        return self._inc

    def _advance(self) -> None:
        self._state = (self._state * self._MUL + self._inc) & self._MASK64

    def _next_word(self) -> int:
        return self.next_u32()

    def next_u32(self) -> int:
        old = self._state
        self._advance()
        xorshifted = (((old >> 18) ^ old) >> 27) & self._MASK32
        rot = (old >> 59) & 31
        return (
            (xorshifted >> rot) | (xorshifted << ((-rot) & 31))
        ) & self._MASK32

    def next_u64(self) -> int:
        """Two u32 draws, high word first."""
        hi = self.next_u32()
        lo = self.next_u32()
        return (hi << 32) | lo


def xorshift64_from_seed(seed: int) -> XorShift64Star:
    return XorShift64Star.from_seed(seed)


def pcg32_from_seed(seed: int, sequence: int = 0) -> PCG32:
    return PCG32.from_seed(seed, sequence)


def build_generator(
    config: GeneratorConfig,
    entropy: EntropySource | None = None,
    clock: Clock | None = None,
) -> BitGenerator:
    """Construct the generator described by ``config``.

    ``config.seed is None`` seeds from ``entropy`` (falling back to
    ``clock``); otherwise ``entropy`` and ``clock`` are not consulted.
    """
    if config.kind == XORSHIFT64:
        if config.seed is None:
            return XorShift64Star.from_entropy(entropy, clock)
        return XorShift64Star.from_seed(config.seed)
    if config.seed is None:
        return PCG32.from_entropy(config.sequence, entropy, clock)
    return PCG32.from_seed(config.seed, config.sequence)
