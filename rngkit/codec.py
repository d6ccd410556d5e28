"""Random byte buffers and base62 identifiers."""

from __future__ import annotations

import string

from .prng import BitSource
from .uniform import u64_below

BASE62_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


def random_bytes(rng: BitSource, n: int) -> bytes:
    buf = bytearray(max(0, n))
    rng.fill_bytes(buf)
    return bytes(buf)


def string_base62(rng: BitSource, length: int) -> str:
    """Random string over ``0-9A-Za-z``, one unbiased draw per character."""
    return "".join(
        BASE62_ALPHABET[u64_below(rng, 62)] for _ in range(max(0, length))
    )
