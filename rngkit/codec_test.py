from __future__ import annotations

from rngkit.codec import BASE62_ALPHABET, random_bytes, string_base62
from rngkit.prng import PCG32, XorShift64Star


def test_base62_alphabet():
    assert len(BASE62_ALPHABET) == 62
    assert len(set(BASE62_ALPHABET)) == 62
    assert BASE62_ALPHABET[:10] == "0123456789"
    assert BASE62_ALPHABET[10] == "A"
    assert BASE62_ALPHABET[36] == "a"


def test_random_bytes_length_and_type():
    rng = XorShift64Star(1)
    for n in (0, 1, 7, 8, 9, 33):
        out = random_bytes(rng, n)
        assert isinstance(out, bytes)
        assert len(out) == n


def test_random_bytes_matches_fill_bytes():
    a = PCG32(42, 54)
    b = PCG32(42, 54)
    buf = bytearray(10)
    b.fill_bytes(buf)
    assert random_bytes(a, 10) == bytes(buf)


def test_random_bytes_negative_length():
    assert random_bytes(PCG32(1), -4) == b""


def test_string_base62():
    rng = PCG32(5)
    s = string_base62(rng, 32)
    assert len(s) == 32
    assert all(c in BASE62_ALPHABET for c in s)


def test_string_base62_deterministic():
    assert string_base62(XorShift64Star(9), 16) == string_base62(
        XorShift64Star(9), 16
    )


def test_string_base62_empty():
    assert string_base62(PCG32(1), 0) == ""
    assert string_base62(PCG32(1), -1) == ""


def test_string_base62_uses_whole_alphabet():
    s = string_base62(XorShift64Star(3), 5000)
    assert set(s) == set(BASE62_ALPHABET)
