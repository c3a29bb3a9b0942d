"""
32-bit MurmurHash2 over a byte sequence plus a signed seed.

Words are read from the end of the buffer backward, each one assembled
little-endian from unsigned octets. The 0-3 leftover bytes are the head of
the buffer and are folded as unsigned octets too, with no sign extension.
Every multiply wraps to a signed 32-bit value and every right
shift is arithmetic, so results match the chained seeding in the filter
bit for bit across runs and processes.
"""
from __future__ import annotations

import struct

M = 0x5BD1E995
R = 24

_MASK32 = 0xFFFFFFFF
_WORD = struct.Struct("<i")


def to_int32(value: int) -> int:
    """Wrap an arbitrary int to the signed 32-bit range."""
    value &= _MASK32
    if value & 0x80000000:
        return value - 0x100000000
    return value


def int_to_bytes(value: int) -> bytes:
    """Pack an int into 4 little-endian bytes (wraps to 32 bits)."""
    return _WORD.pack(to_int32(value))


def int_from_bytes(data: bytes, start: int = 0) -> int:
    """Read 4 little-endian bytes at `start` as a signed 32-bit int."""
    return _WORD.unpack_from(data, start)[0]


def murmur2(data: bytes, seed: int = 0) -> int:
    """MurmurHash2, 32-bit. Returns a signed 32-bit int."""
    length = len(data)
    h = to_int32(seed ^ length)

    remaining = length
    while remaining >= 4:
        k = _WORD.unpack_from(data, remaining - 4)[0]
        k = to_int32(k * M)
        k ^= k >> R
        k = to_int32(k * M)

        h = to_int32(h * M)
        h ^= k
        remaining -= 4

    # Cumulative fold of the head bytes
    if remaining == 3:
        h ^= data[2] << 16
    if remaining >= 2:
        h ^= data[1] << 8
    if remaining >= 1:
        h ^= data[0]
        h = to_int32(h * M)

    h ^= h >> 13
    h = to_int32(h * M)
    h ^= h >> 15
    return h
