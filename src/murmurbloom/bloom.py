"""
Bloom filter over a byte-bucket bit array.

Each item is hashed k times with MurmurHash2, every round seeded with the
previous round's output (the first round uses seed 0). A hash value picks
a bucket with `h mod size` and a bit inside it with `h mod 8`. Bits are
only ever set, so membership answers are "possibly present" or "definitely
absent".
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Iterable, List, Tuple

import numpy as np

from murmurbloom.base import Filter
from murmurbloom.encoding import Encoder, default_encoder, encode_item
from murmurbloom.exceptions import InvalidParameterError
from murmurbloom.murmur import murmur2

if TYPE_CHECKING:
    from murmurbloom.config import FilterConfig

logger = logging.getLogger(__name__)

INDEX_SIZE = 8  # bits per bucket


def bucket_count_for(requested_size: int) -> int:
    """Buckets allocated for a requested size: clamp to one bucket, then force odd."""
    if requested_size < INDEX_SIZE:
        requested_size = INDEX_SIZE
    buckets = requested_size // INDEX_SIZE
    if buckets % 2 == 0:
        return buckets + 1
    return buckets


def estimate_false_positive_probability(n: int, m: int, k: int) -> float:
    """
    (1 - e^(-k*n/m))^k for n inserted items, m buckets and k hash rounds.

    m is the bucket count, not the bit count, so the model treats each
    bucket as a single slot. This overstates the rate of a real filter,
    where every bucket holds 8 bits.
    """
    if n < 0:
        raise InvalidParameterError(f"n must be >= 0, got {n}")
    if m < 1:
        raise InvalidParameterError(f"m must be >= 1, got {m}")
    if k < 1:
        raise InvalidParameterError(f"k must be >= 1, got {k}")
    return (1.0 - math.exp(-k * n / m)) ** k


def size_for(n_items: int, fp_rate: float) -> int:
    """Bits needed for n_items at the target false-positive rate."""
    if not 0.0 < fp_rate < 1.0:
        raise InvalidParameterError(f"fp_rate must be in (0, 1), got {fp_rate}")
    n_items = max(1, n_items)
    return math.ceil(-(n_items * math.log(fp_rate)) / (math.log(2) ** 2))


def optimal_k(size: int, n_items: int) -> int:
    """Hash rounds that minimise false positives for `size` bits and n_items."""
    n_items = max(1, n_items)
    return max(1, math.ceil((size / n_items) * math.log(2)))


class BloomFilter(Filter):
    """Fixed-size Bloom filter with chained MurmurHash2 seeding."""

    def __init__(self, size: int, k: int, encoder: Encoder = default_encoder) -> None:
        if size < 1:
            raise InvalidParameterError(f"size must be >= 1, got {size}")
        if k < 1:
            raise InvalidParameterError(f"k must be >= 1, got {k}")

        self._k = k
        self._unit = INDEX_SIZE
        self._size = bucket_count_for(size)
        self._bits = bytearray(self._size)
        self._encoder = encoder

        if self._size != max(size, INDEX_SIZE) // INDEX_SIZE:
            logger.debug("bucket count bumped to odd value %d", self._size)
        logger.debug("bloom filter: requested=%d buckets=%d k=%d", size, self._size, k)

    @classmethod
    def from_config(cls, cfg: FilterConfig, encoder: Encoder | None = None) -> "BloomFilter":
        """Build a filter from a FilterConfig."""
        if encoder is None:
            encoder = cfg.encoder()
        return cls(cfg.size, cfg.k, encoder=encoder)

    @property
    def k(self) -> int:
        return self._k

    @property
    def size(self) -> int:
        """Bucket count."""
        return self._size

    def __repr__(self) -> str:
        return f"BloomFilter(size={self._size}, k={self._k})"

    # -- hashing ------------------------------------------------------------

    def hashes(self, item: Any) -> List[int]:
        """The k chained hash values for an item."""
        data = encode_item(item, self._encoder)
        out: List[int] = []
        seed = 0
        for _ in range(self._k):
            seed = murmur2(data, seed)
            out.append(seed)
        return out

    def indices(self, h: int) -> Tuple[int, int]:
        """(bucket_index, bit_index) for one hash value, both non-negative."""
        return h % self._size, h % self._unit

    # -- membership ---------------------------------------------------------

    def add(self, item: Any) -> None:
        for h in self.hashes(item):
            bucket, bit = self.indices(h)
            self._bits[bucket] |= 1 << bit

    def contains(self, item: Any) -> bool:
        for h in self.hashes(item):
            bucket, bit = self.indices(h)
            if not ((self._bits[bucket] & 0xFF) >> bit) & 1:
                return False
        return True

    def add_all(self, items: Iterable[Any]) -> None:
        for item in items:
            self.add(item)

    def contains_all(self, items: Iterable[Any]) -> bool:
        return all(self.contains(item) for item in items)

    # -- inspection ---------------------------------------------------------

    def snapshot(self) -> bytes:
        """Immutable copy of the bit array."""
        return bytes(self._bits)

    def bits_set(self) -> int:
        return int(np.unpackbits(np.frombuffer(self._bits, dtype=np.uint8)).sum())

    def fill_ratio(self) -> float:
        """Fraction of the 8 * size bits that are set."""
        return self.bits_set() / (self._size * self._unit)

    def false_positive_probability(self, n: int) -> float:
        return estimate_false_positive_probability(n, self._size, self._k)

    estimate_false_positive_probability = staticmethod(estimate_false_positive_probability)
