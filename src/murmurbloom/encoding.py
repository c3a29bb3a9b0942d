"""
Item-to-bytes conversion.

The filter hashes bytes, never object identity. Two items that compare
equal must encode to the same bytes, otherwise `contains` can return a
false negative with no signal from the filter. Callers with their own item
types pass an encoder that upholds this.
"""
from __future__ import annotations

from typing import Any, Callable

from murmurbloom.exceptions import UnencodableItemError

Encoder = Callable[[Any], bytes]


def default_encoder(item: Any) -> bytes:
    """Encode bytes-like, str and int items; reject everything else."""
    if isinstance(item, (bytes, bytearray, memoryview)):
        return bytes(item)
    if isinstance(item, str):
        return item.encode("utf-8")
    # bool is an int subclass but str(True) is not a stable choice to make silently
    if isinstance(item, int) and not isinstance(item, bool):
        return str(item).encode("utf-8")
    raise UnencodableItemError(
        f"no default byte encoding for {type(item).__name__}; pass an encoder"
    )


def text_encoder(encoding: str = "utf-8") -> Encoder:
    """Encoder that renders `str(item)` in the given codec."""
    def _encode(item: Any) -> bytes:
        return str(item).encode(encoding)
    return _encode


def encode_item(item: Any, encoder: Encoder) -> bytes:
    data = encoder(item)
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if not isinstance(data, bytes):
        raise UnencodableItemError(
            f"encoder returned {type(data).__name__}, expected bytes"
        )
    return data
