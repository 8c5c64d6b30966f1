"""Host to network byte order conversion for fixed-width integers."""

from __future__ import annotations

import sys

_SIZES = (1, 2, 4, 8)


def hton(value: int, size: int, signed: bool = False) -> int:
    """Convert a `size`-byte integer from host to network byte order.

    The result, laid out in host byte order, has the big-endian bytes of
    `value`. Sizes are 1, 2, 4 or 8 bytes.
    """
    if size not in _SIZES:
        raise ValueError(f"unsupported integer size: {size}")
    if size == 1:
        value.to_bytes(1, "big", signed=signed)
        return value
    raw = value.to_bytes(size, "big", signed=signed)
    return int.from_bytes(raw, sys.byteorder, signed=signed)