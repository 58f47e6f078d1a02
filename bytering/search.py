"""Searching for byte sequences inside a ring buffer."""

from __future__ import annotations

from typing import Optional

from bytering.ring import RingBuffer

__all__ = ["find"]


def find(ring: RingBuffer, needle, start: int = 0) -> Optional[int]:
    """Return the offset of ``needle`` among the readable bytes of ``ring``.

    The search begins ``start`` bytes past the read position and the returned
    offset is counted from the read position. Returns None when the needle
    does not occur. The buffer's contents are left untouched.
    """
    pattern = bytes(memoryview(needle).cast("B"))
    if not pattern:
        raise ValueError("needle must not be empty")
    if start < 0:
        raise ValueError("start offset must not be negative")
    full = len(ring)
    if not ring.is_ready():
        raise ValueError("ring buffer is closed")
    if full < len(pattern) + start:
        return None
    contents = ring.peek(full)
    index = contents.find(pattern, start)
    return None if index < 0 else index