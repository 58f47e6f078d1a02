"""A fixed-size byte ring buffer with optional event notifications."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

__all__ = ["Event", "RingBuffer"]


class Event(Enum):
    """Kind of operation reported to a ring buffer's event callback."""

    READ = "read"
    WRITE = "write"
    RESET = "reset"


EventCallback = Callable[["RingBuffer", Event, int], None]


class RingBuffer:
    """Byte FIFO backed by a fixed block of storage.

    The storage holds ``size`` bytes, but one slot always stays empty so that
    a full buffer can be told apart from an empty one; the buffer therefore
    holds at most ``size - 1`` bytes.

    The buffer itself is not locked: a single reader and a single writer may
    use it concurrently, anything beyond that needs external locking.
    """

    def __init__(
        self,
        size: int,
        on_event: Optional[EventCallback] = None,
        arg: object = None,
    ) -> None:
        if size <= 0:
            raise ValueError("ring buffer size must be positive")
        self._storage: Optional[bytearray] = bytearray(size)
        self._size = size
        self._r = 0
        self._w = 0
        self.on_event = on_event
        self.arg = arg

    @property
    def size(self) -> int:
        """Size of the underlying storage in bytes."""
        return self._size

    @property
    def capacity(self) -> int:
        """Largest number of bytes the buffer can hold at once."""
        return self._size - 1

    def is_ready(self) -> bool:
        """Return True while the buffer has storage and can be used."""
        return self._storage is not None

    def close(self) -> None:
        """Release the storage; the buffer cannot be used afterwards."""
        self._storage = None

    def reset(self) -> None:
        """Discard all contents, keeping the size."""
        self._require_storage()
        self._w = 0
        self._r = 0
        self._emit(Event.RESET, 0)

    def write(self, data, write_all: bool = False) -> int:
        """Copy as much of ``data`` as fits and return the number of bytes written.

        With ``write_all`` nothing is written unless all of ``data`` fits.
        """
        storage = self._require_storage()
        view = memoryview(data).cast("B")
        count = len(view)
        if count == 0:
            return 0
        free = self.available()
        if free == 0 or (free < count and write_all):
            return 0
        count = min(free, count)

        w = self._w
        first = min(self._size - w, count)
        storage[w:w + first] = view[:first]
        rest = count - first
        if rest:
            storage[:rest] = view[first:count]
            w = rest
        else:
            w += first
        if w >= self._size:
            w = 0
        self._w = w

        self._emit(Event.WRITE, count)
        return count

    def read(self, size: int, read_all: bool = False) -> bytes:
        """Remove and return up to ``size`` bytes.

        With ``read_all`` nothing is read unless ``size`` bytes are available.
        """
        self._require_storage()
        if size < 0:
            raise ValueError("read size must not be negative")
        if size == 0:
            return b""
        full = len(self)
        if full == 0 or (full < size and read_all):
            return b""
        count = min(full, size)
        data = self._copy_out(self._r, count)

        r = self._r + count
        if r >= self._size:
            r -= self._size
        self._r = r

        self._emit(Event.READ, count)
        return data

    def peek(self, size: int, skip: int = 0) -> bytes:
        """Return up to ``size`` bytes after the first ``skip``, without removing them."""
        self._require_storage()
        if size < 0 or skip < 0:
            raise ValueError("peek size and skip must not be negative")
        if size == 0:
            return b""
        full = len(self)
        if skip >= full:
            return b""
        r = self._r + skip
        if r >= self._size:
            r -= self._size
        count = min(full - skip, size)
        return self._copy_out(r, count)

    def available(self) -> int:
        """Number of bytes that can still be written; 0 once closed."""
        if self._storage is None:
            return 0
        w, r = self._w, self._r
        if w >= r:
            space = self._size - (w - r)
        else:
            space = r - w
        return space - 1

    def __len__(self) -> int:
        """Number of bytes waiting to be read; 0 once closed."""
        if self._storage is None:
            return 0
        w, r = self._w, self._r
        if w >= r:
            return w - r
        return self._size - (r - w)

    def read_block(self) -> memoryview:
        """View of the readable bytes that lie contiguously at the read position."""
        storage = self._require_storage()
        w, r = self._w, self._r
        if w > r:
            length = w - r
        elif r > w:
            length = self._size - r
        else:
            length = 0
        return memoryview(storage)[r:r + length]

    def write_block(self) -> memoryview:
        """Writable view of the free bytes contiguous at the write position.

        Fill it, then call :meth:`advance` with the number of bytes stored.
        """
        storage = self._require_storage()
        w, r = self._w, self._r
        if w >= r:
            length = self._size - w
            if r == 0:
                length -= 1
        else:
            length = r - w - 1
        return memoryview(storage)[w:w + length]

    def skip(self, count: int) -> int:
        """Drop up to ``count`` readable bytes and return how many were dropped."""
        self._require_storage()
        if count < 0:
            raise ValueError("skip count must not be negative")
        if count == 0:
            return 0
        count = min(count, len(self))
        r = self._r + count
        if r >= self._size:
            r -= self._size
        self._r = r
        self._emit(Event.READ, count)
        return count

    def advance(self, count: int) -> int:
        """Mark up to ``count`` bytes as written and return how many were marked."""
        self._require_storage()
        if count < 0:
            raise ValueError("advance count must not be negative")
        if count == 0:
            return 0
        count = min(count, self.available())
        w = self._w + count
        if w >= self._size:
            w -= self._size
        self._w = w
        self._emit(Event.WRITE, count)
        return count

    def __repr__(self) -> str:
        state = "ready" if self.is_ready() else "closed"
        return f"RingBuffer(size={self._size}, used={len(self)}, {state})"

    def _require_storage(self) -> bytearray:
        if self._storage is None:
            raise ValueError("ring buffer is closed")
        return self._storage

    def _copy_out(self, start: int, count: int) -> bytes:
        storage = self._require_storage()
        first = min(self._size - start, count)
        head = bytes(storage[start:start + first])
        rest = count - first
        if rest:
            return head + bytes(storage[:rest])
        return head

    def _emit(self, event: Event, count: int) -> None:
        if self.on_event is not None:
            self.on_event(self, event, count)