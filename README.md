# bytering

bytering is a fixed-size byte ring buffer for one producer and one consumer.
It also includes a small demo in which a producer thread and a consumer thread
share one buffer.

If you create a buffer with `size` bytes of storage, it holds at most
`size - 1` bytes. The buffer keeps one slot empty so it can tell a full buffer
from an empty one. The `size` property gives the storage size and the
`capacity` property gives the largest number of bytes the buffer can hold.

The buffer does no locking of its own. One reader and one writer may use it at
the same time. Any other concurrent use needs a lock that you supply.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Using the ring buffer

```python
from bytering.ring import Event, RingBuffer
from bytering.search import find

def on_event(ring, event, count):
    print(event, count)

ring = RingBuffer(16, on_event=on_event)

ring.write(b"hello world")                    # 11: number of bytes written
ring.write(b"too much data", write_all=True)  # 0: writes nothing unless all of it fits

len(ring)          # 11: bytes ready to be read
ring.available()   # 4: free space left for writing

ring.peek(5)               # b"hello", the data stays in the buffer
ring.peek(5, skip=6)       # b"world"
find(ring, b"world")       # 6: offset from the read position, or None if absent

ring.read(6)                   # b"hello "
ring.read(100, read_all=True)  # b"": fewer than 100 bytes are stored

ring.skip(2)               # drops up to 2 bytes without copying them
ring.reset()               # empties the buffer and emits Event.RESET
ring.close()               # afterwards is_ready() is False
```

`write` accepts any object that supports the buffer protocol, such as `bytes`,
`bytearray` or `memoryview`. Negative sizes or counts raise `ValueError`, and
so does an empty needle passed to `find`.

Once a buffer is closed, `len()` and `available()` return 0. Every other
operation raises `ValueError`.

### Zero-copy access

`read_block()` returns a view of the stored bytes that lie contiguously from
the read position. After you have used them, call `skip(n)`.

`write_block()` returns a writable view of the free space that lies
contiguously from the write position. Fill it, then call `advance(n)` to make
the new bytes readable.

```python
block = ring.write_block()
block[:3] = b"abc"
ring.advance(3)
```

### Events

The optional `on_event(ring, event, count)` callback runs after each read,
write, skip, advance or reset that changes the buffer:

- `event` is a member of `Event`: `READ`, `WRITE` or `RESET`.
- `count` is the number of bytes affected. It is 0 for a reset.
- You can change the callback later through the `on_event` attribute.
- The `arg` attribute holds any value you want to keep with the buffer.

## Producer/consumer demo

```
bytering
```

The demo runs two threads over one 128-byte ring:

- A producer thread writes `Hello, ring in Linux!\n` into the ring every
  100 ms. If the whole line does not fit, it logs an error.
- A consumer thread reads up to 64 bytes every 50 ms and logs what it
  received.

The demo runs until you interrupt it with Ctrl+C.

Options:

- `--duration SECONDS` stops the demo after a fixed time.
- `--size BYTES` sets the storage size of the ring.
- `--log-level LEVEL` sets the logging level. The default is `DEBUG`.

To use the demo from Python:

- `bytering.app.run(duration, size)` runs the demo and returns the number of
  bytes produced and the bytes consumed.
- `bytering.app.producer` and `bytering.app.consumer` are the two thread loops.
- `bytering.app.configure_logging(level)` sets up the `my_cat` logger that the
  demo writes to.

## What it does not do

The demo logs only to standard error through Python's `logging` module. It
reads no logging configuration file and writes no log files.