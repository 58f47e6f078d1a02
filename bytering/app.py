"""Producer/consumer demo that streams a message through a ring buffer."""

from __future__ import annotations

import argparse
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Tuple, Union

from bytering.ring import RingBuffer

__all__ = [
    "DEFAULT_MESSAGE",
    "DEFAULT_SIZE",
    "LOGGER_NAME",
    "configure_logging",
    "producer",
    "consumer",
    "run",
    "main",
]

LOGGER_NAME = "my_cat"
DEFAULT_MESSAGE = b"Hello, ring in Linux!\n"
DEFAULT_SIZE = 128
PRODUCER_INTERVAL = 0.1
CONSUMER_INTERVAL = 0.05
CONSUMER_CHUNK = 64


def configure_logging(level: Union[int, str] = logging.DEBUG) -> logging.Logger:
    """Set up and return the demo's logger at ``level``."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(threadName)s] %(message)s")
        )
        logger.addHandler(handler)
    return logger


def producer(
    ring: RingBuffer,
    lock: threading.Lock,
    stop: threading.Event,
    message: bytes = DEFAULT_MESSAGE,
    interval: float = PRODUCER_INTERVAL,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Write ``message`` every ``interval`` seconds until ``stop`` is set.

    Always writes at least once. Returns the total number of bytes written.
    """
    log = logger or logging.getLogger(LOGGER_NAME)
    total = 0
    while True:
        with lock:
            written = ring.write(message)
        total += written
        if written != len(message):
            log.error("Buffer full, failed to write all data")
        if stop.wait(interval):
            return total


def consumer(
    ring: RingBuffer,
    lock: threading.Lock,
    stop: threading.Event,
    chunk: int = CONSUMER_CHUNK,
    interval: float = CONSUMER_INTERVAL,
    logger: Optional[logging.Logger] = None,
) -> bytes:
    """Read up to ``chunk`` bytes every ``interval`` seconds until ``stop`` is set.

    Always reads at least once. Returns everything that was received.
    """
    log = logger or logging.getLogger(LOGGER_NAME)
    received = bytearray()
    while True:
        with lock:
            data = ring.read(chunk)
        if data:
            received += data
            log.debug("Received: %s", data.decode("utf-8", errors="replace"))
        if stop.wait(interval):
            return bytes(received)


def run(duration: Optional[float] = None, size: int = DEFAULT_SIZE) -> Tuple[int, bytes]:
    """Run one producer and one consumer over a shared ring buffer.

    Runs for ``duration`` seconds, or until interrupted when it is None.
    Returns the number of bytes produced and the bytes consumed.
    """
    ring = RingBuffer(size)
    lock = threading.Lock()
    stop = threading.Event()
    logger = logging.getLogger(LOGGER_NAME)
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="ring") as pool:
        produced = pool.submit(producer, ring, lock, stop, DEFAULT_MESSAGE,
                               PRODUCER_INTERVAL, logger)
        consumed = pool.submit(consumer, ring, lock, stop, CONSUMER_CHUNK,
                               CONSUMER_INTERVAL, logger)
        try:
            if duration is None:
                while True:
                    time.sleep(1)
            else:
                time.sleep(duration)
        except KeyboardInterrupt:
            pass
        finally:
            stop.set()
        return produced.result(), consumed.result()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="bytering",
        description="Stream a message through a ring buffer between two threads.",
    )
    parser.add_argument("--duration", type=float, default=None,
                        help="seconds to run (default: until interrupted)")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE,
                        help="ring buffer storage size in bytes")
    parser.add_argument("--log-level", default="DEBUG",
                        help="logging level name")
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")
    configure_logging(args.log_level)
    run(args.duration, args.size)
    return 0