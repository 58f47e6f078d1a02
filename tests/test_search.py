import pytest

from bytering.ring import RingBuffer
from bytering.search import find


def _ring(data, size=16):
    ring = RingBuffer(size)
    ring.write(data)
    return ring


def _assert_at(ring, needle, index):
    assert index is not None
    assert ring.peek(len(needle), skip=index) == needle


@pytest.mark.parametrize(
    "data, needle, expected",
    [(b"hello world", b"world", 6), (b"hello", b"he", 0)],
)
def test_finds_needle_at_offset(data, needle, expected):
    assert find(_ring(data), needle) == expected


def test_found_offset_points_at_needle():
    ring = _ring(b"abcabcxyz")
    _assert_at(ring, b"cx", find(ring, b"cx"))


def test_start_offset_skips_earlier_matches():
    ring = _ring(b"abab")
    first = find(ring, b"ab")
    second = find(ring, b"ab", start=first + 1)
    assert first == 0
    _assert_at(ring, b"ab", second)
    assert second > first


@pytest.mark.parametrize(
    "data, needle, start",
    [
        (b"hello world", b"xyz", 0),
        (b"abc", b"abcd", 0),
        (b"abcabc", b"abc", 4),
        (b"", b"a", 0),
    ],
    ids=["missing", "longer-than-contents", "start-past-contents", "empty"],
)
def test_no_match_returns_none(data, needle, start):
    assert find(_ring(data), needle, start=start) is None


def test_search_across_wraparound():
    ring = RingBuffer(8)
    ring.write(b"xxxxxx")
    ring.read(5)
    ring.write(b"abcde")
    _assert_at(ring, b"bcd", find(ring, b"bcd"))


def test_search_does_not_consume():
    ring = _ring(b"hello world")
    before = len(ring)
    find(ring, b"world")
    assert len(ring) == before
    assert ring.read(before) == b"hello world"


def test_accepts_bytearray_needle():
    ring = _ring(b"hello world")
    assert find(ring, bytearray(b"world")) == 6


@pytest.mark.parametrize(
    "needle, start",
    [(b"", 0), (b"a", -1)],
    ids=["empty-needle", "negative-start"],
)
def test_bad_arguments_rejected(needle, start):
    with pytest.raises(ValueError):
        find(_ring(b"abc"), needle, start=start)


def test_closed_ring_is_rejected():
    ring = _ring(b"abc")
    ring.close()
    with pytest.raises(ValueError):
        find(ring, b"a")