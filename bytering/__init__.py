"""Fixed-size byte ring buffer, needle search over its contents, and a producer/consumer demo."""

__version__ = "0.1.0"
__all__ = ["ring", "search", "app"]