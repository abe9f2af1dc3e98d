"""Render key allocation.

Hosts that diff re-rendered primitives need a fresh key per drawn arrow.
Allocators are owned by the host and passed in; there is no global counter.
"""

import itertools


class KeyAllocator:
    """Hands out increasing integer keys."""

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)

    def next_key(self) -> int:
        return next(self._counter)
