# site_word_scanner/crawler/frontier.py
"""
URL frontier: canonical URLs still to fetch plus the set of URLs already processed.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Set


class Frontier:
    """FIFO queue of pending URLs with dedup against everything seen so far.

    A URL is accepted by :meth:`push` only if it is neither pending nor
    visited, and :meth:`pop` moves it to the visited set, so the two sets
    never intersect and no URL is processed twice.
    """

    def __init__(self, seed: str) -> None:
        self._queue: Deque[str] = deque()
        self._pending: Set[str] = set()
        self.visited: Set[str] = set()
        self.push(seed)

    def push(self, url: str) -> bool:
        """Enqueue *url*; return False when it is already pending or visited."""
        if url in self._pending or url in self.visited:
            return False
        self._queue.append(url)
        self._pending.add(url)
        return True

    def pop(self) -> str:
        """Take the next pending URL and mark it visited."""
        url = self._queue.popleft()
        self._pending.discard(url)
        self.visited.add(url)
        return url

    @property
    def pending(self) -> int:
        return len(self._queue)

    def progress(self) -> int:
        """Percentage of known URLs already visited."""
        total = len(self.visited) + len(self._queue)
        return 100 * len(self.visited) // total if total else 100

    def __contains__(self, url: object) -> bool:
        return url in self._pending or url in self.visited

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
