"""Percentage based sampling."""

from __future__ import annotations

import random
import threading

__all__ = ["Sampler"]

_RANGE = 100_000


class Sampler:
    """Accepts roughly pct percent of calls."""

    def __init__(self, pct: float, seed: int | None = None) -> None:
        self.pct = pct
        self._threshold = int(pct * 1000.0)
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def accept(self) -> bool:
        """Return True with the configured probability."""
        with self._lock:
            return self._random.randrange(_RANGE) < self._threshold

    def accept_with_threshold(self, threshold: float) -> bool:
        """Return True with probability threshold percent, ignoring pct."""
        with self._lock:
            return self._random.randrange(_RANGE) < int(threshold * 1000.0)