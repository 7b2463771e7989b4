"""Metrics registry shared by the weight controller modules.

Counters and histograms are thread-safe so concurrent reconciliation workers
can record into the same registry. ``export()`` produces a plain snapshot the
reconciler can publish however it likes.
"""

from __future__ import annotations

import threading
import time
from typing import Any


class Counter:
    __slots__ = ("_value", "_lock")

    def __init__(self, initial: int = 0) -> None:
        self._value = initial
        self._lock = threading.Lock()

    def inc(self, amount: int = 1) -> None:
        if amount == 0:
            return
        with self._lock:
            self._value += amount

    @property
    def value(self) -> int:
        return self._value


class Histogram:
    __slots__ = ("_buckets", "_counts", "_sum", "_lock")

    def __init__(self, buckets: list[float]) -> None:
        self._buckets = sorted(buckets)
        # last slot is the +Inf bucket
        self._counts = [0] * (len(self._buckets) + 1)
        self._sum = 0.0
        self._lock = threading.Lock()

    def observe(self, v: float) -> None:
        with self._lock:
            self._sum += v
            for i, b in enumerate(self._buckets):
                if v <= b:
                    self._counts[i] += 1
                    return
            self._counts[-1] += 1

    @property
    def count(self) -> int:
        with self._lock:
            return sum(self._counts)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {"buckets": list(self._buckets), "counts": list(self._counts), "sum": self._sum}


class MetricsRegistry:
    def __init__(self) -> None:
        self.counters: dict[str, Counter] = {}
        self.histograms: dict[str, Histogram] = {}
        self._lock = threading.Lock()

    def counter(self, name: str) -> Counter:
        with self._lock:
            c = self.counters.get(name)
            if c is None:
                c = Counter()
                self.counters[name] = c
            return c

    def histogram(self, name: str, buckets: list[float]) -> Histogram:
        with self._lock:
            h = self.histograms.get(name)
            if h is None:
                h = Histogram(buckets)
                self.histograms[name] = h
            return h

    def export(self) -> dict[str, Any]:
        return {
            "counters": {k: v.value for k, v in self.counters.items()},
            "histograms": {k: v.snapshot() for k, v in self.histograms.items()},
            "ts": time.time(),
        }

    def reset(self) -> None:
        """Drop every registered metric. Intended for tests."""
        with self._lock:
            self.counters.clear()
            self.histograms.clear()


REGISTRY = MetricsRegistry()
