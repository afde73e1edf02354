"""Throughput and time estimates reported alongside run progress."""
from __future__ import annotations

import math
import time
from typing import Callable, Optional

# Average bytes per line in a typical phone number list.
BYTES_PER_LINE = 15
DEFAULT_LINES_PER_SECOND = 50000


class ThroughputMeter:
    """Samples the processing rate every ``sample_every`` records.

    The rate is measured over the interval since the previous sample, so it
    reflects current speed rather than the run average.
    """

    def __init__(self, sample_every: int = 1000, clock: Callable[[], float] = time.perf_counter) -> None:
        if sample_every <= 0:
            raise ValueError("sample_every must be positive")
        self._sample_every = sample_every
        self._clock = clock
        self._started = clock()
        self._last_sample = self._started
        self._count = 0
        self.rate: Optional[float] = None

    @property
    def count(self) -> int:
        return self._count

    @property
    def elapsed(self) -> float:
        return self._clock() - self._started

    def record(self) -> Optional[float]:
        """Count one processed record; return the new rate when a sample is taken."""

        self._count += 1
        if self._count % self._sample_every:
            return None
        now = self._clock()
        interval = now - self._last_sample
        self._last_sample = now
        if interval <= 0:
            return None
        self.rate = self._sample_every / interval
        return self.rate


def estimate_remaining_seconds(total: int, processed: int, elapsed_seconds: float) -> Optional[float]:
    """Project the time left from the average rate so far.

    Returns ``None`` when no rate can be computed yet.
    """

    if processed <= 0 or elapsed_seconds <= 0:
        return None
    rate = processed / elapsed_seconds
    return max(total - processed, 0) / rate


def estimate_line_count(size_bytes: int) -> int:
    return size_bytes // BYTES_PER_LINE


def estimate_processing_time(line_count: int, lines_per_second: int = DEFAULT_LINES_PER_SECOND) -> str:
    seconds = math.ceil(line_count / lines_per_second)
    if seconds < 60:
        return f"{seconds} seconds"
    minutes = math.ceil(seconds / 60)
    return f"{minutes} minute{'s' if minutes > 1 else ''}"


def format_file_size(size_bytes: int) -> str:
    if size_bytes == 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {units[index]}"


__all__ = [
    "ThroughputMeter",
    "estimate_remaining_seconds",
    "estimate_line_count",
    "estimate_processing_time",
    "format_file_size",
]
