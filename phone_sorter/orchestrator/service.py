"""Chunked, cancellable processing of phone number lines."""
from __future__ import annotations

import asyncio
import logging
import math
import threading
import time
from typing import Callable, List, Optional, Sequence

from ..aggregate import ResultAggregator
from ..classifier import classify
from ..models import (
    AggregateSnapshot,
    ClassifiedRecord,
    ProcessingOptions,
    ProgressUpdate,
    RunCallbacks,
    RunFailedError,
    RunStatus,
)
from ..telemetry import ThroughputMeter, estimate_remaining_seconds

LOGGER = logging.getLogger(__name__)

ClassifyFunction = Callable[[str, ProcessingOptions], ClassifiedRecord]


def _default_yield() -> None:
    # Gives other threads (a UI thread, for example) a chance to run.
    time.sleep(0)


class ProcessingRun:
    """A single pass over the input lines.

    Instances are created by :meth:`BatchScheduler.start` and driven by the
    host with :meth:`run`, :meth:`run_async`, or repeated calls to
    :meth:`step`. Each step processes one chunk to completion, checking for
    cancellation before every line.
    """

    def __init__(
        self,
        scheduler: "BatchScheduler",
        lines: Sequence[str],
        options: ProcessingOptions,
        callbacks: RunCallbacks,
        *,
        classify_function: ClassifyFunction,
        clock: Callable[[], float],
        sample_every: int,
    ) -> None:
        self._scheduler = scheduler
        self._lines = lines
        self._options = options
        self._callbacks = callbacks
        self._classify = classify_function
        self._clock = clock
        self._aggregator = ResultAggregator(options, total=len(lines))
        self._meter = ThroughputMeter(sample_every=sample_every, clock=clock)
        self._cancel_event = threading.Event()
        self._total_chunks = math.ceil(len(lines) / options.batch_size)
        self._next_chunk = 0
        self._processed = 0
        self._status = RunStatus.RUNNING
        self._error: Optional[BaseException] = None

    # ------------------------------------------------------------------
    @property
    def status(self) -> RunStatus:
        return self._status

    @property
    def options(self) -> ProcessingOptions:
        return self._options

    @property
    def processed(self) -> int:
        """Non-blank lines classified so far."""
        return self._processed

    @property
    def total(self) -> int:
        return len(self._lines)

    @property
    def total_chunks(self) -> int:
        return self._total_chunks

    @property
    def fraction_complete(self) -> float:
        if self._total_chunks == 0:
            return 1.0
        return self._next_chunk / self._total_chunks

    @property
    def cancel_requested(self) -> bool:
        return self._cancel_event.is_set()

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    def snapshot(self) -> AggregateSnapshot:
        return self._aggregator.snapshot()

    def estimate_remaining_seconds(self) -> Optional[float]:
        return estimate_remaining_seconds(self.total, self._processed, self._meter.elapsed)

    def progress(self) -> ProgressUpdate:
        stats = self._aggregator.state.stats
        elapsed = self._meter.elapsed
        return ProgressUpdate(
            fraction=self.fraction_complete,
            processed=self._processed,
            total=self.total,
            valid_count=stats.valid_count,
            invalid_count=stats.invalid_count,
            elapsed_seconds=elapsed,
            records_per_second=self._meter.rate,
            remaining_seconds=estimate_remaining_seconds(self.total, self._processed, elapsed),
        )

    # ------------------------------------------------------------------
    def cancel(self) -> None:
        """Request a stop at the next per-line check. Safe from any thread."""

        if self._status.finished:
            return
        self._cancel_event.set()

    def run(self) -> RunStatus:
        """Drive the run to the end, yielding to the host between chunks."""

        while self.step():
            self._scheduler.yield_control()
        return self._status

    async def run_async(self) -> RunStatus:
        """Drive the run from a coroutine, returning to the event loop between chunks."""

        while self.step():
            await asyncio.sleep(0)
        return self._status

    def step(self) -> bool:
        """Process the next chunk. Returns ``True`` while chunks remain."""

        if self._status.finished:
            raise RuntimeError(f"Run already {self._status.value}")

        if self._next_chunk >= self._total_chunks:
            self._complete()
            return False

        start = self._next_chunk * self._options.batch_size
        chunk = self._lines[start:start + self._options.batch_size]

        chunk_number = self._next_chunk + 1
        staged: List[ClassifiedRecord] = []
        cancelled = False
        try:
            for line in chunk:
                if self._cancel_event.is_set():
                    cancelled = True
                    break
                text = line.strip()
                if not text:
                    continue
                staged.append(self._classify(text, self._options))
            rates = self._ingest(staged)
            if self._callbacks.on_throughput:
                for rate in rates:
                    self._callbacks.on_throughput(rate)
            if not cancelled:
                self._next_chunk += 1
                if self._callbacks.on_progress:
                    self._callbacks.on_progress(self.fraction_complete, self._processed)
        except Exception as exc:
            self._fail(exc, chunk_number)
            raise RunFailedError(
                f"Processing aborted in chunk {chunk_number} of {self._total_chunks}"
            ) from exc

        if cancelled:
            self._cancel()
            return False

        if self._next_chunk >= self._total_chunks:
            self._complete()
            return False
        return True

    # ------------------------------------------------------------------
    def _ingest(self, records: List[ClassifiedRecord]) -> List[float]:
        """Apply a staged chunk and return the throughput samples it produced."""

        self._aggregator.ingest_many(records)
        rates: List[float] = []
        for _ in records:
            self._processed += 1
            rate = self._meter.record()
            if rate is not None:
                LOGGER.debug("Processing %.0f numbers/sec (%s so far)", rate, self._processed)
                rates.append(rate)
        return rates

    def _complete(self) -> None:
        self._status = RunStatus.COMPLETED
        self._scheduler._release(self)
        stats = self._aggregator.state.stats
        LOGGER.info(
            "Processed %s lines in %.2fs: %s valid, %s invalid, %s states",
            stats.total,
            self._meter.elapsed,
            stats.valid_count,
            stats.invalid_count,
            len(stats.distinct_states),
        )
        if self._callbacks.on_complete:
            self._callbacks.on_complete(self.snapshot())

    def _cancel(self) -> None:
        self._status = RunStatus.CANCELLED
        self._scheduler._release(self)
        LOGGER.info("Processing cancelled after %s of %s lines", self._processed, self.total)
        if self._callbacks.on_cancelled:
            self._callbacks.on_cancelled(self.snapshot())

    def _fail(self, exc: BaseException, chunk_number: int) -> None:
        self._status = RunStatus.FAILED
        self._error = exc
        self._scheduler._release(self)
        LOGGER.exception("Processing failed in chunk %s", chunk_number)


RunHandle = ProcessingRun


class BatchScheduler:
    """Starts processing runs, allowing at most one active run at a time."""

    def __init__(
        self,
        *,
        classify_function: ClassifyFunction = classify,
        yield_control: Optional[Callable[[], None]] = None,
        clock: Callable[[], float] = time.perf_counter,
        sample_every: int = 1000,
    ) -> None:
        self._classify = classify_function
        self._yield_control = yield_control or _default_yield
        self._clock = clock
        self._sample_every = sample_every
        self._lock = threading.Lock()
        self._active_run: Optional[ProcessingRun] = None

    @property
    def active(self) -> bool:
        return self._active_run is not None

    @property
    def status(self) -> RunStatus:
        """``RUNNING`` while a run is active, otherwise ``IDLE``."""
        return RunStatus.RUNNING if self._active_run is not None else RunStatus.IDLE

    @property
    def current_run(self) -> Optional[ProcessingRun]:
        return self._active_run

    def start(
        self,
        lines: Sequence[str],
        options: ProcessingOptions,
        callbacks: Optional[RunCallbacks] = None,
    ) -> Optional[ProcessingRun]:
        """Create a run over ``lines``.

        Returns ``None`` without side effects if another run is still active.
        Raises :class:`InvalidConfigurationError` for unusable options.
        """

        options.validate()
        with self._lock:
            if self._active_run is not None:
                LOGGER.warning("A processing run is already active; ignoring start request")
                return None
            run = ProcessingRun(
                self,
                lines,
                options,
                callbacks or RunCallbacks(),
                classify_function=self._classify,
                clock=self._clock,
                sample_every=self._sample_every,
            )
            self._active_run = run
        LOGGER.info(
            "Starting run over %s lines in %s chunks of up to %s",
            run.total,
            run.total_chunks,
            options.batch_size,
        )
        return run

    def cancel(self, handle: Optional[ProcessingRun] = None) -> None:
        run = handle or self._active_run
        if run is not None:
            run.cancel()

    def yield_control(self) -> None:
        self._yield_control()

    def _release(self, run: ProcessingRun) -> None:
        with self._lock:
            if self._active_run is run:
                self._active_run = None


def process_lines(
    lines: Sequence[str],
    options: Optional[ProcessingOptions] = None,
    callbacks: Optional[RunCallbacks] = None,
    *,
    scheduler: Optional[BatchScheduler] = None,
) -> ProcessingRun:
    """Run a complete pass synchronously and return the finished run."""

    scheduler = scheduler or BatchScheduler()
    run = scheduler.start(lines, options or ProcessingOptions(), callbacks)
    if run is None:
        raise RuntimeError("Scheduler already has an active run")
    run.run()
    return run


__all__ = ["BatchScheduler", "ProcessingRun", "RunHandle", "process_lines"]
