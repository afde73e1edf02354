"""Data models shared by the classifier, scheduler, aggregator, and reports."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Set, Tuple

from .config import InvalidConfigurationError

STATUS_VALID = "valid"
STATUS_INVALID = "invalid"


# --- Per-number records ---

@dataclass(frozen=True, slots=True)
class ClassifiedRecord:
    """Outcome of classifying a single input line.

    ``area_code`` and ``state`` are only populated for valid records.
    """

    original: str
    cleaned: str
    status: str
    area_code: Optional[str] = None
    state: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status == STATUS_VALID

    def as_row(self) -> Dict[str, str]:
        """Return a serialisable representation of the record."""
        return {
            "original": self.original,
            "cleaned": self.cleaned,
            "status": self.status,
            "area_code": self.area_code or "",
            "state": self.state or "",
        }


# --- Run configuration ---

@dataclass(frozen=True, slots=True)
class ProcessingOptions:
    """Options fixed for the duration of one run."""

    strip_country_code: bool = True
    group_by_state: bool = True
    batch_size: int = 10000

    def validate(self) -> None:
        """Raise :class:`InvalidConfigurationError` if the options are unusable."""

        if isinstance(self.batch_size, bool) or not isinstance(self.batch_size, int):
            raise InvalidConfigurationError(
                f"batch_size must be a positive integer, got {self.batch_size!r}"
            )
        if self.batch_size <= 0:
            raise InvalidConfigurationError(f"batch_size must be positive, got {self.batch_size}")


# --- Aggregated results ---

@dataclass
class AggregateStats:
    total: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    distinct_states: Set[str] = field(default_factory=set)


@dataclass
class AggregateState:
    """Mutable accumulation of records owned by a single run."""

    valid_records: List[ClassifiedRecord] = field(default_factory=list)
    invalid_records: List[ClassifiedRecord] = field(default_factory=list)
    by_state: Dict[str, List[ClassifiedRecord]] = field(default_factory=dict)
    stats: AggregateStats = field(default_factory=AggregateStats)

    def snapshot(self) -> "AggregateSnapshot":
        """Return an immutable copy safe to hand to callbacks and reports."""

        return AggregateSnapshot(
            valid_records=tuple(self.valid_records),
            invalid_records=tuple(self.invalid_records),
            by_state=MappingProxyType({state: tuple(records) for state, records in self.by_state.items()}),
            total=self.stats.total,
            valid_count=self.stats.valid_count,
            invalid_count=self.stats.invalid_count,
            distinct_states=frozenset(self.stats.distinct_states),
        )


@dataclass(frozen=True)
class AggregateSnapshot:
    """Read-only view of an :class:`AggregateState` at a point in time."""

    valid_records: Tuple[ClassifiedRecord, ...] = ()
    invalid_records: Tuple[ClassifiedRecord, ...] = ()
    by_state: Mapping[str, Tuple[ClassifiedRecord, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    total: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    distinct_states: frozenset = frozenset()

    @property
    def skipped_count(self) -> int:
        """Number of blank lines (or lines never reached) excluded from classification."""
        return self.total - self.valid_count - self.invalid_count


# --- Run lifecycle ---

class RunStatus(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"

    @property
    def finished(self) -> bool:
        return self in {RunStatus.COMPLETED, RunStatus.CANCELLED, RunStatus.FAILED}


@dataclass(frozen=True, slots=True)
class ProgressUpdate:
    """Point-in-time progress information for a run."""

    fraction: float
    processed: int
    total: int
    valid_count: int
    invalid_count: int
    elapsed_seconds: float
    records_per_second: Optional[float] = None
    remaining_seconds: Optional[float] = None


ProgressCallback = Callable[[float, int], None]
SnapshotCallback = Callable[[AggregateSnapshot], None]
ThroughputCallback = Callable[[float], None]


@dataclass
class RunCallbacks:
    """Host hooks invoked synchronously by the scheduler."""

    on_progress: Optional[ProgressCallback] = None
    on_complete: Optional[SnapshotCallback] = None
    on_cancelled: Optional[SnapshotCallback] = None
    on_throughput: Optional[ThroughputCallback] = None


class RunFailedError(RuntimeError):
    """Raised when an unexpected fault aborts a run."""


__all__ = [
    "STATUS_VALID",
    "STATUS_INVALID",
    "ClassifiedRecord",
    "ProcessingOptions",
    "AggregateStats",
    "AggregateState",
    "AggregateSnapshot",
    "RunStatus",
    "ProgressUpdate",
    "RunCallbacks",
    "RunFailedError",
]
