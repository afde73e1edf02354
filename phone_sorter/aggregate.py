"""Accumulate classified records into lists, state groupings, and counters."""
from __future__ import annotations

from typing import Iterable

from .models import AggregateSnapshot, AggregateState, ClassifiedRecord, ProcessingOptions


class ResultAggregator:
    """Owns the :class:`AggregateState` of one run and applies records to it.

    ``stats.total`` is the raw line count and is fixed when the aggregator is
    created; blank lines never reach :meth:`ingest`.
    """

    def __init__(self, options: ProcessingOptions, total: int = 0) -> None:
        self._options = options
        self._state = AggregateState()
        self._state.stats.total = total

    @property
    def state(self) -> AggregateState:
        return self._state

    def ingest(self, record: ClassifiedRecord) -> None:
        state = self._state
        if record.is_valid:
            state.valid_records.append(record)
            state.stats.valid_count += 1
            state.stats.distinct_states.add(record.state)
            if self._options.group_by_state:
                state.by_state.setdefault(record.state, []).append(record)
        else:
            state.invalid_records.append(record)
            state.stats.invalid_count += 1

    def ingest_many(self, records: Iterable[ClassifiedRecord]) -> None:
        for record in records:
            self.ingest(record)

    def snapshot(self) -> AggregateSnapshot:
        return self._state.snapshot()


__all__ = ["ResultAggregator"]
