"""Render finished run results as plain-text report artifacts."""
from __future__ import annotations

import re
from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .models import AggregateSnapshot, ClassifiedRecord

ALL_VALID_FILENAME = "all-valid-numbers.txt"
INVALID_FILENAME = "invalid-numbers.txt"
SUMMARY_FILENAME = "summary-report.txt"

_WHITESPACE = re.compile(r"\s+")


def state_filename(state: str) -> str:
    """Return the artifact name for a state, e.g. ``new-york-numbers.txt``."""

    return _WHITESPACE.sub("-", state.lower()) + "-numbers.txt"


def _join_cleaned(records) -> str:
    return "\n".join(record.cleaned for record in records)


class ReportGenerator:
    """Pure text transformations over an :class:`AggregateSnapshot`."""

    def __init__(self, snapshot: AggregateSnapshot) -> None:
        self._snapshot = snapshot

    @property
    def snapshot(self) -> AggregateSnapshot:
        return self._snapshot

    def all_valid_text(self) -> str:
        return _join_cleaned(self._snapshot.valid_records)

    def invalid_text(self) -> str:
        return "\n".join(f"{record.original} => {record.cleaned}" for record in self._snapshot.invalid_records)

    def state_text(self, state: str) -> str:
        return _join_cleaned(self._snapshot.by_state.get(state, ()))

    def state_distribution(self) -> List[Tuple[str, int]]:
        """Valid record counts per state, largest first and ties by name."""

        counts = Counter(record.state for record in self._snapshot.valid_records)
        return sorted(counts.items(), key=lambda item: (-item[1], item[0]))

    def summary_report(self, generated_at: Optional[datetime] = None) -> str:
        snapshot = self._snapshot
        generated_at = generated_at or datetime.now()

        lines = [
            "PHONE NUMBER PROCESSING REPORT",
            "===============================",
            f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}",
            "",
            f"Total Numbers Processed: {snapshot.total}",
            f"Valid US Numbers: {snapshot.valid_count}",
            f"Invalid Numbers: {snapshot.invalid_count}",
            f"States Found: {len(snapshot.distinct_states)}",
            "",
            "DISTRIBUTION BY STATE:",
            "=====================",
        ]
        if snapshot.valid_count:
            for state, count in self.state_distribution():
                percentage = count / snapshot.valid_count * 100
                lines.append(f"{state:<20}: {count:>8} ({percentage:.1f}%)")
        return "\n".join(lines) + "\n"

    def preview_rows(self, limit: int = 100) -> Tuple[List[ClassifiedRecord], int]:
        """Return the first ``limit`` valid records and how many were left out."""

        records = list(self._snapshot.valid_records[:limit])
        return records, max(len(self._snapshot.valid_records) - limit, 0)

    def artifacts(self, generated_at: Optional[datetime] = None) -> Dict[str, str]:
        """Map artifact filenames to their text, in download order."""

        files: Dict[str, str] = {ALL_VALID_FILENAME: self.all_valid_text()}
        for state in sorted(self._snapshot.by_state):
            files[state_filename(state)] = self.state_text(state)
        if self._snapshot.invalid_records:
            files[INVALID_FILENAME] = self.invalid_text()
        files[SUMMARY_FILENAME] = self.summary_report(generated_at)
        return files


__all__ = [
    "ReportGenerator",
    "state_filename",
    "ALL_VALID_FILENAME",
    "INVALID_FILENAME",
    "SUMMARY_FILENAME",
]
