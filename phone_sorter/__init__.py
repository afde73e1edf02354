"""Validate US phone number lists and sort them into per-state reports."""

from . import models  # noqa: F401
from .aggregate import ResultAggregator
from .area_codes import UNKNOWN_STATE, lookup_state
from .classifier import classify
from .config import ConfigurationError, InvalidConfigurationError
from .models import (
    AggregateSnapshot,
    AggregateState,
    AggregateStats,
    ClassifiedRecord,
    ProcessingOptions,
    ProgressUpdate,
    RunCallbacks,
    RunFailedError,
    RunStatus,
)
from .normalize import normalize
from .orchestrator import BatchScheduler, ProcessingRun, RunHandle, process_lines
from .reports import ReportGenerator
from .validation import is_valid_us_number

__all__ = [
    "AggregateSnapshot",
    "AggregateState",
    "AggregateStats",
    "BatchScheduler",
    "ClassifiedRecord",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ProcessingOptions",
    "ProcessingRun",
    "ProgressUpdate",
    "ReportGenerator",
    "ResultAggregator",
    "RunCallbacks",
    "RunFailedError",
    "RunHandle",
    "RunStatus",
    "UNKNOWN_STATE",
    "classify",
    "is_valid_us_number",
    "lookup_state",
    "normalize",
    "process_lines",
    "ingestion",
    "orchestrator",
]
