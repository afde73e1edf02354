"""Batch scheduling for classifying large phone number lists."""

from .service import BatchScheduler, ProcessingRun, RunHandle, process_lines

__all__ = ["BatchScheduler", "ProcessingRun", "RunHandle", "process_lines"]
