"""Utilities for importing phone number lists and exporting processed results."""

from .exporters import export_records, records_to_dataframe, write_archive, write_artifacts
from .loaders import UnsupportedFileTypeError, load_lines, split_lines

__all__ = [
    "UnsupportedFileTypeError",
    "load_lines",
    "split_lines",
    "write_artifacts",
    "write_archive",
    "records_to_dataframe",
    "export_records",
]
