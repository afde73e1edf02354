"""Utilities for loading candidate phone numbers from text files and spreadsheets."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, MutableMapping, Optional, Sequence, Union

import pandas as pd

PathLike = Union[str, Path]

_TEXT_SUFFIXES = {".txt"}
_DELIMITED_SUFFIXES = {".csv", ".tsv"}
_EXCEL_SUFFIXES = {".xls", ".xlsx", ".xlsm", ".xlsb"}

_PHONE_COLUMN_SYNONYMS: Sequence[str] = (
    "phone",
    "phones",
    "phone_number",
    "phone number",
    "number",
    "telephone",
    "mobile",
    "cell",
)


class UnsupportedFileTypeError(ValueError):
    """Raised when an unsupported file format is passed to the loader."""


def split_lines(text: str) -> List[str]:
    """Split raw text on newlines without any other normalisation."""

    return text.split("\n")


def load_lines(
    path: PathLike,
    *,
    column: Optional[str] = None,
    sheet_name: Union[str, int] = 0,
    loader_kwargs: Optional[MutableMapping[str, Any]] = None,
) -> List[str]:
    """Load one candidate phone number per line.

    Parameters
    ----------
    path:
        A ``.txt`` file with one number per line, or a CSV/TSV/Excel file.
    column:
        Spreadsheet column holding the numbers. When omitted, the first column
        whose name matches a common phone heading is used, falling back to the
        first column. Ignored for text files.
    sheet_name:
        Sheet selector passed to :func:`pandas.read_excel`.
    loader_kwargs:
        Extra keyword arguments forwarded to :func:`pandas.read_csv` or
        :func:`pandas.read_excel`.
    """

    path_obj = Path(path)
    suffix = path_obj.suffix.lower()

    if suffix in _TEXT_SUFFIXES:
        return split_lines(path_obj.read_text(encoding="utf-8-sig"))

    dataframe = _read_dataframe(path_obj, sheet_name=sheet_name, loader_kwargs=loader_kwargs)
    if not len(dataframe.columns):
        return []
    resolved = _resolve_column(dataframe.columns, column)
    return [_cell_to_line(value) for value in dataframe[resolved]]


def _read_dataframe(
    path: Path,
    *,
    sheet_name: Union[str, int] = 0,
    loader_kwargs: Optional[MutableMapping[str, Any]] = None,
) -> pd.DataFrame:
    loader_kwargs = dict(loader_kwargs or {})
    suffix = path.suffix.lower()
    # Keep numbers as text so leading "+" and formatting survive.
    loader_kwargs.setdefault("dtype", str)

    if suffix in _DELIMITED_SUFFIXES:
        if suffix == ".tsv":
            loader_kwargs.setdefault("sep", "\t")
        loader_kwargs.setdefault("skip_blank_lines", False)
        return pd.read_csv(path, **loader_kwargs)

    if suffix in _EXCEL_SUFFIXES:
        engine = loader_kwargs.pop("engine", None) or "openpyxl"
        return pd.read_excel(path, sheet_name=sheet_name, engine=engine, **loader_kwargs)

    raise UnsupportedFileTypeError(f"Unsupported file extension: {path.suffix}")


def _resolve_column(columns: Iterable[Any], requested: Optional[str]) -> Any:
    available = list(columns)
    if requested is not None:
        if requested not in available:
            raise KeyError(f"Column '{requested}' not found. Available columns: {available}")
        return requested

    for column in available:
        if str(column).strip().lower() in _PHONE_COLUMN_SYNONYMS:
            return column
    return available[0]


def _cell_to_line(value: Any) -> str:
    if pd.isna(value):
        return ""
    return str(value)


__all__ = ["load_lines", "split_lines", "UnsupportedFileTypeError"]
