"""Export utilities for processed phone number results."""
from __future__ import annotations

import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, MutableMapping, Optional, Union

import pandas as pd

from ..models import ClassifiedRecord
from ..reports import ReportGenerator

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]

ARCHIVE_FOLDER = "phone-numbers-results"
RECORD_COLUMNS = ["original", "cleaned", "status", "area_code", "state"]


def write_artifacts(
    directory: PathLike,
    report: ReportGenerator,
    *,
    generated_at: Optional[datetime] = None,
) -> List[Path]:
    """Write every report artifact into ``directory`` and return the paths."""

    destination = Path(directory)
    destination.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for filename, content in report.artifacts(generated_at).items():
        path = destination / filename
        path.write_text(content, encoding="utf-8")
        written.append(path)
    LOGGER.info("Wrote %s report files to %s", len(written), destination)
    return written


def write_archive(
    path: PathLike,
    report: ReportGenerator,
    *,
    folder: str = ARCHIVE_FOLDER,
    generated_at: Optional[datetime] = None,
) -> Path:
    """Bundle every report artifact into a single zip archive."""

    archive_path = Path(path)
    archive_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for filename, content in report.artifacts(generated_at).items():
            archive.writestr(f"{folder}/{filename}", content)
    LOGGER.info("Wrote report archive %s", archive_path)
    return archive_path


def records_to_dataframe(records: Iterable[ClassifiedRecord]) -> pd.DataFrame:
    """Convert classified records into a :class:`pandas.DataFrame`."""

    return pd.DataFrame([record.as_row() for record in records], columns=RECORD_COLUMNS)


def export_records(
    records: Iterable[ClassifiedRecord],
    path: PathLike,
    *,
    sheet_name: str = "Numbers",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write classified records to a CSV, TSV, or Excel file."""

    output_path = Path(path)
    _write_dataframe(records_to_dataframe(records), output_path, sheet_name=sheet_name, exporter_kwargs=exporter_kwargs)
    return output_path


def _write_dataframe(
    dataframe: pd.DataFrame,
    path: Path,
    *,
    sheet_name: str,
    exporter_kwargs: Optional[MutableMapping[str, object]],
) -> None:
    exporter_kwargs = dict(exporter_kwargs or {})
    suffix = path.suffix.lower()

    if suffix in {".csv", ".tsv"}:
        if suffix == ".tsv":
            exporter_kwargs.setdefault("sep", "\t")
        dataframe.to_csv(path, index=False, **exporter_kwargs)
        return

    if suffix in {".xlsx", ".xlsm"}:
        engine = exporter_kwargs.pop("engine", None) or "openpyxl"
        dataframe.to_excel(path, index=False, sheet_name=sheet_name, engine=engine, **exporter_kwargs)
        return

    raise ValueError(f"Unsupported export file extension: {suffix}")


__all__ = ["write_artifacts", "write_archive", "records_to_dataframe", "export_records"]
