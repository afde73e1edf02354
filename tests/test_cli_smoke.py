"""Smoke tests for the CLI entry point."""
from __future__ import annotations

import zipfile

import pandas as pd
import pytest

from phone_sorter import __main__
from phone_sorter.cli import main


@pytest.fixture()
def input_path(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("612-554-4556\n+1 (212) 555-1234\n\n555-0100\n", encoding="utf-8")
    return path


def test_cli_writes_reports(tmp_path, input_path) -> None:
    output_dir = tmp_path / "results"

    exit_code = main([str(input_path), str(output_dir)])

    assert exit_code == 0
    assert (output_dir / "all-valid-numbers.txt").read_text(encoding="utf-8") == "6125544556\n2125551234"
    assert (output_dir / "minnesota-numbers.txt").exists()
    assert (output_dir / "invalid-numbers.txt").read_text(encoding="utf-8") == "555-0100 => 5550100"
    summary = (output_dir / "summary-report.txt").read_text(encoding="utf-8")
    assert "Total Numbers Processed: 5" in summary


def test_cli_with_config_zip_and_record_export(tmp_path, input_path) -> None:
    config_path = tmp_path / "options.yaml"
    config_path.write_text("group_by_state: false\nbatch_size: 2\n", encoding="utf-8")
    output_dir = tmp_path / "results"
    records_path = tmp_path / "records.csv"

    exit_code = main(
        [
            str(input_path),
            str(output_dir),
            "--config",
            str(config_path),
            "--zip",
            "--export-records",
            str(records_path),
        ]
    )

    assert exit_code == 0
    assert not (output_dir / "minnesota-numbers.txt").exists()
    with zipfile.ZipFile(output_dir / "phone-numbers-results.zip") as archive:
        assert "phone-numbers-results/all-valid-numbers.txt" in archive.namelist()
    records = pd.read_csv(records_path, dtype=str)
    assert list(records["status"]) == ["valid", "valid", "invalid"]


def test_cli_rejects_invalid_batch_size(tmp_path, input_path) -> None:
    exit_code = main([str(input_path), str(tmp_path / "results"), "--batch-size", "0"])

    assert exit_code == 1
    assert not (tmp_path / "results").exists()


def test_cli_rejects_unsupported_input(tmp_path) -> None:
    bad_path = tmp_path / "numbers.json"
    bad_path.write_text("[]", encoding="utf-8")

    assert main([str(bad_path), str(tmp_path / "results")]) == 1


def test_module_entry_point_delegates_to_cli(tmp_path, input_path) -> None:
    output_dir = tmp_path / "results"

    exit_code = __main__.main([str(input_path), str(output_dir), "--keep-country-code"])

    assert exit_code == 0
    assert (output_dir / "summary-report.txt").exists()


def test_module_entry_point_without_arguments_shows_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = __main__.main([])

    captured = capsys.readouterr()
    assert "python -m phone_sorter" in captured.out
    assert exit_code == 2
