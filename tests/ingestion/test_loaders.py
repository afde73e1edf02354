import pandas as pd
import pytest

from phone_sorter.ingestion.loaders import UnsupportedFileTypeError, load_lines, split_lines


def test_split_lines_only_splits_on_newlines():
    assert split_lines("a\r\nb\n\nc\n") == ["a\r", "b", "", "c", ""]


def test_load_lines_from_text_file(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("\ufeff612-554-4556\n\n+1 212 555 1234\n", encoding="utf-8")

    assert load_lines(path) == ["612-554-4556", "", "+1 212 555 1234", ""]


def test_load_lines_from_csv_uses_phone_column(tmp_path):
    path = tmp_path / "leads.csv"
    path.write_text("name,Phone\nAda,+1 612 554 4556\nGrace,\nAlan,2125551234\n", encoding="utf-8")

    assert load_lines(path) == ["+1 612 554 4556", "", "2125551234"]


def test_load_lines_with_explicit_column(tmp_path):
    path = tmp_path / "leads.tsv"
    path.write_text("id\tcontact\n1\t6125544556\n2\t2125551234\n", encoding="utf-8")

    assert load_lines(path, column="contact") == ["6125544556", "2125551234"]

    with pytest.raises(KeyError):
        load_lines(path, column="missing")


def test_load_lines_falls_back_to_first_column(tmp_path):
    path = tmp_path / "numbers.csv"
    path.write_text("values\n6125544556\n", encoding="utf-8")

    assert load_lines(path) == ["6125544556"]


def test_load_lines_from_excel(tmp_path):
    pytest.importorskip("openpyxl")
    path = tmp_path / "leads.xlsx"
    pd.DataFrame({"Name": ["Ada", "Grace"], "Mobile": ["(612) 554-4556", "212.555.1234"]}).to_excel(path, index=False)

    assert load_lines(path) == ["(612) 554-4556", "212.555.1234"]


def test_unsupported_file_extension(tmp_path):
    bad_path = tmp_path / "numbers.json"
    bad_path.write_text("{}", encoding="utf-8")

    with pytest.raises(UnsupportedFileTypeError):
        load_lines(bad_path)
