"""Tests for configuration loading and option validation."""
from __future__ import annotations

import json

import pytest

from phone_sorter.config import ConfigurationError, InvalidConfigurationError, build_options, load_configuration
from phone_sorter.models import ProcessingOptions


def test_load_json_configuration(tmp_path) -> None:
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"batch_size": 500}), encoding="utf-8")

    assert load_configuration(path) == {"batch_size": 500}


def test_load_yaml_configuration(tmp_path) -> None:
    path = tmp_path / "options.yaml"
    path.write_text("strip_country_code: false\ngroup_by_state: true\nbatch_size: 250\n", encoding="utf-8")

    config = load_configuration(path)

    assert config == {"strip_country_code": False, "group_by_state": True, "batch_size": 250}


def test_empty_yaml_is_empty_configuration(tmp_path) -> None:
    path = tmp_path / "options.yml"
    path.write_text("", encoding="utf-8")

    assert load_configuration(path) == {}


@pytest.mark.parametrize(
    "filename, content",
    [
        ("options.toml", "batch_size = 5"),
        ("options.yaml", "- just\n- a list\n"),
        ("options.json", "{not json"),
    ],
)
def test_bad_configuration_files(tmp_path, filename: str, content: str) -> None:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_configuration(path)


def test_missing_configuration_file(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        load_configuration(tmp_path / "missing.json")


def test_build_options_defaults() -> None:
    assert build_options() == ProcessingOptions(strip_country_code=True, group_by_state=True, batch_size=10000)


def test_build_options_overrides_take_precedence() -> None:
    options = build_options(
        {"batch_size": 100, "group_by_state": True, "filter_invalid": True, "theme": "dark"},
        group_by_state=False,
        batch_size=None,
    )

    assert options == ProcessingOptions(strip_country_code=True, group_by_state=False, batch_size=100)


@pytest.mark.parametrize(
    "config",
    [
        {"batch_size": 0},
        {"batch_size": -1},
        {"batch_size": "100"},
        {"batch_size": True},
        {"strip_country_code": "yes"},
    ],
)
def test_build_options_rejects_invalid_values(config) -> None:
    with pytest.raises(InvalidConfigurationError):
        build_options(config)


def test_invalid_configuration_is_a_configuration_error() -> None:
    assert issubclass(InvalidConfigurationError, ConfigurationError)
