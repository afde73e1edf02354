"""Configuration helpers for phone number processing runs."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .models import ProcessingOptions

LOGGER = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when processing options cannot be used to start a run."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}

_OPTION_KEYS = {"strip_country_code", "group_by_state", "batch_size"}
# Accepted for compatibility with older option files; has no effect on processing.
_IGNORED_KEYS = {"filter_invalid"}


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Configuration file '{file_path}' could not be parsed: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping at the top level")
    return data


def build_options(config: Optional[Dict[str, Any]] = None, **overrides: Any) -> "ProcessingOptions":
    """Translate configuration data into validated :class:`ProcessingOptions`.

    Keyword overrides take precedence over the configuration mapping; overrides
    set to ``None`` are ignored so unset CLI flags fall through.
    """

    from .models import ProcessingOptions

    settings: Dict[str, Any] = {}
    for key, value in (config or {}).items():
        if key in _OPTION_KEYS:
            settings[key] = value
        elif key in _IGNORED_KEYS:
            LOGGER.debug("Option %s has no effect on processing", key)
        else:
            LOGGER.debug("Ignoring unknown configuration key %s", key)

    settings.update({key: value for key, value in overrides.items() if value is not None})
    unknown = set(settings) - _OPTION_KEYS
    if unknown:
        raise InvalidConfigurationError(f"Unknown processing options: {sorted(unknown)}")

    for flag in ("strip_country_code", "group_by_state"):
        if flag in settings and not isinstance(settings[flag], bool):
            raise InvalidConfigurationError(f"{flag} must be true or false, got {settings[flag]!r}")

    options = ProcessingOptions(**settings)
    options.validate()
    return options


__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "load_configuration",
    "build_options",
]
