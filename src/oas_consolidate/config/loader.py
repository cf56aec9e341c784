"""Load consolidation options from a YAML file.

The file may hold the options at its root or under a ``consolidate:``
key, so the settings can live in a larger project config::

    consolidate:
      scan_key: paths
      table_path: [components, schemas]
      items_suffix: .Items
      ignore_keys: [description, example]

Unknown keys are rejected so that typos do not silently fall back to
defaults.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from oas_consolidate.config.options import ConsolidationOptions
from oas_consolidate.core.errors import ConsolidationError

_SECTION = "consolidate"


class ConfigurationError(ConsolidationError):
    """Raised when the configuration file is invalid."""


def load_options(config_path: Path | str) -> ConsolidationOptions:
    """Load and validate consolidation options from ``config_path``."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return options_from_mapping(parsed.get(_SECTION, parsed))


def options_from_mapping(raw: Any) -> ConsolidationOptions:
    """Build ``ConsolidationOptions`` from a plain mapping."""
    if raw is None:
        return ConsolidationOptions()
    section = _require_mapping(raw, _SECTION)

    known = {f.name for f in fields(ConsolidationOptions)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigurationError(f"Unknown option(s) in '{_SECTION}': {', '.join(unknown)}")

    values: dict[str, Any] = {}
    if "scan_key" in section:
        values["scan_key"] = _require_text(section["scan_key"], "scan_key")
    if "table_path" in section:
        table_path = _require_text_list(section["table_path"], "table_path")
        if not table_path:
            raise ConfigurationError("'table_path' must name at least one key.")
        values["table_path"] = table_path
    if "items_suffix" in section:
        values["items_suffix"] = _require_text(section["items_suffix"], "items_suffix")
    if "ignore_keys" in section:
        values["ignore_keys"] = _require_text_list(section["ignore_keys"], "ignore_keys")

    return ConsolidationOptions(**values)


def _require_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"'{name}' section must be a mapping.")
    return value


def _require_text(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"'{name}' must be a non-empty string.")
    return value


def _require_text_list(value: Any, name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (_require_text(value, name),)
    if not isinstance(value, list):
        raise ConfigurationError(f"'{name}' must be a string or a list of strings.")
    return tuple(_require_text(item, name) for item in value)
