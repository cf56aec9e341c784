"""Reading and writing OpenAPI documents as JSON or YAML.

The format is picked from the file suffix when reading: ``.json`` is
decoded as JSON, anything else with PyYAML (which also accepts JSON).
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from oas_consolidate.core.errors import DocumentLoadError

FORMATS = ("json", "yaml")


def format_for_path(path: Path | str) -> str:
    """Return ``"json"`` or ``"yaml"`` based on the suffix of ``path``."""
    return "json" if Path(path).suffix.lower() == ".json" else "yaml"


def parse_document(text: str, fmt: str = "yaml", source: Path | str = "<string>") -> dict[str, Any]:
    """Decode ``text`` into a document mapping.

    Raises
    ------
    DocumentLoadError
        If the text cannot be decoded or its root is not a mapping.
    """
    try:
        if fmt == "json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentLoadError(source, f"invalid {fmt.upper()}: {exc}") from exc

    if not isinstance(data, Mapping):
        raise DocumentLoadError(source, "document root must be a mapping")
    return dict(data)


def load_document(path: Path | str) -> dict[str, Any]:
    """Read and decode the document at ``path``."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DocumentLoadError(source, "file not found") from None
    except OSError as exc:
        raise DocumentLoadError(source, str(exc)) from exc
    return parse_document(text, format_for_path(source), source)


def dump_document(document: Mapping[str, Any], fmt: str = "json", indent: int = 2) -> str:
    """Serialise ``document`` to JSON or YAML text, preserving key order."""
    if fmt == "json":
        return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(
            dict(document), default_flow_style=False, sort_keys=False, allow_unicode=True
        )
    raise ValueError(f"Unsupported output format {fmt!r}; expected one of {', '.join(FORMATS)}")
