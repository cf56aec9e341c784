"""Document I/O module."""
from __future__ import annotations

from oas_consolidate.document.io import (
    FORMATS,
    dump_document,
    format_for_path,
    load_document,
    parse_document,
)

__all__ = ["FORMATS", "dump_document", "format_for_path", "load_document", "parse_document"]
