"""Tree walker module.

Exports the ``SchemaWalker`` class, the ``consolidate`` convenience
function and the report types describing a pass.
"""
from __future__ import annotations

from oas_consolidate.walker.report import (
    ConsolidationReport,
    ExtractionAction,
    ExtractionRecord,
)
from oas_consolidate.walker.walker import SchemaWalker, consolidate

__all__ = [
    "SchemaWalker",
    "consolidate",
    "ConsolidationReport",
    "ExtractionAction",
    "ExtractionRecord",
]
