"""Structural comparison module.

Exports the ``SchemaComparator`` class and the ``equal_schemas``
convenience function.
"""
from __future__ import annotations

from oas_consolidate.compare.comparator import (
    DEFAULT_IGNORE_KEYS,
    SchemaComparator,
    equal_schemas,
)

__all__ = ["DEFAULT_IGNORE_KEYS", "SchemaComparator", "equal_schemas"]
