"""Consolidation options.

All knobs default to the OpenAPI v3 layout: titled schemas found under
``paths`` are moved to ``components.schemas`` and referenced as
``#/components/schemas/<name>``.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from oas_consolidate.compare.comparator import DEFAULT_IGNORE_KEYS


@dataclass(frozen=True)
class ConsolidationOptions:
    """Options controlling where consolidation scans and writes.

    Parameters
    ----------
    scan_key:
        Top-level document key whose sub-tree is scanned.
    table_path:
        Key path of the schema table inside the document.
    items_suffix:
        Appended to an array schema's title to name its untitled
        ``items`` schema.
    ignore_keys:
        Keywords ignored when deciding whether two schemas are the same.
    """

    scan_key: str = "paths"
    table_path: tuple[str, ...] = ("components", "schemas")
    items_suffix: str = ".Items"
    ignore_keys: tuple[str, ...] = field(default=DEFAULT_IGNORE_KEYS)

    @property
    def ref_prefix(self) -> str:
        """Pointer prefix of table entries, e.g. ``#/components/schemas``."""
        return "#/" + "/".join(self.table_path)


DEFAULT_OPTIONS = ConsolidationOptions()
