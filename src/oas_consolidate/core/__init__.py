"""Core domain logic.

Node classification predicates and the shared exception hierarchy.
Submodules in core/ should not import from enhancers/ or cli/.
"""
from __future__ import annotations

from oas_consolidate.core.errors import (
    ConsolidationError,
    DocumentLoadError,
    NameConflictError,
    StructuralCycleError,
)
from oas_consolidate.core.nodes import (
    Node,
    SchemaBody,
    Table,
    is_extractable,
    is_mapping,
    is_reference,
    is_schema_body,
    is_sequence,
    make_reference,
    schema_title,
)

__all__ = [
    "ConsolidationError",
    "DocumentLoadError",
    "NameConflictError",
    "StructuralCycleError",
    "Node",
    "SchemaBody",
    "Table",
    "is_extractable",
    "is_mapping",
    "is_reference",
    "is_schema_body",
    "is_sequence",
    "make_reference",
    "schema_title",
]
