"""Exception types shared across oas-consolidate.

Consolidation itself is total over JSON-shaped trees: malformed nodes are
passed through rather than rejected.  The errors below cover the few
conditions that cannot be handled that way, plus the outer I/O layer.
"""
from __future__ import annotations

from pathlib import Path


class ConsolidationError(Exception):
    """Base class for every error raised by oas-consolidate."""


class StructuralCycleError(ConsolidationError):
    """Raised when a document tree contains an object-identity cycle.

    JSON text cannot express such a cycle, but a tree assembled in
    memory can.  ``$ref`` cycles are never followed and do not trigger
    this error.

    Parameters
    ----------
    pointer:
        JSON Pointer of the node that closes the cycle, relative to the
        root handed to the walker.
    """

    def __init__(self, pointer: str) -> None:
        self.pointer = pointer
        super().__init__(
            f"Structural cycle detected at {pointer or '/'!r}: "
            "the node is one of its own ancestors."
        )


class NameConflictError(ConsolidationError, ValueError):
    """Raised when a table name is registered for two different schemas.

    Callers are expected to resolve a name through
    :meth:`NameRegistry.resolve_name` before registering it, so this only
    fires on misuse.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Schema name {name!r} is already bound to a structurally different body. "
            "Resolve the name before registering it."
        )


class DocumentLoadError(ConsolidationError):
    """Raised when a source document cannot be read or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load document {str(self.path)!r}: {reason}")
