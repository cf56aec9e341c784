"""oas-consolidate — move inline OpenAPI schemas into shared components.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import oas_consolidate

    spec = {
        "paths": {
            "/pets": {"get": {"responses": {"200": {"content": {
                "application/json": {"schema": {
                    "title": "Pet",
                    "properties": {"name": {"type": "string"}},
                }},
            }}}}},
        },
    }

    consolidated = oas_consolidate.consolidate_spec(spec)
    consolidated["components"]["schemas"]["Pet"]
    # {'title': 'Pet', 'properties': {'name': {'type': 'string'}}}

    oas_consolidate.equal_schemas({"title": "A", "description": "x"}, {"title": "A"})
    # True

    oas_consolidate.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from oas_consolidate.config.options import ConsolidationOptions
    from oas_consolidate.walker.report import ConsolidationReport


def consolidate_spec(
    spec: dict[str, Any], options: "ConsolidationOptions | None" = None
) -> dict[str, Any]:
    """Return a copy of ``spec`` with titled inline schemas moved to components.

    Parameters
    ----------
    spec:
        An OpenAPI document as a plain dict.
    options:
        Consolidation options; defaults to the OpenAPI v3 layout.

    Returns
    -------
    dict[str, Any]
        The consolidated document.  ``spec`` is not modified.

    Raises
    ------
    oas_consolidate.core.StructuralCycleError
        If the document contains an object-identity cycle.
    """
    document, _ = consolidate_with_report(spec, options)
    return document


def consolidate_with_report(
    spec: dict[str, Any], options: "ConsolidationOptions | None" = None
) -> tuple[dict[str, Any], "ConsolidationReport"]:
    """Like :func:`consolidate_spec`, also returning the extraction report."""
    from oas_consolidate.config.options import DEFAULT_OPTIONS
    from oas_consolidate.enhancers.consolidate import consolidate_document

    return consolidate_document(spec, options or DEFAULT_OPTIONS)


def equal_schemas(a: Any, b: Any, ignore_keys: Iterable[str] = ("description",)) -> bool:
    """Return ``True`` if two schema bodies are structurally equal.

    Keys in ``ignore_keys`` are skipped at every schema level.
    """
    from oas_consolidate.compare.comparator import equal_schemas as _equal_schemas

    return _equal_schemas(a, b, ignore_keys)


__all__ = [
    "__version__",
    "consolidate_spec",
    "consolidate_with_report",
    "equal_schemas",
]
