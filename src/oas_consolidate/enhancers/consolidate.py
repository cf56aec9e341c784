"""Schema consolidation enhancer.

Moves every inline schema that carries a ``title`` and ``properties``
from ``paths`` into ``components.schemas`` and replaces it with a
``$ref``.  Schemas that are structurally the same (ignoring
``description``) share one table entry; different schemas competing for
the same title get suffixed names (``Pet``, ``Pet1``, ...).

Usage
-----
::

    from oas_consolidate.enhancers import ConsolidationEnhancer

    spec = ConsolidationEnhancer().modify_spec(spec)
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from oas_consolidate.compare.comparator import SchemaComparator
from oas_consolidate.config.options import DEFAULT_OPTIONS, ConsolidationOptions
from oas_consolidate.core.nodes import Table, is_mapping
from oas_consolidate.enhancers.base import OpenApiDocument, SpecEnhancer
from oas_consolidate.enhancers.registry import enhancer_registry
from oas_consolidate.registry.names import NameRegistry
from oas_consolidate.walker.report import ConsolidationReport
from oas_consolidate.walker.walker import SchemaWalker

logger = logging.getLogger(__name__)


def _read_table(spec: Mapping[str, Any], table_path: tuple[str, ...]) -> Table:
    node: Any = spec
    for key in table_path:
        if not is_mapping(node):
            return {}
        node = node.get(key)
    return dict(node) if is_mapping(node) else {}


def _place_table(
    container: dict[str, Any], table_path: tuple[str, ...], table: Table
) -> None:
    """Write ``table`` at ``table_path`` and drop the containers it leaves empty."""
    key, rest = table_path[0], table_path[1:]
    if not rest:
        if table:
            container[key] = table
        else:
            container.pop(key, None)
        return

    child = container.get(key)
    if not is_mapping(child):
        if not table:
            return
        child = {}
    _place_table(child, rest, table)
    if child:
        container[key] = child
    else:
        container.pop(key, None)


def consolidate_document(
    spec: Mapping[str, Any],
    options: ConsolidationOptions = DEFAULT_OPTIONS,
) -> tuple[OpenApiDocument, ConsolidationReport]:
    """Consolidate titled schemas of ``spec`` into its schema table.

    The input is left untouched; the returned document shares no mutable
    state with it.  The scan region and the seed table are copied
    independently, so an entry aliased into ``paths`` keeps its original
    body in the table.

    Parameters
    ----------
    spec:
        The OpenAPI document.
    options:
        Where to scan and where to write; see :class:`ConsolidationOptions`.

    Returns
    -------
    tuple[OpenApiDocument, ConsolidationReport]
        The consolidated document and a record of every extraction.

    Raises
    ------
    StructuralCycleError
        If the document contains an object-identity cycle.
    """
    # Separate copies: YAML aliases may share nodes between the scan region
    # and the seed table, and the walk must not rewrite seed entries.
    working: OpenApiDocument = copy.deepcopy(dict(spec))
    registry = NameRegistry(
        copy.deepcopy(_read_table(spec, options.table_path)),
        SchemaComparator(options.ignore_keys),
    )
    walker = SchemaWalker(registry, options)

    if options.scan_key in spec:
        scan_root = copy.deepcopy(spec[options.scan_key])
        working[options.scan_key] = walker.walk(scan_root)
    else:
        logger.debug("Document has no %r section; nothing to scan.", options.scan_key)

    _place_table(working, options.table_path, registry.to_dict())

    logger.info(walker.report.summary())
    return working, walker.report


@enhancer_registry.register("consolidate")
class ConsolidationEnhancer(SpecEnhancer):
    """A spec enhancer that consolidates inline titled schemas.

    Parameters
    ----------
    options:
        Consolidation options; defaults to the OpenAPI v3 layout.
    """

    name = "consolidate"

    def __init__(self, options: ConsolidationOptions = DEFAULT_OPTIONS) -> None:
        self.options = options

    def modify_spec(self, spec: OpenApiDocument) -> OpenApiDocument:
        """Return a consolidated copy of ``spec``."""
        updated, _ = consolidate_document(spec, self.options)
        return updated
