"""Depth-first rewriter that moves titled schemas into the shared table.

``SchemaWalker`` makes a single pass over a tree it owns and mutates it
in place:

1. scalars and ``$ref`` nodes are left alone;
2. before descending, an array schema with a ``title`` names its untitled
   ``items`` schema ``<title>.Items`` so that it can be extracted too;
3. every mapping value and sequence element is visited and the result is
   written back into its slot;
4. after descending, a schema body with a ``title`` and ``properties`` is
   stored in the :class:`NameRegistry` and replaced by a reference.

A replaced node is never visited again, which is also why a second pass
over the output changes nothing.

Usage
-----
::

    from oas_consolidate.registry import NameRegistry
    from oas_consolidate.walker import consolidate

    registry = NameRegistry()
    paths = consolidate(paths, registry)
    schemas = registry.to_dict()
"""
from __future__ import annotations

import logging
from typing import Any

from oas_consolidate.config.options import DEFAULT_OPTIONS, ConsolidationOptions
from oas_consolidate.core.errors import StructuralCycleError
from oas_consolidate.core.nodes import (
    ITEMS_KEY,
    TITLE_KEY,
    Node,
    child_pointer,
    is_extractable,
    is_mapping,
    is_reference,
    is_schema_body,
    is_sequence,
    make_reference,
    schema_title,
)
from oas_consolidate.registry.names import NameRegistry
from oas_consolidate.walker.report import (
    ConsolidationReport,
    ExtractionAction,
    ExtractionRecord,
)

logger = logging.getLogger(__name__)


class SchemaWalker:
    """Rewrites one tree against one registry.

    Parameters
    ----------
    registry:
        Table receiving extracted bodies.  Scoped to a single document.
    options:
        Controls the reference prefix and the items title suffix.
    """

    def __init__(
        self,
        registry: NameRegistry,
        options: ConsolidationOptions = DEFAULT_OPTIONS,
    ) -> None:
        self._registry = registry
        self._options = options
        self.report = ConsolidationReport()
        self._active: set[int] = set()

    def walk(self, root: Node) -> Node:
        """Rewrite ``root`` in place and return it (or its replacement).

        Raises
        ------
        StructuralCycleError
            If a mapping or list is its own ancestor.
        """
        self._active.clear()
        return self._visit(root, "")

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _visit(self, node: Node, pointer: str) -> Node:
        if not (is_mapping(node) or is_sequence(node)) or is_reference(node):
            return node

        node_id = id(node)
        if node_id in self._active:
            raise StructuralCycleError(pointer)
        self._active.add(node_id)

        if is_mapping(node):
            self._name_array_items(node)  # type: ignore[arg-type]
            for key in list(node):  # type: ignore[union-attr]
                node[key] = self._visit(node[key], child_pointer(pointer, key))  # type: ignore[index]
        else:
            for index, item in enumerate(node):  # type: ignore[arg-type]
                node[index] = self._visit(item, child_pointer(pointer, index))  # type: ignore[index]

        self._active.discard(node_id)

        if is_extractable(node):
            return self._extract(node, pointer)  # type: ignore[arg-type]
        return node

    def _name_array_items(self, node: dict[str, Any]) -> None:
        title = schema_title(node)
        if title is None:
            return
        items = node.get(ITEMS_KEY)
        if is_schema_body(items) and TITLE_KEY not in items:  # type: ignore[operator]
            node[ITEMS_KEY] = {TITLE_KEY: f"{title}{self._options.items_suffix}", **items}  # type: ignore[dict-item]

    def _extract(self, node: dict[str, Any], pointer: str) -> dict[str, str]:
        title: str = node[TITLE_KEY]
        name = self._registry.resolve_name(title, node)
        if self._registry.register(name, node):
            action = ExtractionAction.REGISTERED
            logger.debug("Extracted %s as new schema %r", pointer or "/", name)
        else:
            action = ExtractionAction.REUSED
            logger.debug("Replaced %s with existing schema %r", pointer or "/", name)
        self.report.add(ExtractionRecord(pointer=pointer, title=title, name=name, action=action))
        return make_reference(self._options.ref_prefix, name)


def consolidate(
    scan_root: Node,
    registry: NameRegistry,
    options: ConsolidationOptions = DEFAULT_OPTIONS,
) -> Node:
    """Rewrite ``scan_root`` in place, filling ``registry`` with extracted bodies.

    Parameters
    ----------
    scan_root:
        The tree to rewrite.  The caller must own it exclusively; pass a
        deep copy to keep the original intact.
    registry:
        Table to resolve names against and register new bodies in.
    options:
        Consolidation options.

    Returns
    -------
    Node
        The rewritten tree.  This is ``scan_root`` itself unless the root
        was extractable, in which case it is a reference.
    """
    return SchemaWalker(registry, options).walk(scan_root)
