"""Node classification for OpenAPI document trees.

Documents are plain JSON values: ``dict``, ``list``, ``str``, numbers,
booleans and ``None``.  Nothing carries a type tag, so every node is
classified by the keys it holds:

- a *reference* is a mapping containing ``$ref``;
- a *schema body* is any other mapping;
- an *extractable* schema body carries both a string ``title`` and a
  ``properties`` mapping, and is what consolidation moves into the
  shared table.

Everything else (scalars, sequences) is opaque to classification.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

Node = Union[dict[str, Any], list[Any], str, int, float, bool, None]
SchemaBody = dict[str, Any]
Table = dict[str, SchemaBody]

REF_KEY = "$ref"
TITLE_KEY = "title"
PROPERTIES_KEY = "properties"
ITEMS_KEY = "items"


def is_mapping(node: object) -> bool:
    """Return ``True`` for JSON object nodes."""
    return isinstance(node, Mapping)


def is_sequence(node: object) -> bool:
    """Return ``True`` for JSON array nodes."""
    return isinstance(node, list)


def is_reference(node: object) -> bool:
    """Return ``True`` if ``node`` is a ``{"$ref": ...}`` pointer."""
    return is_mapping(node) and REF_KEY in node  # type: ignore[operator]


def is_schema_body(node: object) -> bool:
    """Return ``True`` if ``node`` is a mapping that is not a reference."""
    return is_mapping(node) and REF_KEY not in node  # type: ignore[operator]


def schema_title(node: object) -> str | None:
    """Return the non-empty string ``title`` of a schema body, else ``None``."""
    if not is_schema_body(node):
        return None
    title = node.get(TITLE_KEY)  # type: ignore[union-attr]
    if isinstance(title, str) and title:
        return title
    return None


def is_extractable(node: object) -> bool:
    """Return ``True`` if ``node`` should be moved into the schema table.

    Only object-shaped schemas qualify: the body needs a title to name the
    table entry and a ``properties`` mapping.  A titled primitive, or an
    untitled object, stays where it is.
    """
    if schema_title(node) is None:
        return False
    return is_mapping(node.get(PROPERTIES_KEY))  # type: ignore[union-attr]


def make_reference(ref_prefix: str, name: str) -> dict[str, str]:
    """Build a reference node pointing at ``name`` under ``ref_prefix``."""
    return {REF_KEY: f"{ref_prefix}/{name}"}


def escape_pointer_token(token: object) -> str:
    """Escape one JSON Pointer (RFC 6901) reference token."""
    return str(token).replace("~", "~0").replace("/", "~1")


def child_pointer(pointer: str, token: object) -> str:
    """Return the JSON Pointer of child ``token`` beneath ``pointer``."""
    return f"{pointer}/{escape_pointer_token(token)}"
