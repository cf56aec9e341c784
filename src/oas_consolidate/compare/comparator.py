"""Structural comparison of schema bodies.

Two schema bodies are considered the same type when every keyword other
than the ignored ones (``description`` by default) matches recursively.
Mapping key order never matters; sequence order always does.

The comparison is schema-aware in two small ways:

- Maps whose keys are *names* rather than keywords (``properties``,
  ``patternProperties``, ``definitions``, ``$defs``,
  ``dependentSchemas``) never have their keys ignored, so a property
  literally called ``description`` still counts.  Their values are
  compared as schema bodies again.
- Keywords that hold instance data (``enum``, ``const``, ``default``,
  ``example``, ``examples``) are compared literally, with nothing
  ignored.

Usage
-----
::

    from oas_consolidate.compare import equal_schemas

    equal_schemas(
        {"title": "Pet", "description": "a pet", "properties": {}},
        {"title": "Pet", "properties": {}},
    )  # True
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum, auto

from oas_consolidate.core.nodes import child_pointer

DEFAULT_IGNORE_KEYS: tuple[str, ...] = ("description",)

_NAME_MAP_KEYWORDS = frozenset(
    {"properties", "patternProperties", "definitions", "$defs", "dependentSchemas"}
)
_LITERAL_KEYWORDS = frozenset({"enum", "const", "default", "example", "examples"})


class _Context(Enum):
    """What the compared value represents inside a schema body."""

    SCHEMA = auto()
    NAME_MAP = auto()
    LITERAL = auto()


def _kind(value: object) -> str:
    # bool is an int subclass; JSON keeps them apart
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    if value is None:
        return "null"
    return type(value).__name__


def _child_context(key: str, context: _Context) -> _Context:
    if context is _Context.LITERAL:
        return _Context.LITERAL
    if context is _Context.NAME_MAP:
        return _Context.SCHEMA
    if key in _NAME_MAP_KEYWORDS:
        return _Context.NAME_MAP
    if key in _LITERAL_KEYWORDS:
        return _Context.LITERAL
    return _Context.SCHEMA


class SchemaComparator:
    """Deep structural equality over schema bodies.

    Parameters
    ----------
    ignore_keys:
        Keywords skipped on both sides wherever they appear directly in a
        compared schema body.  Defaults to ``("description",)``.
    """

    def __init__(self, ignore_keys: Iterable[str] = DEFAULT_IGNORE_KEYS) -> None:
        self._ignore_keys = frozenset(ignore_keys)

    @property
    def ignore_keys(self) -> frozenset[str]:
        """Keywords excluded from comparison."""
        return self._ignore_keys

    def equal(self, a: object, b: object) -> bool:
        """Return ``True`` if ``a`` and ``b`` are structurally equal."""
        return next(self._walk(a, b, _Context.SCHEMA, ""), None) is None

    def differences(self, a: object, b: object) -> list[str]:
        """Return JSON Pointers (relative to the bodies) where ``a`` and ``b`` differ.

        A key present on only one side is reported at the key's own
        pointer; a type or value mismatch is reported where it occurs.
        The empty string denotes the bodies themselves.
        """
        return list(self._walk(a, b, _Context.SCHEMA, ""))

    def __repr__(self) -> str:
        return f"SchemaComparator(ignore_keys={sorted(self._ignore_keys)})"

    # ------------------------------------------------------------------
    # Recursive walk
    # ------------------------------------------------------------------

    def _walk(self, a: object, b: object, context: _Context, pointer: str) -> Iterator[str]:
        kind = _kind(a)
        if kind != _kind(b):
            yield pointer
            return

        if kind == "object":
            yield from self._walk_mapping(a, b, context, pointer)  # type: ignore[arg-type]
        elif kind == "array":
            yield from self._walk_sequence(a, b, context, pointer)  # type: ignore[arg-type]
        elif a != b:
            yield pointer

    def _walk_mapping(
        self,
        a: Mapping[str, object],
        b: Mapping[str, object],
        context: _Context,
        pointer: str,
    ) -> Iterator[str]:
        ignored = self._ignore_keys if context is _Context.SCHEMA else frozenset()
        keys_a = {k for k in a if k not in ignored}
        keys_b = {k for k in b if k not in ignored}

        for key in sorted(keys_a ^ keys_b, key=str):
            yield child_pointer(pointer, key)
        for key in sorted(keys_a & keys_b, key=str):
            yield from self._walk(
                a[key], b[key], _child_context(key, context), child_pointer(pointer, key)
            )

    def _walk_sequence(
        self, a: list[object], b: list[object], context: _Context, pointer: str
    ) -> Iterator[str]:
        if len(a) != len(b):
            yield pointer
            return
        for index, (item_a, item_b) in enumerate(zip(a, b)):
            # a list directly under a name map is not meaningful; treat items as schemas
            item_context = _Context.SCHEMA if context is _Context.NAME_MAP else context
            yield from self._walk(item_a, item_b, item_context, child_pointer(pointer, index))


def equal_schemas(
    a: object, b: object, ignore_keys: Iterable[str] = DEFAULT_IGNORE_KEYS
) -> bool:
    """Convenience wrapper: compare two schema bodies structurally.

    Parameters
    ----------
    a, b:
        The schema bodies to compare.
    ignore_keys:
        Keywords skipped at every schema level.  Defaults to
        ``("description",)``.

    Returns
    -------
    bool
        ``True`` if every non-ignored field matches recursively.
    """
    return SchemaComparator(ignore_keys).equal(a, b)
