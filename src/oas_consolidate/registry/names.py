"""Name registry for the shared schema table.

``NameRegistry`` holds the table that consolidation fills
(``components.schemas`` in an OpenAPI document).  It is seeded with
whatever entries the document already has and only ever grows.

Naming collisions are resolved by probing a deterministic sequence of
candidate names: ``Pet``, ``Pet1``, ``Pet2``, ...  The first name that is
either free or already bound to a structurally equal body wins.

Example
-------
::

    from oas_consolidate.registry import NameRegistry

    registry = NameRegistry({"Pet": {"title": "Pet", "properties": {"id": {}}}})
    body = {"title": "Pet", "properties": {"name": {}}}
    name = registry.resolve_name("Pet", body)   # "Pet1"
    registry.register(name, body)
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from oas_consolidate.compare.comparator import SchemaComparator
from oas_consolidate.core.errors import NameConflictError
from oas_consolidate.core.nodes import SchemaBody, Table

logger = logging.getLogger(__name__)


class NameRegistry:
    """Table of schema name -> schema body with collision resolution.

    Parameters
    ----------
    seed:
        Pre-existing table entries.  They take part in collision
        detection and are kept in the resulting table unchanged.  The
        mapping is copied shallowly; bodies are not copied.
    comparator:
        Comparator used to decide whether an occupied name can be reused.
        Defaults to one ignoring ``description``.
    """

    def __init__(
        self,
        seed: Mapping[str, SchemaBody] | None = None,
        comparator: SchemaComparator | None = None,
    ) -> None:
        self._entries: Table = dict(seed or {})
        self._seeded: frozenset[str] = frozenset(self._entries)
        self._comparator = comparator or SchemaComparator()

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def candidates(self, candidate: str) -> Iterator[str]:
        """Yield ``candidate``, ``candidate1``, ``candidate2``, ... without end."""
        yield candidate
        suffix = 1
        while True:
            yield f"{candidate}{suffix}"
            suffix += 1

    def resolve_name(self, candidate: str, body: SchemaBody) -> str:
        """Return the table name ``body`` should be stored or referenced under.

        The returned name is either unoccupied, in which case the caller
        registers ``body`` under it, or already bound to a structurally
        equal body, in which case the existing entry is reused.  Nothing
        is registered here.

        Parameters
        ----------
        candidate:
            The natural name, normally the schema's ``title``.
        body:
            The schema body looking for a name.

        Returns
        -------
        str
            The first name in the probing sequence that is free or
            matches ``body``.
        """
        for name in self.candidates(candidate):
            if name not in self._entries:
                return name
            occupant = self._entries[name]
            if self._comparator.equal(occupant, body):
                return name
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Schema name %r is taken by a different body (differs at %s); probing next.",
                    name,
                    ", ".join(p or "/" for p in self._comparator.differences(occupant, body)),
                )
        raise AssertionError("unreachable: candidate sequence is unbounded")

    # ------------------------------------------------------------------
    # Registration and lookup
    # ------------------------------------------------------------------

    def register(self, name: str, body: SchemaBody) -> bool:
        """Bind ``name`` to ``body``.

        Returns ``True`` when a new entry was added and ``False`` when
        ``name`` was already bound to an equal body.

        Raises
        ------
        NameConflictError
            If ``name`` is bound to a structurally different body.
        """
        if name in self._entries:
            if self._comparator.equal(self._entries[name], body):
                return False
            raise NameConflictError(name)
        self._entries[name] = body
        logger.debug("Registered schema %r", name)
        return True

    def lookup(self, name: str) -> SchemaBody | None:
        """Return the body bound to ``name``, or ``None``."""
        return self._entries.get(name)

    def is_seeded(self, name: str) -> bool:
        """Return ``True`` if ``name`` came from the seed table."""
        return name in self._seeded

    def names(self) -> list[str]:
        """Return all table names in insertion order."""
        return list(self._entries)

    def to_dict(self) -> Table:
        """Return the table as a new dict (bodies are shared, not copied)."""
        return dict(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NameRegistry(names={self.names()})"
