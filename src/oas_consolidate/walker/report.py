"""Records of what a consolidation pass did.

Every extraction produces one :class:`ExtractionRecord`.  The
:class:`ConsolidationReport` collects them in traversal order and offers
the summary helpers the CLI prints.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ExtractionAction(Enum):
    """What happened to an extracted schema body."""

    REGISTERED = auto()
    REUSED = auto()


@dataclass(frozen=True)
class ExtractionRecord:
    """A single schema body replaced by a reference.

    Parameters
    ----------
    pointer:
        JSON Pointer of the replaced node, relative to the scanned region.
    title:
        The schema's ``title``, i.e. the name it asked for.
    name:
        The table name it was stored or found under.
    action:
        Whether a new table entry was created or an existing one reused.
    """

    pointer: str
    title: str
    name: str
    action: ExtractionAction

    @property
    def renamed(self) -> bool:
        """``True`` when a collision forced a suffixed name."""
        return self.name != self.title

    def __str__(self) -> str:
        tag = "+" if self.action is ExtractionAction.REGISTERED else "="
        suffix = f" (title {self.title!r})" if self.renamed else ""
        return f"[{tag}] {self.pointer or '/'} -> {self.name}{suffix}"


@dataclass
class ConsolidationReport:
    """Ordered extraction records from one consolidation pass."""

    records: list[ExtractionRecord] = field(default_factory=list)

    def add(self, record: ExtractionRecord) -> None:
        """Append a record."""
        self.records.append(record)

    @property
    def has_changes(self) -> bool:
        """Return ``True`` when anything was extracted."""
        return bool(self.records)

    @property
    def registered_count(self) -> int:
        return sum(1 for r in self.records if r.action is ExtractionAction.REGISTERED)

    @property
    def reused_count(self) -> int:
        return sum(1 for r in self.records if r.action is ExtractionAction.REUSED)

    @property
    def renamed_count(self) -> int:
        return sum(1 for r in self.records if r.renamed and r.action is ExtractionAction.REGISTERED)

    def names(self) -> list[str]:
        """Distinct table names referenced by this pass, in first-seen order."""
        return list(dict.fromkeys(r.name for r in self.records))

    def summary(self) -> str:
        """Return a one-line human-readable summary."""
        if not self.has_changes:
            return "No titled object schemas found; document unchanged."
        return (
            f"{len(self.records)} schema(s) replaced by references: "
            f"{self.registered_count} new table entr{'y' if self.registered_count == 1 else 'ies'}, "
            f"{self.reused_count} reused, {self.renamed_count} renamed on collision"
        )
