"""Schema name registry.

Exports ``NameRegistry``, the table that consolidation fills.
"""
from __future__ import annotations

from oas_consolidate.registry.names import NameRegistry

__all__ = ["NameRegistry"]
