"""Command-line interface for oas-consolidate."""
from __future__ import annotations

from oas_consolidate.cli.main import cli

__all__ = ["cli"]
