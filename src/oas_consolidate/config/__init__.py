"""Configuration for oas-consolidate."""
from __future__ import annotations

from oas_consolidate.config.loader import (
    ConfigurationError,
    load_options,
    options_from_mapping,
)
from oas_consolidate.config.options import DEFAULT_OPTIONS, ConsolidationOptions

__all__ = [
    "ConfigurationError",
    "ConsolidationOptions",
    "DEFAULT_OPTIONS",
    "load_options",
    "options_from_mapping",
]
