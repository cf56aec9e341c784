"""Document enhancer subsystem.

Importing this package registers the built-in ``consolidate`` enhancer
in ``enhancer_registry``.  Third-party enhancers register via
``importlib.metadata`` entry-points under the "oas_consolidate.enhancers"
group.

Example
-------
Declare an enhancer in pyproject.toml:

.. code-block:: toml

    [project.entry-points."oas_consolidate.enhancers"]
    my_enhancer = "my_package.enhancers:MyEnhancer"
"""
from __future__ import annotations

from oas_consolidate.enhancers.base import OpenApiDocument, SpecEnhancer
from oas_consolidate.enhancers.consolidate import ConsolidationEnhancer, consolidate_document
from oas_consolidate.enhancers.registry import (
    ENTRYPOINT_GROUP,
    EnhancerAlreadyRegisteredError,
    EnhancerNotFoundError,
    EnhancerRegistry,
    enhancer_registry,
)

__all__ = [
    "ConsolidationEnhancer",
    "ENTRYPOINT_GROUP",
    "EnhancerAlreadyRegisteredError",
    "EnhancerNotFoundError",
    "EnhancerRegistry",
    "OpenApiDocument",
    "SpecEnhancer",
    "consolidate_document",
    "enhancer_registry",
]
