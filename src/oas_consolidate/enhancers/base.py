"""Abstract base class for document enhancers.

An enhancer takes a whole OpenAPI document and returns an improved one.
Enhancers never mutate their input; each returns a new document.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

OpenApiDocument = dict[str, Any]


class SpecEnhancer(ABC):
    """Base class for OpenAPI document enhancers.

    Subclasses set ``name`` and implement :meth:`modify_spec`.
    """

    name: str = ""

    @abstractmethod
    def modify_spec(self, spec: OpenApiDocument) -> OpenApiDocument:
        """Return an enhanced copy of ``spec``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
