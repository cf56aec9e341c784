"""Enhancer registry for oas-consolidate.

Provides a decorator-based registration system for document enhancers.
Third-party enhancers register via this system by declaring entry-points
in their own ``pyproject.toml`` under the "oas_consolidate.enhancers"
group.

Example
-------
Register an enhancer with the decorator::

    from oas_consolidate.enhancers import SpecEnhancer, enhancer_registry

    @enhancer_registry.register("strip-examples")
    class StripExamples(SpecEnhancer):
        name = "strip-examples"

        def modify_spec(self, spec):
            ...

Load all installed enhancers via entry-points::

    enhancer_registry.load_entrypoints()

Retrieve and run an enhancer by name::

    enhancer = enhancer_registry.create("consolidate")
    spec = enhancer.modify_spec(spec)
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable

from oas_consolidate.enhancers.base import SpecEnhancer

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "oas_consolidate.enhancers"

EnhancerClass = type[SpecEnhancer]


class EnhancerNotFoundError(KeyError):
    """Raised when a requested enhancer name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.enhancer_name = name
        self.available = available
        super().__init__(
            f"Enhancer {name!r} is not registered. "
            f"Available enhancers: {', '.join(available) or '(none)'}. "
            "Check that the package is installed and its entry-points are declared."
        )


class EnhancerAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str) -> None:
        self.enhancer_name = name
        super().__init__(
            f"Enhancer {name!r} is already registered. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class EnhancerRegistry:
    """Registry of :class:`SpecEnhancer` implementations, keyed by name.

    Enhancers are registered either via the ``@register`` decorator at
    import time, or lazily via ``load_entrypoints`` for installed packages.
    """

    def __init__(self) -> None:
        self._enhancers: dict[str, EnhancerClass] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[EnhancerClass], EnhancerClass]:
        """Return a class decorator that registers the decorated class.

        Raises
        ------
        EnhancerAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class does not subclass ``SpecEnhancer``.
        """

        def decorator(cls: EnhancerClass) -> EnhancerClass:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: EnhancerClass) -> None:
        """Register a class directly without using the decorator syntax.

        Parameters
        ----------
        name:
            The unique string key for this enhancer.
        cls:
            The class to register. Must subclass ``SpecEnhancer``.

        Raises
        ------
        EnhancerAlreadyRegisteredError
            If ``name`` is already registered.
        TypeError
            If ``cls`` is not a subclass of ``SpecEnhancer``.
        """
        if name in self._enhancers:
            raise EnhancerAlreadyRegisteredError(name)
        if not (isinstance(cls, type) and issubclass(cls, SpecEnhancer)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                "it must be a subclass of SpecEnhancer."
            )
        self._enhancers[name] = cls
        logger.debug("Registered enhancer %r -> %s", name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        """Remove an enhancer from the registry.

        Raises
        ------
        EnhancerNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._enhancers:
            raise EnhancerNotFoundError(name, self.list_enhancers())
        del self._enhancers[name]
        logger.debug("Deregistered enhancer %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> EnhancerClass:
        """Return the class registered under ``name``.

        Raises
        ------
        EnhancerNotFoundError
            If no enhancer is registered under ``name``.
        """
        try:
            return self._enhancers[name]
        except KeyError:
            raise EnhancerNotFoundError(name, self.list_enhancers()) from None

    def create(self, name: str) -> SpecEnhancer:
        """Instantiate the enhancer registered under ``name``."""
        return self.get(name)()

    def list_enhancers(self) -> list[str]:
        """Return a sorted list of all registered enhancer names."""
        return sorted(self._enhancers)

    def __contains__(self, name: object) -> bool:
        return name in self._enhancers

    def __len__(self) -> int:
        return len(self._enhancers)

    def __repr__(self) -> str:
        return f"EnhancerRegistry(enhancers={self.list_enhancers()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register enhancers declared as package entry-points.

        Enhancers that are already registered are skipped with a
        debug-level log entry rather than raising an error, so repeated
        calls are idempotent.  An entry-point that fails to import is
        logged and skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._enhancers:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (EnhancerAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered; skipping.",
                    ep.name,
                )


enhancer_registry = EnhancerRegistry()
