"""Shared test fixtures for oas-consolidate.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "oas_consolidate"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


def build_spec(schema: Any, path: str = "/", status: str = "200") -> dict[str, Any]:
    """Return a minimal OpenAPI document with ``schema`` as a GET response body."""
    return {
        "openapi": "3.0.0",
        "info": {"title": "Test", "version": "1.0.0"},
        "paths": {
            path: {
                "get": {
                    "responses": {
                        status: {
                            "description": "Example",
                            "content": {"application/json": {"schema": schema}},
                        },
                    },
                },
            },
        },
    }


@pytest.fixture()
def make_spec() -> Callable[..., dict[str, Any]]:
    """Return the ``build_spec`` document factory."""
    return build_spec


def response_schema(spec: dict[str, Any], path: str = "/", status: str = "200") -> Any:
    """Return the response schema slot of a document built by ``build_spec``."""
    return spec["paths"][path]["get"]["responses"][status]["content"]["application/json"]["schema"]


@pytest.fixture()
def schema_at() -> Callable[..., Any]:
    """Return the ``response_schema`` accessor."""
    return response_schema
