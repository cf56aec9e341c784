"""Synthetic OpenAPI documents for the benchmarks.

Each path repeats the same ``Pet`` shape, adds a path-specific ``Pet``
that collides on title, and returns an array of titled ``Tag`` items, so
a run exercises reuse, collision suffixing and items naming together.
"""
from __future__ import annotations

from typing import Any


def _pet(extra_property: str | None = None) -> dict[str, Any]:
    properties: dict[str, Any] = {
        "id": {"type": "integer", "format": "int64"},
        "name": {"type": "string", "description": "Display name"},
    }
    if extra_property:
        properties[extra_property] = {"type": "string"}
    return {"title": "Pet", "type": "object", "properties": properties, "required": ["id"]}


def build_sample_spec(path_count: int = 20) -> dict[str, Any]:
    """Return a document with ``path_count`` paths of inline schemas."""
    paths: dict[str, Any] = {}
    for index in range(path_count):
        paths[f"/pets{index}"] = {
            "get": {
                "responses": {
                    "200": {
                        "description": "ok",
                        "content": {"application/json": {"schema": _pet()}},
                    },
                },
            },
            "post": {
                "requestBody": {
                    "content": {"application/json": {"schema": _pet(f"field{index % 5}")}},
                },
                "responses": {
                    "201": {
                        "description": "created",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "title": "Tags",
                                    "type": "array",
                                    "items": {"properties": {"label": {"type": "string"}}},
                                },
                            },
                        },
                    },
                },
            },
        }
    return {"openapi": "3.0.0", "info": {"title": "Bench", "version": "1.0.0"}, "paths": paths}
