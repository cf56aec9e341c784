#!/usr/bin/env python3
"""Example: Quickstart for oas-consolidate

Consolidates a small OpenAPI document whose operations repeat the same
inline ``Pet`` schema and define a second, different ``Pet``.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install oas-consolidate
"""
from __future__ import annotations

import json

import oas_consolidate


def _json_response(schema: dict) -> dict:
    return {"description": "ok", "content": {"application/json": {"schema": schema}}}


PET = {
    "title": "Pet",
    "type": "object",
    "properties": {"id": {"type": "integer"}, "name": {"type": "string"}},
}

SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Pet Store", "version": "1.0.0"},
    "paths": {
        "/pets": {
            "get": {
                "responses": {
                    "200": _json_response(
                        {"title": "PetList", "type": "array", "items": dict(PET)}
                    ),
                },
            },
        },
        "/pets/{id}": {
            "get": {"responses": {"200": _json_response({**PET, "description": "One pet"})}},
        },
        "/legacy/pets/{id}": {
            "get": {
                "responses": {
                    "200": _json_response(
                        {"title": "Pet", "properties": {"petName": {"type": "string"}}}
                    ),
                },
            },
        },
    },
}


def main() -> None:
    print(f"oas-consolidate version: {oas_consolidate.__version__}")

    document, report = oas_consolidate.consolidate_with_report(SPEC)

    print(f"\n{report.summary()}")
    for record in report.records:
        print(f"  {record}")

    print("\nSchemas:")
    for name in document["components"]["schemas"]:
        print(f"  - {name}")

    print("\nConsolidated paths:")
    print(json.dumps(document["paths"], indent=2))


if __name__ == "__main__":
    main()
