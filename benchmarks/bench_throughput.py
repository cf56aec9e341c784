"""Benchmark: consolidation and comparison throughput.

Measures how many whole-document consolidations and schema comparisons
complete per second using the public oas_consolidate APIs.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

import oas_consolidate
from sample_spec import build_sample_spec

_ITERATIONS: int = 200
_COMPARE_ITERATIONS: int = 5_000


def bench_consolidate_throughput() -> dict[str, object]:
    """Benchmark whole-document consolidation throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    spec = build_sample_spec()

    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        oas_consolidate.consolidate_spec(spec)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "consolidate_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_compare_throughput() -> dict[str, object]:
    """Benchmark structural comparison of two equal schema bodies.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    spec = build_sample_spec(1)
    response = spec["paths"]["/pets0"]["get"]["responses"]["200"]
    left = response["content"]["application/json"]["schema"]
    right = json.loads(json.dumps(left))
    right["description"] = "ignored"

    start = time.perf_counter()
    for _ in range(_COMPARE_ITERATIONS):
        oas_consolidate.equal_schemas(left, right)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "compare_throughput",
        "iterations": _COMPARE_ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_COMPARE_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _COMPARE_ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_consolidate_throughput, "consolidate_throughput_baseline.json"),
        (bench_compare_throughput, "compare_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
