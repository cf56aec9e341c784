"""Benchmark: Memory usage during document consolidation."""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

import oas_consolidate
from sample_spec import build_sample_spec

_ITERATIONS: int = 50


def bench_consolidate_memory() -> dict[str, object]:
    """Benchmark memory retained across repeated consolidations.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb.
    """
    spec = build_sample_spec()

    tracemalloc.start()
    snapshot_before = tracemalloc.take_snapshot()

    for _ in range(_ITERATIONS):
        oas_consolidate.consolidate_spec(spec)

    snapshot_after = tracemalloc.take_snapshot()
    _, peak_bytes = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    stats = snapshot_after.compare_to(snapshot_before, "lineno")
    retained_bytes = sum(stat.size_diff for stat in stats if stat.size_diff > 0)

    result: dict[str, object] = {
        "operation": "consolidate_memory",
        "iterations": _ITERATIONS,
        "peak_memory_kb": round(peak_bytes / 1024, 2),
        "current_memory_kb": round(retained_bytes / 1024, 2),
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(
        f"[bench_memory] {result['operation']}: peak {result['peak_memory_kb']:.2f} KB, "
        f"retained {result['current_memory_kb']:.2f} KB over {_ITERATIONS} iterations"
    )
    return result


if __name__ == "__main__":
    result = bench_consolidate_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
