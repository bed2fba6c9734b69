"""Benchmark: serializer throughput.

Measures how many JSON and YAML round trips of a mid-sized address book
complete per second.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bench_latency import _person

from assignbook.model import AddressBook
from assignbook.storage import AddressBookSerializer

_ITERATIONS: int = 200
_YAML_ITERATIONS: int = 20
_ROSTER_SIZE: int = 100


def _book() -> AddressBook:
    return AddressBook(_person(i) for i in range(_ROSTER_SIZE))


def _throughput(operation: str, iterations: int, total: float) -> dict[str, object]:
    return {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }


def bench_json_throughput() -> dict[str, object]:
    """Benchmark JSON serialize + deserialize round trips.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    serializer = AddressBookSerializer()
    book = _book()
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        serializer.from_json(serializer.to_json(book))
    result = _throughput("assignbook_json_round_trip", _ITERATIONS, time.perf_counter() - start)
    print(f"[bench_throughput] {result['operation']}: {result['ops_per_second']:,.0f} ops/sec")
    return result


def bench_yaml_throughput() -> dict[str, object]:
    """Benchmark YAML serialize + deserialize round trips."""
    serializer = AddressBookSerializer()
    book = _book()
    start = time.perf_counter()
    for _ in range(_YAML_ITERATIONS):
        serializer.from_yaml(serializer.to_yaml(book))
    result = _throughput("assignbook_yaml_round_trip", _YAML_ITERATIONS, time.perf_counter() - start)
    print(f"[bench_throughput] {result['operation']}: {result['ops_per_second']:,.0f} ops/sec")
    return result


if __name__ == "__main__":
    results = [bench_json_throughput(), bench_yaml_throughput()]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "throughput_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
