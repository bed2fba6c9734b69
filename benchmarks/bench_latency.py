"""Benchmark: commit and undo latency (p50/p95/mean).

Each commit snapshots the whole roster, so latency grows with roster
size.  This measures one add-person command plus its commit, and one
undo, on a roster of ``_ROSTER_SIZE`` persons.
"""
from __future__ import annotations

import json
import sys
import time
from datetime import date, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from assignbook.logic import AddPerson, Dispatcher, Undo
from assignbook.model import AddressBook, Assignment, Email, ModelManager, Module, Name, Person

_WARMUP: int = 20
_ITERATIONS: int = 300
_ROSTER_SIZE: int = 200


def _person(index: int) -> Person:
    return Person(
        Name(f"Student {index}"),
        Email(f"student{index}@example.com"),
        Module(f"CS{1000 + index % 7}"),
        assignments=tuple(
            Assignment(f"Task {n}", date(2024, 1, 1) + timedelta(days=n)) for n in range(3)
        ),
    )


def _dispatcher() -> Dispatcher:
    book = AddressBook(_person(i) for i in range(_ROSTER_SIZE))
    return Dispatcher(ModelManager(book))


def _summarize(operation: str, latencies_ms: list[float]) -> dict[str, object]:
    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000
    return {
        "operation": operation,
        "iterations": n,
        "total_seconds": round(total, 4),
        "ops_per_second": round(n / total, 1) if total else 0.0,
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }


def bench_commit_latency() -> dict[str, object]:
    """Benchmark an add-person command including its commit.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    dispatcher = _dispatcher()
    for i in range(_WARMUP):
        dispatcher.execute(AddPerson(_person(_ROSTER_SIZE + i)))

    latencies_ms: list[float] = []
    offset = _ROSTER_SIZE + _WARMUP
    for i in range(_ITERATIONS):
        request = AddPerson(_person(offset + i))
        t0 = time.perf_counter()
        dispatcher.execute(request)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    result = _summarize("assignbook_commit_latency", latencies_ms)
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_undo_latency() -> dict[str, object]:
    """Benchmark undo after a run of committed commands."""
    dispatcher = _dispatcher()
    for i in range(_ITERATIONS):
        dispatcher.execute(AddPerson(_person(_ROSTER_SIZE + i)))

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        dispatcher.execute(Undo())
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    result = _summarize("assignbook_undo_latency", latencies_ms)
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    results = [bench_commit_latency(), bench_undo_latency()]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
