"""Structural tests for assignbook benchmark modules."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_latency_importable() -> None:
    """Verify bench_latency module can be imported."""
    mod = importlib.import_module("bench_latency")
    assert hasattr(mod, "bench_commit_latency")
    assert hasattr(mod, "bench_undo_latency")


def test_bench_throughput_importable() -> None:
    """Verify bench_throughput module can be imported."""
    mod = importlib.import_module("bench_throughput")
    assert hasattr(mod, "bench_json_throughput")
    assert hasattr(mod, "bench_yaml_throughput")


def test_commit_latency_returns_expected_keys() -> None:
    """Verify bench_commit_latency returns expected result keys."""
    from bench_latency import bench_commit_latency

    result = bench_commit_latency()
    for key in ("operation", "iterations", "avg_latency_ms", "p50_ms", "p95_ms"):
        assert key in result
    assert float(result["p95_ms"]) >= float(result["p50_ms"])  # type: ignore[arg-type]


def test_undo_latency_returns_expected_keys() -> None:
    """Verify bench_undo_latency returns expected result keys."""
    from bench_latency import bench_undo_latency

    result = bench_undo_latency()
    assert result["operation"] == "assignbook_undo_latency"
    assert "ops_per_second" in result


def test_json_throughput_returns_expected_keys() -> None:
    """Verify bench_json_throughput returns expected result keys."""
    from bench_throughput import bench_json_throughput

    result = bench_json_throughput()
    assert "operation" in result
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]
