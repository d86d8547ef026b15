# tests/utils.py
"""
Small, reusable helpers used across the docclusters test suite.

Functions:
- unit(v): unit-normalize a numpy vector.
- assert_total_partition(result, ids): every id appears in exactly one cluster.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import time
from collections import Counter
from contextlib import contextmanager
from typing import Any, Dict, Iterable

import numpy as np

_EPS = 1e-12


def unit(v: np.ndarray) -> np.ndarray:
    """Return the unit-normalized vector."""
    v = np.asarray(v, dtype=np.float64)
    if v.ndim != 1:
        raise ValueError(f"unit() expects 1D input, got shape {v.shape}")
    return v / (np.linalg.norm(v) + _EPS)


def assert_total_partition(result, ids: Iterable[str]) -> None:
    """Every identifier appears in exactly one cluster and nothing else does."""
    counts = Counter(doc_id for members in result.clusters for doc_id in members)
    expected = list(ids)
    assert set(counts) == set(expected), "Cluster members differ from input ids"
    duplicated = [doc_id for doc_id, c in counts.items() if c != 1]
    assert not duplicated, f"Ids assigned more than once: {duplicated}"
    assert sum(counts.values()) == len(expected)


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":400,"d":16,"K":4} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """Print timing in a compact, machine-readable single line."""
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
