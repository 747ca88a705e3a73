from __future__ import annotations
import time
from contextlib import contextmanager
from typing import Dict, List
import numpy as np

@contextmanager
def timer(record: Dict[str, List[float]], key: str):
    """Append the wall time (seconds) of the block to record[key]."""
    t0 = time.perf_counter()
    try:
        yield
    finally:
        record.setdefault(key, []).append(time.perf_counter() - t0)

def pct(values: List[float], p: float) -> float:
    if not values:
        return 0.0
    return float(np.percentile(np.asarray(values, dtype=float), p))

def latency_summary(values: List[float]) -> Dict[str, float]:
    """p50/p95/max of latencies, in milliseconds."""
    return {
        "n": len(values),
        "p50_ms": pct(values, 50) * 1000.0,
        "p95_ms": pct(values, 95) * 1000.0,
        "max_ms": max(values) * 1000.0 if values else 0.0,
    }
