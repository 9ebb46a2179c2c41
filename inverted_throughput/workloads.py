"""
Built-in workloads used by the command line tool and the examples
"""

from typing import Callable

import numpy as np

WORKLOADS = ("sum", "copy", "sort")


def make_workload(name: str, size: int, seed: int = 0) -> Callable[[], object]:
    """
    Build a zero-argument callable processing ``size`` float64 elements.

    Args:
        name: One of ``WORKLOADS``
        size: Number of elements handled per call
        seed: Seed for the random input buffer

    Returns:
        Callable running the workload once
    """
    if name not in WORKLOADS:
        raise ValueError(f"Unknown workload '{name}', expected one of {', '.join(WORKLOADS)}")
    if size < 1:
        raise ValueError(f"Workload size must be at least 1, got {size}")

    data = np.random.default_rng(seed).random(size)

    if name == "sum":
        return lambda: data.sum()
    if name == "copy":
        out = np.empty_like(data)
        return lambda: np.copyto(out, data)
    return lambda: np.sort(data)
