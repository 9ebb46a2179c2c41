"""
BenchmarkResult class for storing benchmark results
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import time

import numpy as np

from inverted_throughput.throughput import Throughput


@dataclass
class BenchmarkResult:
    """Class for storing benchmark results"""
    name: str
    group: str
    samples: np.ndarray  # Per-iteration values in the measurement's base unit
    iterations: int
    total_time: float = 0.0  # Sum of all timed values in the measurement's base unit
    throughput: Optional[Throughput] = None
    system_info: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)  # When the benchmark was run

    @property
    def full_name(self) -> str:
        return f"{self.group}/{self.name}"

    @property
    def sample_size(self) -> int:
        return len(self.samples)

    @property
    def typical_value(self) -> float:
        """Median of the samples, used to pick one display scale for the result"""
        return float(np.median(self.samples))

    @property
    def estimates(self) -> Tuple[float, float, float]:
        """Lower bound, typical value and upper bound of the samples"""
        lower, upper = np.percentile(self.samples, [2.5, 97.5])
        return float(lower), self.typical_value, float(upper)
