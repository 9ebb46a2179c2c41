"""
Inverted-throughput: report benchmark throughputs as time per element or byte
"""

__version__ = "0.1.0"

from inverted_throughput.throughput import Throughput, ThroughputKind  # noqa: F401
from inverted_throughput.measurement import Measurement, ValueFormatter, WallTime, DurationFormatter  # noqa: F401
from inverted_throughput.inverted import InvertedThroughput, UNEXPECTED  # noqa: F401
from inverted_throughput.benchmark import Benchmark, BenchmarkGroup  # noqa: F401

__all__ = [
    "Throughput",
    "ThroughputKind",
    "Measurement",
    "ValueFormatter",
    "WallTime",
    "DurationFormatter",
    "InvertedThroughput",
    "UNEXPECTED",
    "Benchmark",
    "BenchmarkGroup",
]
