"""
Result records for inverted-throughput benchmarks.
"""

from .benchmark_result import BenchmarkResult

__all__ = [
    'BenchmarkResult',
]
