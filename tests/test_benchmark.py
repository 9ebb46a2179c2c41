"""
Unit tests for benchmark module
"""

import pytest
import numpy as np

# Add parent directory to path
import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inverted_throughput import Benchmark, InvertedThroughput, Throughput, WallTime
from inverted_throughput.benchmark import make_measurement
from inverted_throughput.config import BenchmarkConfig


QUIET = BenchmarkConfig(sample_size=5, warm_up_runs=1, iterations=4, progress=False)


class SteppingClock(WallTime):
    """Wall time whose samples grow by a fixed step, independent of the real clock"""

    def __init__(self, step=1000):
        self.step = step
        self.calls = 0

    def start(self):
        return 0

    def end(self, intermediate):
        self.calls += 1
        return self.step * self.calls


def test_benchmark_initialization():
    """Test benchmark initialization"""
    benchmark = Benchmark(config=QUIET)
    assert benchmark is not None
    assert len(benchmark.results) == 0
    assert isinstance(benchmark.measurement, InvertedThroughput)
    assert benchmark.system_info is not None


def test_measurement_from_config():
    benchmark = Benchmark(config=BenchmarkConfig(measurement="wall", progress=False))
    assert isinstance(benchmark.measurement, WallTime)
    with pytest.raises(ValueError):
        make_measurement("cycles")


def test_bench_function_collects_samples():
    clock = SteppingClock(step=1000)
    benchmark = Benchmark(measurement=InvertedThroughput(clock), config=QUIET)
    calls = []

    group = benchmark.benchmark_group("demo")
    group.throughput(Throughput.elements(10))
    result = group.bench_function("append", lambda: calls.append(1))

    # one warm-up call plus five samples of four iterations
    assert len(calls) == 1 + 5 * 4
    assert result.sample_size == 5
    np.testing.assert_allclose(result.samples, [250.0, 500.0, 750.0, 1000.0, 1250.0])
    assert result.total_time == 1000 * (1 + 2 + 3 + 4 + 5)
    assert result.typical_value == pytest.approx(750.0)
    assert result.full_name == "demo/append"
    assert result.throughput == Throughput.elements(10)
    assert benchmark.results == [result]


def test_estimates_are_ordered():
    benchmark = Benchmark(measurement=SteppingClock(), config=QUIET)
    result = benchmark.benchmark_group("g").bench_function("f", lambda: None)
    lower, typical, upper = result.estimates
    assert lower <= typical <= upper


def test_group_settings_override_config():
    clock = SteppingClock()
    benchmark = Benchmark(measurement=clock, config=QUIET)
    group = benchmark.benchmark_group("g").sample_size(3).iterations(2).warm_up_runs(0)
    calls = []
    result = group.bench_function("f", lambda: calls.append(1))
    assert result.sample_size == 3
    assert result.iterations == 2
    assert len(calls) == 6


@pytest.mark.parametrize("method,value", [
    ("sample_size", 0),
    ("iterations", 0),
    ("warm_up_runs", -1),
])
def test_group_rejects_invalid_settings(method, value):
    group = Benchmark(config=QUIET).benchmark_group("g")
    with pytest.raises(ValueError):
        getattr(group, method)(value)


def test_group_rejects_non_throughput():
    group = Benchmark(config=QUIET).benchmark_group("g")
    with pytest.raises(TypeError):
        group.throughput(42)
    with pytest.raises(TypeError):
        group.bench_function("f", "not callable")


def test_failing_function_is_reraised():
    group = Benchmark(config=QUIET).benchmark_group("g")

    def broken():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        group.bench_function("broken", broken)
    assert group.results == []


def test_finish_returns_results():
    benchmark = Benchmark(measurement=InvertedThroughput(SteppingClock()), config=QUIET)
    group = benchmark.benchmark_group("g")
    group.throughput(Throughput.bytes(64))
    first = group.bench_function("a", lambda: None)
    second = group.bench_function("b", lambda: None)
    assert group.finish() == [first, second]


def test_benchmark_real_function():
    """Benchmark a real workload with the wall clock"""
    benchmark = Benchmark(config=QUIET)
    group = benchmark.benchmark_group("sum")
    group.throughput(Throughput.elements(1000))
    data = np.arange(1000, dtype=np.float64)
    result = group.bench_function("arange", data.sum)
    assert np.all(result.samples > 0)
