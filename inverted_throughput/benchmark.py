"""
Benchmarking harness driving a Measurement
"""

import logging
from typing import Callable, List, Optional

import numpy as np
from tqdm import tqdm

from inverted_throughput.config import BenchmarkConfig, load_config
from inverted_throughput.inverted import InvertedThroughput
from inverted_throughput.measurement import Measurement, WallTime
from inverted_throughput.models.benchmark_result import BenchmarkResult
from inverted_throughput.reports.console import render_result
from inverted_throughput.throughput import Throughput
from inverted_throughput.utils.system_info import get_system_info

logger = logging.getLogger(__name__)


def make_measurement(name: str) -> Measurement:
    """Create the measurement registered under ``name`` ('inverted' or 'wall')"""
    if name == "inverted":
        return InvertedThroughput()
    if name == "wall":
        return WallTime()
    raise ValueError(f"Unknown measurement '{name}'")


class Benchmark:
    """Benchmark runner collecting results for groups of functions"""

    def __init__(self, measurement: Optional[Measurement] = None,
                 config_path: Optional[str] = None,
                 config: Optional[BenchmarkConfig] = None):
        """
        Initialize the benchmarking tool.

        Args:
            measurement: Measurement used for every group; built from the
                configuration when not given
            config_path: Path to a JSON or YAML configuration file
            config: Configuration object, takes precedence over ``config_path``
        """
        self.results: List[BenchmarkResult] = []
        self.config = config if config is not None else load_config(config_path)
        self.measurement = measurement if measurement is not None else make_measurement(self.config.measurement)
        self.system_info = get_system_info()

    def benchmark_group(self, name: str) -> "BenchmarkGroup":
        return BenchmarkGroup(self, name)

    def _add_result_to_history(self, result: BenchmarkResult):
        self.results.append(result)


class BenchmarkGroup:
    """Related benchmarks sharing a throughput and sampling settings"""

    def __init__(self, benchmark: Benchmark, name: str):
        self.benchmark = benchmark
        self.name = name
        self.results: List[BenchmarkResult] = []
        self._throughput: Optional[Throughput] = None
        self._sample_size = benchmark.config.sample_size
        self._warm_up_runs = benchmark.config.warm_up_runs
        self._iterations = benchmark.config.iterations

    def throughput(self, throughput: Throughput) -> "BenchmarkGroup":
        """Declare the work done by one iteration to enable throughput reporting"""
        if not isinstance(throughput, Throughput):
            raise TypeError(f"Expected a Throughput, got {type(throughput).__name__}")
        self._throughput = throughput
        return self

    def sample_size(self, n: int) -> "BenchmarkGroup":
        if n < 1:
            raise ValueError(f"sample_size must be at least 1, got {n}")
        self._sample_size = n
        return self

    def warm_up_runs(self, n: int) -> "BenchmarkGroup":
        if n < 0:
            raise ValueError(f"warm_up_runs must be non-negative, got {n}")
        self._warm_up_runs = n
        return self

    def iterations(self, n: int) -> "BenchmarkGroup":
        if n < 1:
            raise ValueError(f"iterations must be at least 1, got {n}")
        self._iterations = n
        return self

    def bench_function(self, name: str, func: Callable[[], object]) -> BenchmarkResult:
        """
        Benchmark a function.

        Each sample times ``iterations`` back-to-back calls between a single
        start and end of the measurement, and records the value per call.

        Args:
            name: Name of the benchmark within the group
            func: Zero-argument callable to benchmark

        Returns:
            BenchmarkResult with the collected samples
        """
        if not callable(func):
            raise TypeError(f"Benchmark target {name!r} is not callable")

        measurement = self.benchmark.measurement
        iterations = self._iterations
        full_name = f"{self.name}/{name}"

        try:
            for _ in range(self._warm_up_runs):
                func()

            samples = np.empty(self._sample_size, dtype=np.float64)
            total = measurement.zero()
            progress = tqdm(range(self._sample_size), desc=full_name, leave=False,
                            disable=not self.benchmark.config.progress)
            for i in progress:
                start = measurement.start()
                for _ in range(iterations):
                    func()
                elapsed = measurement.end(start)
                total = measurement.add(total, elapsed)
                samples[i] = measurement.to_f64(elapsed) / iterations
        except Exception as e:
            logger.error(f"Error benchmarking {full_name}: {e}")
            raise

        result = BenchmarkResult(
            name=name,
            group=self.name,
            samples=samples,
            iterations=iterations,
            total_time=measurement.to_f64(total),
            throughput=self._throughput,
            system_info=self.benchmark.system_info,
        )
        logger.debug(f"Collected {result.sample_size} samples for {full_name}")

        self.results.append(result)
        self.benchmark._add_result_to_history(result)
        return result

    def finish(self) -> List[BenchmarkResult]:
        """Log the rendered results of the group and return them"""
        formatter = self.benchmark.measurement.formatter()
        for result in self.results:
            logger.info("\n" + render_result(result, formatter))
        return list(self.results)
