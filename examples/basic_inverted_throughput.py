#!/usr/bin/env python3
"""
Basic example comparing plain throughputs with inverted throughputs
for the same workload
"""

import os
import sys
import argparse

# Add parent directory to path to import inverted_throughput
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inverted_throughput import Benchmark, InvertedThroughput, Throughput, WallTime
from inverted_throughput.config import BenchmarkConfig
from inverted_throughput.reports.console import render_result
from inverted_throughput.workloads import make_workload


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Compare throughput and inverted throughput')
    parser.add_argument('--size', type=int, default=4096,
                        help='Number of float64 elements per call')
    parser.add_argument('--samples', type=int, default=50,
                        help='Number of samples per measurement')
    return parser.parse_args()


def main():
    """Run the same workload under both measurements"""
    args = parse_args()
    config = BenchmarkConfig(sample_size=args.samples)

    for measurement in (WallTime(), InvertedThroughput()):
        benchmark = Benchmark(measurement=measurement, config=config)
        group = benchmark.benchmark_group("copy")

        # 8 bytes per float64 element
        group.throughput(Throughput.bytes(args.size * 8))
        result = group.bench_function(f"{args.size} elements", make_workload("copy", args.size))

        print(f"\n=== {type(measurement).__name__} ===")
        print(render_result(result, measurement.formatter()))


if __name__ == "__main__":
    main()
