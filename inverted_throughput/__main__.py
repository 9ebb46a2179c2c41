"""
Main entry point for inverted_throughput
"""

import sys
import json
import logging
import argparse

from inverted_throughput.benchmark import Benchmark
from inverted_throughput.config import MEASUREMENTS, load_config
from inverted_throughput.reports.console import render_result, result_to_dict
from inverted_throughput.throughput import Throughput
from inverted_throughput.utils.system_info import get_system_info
from inverted_throughput.workloads import WORKLOADS, make_workload


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Benchmark a workload and report its throughput as time per element or byte'
    )

    # Workload specification
    workload_group = parser.add_argument_group('Workload Options')
    workload_group.add_argument('--workload', type=str, default='sum', choices=WORKLOADS,
                                help='Built-in workload to benchmark')
    workload_group.add_argument('--size', type=int, default=1024,
                                help='Number of float64 elements processed per call')

    # Throughput declaration
    thrpt_group = parser.add_argument_group('Throughput Options')
    thrpt = thrpt_group.add_mutually_exclusive_group()
    thrpt.add_argument('--elements', type=int,
                       help='Elements processed per call (default: --size)')
    thrpt.add_argument('--bytes', type=int,
                       help='Bytes processed per call, reported with binary prefixes')
    thrpt.add_argument('--bytes-decimal', type=int,
                       help='Bytes processed per call, reported with decimal prefixes')

    # Benchmark options
    bench_group = parser.add_argument_group('Benchmark Options')
    bench_group.add_argument('--config', type=str,
                             help='Path to benchmark configuration JSON or YAML file')
    bench_group.add_argument('--measurement', type=str, choices=MEASUREMENTS,
                             help='Measurement used to report results')
    bench_group.add_argument('--sample-size', type=int,
                             help='Number of samples to collect')
    bench_group.add_argument('--warm-up', type=int,
                             help='Number of untimed calls before sampling')
    bench_group.add_argument('--iterations', type=int,
                             help='Calls timed together in each sample')
    bench_group.add_argument('--no-progress', action='store_true',
                             help='Hide the progress bar')

    # Output options
    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument('--output', type=str,
                              help='Path to save the results as JSON')
    output_group.add_argument('--verbose', action='store_true',
                              help='Enable debug logging')
    output_group.add_argument('--system-info', action='store_true',
                              help='Display system information and exit')

    return parser.parse_args(argv)


def display_system_info():
    """Display system information and exit"""
    system_info = get_system_info()

    print("\n=== System Information ===")
    print(f"OS: {system_info['os']['name']} {system_info['os']['release']}")
    print(f"CPU: {system_info['cpu']['brand']}")
    print(f"CPU Cores: {system_info['cpu']['cores']} physical, "
          f"{system_info['cpu']['threads']} logical")
    print(f"RAM: {system_info['ram']['total_gb']} GB total, "
          f"{system_info['ram']['available_gb']} GB available")
    print(f"Python Version: {system_info['python_version']}")
    print("==========================\n")


def build_throughput(args) -> Throughput:
    if args.bytes is not None:
        return Throughput.bytes(args.bytes)
    if args.bytes_decimal is not None:
        return Throughput.bytes_decimal(args.bytes_decimal)
    if args.elements is not None:
        return Throughput.elements(args.elements)
    return Throughput.elements(args.size)


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Just display system info if requested
    if args.system_info:
        display_system_info()
        return 0

    try:
        config = load_config(args.config).override(
            sample_size=args.sample_size,
            warm_up_runs=args.warm_up,
            iterations=args.iterations,
            measurement=args.measurement,
            progress=False if args.no_progress else None,
        )
        throughput = build_throughput(args)
        workload = make_workload(args.workload, args.size)
    except (ValueError, TypeError, OSError) as e:
        print(f"Error: {e}")
        return 1

    benchmark = Benchmark(config=config)
    formatter = benchmark.measurement.formatter()

    group = benchmark.benchmark_group(args.workload)
    group.throughput(throughput)
    result = group.bench_function(f"size={args.size}", workload)
    group.finish()

    print(render_result(result, formatter))

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump([result_to_dict(r, formatter) for r in benchmark.results], f, indent=2)
        except OSError as e:
            print(f"Error: could not write results to {args.output}: {e}")
            return 1
        print(f"\nResults saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
