"""
Console and machine-readable rendering of benchmark results
"""

from typing import Any, Dict, List, Optional

from inverted_throughput.measurement import ValueFormatter
from inverted_throughput.models.benchmark_result import BenchmarkResult


def short(n: float) -> str:
    """Format a number with four significant digits"""
    if n < 10.0:
        return f"{n:.4f}"
    elif n < 100.0:
        return f"{n:.3f}"
    elif n < 1000.0:
        return f"{n:.2f}"
    elif n < 10000.0:
        return f"{n:.1f}"
    else:
        return f"{n:.0f}"


def _bracket(values: List[float], unit: str) -> str:
    return "[" + " ".join(f"{short(value)} {unit}" for value in values) + "]"


def format_time_line(result: BenchmarkResult, formatter: ValueFormatter) -> str:
    values = list(result.estimates)
    unit = formatter.scale_values(result.typical_value, values)
    return f"time:   {_bracket(values, unit)}"


def format_throughput_line(result: BenchmarkResult, formatter: ValueFormatter) -> Optional[str]:
    """
    Format the throughput estimates of a result.

    The estimates are passed from the upper to the lower bound, so a rate reads
    from slowest to fastest and an inverted throughput from costliest to cheapest.

    Returns:
        The 'thrpt:' line, or None when the result has no throughput
    """
    if result.throughput is None:
        return None

    lower, typical, upper = result.estimates
    values = [upper, typical, lower]
    unit = formatter.scale_throughputs(result.typical_value, result.throughput, values)
    return f"thrpt:  {_bracket(values, unit)}"


def render_result(result: BenchmarkResult, formatter: ValueFormatter) -> str:
    lines = [result.full_name, "                        " + format_time_line(result, formatter)]
    thrpt = format_throughput_line(result, formatter)
    if thrpt is not None:
        lines.append("                        " + thrpt)
    return "\n".join(lines)


def result_to_dict(result: BenchmarkResult, formatter: ValueFormatter) -> Dict[str, Any]:
    """Convert a result into a JSON-serializable dictionary"""
    # total time is appended so it is scaled together with the samples
    samples = [float(value) for value in result.samples] + [float(result.total_time)]
    unit = formatter.scale_for_machines(samples)
    total_time = samples.pop()

    throughput = None
    if result.throughput is not None:
        throughput = {
            'kind': result.throughput.kind.value,
            'count': result.throughput.count,
        }

    return {
        'group': result.group,
        'name': result.name,
        'iterations': result.iterations,
        'sample_size': result.sample_size,
        'total_time': total_time,
        'unit': unit,
        'samples': samples,
        'throughput': throughput,
        'system_info': result.system_info,
        'timestamp': result.timestamp,
    }
