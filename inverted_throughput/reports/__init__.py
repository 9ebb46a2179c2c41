"""
Rendering of benchmark results
"""

from .console import format_time_line, format_throughput_line, render_result, result_to_dict, short

__all__ = [
    'format_time_line',
    'format_throughput_line',
    'render_result',
    'result_to_dict',
    'short',
]
