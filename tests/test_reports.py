"""
Unit tests for console rendering of results
"""

import json

import numpy as np
import pytest

import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inverted_throughput.inverted import InvertedThroughput
from inverted_throughput.measurement import WallTime
from inverted_throughput.models.benchmark_result import BenchmarkResult
from inverted_throughput.reports.console import (
    format_throughput_line,
    format_time_line,
    render_result,
    result_to_dict,
    short,
)
from inverted_throughput.throughput import Throughput


def make_result(throughput=None):
    # every sample equals 2.8720 µs so all estimates coincide
    return BenchmarkResult(
        name="f",
        group="foo",
        samples=np.full(10, 2872.0),
        iterations=10,
        throughput=throughput,
    )


@pytest.mark.parametrize("value,text", [
    (1.23456, "1.2346"),
    (12.3456, "12.346"),
    (123.456, "123.46"),
    (1234.56, "1234.6"),
    (12345.6, "12346"),
])
def test_short(value, text):
    assert short(value) == text


def test_time_line():
    line = format_time_line(make_result(), WallTime().formatter())
    assert line == "time:   [2.8720 µs 2.8720 µs 2.8720 µs]"


def test_throughput_line_inverted():
    result = make_result(Throughput.elements(42))
    line = format_throughput_line(result, InvertedThroughput())
    assert line == "thrpt:  [68.381 ns/elem 68.381 ns/elem 68.381 ns/elem]"


def test_throughput_line_rate():
    result = make_result(Throughput.elements(42))
    line = format_throughput_line(result, WallTime().formatter())
    assert line == "thrpt:  [14.624 Melem/s 14.624 Melem/s 14.624 Melem/s]"


def test_throughput_line_without_throughput():
    assert format_throughput_line(make_result(), InvertedThroughput()) is None


def test_throughput_line_bounds_order():
    result = BenchmarkResult(name="f", group="g", samples=np.linspace(900.0, 1100.0, 41),
                             iterations=1, throughput=Throughput.bytes(1))
    line = format_throughput_line(result, InvertedThroughput())
    numbers = [float(token) for token in line[len("thrpt:  ["):-1].split() if token[0].isdigit()]
    assert numbers[0] > numbers[1] > numbers[2]


def test_render_result():
    text = render_result(make_result(Throughput.bytes_decimal(100)), InvertedThroughput())
    lines = text.splitlines()
    assert lines[0] == "foo/f"
    assert lines[1].strip().startswith("time:")
    assert lines[2].strip().endswith("ns/byte]")


def test_result_to_dict_is_json_ready():
    result = make_result(Throughput.bytes(256))
    data = result_to_dict(result, InvertedThroughput())
    assert data["unit"] == "ns"
    assert data["samples"] == [2872.0] * 10
    assert data["throughput"] == {"kind": "bytes", "count": 256}
    assert data["sample_size"] == 10
    json.dumps(data)
    # the result keeps its raw samples
    assert result.samples[0] == 2872.0


def test_result_to_dict_includes_total_time():
    result = make_result()
    result.total_time = 28720.0
    data = result_to_dict(result, WallTime().formatter())
    assert data["total_time"] == 28720.0
    assert len(data["samples"]) == 10
