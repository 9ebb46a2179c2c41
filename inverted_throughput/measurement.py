"""
Measurement and value formatting interfaces, plus the wall-clock implementation

A measurement collects raw values (wall-clock nanoseconds for ``WallTime``)
and hands out a formatter that turns batches of those values into
human-readable magnitudes. Formatters rescale the batch in place and return
the unit label for the whole batch.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, MutableSequence

import numpy as np

from inverted_throughput.throughput import Throughput, ThroughputKind


class ValueFormatter(ABC):
    """Scales batches of measured values for display"""

    @abstractmethod
    def scale_values(self, typical_value: float, values: MutableSequence[float]) -> str:
        """
        Rescale ``values`` in place to a magnitude chosen from ``typical_value``.

        Args:
            typical_value: Representative value used to pick one scale for the batch
            values: Batch of raw values, modified in place

        Returns:
            Unit label for the rescaled values
        """

    @abstractmethod
    def scale_throughputs(self, typical_value: float, throughput: Throughput,
                          values: MutableSequence[float]) -> str:
        """Rescale ``values`` in place into throughput figures and return their unit"""

    @abstractmethod
    def scale_for_machines(self, values: MutableSequence[float]) -> str:
        """Rescale ``values`` in place into a fixed machine-readable unit"""


class Measurement(ABC):
    """Capability set the benchmark harness needs from a measurement backend"""

    @abstractmethod
    def start(self) -> Any:
        """Capture the opaque starting point of a measurement"""

    @abstractmethod
    def end(self, intermediate: Any) -> Any:
        """Finish the measurement started by ``start`` and return its value"""

    @abstractmethod
    def add(self, v1: Any, v2: Any) -> Any:
        """Combine two measured values, e.g. to total repeated iterations"""

    @abstractmethod
    def zero(self) -> Any:
        """Return the value that leaves any other value unchanged under ``add``"""

    @abstractmethod
    def to_f64(self, value: Any) -> float:
        """Convert a measured value to a float in the formatter's base unit"""

    @abstractmethod
    def formatter(self) -> ValueFormatter:
        """Return the formatter used to display values of this measurement"""


def rescale_in_place(values: MutableSequence[float], func: Callable[[float], float]):
    """Apply ``func`` to every entry of ``values`` without changing length or order"""
    for i, value in enumerate(values):
        values[i] = func(value)


class DurationFormatter(ValueFormatter):
    """Formats nanosecond durations and the rates derived from them"""

    def scale_values(self, typical_value: float, values: MutableSequence[float]) -> str:
        ns = typical_value
        if ns < 1e0:
            factor, unit = 1e3, "ps"
        elif ns < 1e3:
            factor, unit = 1e0, "ns"
        elif ns < 1e6:
            factor, unit = 1e-3, "µs"
        elif ns < 1e9:
            factor, unit = 1e-6, "ms"
        else:
            factor, unit = 1e-9, "s"

        rescale_in_place(values, lambda value: value * factor)
        return unit

    def scale_throughputs(self, typical_value: float, throughput: Throughput,
                          values: MutableSequence[float]) -> str:
        count = float(throughput.count)
        if throughput.kind is ThroughputKind.BYTES:
            return self._per_second(count, typical_value, values, 1024.0,
                                    ("  B/s", "KiB/s", "MiB/s", "GiB/s"))
        if throughput.kind is ThroughputKind.BYTES_DECIMAL:
            return self._per_second(count, typical_value, values, 1000.0,
                                    ("  B/s", "KB/s", "MB/s", "GB/s"))
        return self._per_second(count, typical_value, values, 1000.0,
                                (" elem/s", "Kelem/s", "Melem/s", "Gelem/s"))

    def scale_for_machines(self, values: MutableSequence[float]) -> str:
        # values are already nanoseconds
        return "ns"

    @staticmethod
    def _per_second(count: float, typical_value: float, values: MutableSequence[float],
                    step: float, units) -> str:
        # a zero duration is an infinite rate, not an error
        with np.errstate(divide="ignore", invalid="ignore"):
            typical_rate = count * (np.float64(1e9) / typical_value)

            denominator, unit = step ** 3, units[3]
            for power, label in enumerate(units[:3]):
                if typical_rate < step ** (power + 1):
                    denominator, unit = step ** power, label
                    break

            rescale_in_place(
                values, lambda value: count * (np.float64(1e9) / value) / denominator
            )
        return unit


_DURATION_FORMATTER = DurationFormatter()


class WallTime(Measurement):
    """Wall-clock measurement in integer nanoseconds, based on ``time.perf_counter_ns``"""

    def start(self) -> int:
        return time.perf_counter_ns()

    def end(self, intermediate: int) -> int:
        return time.perf_counter_ns() - intermediate

    def add(self, v1: int, v2: int) -> int:
        return v1 + v2

    def zero(self) -> int:
        return 0

    def to_f64(self, value: int) -> float:
        return float(value)

    def formatter(self) -> ValueFormatter:
        return _DURATION_FORMATTER
