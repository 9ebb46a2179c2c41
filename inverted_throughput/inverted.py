"""
Measurement reporting throughputs as time per element or byte

With the default duration formatter a throughput group is reported as a rate::

    time:   [2.8617 µs 2.8728 µs 2.8850 µs]
    thrpt:  [14.558 Melem/s 14.620 Melem/s 14.677 Melem/s]

``InvertedThroughput`` keeps the timing untouched and reports the cost of a
single unit instead::

    time:   [2.8581 µs 2.8720 µs 2.8917 µs]
    thrpt:  [68.849 ns/elem 68.381 ns/elem 68.049 ns/elem]
"""

import logging
from enum import Enum
from typing import Any, MutableSequence, Optional

import numpy as np

from inverted_throughput.measurement import Measurement, ValueFormatter, WallTime, rescale_in_place
from inverted_throughput.throughput import Throughput

logger = logging.getLogger(__name__)

UNEXPECTED = "UNEXPECTED"


class TimeUnit(Enum):
    """Time labels produced by the duration formatter"""
    PS = "ps"
    NS = "ns"
    US = "µs"
    MS = "ms"
    S = "s"


class UnitCategory(Enum):
    ELEM = "elem"
    BYTE = "byte"


_UNIT_LABELS = {
    (UnitCategory.BYTE, TimeUnit.PS): "ps/byte",
    (UnitCategory.BYTE, TimeUnit.NS): "ns/byte",
    (UnitCategory.BYTE, TimeUnit.US): "µs/byte",
    (UnitCategory.BYTE, TimeUnit.MS): "ms/byte",
    (UnitCategory.BYTE, TimeUnit.S): "s/byte",
    (UnitCategory.ELEM, TimeUnit.PS): "ps/elem",
    (UnitCategory.ELEM, TimeUnit.NS): "ns/elem",
    (UnitCategory.ELEM, TimeUnit.US): "µs/elem",
    (UnitCategory.ELEM, TimeUnit.MS): "ms/elem",
    (UnitCategory.ELEM, TimeUnit.S): "s/elem",
}


def unit_label(time_unit: str, category: str) -> str:
    """
    Combine a time label and a throughput category into a per-unit label.

    Args:
        time_unit: Label returned by a duration formatter (ps, ns, µs, ms, s)
        category: Throughput category ('elem' or 'byte')

    Returns:
        Compound label such as 'ns/elem', or ``UNEXPECTED`` for any other pairing
    """
    try:
        key = (UnitCategory(category), TimeUnit(time_unit))
    except ValueError:
        key = None

    label = _UNIT_LABELS.get(key)
    if label is None:
        logger.warning(f"No per-unit label for time unit {time_unit!r} and category {category!r}")
        return UNEXPECTED
    return label


class InvertedThroughput(Measurement, ValueFormatter):
    """
    Measurement printing inverted throughputs instead of throughputs.

    Collection of values is delegated unchanged to ``base`` (wall-clock time by
    default), so timings stay comparable with a plain ``WallTime`` run. Only
    ``scale_throughputs`` differs: it divides each value by the throughput count
    and lets the base formatter pick the time magnitude.

    Use it as the measurement of a benchmark, e.g.
    ``Benchmark(measurement=InvertedThroughput())``.
    """

    def __init__(self, base: Optional[Measurement] = None):
        self.base = base if base is not None else WallTime()

    def start(self) -> Any:
        return self.base.start()

    def end(self, intermediate: Any) -> Any:
        return self.base.end(intermediate)

    def add(self, v1: Any, v2: Any) -> Any:
        return self.base.add(v1, v2)

    def zero(self) -> Any:
        return self.base.zero()

    def to_f64(self, value: Any) -> float:
        return self.base.to_f64(value)

    def formatter(self) -> ValueFormatter:
        return self

    def scale_values(self, typical_value: float, values: MutableSequence[float]) -> str:
        return self.base.formatter().scale_values(typical_value, values)

    def scale_throughputs(self, typical_value: float, throughput: Throughput,
                          values: MutableSequence[float]) -> str:
        units, category = throughput.unpack()
        time_unit = self._time_per_unit(units, typical_value, values)
        return unit_label(time_unit, category)

    def scale_for_machines(self, values: MutableSequence[float]) -> str:
        return self.base.formatter().scale_for_machines(values)

    def _time_per_unit(self, units: float, typical_value: float,
                       values: MutableSequence[float]) -> str:
        # a zero count gives inf/nan rather than an exception
        with np.errstate(divide="ignore", invalid="ignore"):
            typical_time = np.float64(typical_value) / units
            rescale_in_place(values, lambda value: np.float64(value) / units)
        return self.base.formatter().scale_values(typical_time, values)
