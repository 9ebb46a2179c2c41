"""
Throughput declarations attached to a benchmark group
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ThroughputKind(Enum):
    """How the per-iteration count of a throughput is interpreted"""
    ELEMENTS = "elements"
    BYTES = "bytes"
    BYTES_DECIMAL = "bytes_decimal"


@dataclass(frozen=True)
class Throughput:
    """
    Amount of work done by one benchmark iteration.

    Use the ``elements``, ``bytes`` and ``bytes_decimal`` constructors rather
    than building instances by hand. ``bytes`` reports rates with 1024-based
    prefixes (KiB/s) and ``bytes_decimal`` with 1000-based ones (KB/s); both
    count single bytes.
    """
    kind: ThroughputKind
    count: int

    def __post_init__(self):
        if not isinstance(self.kind, ThroughputKind):
            raise TypeError(f"kind must be a ThroughputKind, got {self.kind!r}")
        if isinstance(self.count, bool) or not isinstance(self.count, numbers.Integral):
            raise TypeError(f"Throughput count must be an integer, got {self.count!r}")
        if self.count < 0:
            raise ValueError(f"Throughput count must be non-negative, got {self.count}")

    @classmethod
    def elements(cls, count: int) -> "Throughput":
        return cls(ThroughputKind.ELEMENTS, count)

    @classmethod
    def bytes(cls, count: int) -> "Throughput":
        return cls(ThroughputKind.BYTES, count)

    @classmethod
    def bytes_decimal(cls, count: int) -> "Throughput":
        return cls(ThroughputKind.BYTES_DECIMAL, count)

    @property
    def category(self) -> str:
        """'elem' for elements, 'byte' for either byte convention"""
        if self.kind is ThroughputKind.ELEMENTS:
            return "elem"
        return "byte"

    def unpack(self) -> Tuple[float, str]:
        """Return the count as a float together with its category"""
        return float(self.count), self.category

    def __str__(self):
        return f"{self.count} {self.kind.value}"
