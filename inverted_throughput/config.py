"""
Benchmark configuration loading
"""

import json
import logging
import numbers
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

MEASUREMENTS = ("inverted", "wall")


@dataclass(frozen=True)
class BenchmarkConfig:
    """Sampling settings shared by every group of a benchmark run"""
    sample_size: int = 100
    warm_up_runs: int = 3
    iterations: int = 10
    measurement: str = "inverted"
    progress: bool = True

    def __post_init__(self):
        for name in ('sample_size', 'warm_up_runs', 'iterations'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.progress, bool):
            raise TypeError(f"progress must be true or false, got {self.progress!r}")
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be at least 1, got {self.sample_size}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")
        if self.warm_up_runs < 0:
            raise ValueError(f"warm_up_runs must be non-negative, got {self.warm_up_runs}")
        if self.measurement not in MEASUREMENTS:
            raise ValueError(
                f"Unknown measurement '{self.measurement}', expected one of {', '.join(MEASUREMENTS)}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def override(self, **kwargs) -> "BenchmarkConfig":
        """Return a copy with every non-None keyword applied"""
        changes = {key: value for key, value in kwargs.items() if value is not None}
        return replace(self, **changes)


def load_config(config_path: Optional[str]) -> BenchmarkConfig:
    """
    Load a benchmark configuration file.

    Files ending in .yaml or .yml are parsed as YAML, everything else as JSON.
    A missing ``config_path`` gives the default configuration.

    Args:
        config_path: Path to the configuration file, or None

    Returns:
        BenchmarkConfig built from the file contents
    """
    if not config_path:
        return BenchmarkConfig()

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file {config_path} does not exist")

    with open(config_path, 'r', encoding='utf-8') as f:
        if config_path.endswith(('.yaml', '.yml')):
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        else:
            data = json.load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    logger.info(f"Loaded benchmark configuration from {config_path}")
    return BenchmarkConfig.from_dict(data)
