"""Runtime settings for the allocator."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class AllocatorConfig:
    """Settings shared by the engine, the reports and the CLI.

    Attributes:
        tolerance: Absolute tolerance for capacity bookkeeping checks
        log_level: Name of the logging level used by configure_logging()
        curve_points: Default number of capacities sampled by the value curve
    """
    tolerance: float = 1e-9
    log_level: str = "WARNING"
    curve_points: int = 50


def validate_config(config: AllocatorConfig) -> None:
    if not config.tolerance >= 0.0:
        raise ValueError(f"tolerance must be >= 0, got {config.tolerance}")
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"Unknown log_level: {config.log_level}")
    if config.curve_points < 2:
        raise ValueError(f"curve_points must be >= 2, got {config.curve_points}")


@lru_cache(maxsize=1)
def get_config() -> AllocatorConfig:
    """Build the config from BWALLOC_* environment variables once."""
    config = AllocatorConfig(
        tolerance=float(os.environ.get("BWALLOC_TOLERANCE", 1e-9)),
        log_level=os.environ.get("BWALLOC_LOG_LEVEL", "WARNING"),
        curve_points=int(os.environ.get("BWALLOC_CURVE_POINTS", 50)),
    )
    validate_config(config)
    return config
