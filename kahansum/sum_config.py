from __future__ import annotations
from dataclasses import dataclass
import logging

from .sum_constants import DEFAULT_DTYPE
from .float_types import resolve_dtype

"""
This central configuration module defines the summation defaults through the SumConfig
dataclass. It selects the floating-point width new accumulators use when none is given,
whether the magnitude-ordered update (swapping the running sum with a larger incoming
term before compensating) is enabled, and whether numpy floating-point warnings from
inf/NaN arithmetic are silenced inside the update. A single process-wide instance is
held here and replaced through set_config. Invalid dtype names surface when the config
is resolved or installed, never mid-summation.

"""

logger = logging.getLogger(__name__)


@dataclass
class SumConfig:
    dtype: str = DEFAULT_DTYPE
    swap_larger: bool = False
    suppress_fp_warnings: bool = True

    def copy(self) -> "SumConfig":
        new = object.__new__(SumConfig)
        new.__dict__ = dict(getattr(self, "__dict__", {}))
        return new

    def resolved_dtype(self):
        return resolve_dtype(self.dtype)


_CONFIG = SumConfig()


def get_config() -> SumConfig:
    return _CONFIG


def set_config(cfg: SumConfig) -> SumConfig:
    """Install ``cfg`` as the process-wide default and return the previous one."""
    global _CONFIG
    if not isinstance(cfg, SumConfig):
        raise TypeError(f"expected SumConfig, got {type(cfg).__name__}")
    cfg.resolved_dtype()
    previous = _CONFIG
    _CONFIG = cfg
    logger.debug("summation config set: %r", cfg)
    return previous


__all__ = ["SumConfig", "get_config", "set_config"]
