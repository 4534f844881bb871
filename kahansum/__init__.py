"""
This initialization file exposes the public API of the compensated-summation package.

It re-exports the KahanSum accumulator, the sequence reduction helpers (kahan_sum,
naive_sum, is_summable and the KahanSummator mixin), the floating-point width helpers,
and the configuration layer (SumConfig, get_config, set_config). Users import everything
from the package root; internal module organization is not part of the interface.
"""

from .sum_constants import DEFAULT_DTYPE
from .float_types import resolve_dtype, as_float, infer_dtype
from .sum_config import SumConfig, get_config, set_config
from .kahan_sum import KahanSum
from .summator import kahan_sum, naive_sum, is_summable, KahanSummator


__version__ = "0.1.0"

__all__ = [
	"DEFAULT_DTYPE",
	"resolve_dtype",
	"as_float",
	"infer_dtype",
	"SumConfig",
	"get_config",
	"set_config",
	"KahanSum",
	"kahan_sum",
	"naive_sum",
	"is_summable",
	"KahanSummator",
]
