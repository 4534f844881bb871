from __future__ import annotations
import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from .float_types import infer_dtype, dtype_name, as_float, resolve_dtype
from .kahan_sum import KahanSum
from .sum_config import get_config

"""
This module reduces whole sequences into a KahanSum in a single ordered pass. kahan_sum
accepts any finite iterable (lists, generators, numpy arrays, pandas-like columns) and
folds its terms left to right into a fresh zero accumulator, giving exactly the state a
caller would reach by calling add once per term. Because floating-point addition is not
associative, the traversal is strictly sequential with no batching or reordering.
KahanSummator is a mixin that gives any iterable class a kahan_sum method, and naive_sum
is the uncompensated left-to-right reduction at the same width, used to measure how much
error compensation recovers. An infinite iterable never returns.

"""

logger = logging.getLogger(__name__)


def kahan_sum(values: Iterable[Any], dtype: Any = None, *, swap_larger: bool | None = None) -> KahanSum:
	if dtype is None:
		dtype = infer_dtype(values)
	acc = KahanSum.zero(dtype, swap_larger=swap_larger)
	n = acc._extend(values)
	if logger.isEnabledFor(logging.DEBUG):
		logger.debug(
			"kahan_sum reduced %d terms at %s (finite=%s)",
			n, dtype_name(acc.dtype.type), bool(np.isfinite(acc.sum)),
		)
	return acc


def naive_sum(values: Iterable[Any], dtype: Any = None) -> np.floating:
	if dtype is None:
		dtype = infer_dtype(values)
	if dtype is None:
		dtype = get_config().dtype
	ftype = resolve_dtype(dtype)
	s = ftype(0.0)
	with np.errstate(all="ignore"):
		for i, v in enumerate(values):
			try:
				s = s + as_float(v, ftype)
			except TypeError as exc:
				raise TypeError(f"term {i}: {exc}") from exc
	return s


def is_summable(obj: Any) -> bool:
	return isinstance(obj, Iterable) and not isinstance(obj, (str, bytes))


class KahanSummator:
	"""Mixin giving an iterable class a ``kahan_sum`` reduction over its items."""

	def kahan_sum(self, dtype: Any = None, *, swap_larger: bool | None = None) -> KahanSum:
		return kahan_sum(self, dtype, swap_larger=swap_larger)


__all__ = ["kahan_sum", "naive_sum", "is_summable", "KahanSummator"]
