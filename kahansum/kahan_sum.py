"""
This module implements the KahanSum accumulator, a compensated running sum over
floating-point values.

Each term is folded in with the classical two-term Kahan update: the pending correction
is subtracted from the incoming term, the adjusted term is added to the running sum, and
the rounding error of that addition is recovered by re-subtracting and kept as the new
correction. The sum property is the best single-value estimate of the total; the
correction is what plain addition would have discarded and is reinjected on the next
add. Arithmetic is carried out on numpy scalars of the accumulator's dtype (float16,
float32, float64 or longdouble), so every step rounds at that width. CPython evaluates
the update exactly as written, with no reassociation or fused multiply-add, which the
error recovery depends on; _fold keeps the operations in their required order.

NaN and infinite terms are accepted and propagate under IEEE-754 rules; numpy warnings
for such arithmetic are silenced inside the update unless the configuration disables
that. An opt-in magnitude-ordered variant swaps the running sum with a larger incoming
term before compensating.
"""

from __future__ import annotations
from contextlib import nullcontext
import numpy as np
from typing import Any, Iterable

from .float_types import resolve_dtype, dtype_name, as_float
from .sum_config import get_config



class KahanSum:
	__array_ufunc__ = None
	__hash__ = None

	def __init__(self, value: Any = 0.0, dtype: Any = None, *, swap_larger: bool | None = None) -> None:
		cfg = get_config()
		if dtype is None:
			if isinstance(value, np.floating):
				dtype = type(value)
			else:
				dtype = cfg.dtype
		self._ftype = resolve_dtype(dtype)
		self._quiet = bool(cfg.suppress_fp_warnings)
		with self._fp_guard():
			self._sum = as_float(value, self._ftype)
		self._correction = self._ftype(0.0)
		if swap_larger is None:
			self._swap = bool(cfg.swap_larger)
		else:
			self._swap = bool(swap_larger)

	@classmethod
	def zero(cls, dtype: Any = None, *, swap_larger: bool | None = None) -> "KahanSum":
		return cls(0.0, dtype, swap_larger=swap_larger)

	@classmethod
	def from_value(cls, seed: Any, dtype: Any = None, *, swap_larger: bool | None = None) -> "KahanSum":
		return cls(seed, dtype, swap_larger=swap_larger)

	@property
	def sum(self) -> np.floating:
		return self._sum

	@property
	def correction(self) -> np.floating:
		return self._correction

	@property
	def dtype(self) -> np.dtype:
		return np.dtype(self._ftype)

	@property
	def swap_larger(self) -> bool:
		return self._swap

	def compensated_total(self) -> np.floating:
		"""Running sum with the pending correction folded back in."""
		with np.errstate(all="ignore"):
			return self._sum - self._correction

	def _fp_guard(self):
		if self._quiet:
			return np.errstate(all="ignore")
		return nullcontext()

	def _fold(self, x: np.floating) -> None:
		s = self._sum
		if self._swap and abs(s) < abs(x):
			s, x = x, s
		y = x - self._correction
		t = s + y
		self._correction = (t - s) - y
		self._sum = t

	def add(self, value: Any) -> "KahanSum":
		with self._fp_guard():
			self._fold(as_float(value, self._ftype))
		return self

	def sub(self, value: Any) -> "KahanSum":
		with self._fp_guard():
			self._fold(-as_float(value, self._ftype))
		return self

	def _extend(self, values: Iterable[Any]) -> int:
		ftype = self._ftype
		n = 0
		with self._fp_guard():
			for i, v in enumerate(values):
				try:
					x = as_float(v, ftype)
				except TypeError as exc:
					raise TypeError(f"term {i}: {exc}") from exc
				self._fold(x)
				n += 1
		return n

	def update(self, values: Iterable[Any]) -> "KahanSum":
		"""Fold every term of ``values`` in iteration order.

		Produces the same state as calling ``add`` once per term. A term that cannot
		be converted to the accumulator's dtype raises ``TypeError`` naming its
		position; terms before it have already been folded in.
		"""
		self._extend(values)
		return self

	def copy(self) -> "KahanSum":
		new = object.__new__(KahanSum)
		new.__dict__ = dict(self.__dict__)
		return new

	def __copy__(self) -> "KahanSum":
		return self.copy()

	def __deepcopy__(self, memo) -> "KahanSum":
		return self.copy()

	def __iadd__(self, other: Any):
		if isinstance(other, KahanSum):
			return NotImplemented
		try:
			return self.add(other)
		except TypeError:
			return NotImplemented

	def __isub__(self, other: Any):
		if isinstance(other, KahanSum):
			return NotImplemented
		try:
			return self.sub(other)
		except TypeError:
			return NotImplemented

	def __add__(self, other: Any):
		if isinstance(other, KahanSum):
			return NotImplemented
		try:
			return self.copy().add(other)
		except TypeError:
			return NotImplemented

	def __sub__(self, other: Any):
		if isinstance(other, KahanSum):
			return NotImplemented
		try:
			return self.copy().sub(other)
		except TypeError:
			return NotImplemented

	def __float__(self) -> float:
		return float(self._sum)

	def __eq__(self, other: Any):
		if not isinstance(other, KahanSum):
			return NotImplemented
		return (
			self._ftype is other._ftype
			and bool(self._sum == other._sum)
			and bool(self._correction == other._correction)
		)

	def __repr__(self) -> str:
		return (
			f"KahanSum(sum={self._sum}, correction={self._correction}, "
			f"dtype='{dtype_name(self._ftype)}')"
		)


__all__ = ["KahanSum"]
