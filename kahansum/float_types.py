from __future__ import annotations
import logging
import numpy as np
from typing import Any, Optional, Type

from .sum_constants import DTYPE_ALIASES

"""
This module holds the floating-point width plumbing shared by the accumulator and the
reduction helpers. resolve_dtype turns a dtype specification (a name such as "float32",
a numpy dtype, a numpy scalar type, or the builtin float) into the numpy floating scalar
type used for arithmetic, rejecting integer, boolean and complex widths because
compensated summation is only meaningful for IEEE-754 floats. as_float converts a single
incoming term to that type so each step of the update rounds at the accumulator's width,
and infer_dtype picks up the width of a numpy array handed to a reduction.

"""

logger = logging.getLogger(__name__)



def resolve_dtype(requested: Any) -> Type[np.floating]:
	if isinstance(requested, str):
		name = DTYPE_ALIASES.get(requested.strip().lower(), requested.strip().lower())
		try:
			dt = np.dtype(name)
		except TypeError as exc:
			raise ValueError(f"unknown floating-point dtype {requested!r}") from exc
	else:
		try:
			dt = np.dtype(requested)
		except TypeError as exc:
			raise TypeError(f"cannot interpret {requested!r} as a floating-point dtype") from exc
	if not np.issubdtype(dt, np.floating):
		raise TypeError(f"compensated summation requires a floating-point dtype, got {dt.name}")
	logger.debug("resolved dtype %r to %s", requested, dt.name)
	return dt.type


def dtype_name(ftype: Type[np.floating]) -> str:
	return np.dtype(ftype).name


def as_float(value: Any, ftype: Type[np.floating]) -> np.floating:
	if isinstance(value, ftype):
		return value
	if value is None or isinstance(value, (str, bytes, complex, np.complexfloating)):
		raise TypeError(f"cannot sum {type(value).__name__} value {value!r}")
	if isinstance(value, (float, int, np.floating, np.integer)):
		return ftype(value)
	if np.ndim(value) != 0:
		raise TypeError(f"expected a scalar term, got {type(value).__name__} of shape {np.shape(value)}")
	if isinstance(value, np.ndarray):
		value = value[()]
	try:
		out = ftype(value)
	except (TypeError, ValueError) as exc:
		raise TypeError(f"cannot convert {value!r} to {dtype_name(ftype)}") from exc
	if not isinstance(out, ftype):
		raise TypeError(f"expected a scalar term, got {type(value).__name__}")
	return out


def infer_dtype(values: Any) -> Optional[Type[np.floating]]:
	dt = getattr(values, "dtype", None)
	if dt is None:
		return None
	try:
		dt = np.dtype(dt)
	except TypeError:
		return None
	if np.issubdtype(dt, np.floating):
		return dt.type
	return None


__all__ = ["resolve_dtype", "dtype_name", "as_float", "infer_dtype"]
