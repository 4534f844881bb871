from __future__ import annotations

import os
from typing import Final

"""
This module defines the process-wide defaults for compensated summation. It reads
KAHANSUM_DTYPE from the environment once at import time to choose the floating-point
width used when a caller does not name one, falling back to float64 (the width of a
plain Python float). It also maps short aliases such as "single" and "double" onto
numpy dtype names; any floating dtype numpy understands is accepted as well. The
module assumes the environment is set before the package is first imported.

"""



_ALIASES = {
	"half": "float16",
	"single": "float32",
	"double": "float64",
	"float": "float64",
	"float128": "longdouble",
}


def _parse_dtype(default: str = "float64") -> str:
	env_val = os.getenv("KAHANSUM_DTYPE", "")
	name = env_val.strip().lower()
	if name == "":
		return default
	return _ALIASES.get(name, name)


DEFAULT_DTYPE: Final[str] = _parse_dtype()
DTYPE_ALIASES: Final[dict] = dict(_ALIASES)
