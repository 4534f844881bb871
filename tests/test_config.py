"""Tests for the configuration layer and dtype resolution."""

import logging

import numpy as np
import pytest

from kahansum import SumConfig, get_config, set_config, resolve_dtype, infer_dtype, as_float
from kahansum import sum_constants


class TestSumConfig:

    def test_defaults(self):
        cfg = SumConfig(dtype="float64")
        assert cfg.swap_larger is False
        assert cfg.suppress_fp_warnings is True
        assert cfg.resolved_dtype() is np.float64

    def test_copy_is_independent(self):
        cfg = SumConfig(dtype="float32")
        other = cfg.copy()
        other.dtype = "float16"
        assert cfg.dtype == "float32"

    def test_set_config_returns_previous(self):
        before = get_config()
        new = SumConfig(dtype="float32")
        assert set_config(new) is before
        assert get_config() is new

    def test_set_config_rejects_bad_dtype(self):
        before = get_config()
        with pytest.raises(ValueError):
            set_config(SumConfig(dtype="nope"))
        with pytest.raises(TypeError):
            set_config(SumConfig(dtype="int32"))
        assert get_config() is before

    def test_set_config_rejects_other_types(self):
        with pytest.raises(TypeError):
            set_config({"dtype": "float32"})

    def test_set_config_logs(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="kahansum.sum_config"):
            set_config(SumConfig(dtype="float32"))
        assert any("summation config set" in r.getMessage() for r in caplog.records)


class TestEnvironmentDefault:

    def test_unset_is_float64(self, monkeypatch):
        monkeypatch.delenv("KAHANSUM_DTYPE", raising=False)
        assert sum_constants._parse_dtype() == "float64"

    def test_alias_is_normalized(self, monkeypatch):
        monkeypatch.setenv("KAHANSUM_DTYPE", " Single ")
        assert sum_constants._parse_dtype() == "float32"

    def test_blank_falls_back(self, monkeypatch):
        monkeypatch.setenv("KAHANSUM_DTYPE", "  ")
        assert sum_constants._parse_dtype() == "float64"


class TestResolveDtype:

    @pytest.mark.parametrize(
        "requested, expected",
        [
            ("float16", np.float16),
            ("float32", np.float32),
            ("double", np.float64),
            ("longdouble", np.longdouble),
            (float, np.float64),
            (np.float32, np.float32),
            (np.dtype("float16"), np.float16),
        ],
    )
    def test_floating_specs(self, requested, expected):
        assert resolve_dtype(requested) is expected

    @pytest.mark.parametrize("requested", ["int64", int, bool, complex, object])
    def test_non_floating_specs(self, requested):
        with pytest.raises(TypeError):
            resolve_dtype(requested)

    @pytest.mark.parametrize("code, expected", [("f4", np.float32), ("e", np.float16), ("g", np.longdouble)])
    def test_numpy_type_codes(self, code, expected):
        """Any floating dtype numpy understands resolves, not just the aliased names."""
        assert resolve_dtype(code) is expected

    def test_logs_resolution(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="kahansum.float_types"):
            resolve_dtype("single")
        assert any("resolved dtype 'single' to float32" in r.getMessage() for r in caplog.records)

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            resolve_dtype("decimal")

    def test_infer_dtype(self):
        assert infer_dtype(np.zeros(2, dtype=np.float32)) is np.float32
        assert infer_dtype(np.zeros(2, dtype=np.int8)) is None
        assert infer_dtype([1.0]) is None

    def test_as_float(self):
        out = as_float(1, np.float32)
        assert isinstance(out, np.float32)
        assert out == 1.0
        assert as_float(np.array(2.0), np.float64) == 2.0
        with pytest.raises(TypeError):
            as_float(None, np.float64)
        with pytest.raises(TypeError):
            as_float([1.0], np.float64)
