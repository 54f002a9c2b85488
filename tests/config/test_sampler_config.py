"""Tests for the sampler configuration helpers."""

import io
import logging

import numpy as np
import pytest

from variates import Gamma, Multinomial, Poisson
from variates.config import (
    DEFAULT_MAX_ITERATIONS,
    SUM_TO_ONE_TOL,
    get_default_sampler_config,
    load_sampler_config,
)


class TestDefaultConfig:
    """Tests for get_default_sampler_config()."""

    def test_default_values(self):
        config = get_default_sampler_config()
        assert config["float_dtype"] is np.float64
        assert config["int_dtype"] is np.int64
        assert config["max_iterations"] == DEFAULT_MAX_ITERATIONS == 10_000_000
        assert config["sum_to_one_tol"] == pytest.approx(np.sqrt(np.finfo(np.float64).eps))
        assert config["sum_to_one_tol"] == SUM_TO_ONE_TOL

    def test_returns_fresh_copy(self):
        config = get_default_sampler_config()
        config["max_iterations"] = 1
        assert get_default_sampler_config()["max_iterations"] == DEFAULT_MAX_ITERATIONS


class TestLoadSamplerConfig:
    """Tests for load_sampler_config()."""

    def test_load_from_stream(self):
        stream = io.StringIO("float_dtype: float32\nint_dtype: int32\nmax_iterations: 500\n")
        config = load_sampler_config(stream)
        assert config["float_dtype"] is np.float32
        assert config["int_dtype"] is np.int32
        assert config["max_iterations"] == 500
        assert config["sum_to_one_tol"] == SUM_TO_ONE_TOL

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "sampler.yaml"
        path.write_text("Sum_To_One_Tol: 1.0e-4\n")
        config = load_sampler_config(path)
        assert config["sum_to_one_tol"] == pytest.approx(1e-4)

    def test_load_from_str_path(self, tmp_path):
        path = tmp_path / "sampler.yaml"
        path.write_text("max_iterations: 42\n")
        assert load_sampler_config(str(path))["max_iterations"] == 42

    def test_empty_document_gives_defaults(self):
        assert load_sampler_config(io.StringIO("")) == get_default_sampler_config()

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="Unknown sampler configuration keys"):
            load_sampler_config(io.StringIO("seed: 3\n"))

    def test_non_mapping_raises(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            load_sampler_config(io.StringIO("- 1\n- 2\n"))

    def test_logs_loaded_config(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="variates.config.sampler_config"):
            load_sampler_config(io.StringIO("max_iterations: 7\n"))
        assert "Loaded sampler configuration" in caplog.text


class TestFromConfig:
    """Distributions built from a configuration dict."""

    def test_gamma_from_config(self):
        config = load_sampler_config(io.StringIO("float_dtype: float32\nmax_iterations: 99\n"))
        gamma = Gamma.from_config(config)
        assert gamma.dtype == np.float32
        assert gamma.max_iterations == 99

    def test_discrete_from_config(self, source):
        config = load_sampler_config(io.StringIO("int_dtype: int16\n"))
        poisson = Poisson.from_config(config)
        assert poisson.sample(4.0, source=source).dtype == np.int16

    def test_multinomial_tolerance_from_config(self, source):
        config = load_sampler_config(io.StringIO("sum_to_one_tol: 0.01\n"))
        multinomial = Multinomial.from_config(config)
        assert multinomial.sum_to_one_tol == pytest.approx(0.01)
        counts = multinomial.sample(10, [0.5, 0.502], source=source)
        assert counts.sum() == 10
