"""Tests for the Poisson distribution."""

import math

import numpy as np
import pytest
from scipy import stats

from variates import Poisson
from variates.exceptions import (
    BadLambda,
    DomainError,
    KOutOfRange,
    LambdaTooLarge,
    UnsupportedRangeError,
)

N_SAMPLES = 20_000


class TestPoissonSampling:
    """Moment checks across the algorithm branches."""

    @pytest.mark.parametrize("lam", [0.5, 5.0, 16.9, 17.0, 50.0, 1e4, 1e6])
    def test_moments(self, lam, source):
        samples = Poisson().sample_many(N_SAMPLES, lam, source=source)
        assert np.all(samples >= 0)
        assert abs(samples.mean() - lam) < 5 * math.sqrt(lam / N_SAMPLES)
        assert samples.var() == pytest.approx(lam, rel=0.1)

    def test_zero_rate_consumes_no_randomness(self, counting_source):
        poisson = Poisson()
        assert poisson.sample(0.0, source=counting_source) == 0
        assert np.all(poisson.sample_many(100, 0.0, source=counting_source) == 0)
        assert counting_source.total_calls == 0

    def test_very_low_rate(self, source):
        samples = Poisson().sample_many(N_SAMPLES, 1e-7, source=source)
        assert set(samples.tolist()) <= {0, 1, 2}
        assert samples.sum() <= 5

    def test_low_rate_replay(self, replay_source):
        # the first uniform exceeds sqrt(lambda), so no second draw is needed
        assert Poisson().sample(1e-8, source=replay_source(uniforms=[0.5])) == 0

    def test_inversion_replay(self, replay_source):
        # P(X <= 4) = 0.4405, P(X <= 5) = 0.6160 for lambda = 5
        assert Poisson().sample(5.0, source=replay_source(uniforms=[0.5])) == 5
        assert Poisson().sample(5.0, source=replay_source(uniforms=[0.001])) == 0

    def test_lambda_too_large_is_recoverable(self, counting_source):
        poisson = Poisson()
        with pytest.raises(LambdaTooLarge):
            poisson.sample(3e9, source=counting_source)
        assert counting_source.total_calls == 0
        # the same object keeps working afterwards
        assert poisson.sample(2e9, source=counting_source) > 0

    def test_lambda_too_large_is_not_a_domain_error(self):
        assert issubclass(LambdaTooLarge, UnsupportedRangeError)
        assert not issubclass(LambdaTooLarge, DomainError)

    @pytest.mark.parametrize("lam", [-1.0, math.nan, -math.inf])
    def test_bad_lambda(self, lam, counting_source):
        with pytest.raises(BadLambda):
            Poisson().sample(lam, source=counting_source)
        assert counting_source.total_calls == 0

    @pytest.mark.statistical
    @pytest.mark.parametrize("lam", [3.0, 16.5, 17.5, 250.0])
    def test_chi_squared_goodness_of_fit(self, lam, source):
        samples = Poisson().sample_many(100_000, lam, source=source)
        support = np.arange(samples.max() + 1)
        expected = stats.poisson.pmf(support, lam) * samples.size
        observed = np.bincount(samples, minlength=support.size)
        mask = expected > 5
        observed, expected = observed[mask], expected[mask]
        expected *= observed.sum() / expected.sum()
        _, pvalue = stats.chisquare(observed, expected)
        assert pvalue > 0.001


class TestPoissonMass:
    """Mass function checks against scipy.stats.poisson."""

    @pytest.mark.parametrize("lam,k", [(3.5, 0), (3.5, 2), (3.5, 10), (1000.0, 980), (0.01, 1)])
    def test_matches_scipy(self, lam, k):
        poisson = Poisson()
        np.testing.assert_allclose(poisson.ln_pmf(k, lam), stats.poisson.logpmf(k, lam), rtol=1e-9)
        np.testing.assert_allclose(poisson.pmf(k, lam), stats.poisson.pmf(k, lam), rtol=1e-8)

    def test_zero_rate(self):
        assert Poisson().pmf(0, 0.0) == 1.0
        assert Poisson().pmf(3, 0.0) == 0.0

    def test_mass_sums_to_one(self):
        total = math.fsum(Poisson().pmf(k, 7.0) for k in range(100))
        assert total == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize("k", [-1, 1.5])
    def test_k_out_of_range(self, k):
        with pytest.raises(KOutOfRange):
            Poisson().pmf(k, 2.0)
