"""Tests for the Beta distribution."""

import math

import numpy as np
import pytest
from scipy import stats

from variates import Beta
from variates.exceptions import AlphaLessThanZero, BetaLessThanZero, XOutOfRange

N_SAMPLES = 20_000


@pytest.mark.parametrize("alpha,beta", [(0.5, 0.5), (0.2, 0.9), (2.0, 3.0), (0.5, 4.0), (50.0, 20.0)])
def test_moments(alpha, beta, source):
    samples = Beta().sample_many(N_SAMPLES, alpha, beta, source=source)
    mean = alpha / (alpha + beta)
    var = alpha * beta / ((alpha + beta) ** 2 * (alpha + beta + 1.0))
    assert np.all((samples >= 0.0) & (samples <= 1.0))
    assert abs(samples.mean() - mean) < 5 * math.sqrt(var / N_SAMPLES)


def test_johnk_accepts_first_candidate(replay_source):
    # x = y = 0.25 ** 2, so x / (x + y) = 0.5
    src = replay_source(uniforms=[0.25, 0.25])
    assert Beta().sample(0.5, 0.5, source=src) == pytest.approx(0.5)


def test_johnk_rejects_until_inside(replay_source):
    src = replay_source(uniforms=[0.9, 0.9, 0.04, 0.01])
    # second pair: x = 0.0016, y = 0.0001
    assert Beta().sample(0.5, 0.5, source=src) == pytest.approx(0.0016 / 0.0017)


def test_tiny_shapes_stay_in_unit_interval(source):
    samples = Beta().sample_many(500, 1e-3, 2e-3, source=source)
    assert np.all(np.isfinite(samples))
    assert np.all((samples >= 0.0) & (samples <= 1.0))


@pytest.mark.parametrize("alpha,beta", [(0.5, 0.5), (2.0, 3.0), (30.0, 4.0), (1.0, 1.0)])
@pytest.mark.parametrize("x", [0.1, 0.5, 0.93])
def test_density_matches_scipy(alpha, beta, x):
    dist = Beta()
    np.testing.assert_allclose(
        dist.ln_pdf(x, alpha, beta), stats.beta.logpdf(x, alpha, beta), rtol=1e-9, atol=1e-9
    )
    np.testing.assert_allclose(dist.pdf(x, alpha, beta), stats.beta.pdf(x, alpha, beta), rtol=1e-9)


def test_density_at_endpoints():
    dist = Beta()
    assert dist.pdf(0.0, 1.0, 3.0) == pytest.approx(3.0)
    assert dist.pdf(1.0, 2.0, 2.0) == 0.0


@pytest.mark.parametrize("x", [-0.1, 1.1, math.nan])
def test_x_out_of_range(x):
    with pytest.raises(XOutOfRange):
        Beta().pdf(x, 2.0, 2.0)
    with pytest.raises(XOutOfRange):
        Beta().ln_pdf(x, 2.0, 2.0)


def test_parameter_errors(counting_source):
    with pytest.raises(AlphaLessThanZero):
        Beta().sample(0.0, 1.0, source=counting_source)
    with pytest.raises(BetaLessThanZero):
        Beta().sample(1.0, -2.0, source=counting_source)
    assert counting_source.total_calls == 0


@pytest.mark.statistical
def test_ks_against_scipy(source):
    samples = Beta().sample_many(50_000, 0.7, 0.4, source=source)
    _, pvalue = stats.kstest(samples, stats.beta(0.7, 0.4).cdf)
    assert pvalue > 0.001
