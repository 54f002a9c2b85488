"""Tests for the multivariate normal distribution and its Cholesky factorization."""

import math

import numpy as np
import pytest
from scipy import stats

from variates import MultivariateNormal
from variates.distributions import cholesky_in_place
from variates.exceptions import CovarianceNotSymmetric, NotPositiveDefinite, ShapeMismatch

COV = np.array(
    [
        [4.0, 1.2, -0.6],
        [1.2, 2.0, 0.3],
        [-0.6, 0.3, 1.0],
    ]
)
MU = np.array([1.0, -2.0, 0.5])


class TestCholesky:
    """Tests for cholesky_in_place()."""

    def test_matches_numpy(self):
        a = COV.copy()
        factor = cholesky_in_place(a)
        assert factor is a
        np.testing.assert_allclose(factor, np.linalg.cholesky(COV), rtol=1e-12, atol=1e-15)
        np.testing.assert_allclose(factor @ factor.T, COV, rtol=1e-12)

    def test_upper_triangle_zeroed(self):
        factor = cholesky_in_place(COV.copy())
        assert np.all(np.triu(factor, k=1) == 0.0)

    @pytest.mark.parametrize(
        "matrix",
        [
            [[1.0, 2.0], [2.0, 1.0]],
            [[0.0, 0.0], [0.0, 0.0]],
            [[-1.0]],
        ],
    )
    def test_not_positive_definite(self, matrix):
        with pytest.raises(NotPositiveDefinite):
            cholesky_in_place(np.array(matrix))


class TestMultivariateNormalSampling:
    """Sampling checks."""

    def test_moments(self, source):
        n = 20_000
        samples = MultivariateNormal().sample_many(n, MU, COV, source=source)
        assert samples.shape == (n, 3)
        assert np.all(np.abs(samples.mean(axis=0) - MU) < 5 * np.sqrt(np.diag(COV) / n))
        np.testing.assert_allclose(np.cov(samples, rowvar=False), COV, atol=0.25)

    def test_affine_transform_of_normals(self, replay_source):
        src = replay_source(normals=[1.0, -1.0, 2.0])
        x = MultivariateNormal().sample(MU, COV, source=src)
        expected = MU + np.linalg.cholesky(COV) @ np.array([1.0, -1.0, 2.0])
        np.testing.assert_allclose(x, expected, rtol=1e-12)

    def test_one_dimensional(self, replay_source):
        x = MultivariateNormal().sample([3.0], [[4.0]], source=replay_source(normals=[0.5]))
        np.testing.assert_allclose(x, [4.0])

    def test_covariance_untouched_by_default(self, source):
        cov = COV.copy()
        MultivariateNormal().sample(MU, cov, source=source)
        np.testing.assert_array_equal(cov, COV)

    def test_overwrite_cov(self, source):
        cov = COV.copy()
        MultivariateNormal(overwrite_cov=True).sample(MU, cov, source=source)
        np.testing.assert_allclose(cov, np.linalg.cholesky(COV), rtol=1e-12, atol=1e-15)


class TestMultivariateNormalErrors:
    """Validation happens before any deviate is drawn."""

    def test_not_positive_definite_consumes_nothing(self, counting_source):
        with pytest.raises(NotPositiveDefinite):
            MultivariateNormal().sample([0.0, 0.0], [[1.0, 2.0], [2.0, 1.0]], source=counting_source)
        assert counting_source.total_calls == 0

    def test_not_symmetric(self, source):
        with pytest.raises(CovarianceNotSymmetric):
            MultivariateNormal().sample([0.0, 0.0], [[1.0, 0.5], [0.0, 1.0]], source=source)

    @pytest.mark.parametrize(
        "mu,cov",
        [
            ([[0.0, 0.0]], np.eye(2)),
            ([], np.eye(0)),
            ([0.0, 0.0], np.eye(3)),
            ([0.0, 0.0, 0.0], [1.0, 1.0, 1.0]),
        ],
    )
    def test_shape_mismatch(self, mu, cov, source):
        with pytest.raises(ShapeMismatch):
            MultivariateNormal().sample(mu, cov, source=source)

    def test_not_positive_definite_is_arithmetic_error(self, source):
        with pytest.raises(ArithmeticError):
            MultivariateNormal().sample([0.0], [[-1.0]], source=source)


class TestMultivariateNormalDensity:
    """Density checks against scipy.stats.multivariate_normal."""

    @pytest.mark.parametrize("x", [[1.0, -2.0, 0.5], [0.0, 0.0, 0.0], [3.5, 1.0, -2.0]])
    def test_ln_pdf_matches_scipy(self, x):
        expected = stats.multivariate_normal.logpdf(x, MU, COV)
        np.testing.assert_allclose(MultivariateNormal().ln_pdf(x, MU, COV), expected, rtol=1e-10)

    def test_pdf_is_exp_ln_pdf(self):
        dist = MultivariateNormal()
        x = [0.5, -1.0, 0.0]
        assert dist.pdf(x, MU, COV) == pytest.approx(math.exp(dist.ln_pdf(x, MU, COV)))

    def test_ln_pdf_shape_mismatch(self):
        with pytest.raises(ShapeMismatch):
            MultivariateNormal().ln_pdf([0.0, 0.0], MU, COV)
