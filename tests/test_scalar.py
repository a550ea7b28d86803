##################
#
# TESTS FOR THE SCALAR, UNIFORM SPHERE AND
# MULTIVARIATE GAUSSIAN SAMPLERS
#
##################

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from dirsampling import (InvalidInputError, check_random_state, sample_bernoulli,
                         sample_gaussian, sample_multivariate_gaussian,
                         sample_uniform, sample_uniform_on_sphere)


def test_check_random_state():
    rng = np.random.default_rng(3)
    assert check_random_state(rng) is rng
    assert isinstance(check_random_state(None), np.random.Generator)
    a = check_random_state(5).random(4)
    b = check_random_state(5).random(4)
    assert_allclose(a, b)


@pytest.mark.parametrize('a, b', [(0.0, 1.0), (-3.0, 2.0), (0.0, 2 * np.pi)])
def test_uniform_bounds(generator, a, b):
    values = np.array([sample_uniform(a, b, generator) for _ in range(5000)])
    assert np.all(values >= a)
    assert np.all(values < b)
    assert abs(values.mean() - (a + b) / 2) < 0.05 * (b - a)


@pytest.mark.parametrize('p', [0.0, 0.3, 0.9, 1.0])
def test_bernoulli(generator, p):
    values = np.array([sample_bernoulli(p, generator) for _ in range(10000)])
    assert set(np.unique(values)) <= {0, 1}
    assert abs(values.mean() - p) < 0.02


def test_bernoulli_invalid_probability(generator):
    with pytest.raises(ValueError):
        sample_bernoulli(1.5, generator)


def test_gaussian_moments(generator):
    values = np.array([sample_gaussian(2.0, 0.5, generator) for _ in range(20000)])
    assert abs(values.mean() - 2.0) < 0.02
    assert abs(values.std() - 0.5) < 0.02


def test_gaussian_zero_std(generator):
    assert sample_gaussian(1.5, 0.0, generator) == 1.5


def test_uniform_on_sphere_norm(generator):
    for _ in range(2000):
        x = sample_uniform_on_sphere(generator)
        assert x.shape == (3,)
        assert abs(np.linalg.norm(x) - 1.0) < 1e-9


def test_uniform_on_sphere_is_uniform(generator):
    samples = np.array([sample_uniform_on_sphere(generator) for _ in range(5000)])
    # every coordinate of a uniform point on the 2-sphere is U(-1, 1)
    for coordinate in samples.T:
        assert stats.kstest(coordinate, stats.uniform(loc=-1, scale=2).cdf).pvalue > 1e-3
    assert_allclose(samples.mean(axis=0), np.zeros(3), atol=0.05)


def test_uniform_on_sphere_reproducible():
    a = sample_uniform_on_sphere(np.random.default_rng(9))
    b = sample_uniform_on_sphere(np.random.default_rng(9))
    assert_allclose(a, b)


### MULTIVARIATE GAUSSIAN

@pytest.mark.parametrize('n_dim', [1, 3, 5])
def test_identity_covariance_gives_standard_normals(generator, n_dim):
    n_samples = 20000
    samples = np.array([
        sample_multivariate_gaussian(np.zeros(n_dim), np.eye(n_dim), generator)
        for _ in range(n_samples)
    ])
    assert samples.shape == (n_samples, n_dim)
    assert_allclose(samples.mean(axis=0), np.zeros(n_dim), atol=0.04)
    assert_allclose(np.atleast_2d(np.cov(samples.T)), np.eye(n_dim), atol=0.05)


def test_covariance_mode(generator):
    mean = np.array([1.0, -2.0])
    covariance = np.array([[2.0, 0.6], [0.6, 1.0]])
    samples = np.array([
        sample_multivariate_gaussian(mean, covariance, generator) for _ in range(20000)
    ])
    assert_allclose(samples.mean(axis=0), mean, atol=0.05)
    assert_allclose(np.cov(samples.T), covariance, atol=0.08)


def test_standard_deviation_mode(generator):
    std_matrix = np.array([[1.0, 0.0], [0.5, 0.5]])
    samples = np.array([
        sample_multivariate_gaussian(np.zeros(2), std_matrix, generator, is_covariance=False)
        for _ in range(20000)
    ])
    assert_allclose(np.cov(samples.T), std_matrix @ std_matrix.T, atol=0.05)


def test_singular_covariance(generator):
    covariance = np.array([[1.0, 1.0], [1.0, 1.0]])
    samples = np.array([
        sample_multivariate_gaussian(np.zeros(2), covariance, generator) for _ in range(100)
    ])
    assert np.all(np.isfinite(samples))
    assert_allclose(samples[:, 0], samples[:, 1], atol=1e-6)


def test_negative_covariance_raises(generator):
    with pytest.raises(InvalidInputError):
        sample_multivariate_gaussian(np.zeros(2), np.array([[1.0, 0.0], [0.0, -1.0]]), generator)


def test_shape_mismatch_raises(generator):
    with pytest.raises(InvalidInputError):
        sample_multivariate_gaussian(np.zeros(3), np.eye(2), generator)


def test_scalar_mean_raises(generator):
    with pytest.raises(InvalidInputError):
        sample_multivariate_gaussian(np.float64(0.0), np.eye(1), generator)
