##################
#
# TESTS FOR THE VON MISES-FISHER SAMPLERS
#
##################

import numpy as np
import pytest
import torch
from numpy.testing import assert_allclose
from scipy import stats

from dirsampling import InvalidInputError, SphericalStatistics, sample_vmf, sample_vmf_stable
from utility_functions import draw, make_direction, vmf_mean_resultant_length

SAMPLERS = [sample_vmf, sample_vmf_stable]


def vmf_cosine_cdf(kappa):
    """CDF of the cosine W to the mean direction for the 3D VMF distribution."""
    def cdf(w):
        return (np.exp(kappa * (w - 1)) - np.exp(-2 * kappa)) / (1 - np.exp(-2 * kappa))
    return cdf


@pytest.mark.parametrize('sampler', SAMPLERS)
@pytest.mark.parametrize('kappa', [0.0, 0.1, 1.0, 10.0, 100.0, 1000.0])
def test_unit_norm(generator, sampler, kappa):
    mu = make_direction('random', seed=4)
    for _ in range(200):
        x = sampler(kappa, mu, generator)
        assert x.shape == (3,)
        assert abs(np.linalg.norm(x) - 1.0) < 1e-6


@pytest.mark.parametrize('sampler', SAMPLERS)
@pytest.mark.parametrize('direction_type', ['north', 'south', 'x', 'random'])
def test_mean_direction_converges(generator, sampler, direction_type):
    kappa = 10.0
    mu = make_direction(direction_type, seed=11)
    samples = draw(sampler, kappa, mu, 20000, generator)
    statistics = SphericalStatistics(samples)

    assert np.dot(statistics.mean_vector, mu) > 0.999
    assert abs(statistics.mean_resultant_length - vmf_mean_resultant_length(kappa)) < 0.01


@pytest.mark.parametrize('sampler', SAMPLERS)
@pytest.mark.parametrize('kappa', [0.5, 5.0, 30.0])
def test_cosine_distribution(generator, sampler, kappa):
    mu = make_direction('random', seed=21)
    samples = draw(sampler, kappa, mu, 5000, generator)
    w = samples @ mu
    assert stats.kstest(w, vmf_cosine_cdf(kappa)).pvalue > 1e-3


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_concentration_increases_with_kappa(generator, sampler):
    mu = make_direction('random', seed=8)
    lengths = [
        SphericalStatistics(draw(sampler, kappa, mu, 5000, generator)).mean_resultant_length
        for kappa in [1.0, 5.0, 20.0, 100.0]
    ]
    assert np.all(np.diff(lengths) > 0)


def test_stable_variant_concentrated_at_pole():
    generator = np.random.default_rng(50)
    mu = make_direction('north')
    samples = draw(sample_vmf_stable, 50.0, mu, 1000, generator)
    assert samples[:, 2].mean() > 0.85
    assert np.mean(samples[:, 2] > 0.9) > 0.9


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_large_kappa(generator, sampler):
    mu = make_direction('random', seed=6)
    for _ in range(50):
        x = sampler(1e9, mu, generator)
        assert np.all(np.isfinite(x))
        assert np.dot(x, mu) > 0.99


@pytest.mark.parametrize('sampler', SAMPLERS)
@pytest.mark.parametrize('kappa', [1e-12, 1e-17])
def test_tiny_kappa_is_uniform(generator, sampler, kappa):
    mu = make_direction('north')
    w = draw(sampler, kappa, mu, 4000, generator)[:, 2]
    assert abs(w.mean()) < 0.05
    assert stats.kstest(w, stats.uniform(loc=-1, scale=2).cdf).pvalue > 1e-3


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_large_kappa_spread(generator, sampler):
    # kappa (1 - W) is close to Exp(1) for large kappa
    kappa = 1e7
    mu = make_direction('north')
    w = draw(sampler, kappa, mu, 5000, generator)[:, 2]
    assert abs(kappa * np.mean(1.0 - w) - 1.0) < 0.05


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_non_unit_mean_direction_raises(generator, sampler):
    with pytest.raises(InvalidInputError):
        sampler(10.0, np.array([0.0, 0.0, 0.5]), generator)
    with pytest.raises(InvalidInputError):
        sampler(10.0, np.array([0.0, 1.0]), generator)


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_negative_kappa_raises(generator, sampler):
    with pytest.raises(InvalidInputError):
        sampler(-1.0, make_direction('north'), generator)


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_nan_mean_direction_raises(generator, sampler):
    with pytest.raises(InvalidInputError):
        sampler(10.0, np.array([np.nan, 0.0, 0.0]), generator)


@pytest.mark.parametrize('sampler', SAMPLERS)
@pytest.mark.parametrize('kappa', [np.nan, np.inf])
def test_non_finite_kappa_raises(generator, sampler, kappa):
    with pytest.raises(InvalidInputError):
        sampler(kappa, make_direction('north'), generator)


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_invalid_input_does_not_advance_generator(sampler):
    generator = np.random.default_rng(2)
    with pytest.raises(InvalidInputError):
        sampler(10.0, np.array([0.5, 0.0, 0.0]), generator)
    assert_allclose(generator.random(3), np.random.default_rng(2).random(3))


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_reproducible(sampler):
    mu = make_direction('random', seed=3)
    a = draw(sampler, 7.0, mu, 100, np.random.default_rng(99))
    b = draw(sampler, 7.0, mu, 100, np.random.default_rng(99))
    assert_allclose(a, b)


@pytest.mark.parametrize('sampler', SAMPLERS)
def test_container_types(generator, sampler):
    as_list = sampler(5.0, [0.0, 1.0, 0.0], generator)
    assert isinstance(as_list, list)
    assert len(as_list) == 3

    as_tuple = sampler(5.0, (0.0, 1.0, 0.0), generator)
    assert isinstance(as_tuple, tuple)

    mu = torch.tensor([0.0, 1.0, 0.0], dtype=torch.float32)
    as_tensor = sampler(5.0, mu, generator)
    assert isinstance(as_tensor, torch.Tensor)
    assert as_tensor.dtype == torch.float32
    assert abs(float(torch.linalg.norm(as_tensor)) - 1.0) < 1e-5
