"""
Directional Sampling Package

Samplers for scalar distributions, uniform directions, multivariate Gaussian
vectors and the von Mises-Fisher and Watson distributions on the 2-sphere.
"""

from .errors import InvalidInputError, NumericalConsistencyError
from .scalar import (check_random_state, sample_uniform, sample_bernoulli,
                     sample_gaussian, sample_uniform_on_sphere,
                     sample_multivariate_gaussian)
from .vmf import sample_vmf, sample_vmf_stable
from .watson import sample_watson
from .sampler import DirectionalSampler, Distribution, sample_directions
from .stats import SphericalStatistics
from .config import SamplingConfig

__version__ = "1.0.0"

__all__ = [
    'InvalidInputError',
    'NumericalConsistencyError',
    'check_random_state',
    'sample_uniform',
    'sample_bernoulli',
    'sample_gaussian',
    'sample_uniform_on_sphere',
    'sample_multivariate_gaussian',
    'sample_vmf',
    'sample_vmf_stable',
    'sample_watson',
    'DirectionalSampler',
    'Distribution',
    'sample_directions',
    'SphericalStatistics',
    'SamplingConfig',
]
