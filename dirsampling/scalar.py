"""
Scalar, uniform-sphere and multivariate Gaussian samplers.

Every function takes the caller's ``numpy.random.Generator`` explicitly; the
module keeps no random state of its own.
"""

from __future__ import annotations

import numpy as np

from .errors import InvalidInputError
from .geometry import recompose_tensor

# relative tolerance below which negative eigenvalues are treated as rounding noise
EIGENVALUE_TOLERANCE = 1e-10


def check_random_state(seed: int | np.random.Generator | None) -> np.random.Generator:
    """
    Turn seed into a numpy Generator.

    Parameters
    ----------
    seed : int, np.random.Generator or None
        If a Generator is passed it is returned unchanged, otherwise a new
        default_rng is built from the seed.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    assert seed is None or isinstance(seed, (int, np.integer)), (
        f"seed must be None, an integer or a Generator, got {type(seed)}"
    )
    return np.random.default_rng(seed)


def sample_uniform(a: float, b: float, generator: np.random.Generator) -> float:
    """Draw from the half-open interval [a, b)."""
    return float(generator.uniform(a, b))


def sample_bernoulli(p: float, generator: np.random.Generator) -> int:
    """Returns 1 with probability p and 0 otherwise."""
    return int(generator.binomial(1, p))


def sample_gaussian(mean: float, std: float, generator: np.random.Generator) -> float:
    """Draw from N(mean, std**2)."""
    return float(generator.normal(mean, std))


def sample_uniform_on_sphere(generator: np.random.Generator) -> np.ndarray:
    """
    Sample a point uniformly on the unit 2-sphere (Marsaglia, 1972).

    Parameters
    ----------
    generator : np.random.Generator
        Random number generator.

    Returns
    -------
    np.ndarray, shape=(3,)
        Unit vector.
    """
    sq_sum = 2.0
    while sq_sum > 1.0:
        u = sample_uniform(-1.0, 1.0, generator)
        v = sample_uniform(-1.0, 1.0, generator)
        sq_sum = u * u + v * v

    factor = 2.0 * np.sqrt(1.0 - sq_sum)
    return np.array([u * factor, v * factor, 1.0 - 2.0 * sq_sum])


def _matrix_square_root(covariance: np.ndarray) -> np.ndarray:
    eigenvalues, eigenvectors = np.linalg.eigh(covariance)
    scale = max(float(np.max(np.abs(eigenvalues))), 1.0)
    if np.any(eigenvalues < -EIGENVALUE_TOLERANCE * scale):
        raise InvalidInputError(
            f"covariance matrix must be positive semi-definite, got eigenvalues {eigenvalues}"
        )
    return recompose_tensor(np.sqrt(np.clip(eigenvalues, 0.0, None)), eigenvectors)


def sample_multivariate_gaussian(mean: np.ndarray, matrix: np.ndarray,
                                 generator: np.random.Generator,
                                 is_covariance: bool = True) -> np.ndarray:
    """
    Sample a Gaussian vector mean + M z with z ~ N(0, I).

    Parameters
    ----------
    mean : np.ndarray, shape=(n,)
        Mean vector.
    matrix : np.ndarray, shape=(n, n)
        Symmetric covariance matrix, or its square root M when
        ``is_covariance`` is False.
    generator : np.random.Generator
        Random number generator.
    is_covariance : bool, optional
        Whether ``matrix`` is a covariance (default) or a standard-deviation
        matrix.

    Returns
    -------
    np.ndarray, shape=(n,)
        Sampled vector.

    Raises
    ------
    InvalidInputError
        If shapes do not match or the covariance has negative eigenvalues.
    """
    mean = np.asarray(mean, dtype=np.float64)
    matrix = np.asarray(matrix, dtype=np.float64)
    if mean.ndim != 1:
        raise InvalidInputError(f"mean must be a vector, got shape {mean.shape}")
    n = mean.shape[0]
    if matrix.shape != (n, n):
        raise InvalidInputError(
            f"matrix must have shape ({n}, {n}) to match mean, got {matrix.shape}"
        )

    std_matrix = _matrix_square_root(matrix) if is_covariance else matrix
    z = generator.standard_normal(n)
    return mean + std_matrix @ z
