"""
Von Mises-Fisher sampling on the 2-sphere.

Both samplers draw the cosine W of the angle to the canonical axis (0, 0, 1),
pick a uniform azimuth and rotate the resulting point onto the mean
direction. ``sample_vmf`` is Wood's (1994) rejection sampler,
``sample_vmf_stable`` inverts the 3D marginal of W directly and should be
preferred for large kappa.
"""

from __future__ import annotations

import logging
from math import log, pi

import numpy as np

from .adapters import directional
from .errors import InvalidInputError
from .geometry import CANONICAL_AXIS, cartesian_to_spherical, rotation_matrix_from_vectors
from .scalar import sample_uniform, sample_uniform_on_sphere

logger = logging.getLogger(__name__)

NORM_TOLERANCE = 1e-6


def check_mean_direction(mean_direction: np.ndarray) -> None:
    """
    Verify that mean_direction is a unit 3-vector.

    Raises
    ------
    InvalidInputError
        If mean_direction is not of shape (3,) or its norm differs from 1 by
        more than 1e-6.
    """
    if mean_direction.shape != (3,):
        raise InvalidInputError(
            f"mean direction must be a 3-vector, got shape {mean_direction.shape}"
        )
    _, _, norm = cartesian_to_spherical(mean_direction)
    # written so that a NaN norm fails
    if not abs(norm - 1.0) <= NORM_TOLERANCE:
        raise InvalidInputError(
            f"mean direction must have unit norm, got norm {norm}"
        )


def check_concentration(kappa: float, non_negative: bool = True) -> None:
    """
    Verify that kappa is finite, and non-negative unless non_negative is False.

    Raises
    ------
    InvalidInputError
        If kappa is NaN, infinite, or negative when it must not be.
    """
    if not np.isfinite(kappa):
        raise InvalidInputError(f"concentration must be finite, got kappa={kappa}")
    if non_negative and kappa < 0:
        raise InvalidInputError(f"VMF concentration must be non-negative, got kappa={kappa}")


def _place_on_sphere(w: float, mean_direction: np.ndarray,
                     generator: np.random.Generator) -> np.ndarray:
    rotation = rotation_matrix_from_vectors(CANONICAL_AXIS, mean_direction)
    theta = sample_uniform(0.0, 2.0 * pi, generator)
    radius = np.sqrt(max(0.0, 1.0 - w * w))
    canonical = np.array([radius * np.cos(theta), radius * np.sin(theta), w])
    return rotation @ canonical


@directional
def sample_vmf(kappa: float, mean_direction: np.ndarray,
               generator: np.random.Generator) -> np.ndarray:
    """
    Sample from the von Mises-Fisher distribution with Wood's rejection algorithm.

    Parameters
    ----------
    kappa : float
        Concentration parameter (kappa >= 0). kappa == 0 gives a uniform sample.
    mean_direction : array-like, shape=(3,)
        Mean direction (unit vector).
    generator : np.random.Generator
        Random number generator.

    Returns
    -------
    array-like, shape=(3,)
        Unit vector, in the container type of mean_direction.

    Raises
    ------
    InvalidInputError
        If mean_direction is not a unit 3-vector or kappa is negative or not
        finite.
    """
    check_mean_direction(mean_direction)
    check_concentration(kappa)
    if kappa == 0:
        return sample_uniform_on_sphere(generator)

    tmp = np.hypot(kappa, 1.0)
    # equal to tmp - kappa without the cancellation for large kappa
    b = 1.0 / (tmp + kappa)
    a = (1.0 + kappa + tmp) / 2.0
    d = 4.0 * a * b / (1.0 + b) - 2.0 * log(2.0)

    n_trials = 0
    while True:
        n_trials += 1
        # Beta(1, 1) for the 2-sphere
        z = generator.beta(1.0, 1.0)
        u = sample_uniform(0.0, 1.0, generator)
        tmp = 1.0 - (1.0 - b) * z
        t = 2.0 * a * b / tmp
        w = (1.0 - (1.0 + b) * z) / tmp
        with np.errstate(divide="ignore"):
            if 2.0 * np.log(t) - t + d >= np.log(u):
                break

    logger.debug(f"VMF rejection sampler accepted after {n_trials} trials (kappa={kappa})")
    return _place_on_sphere(w, mean_direction, generator)


@directional
def sample_vmf_stable(kappa: float, mean_direction: np.ndarray,
                      generator: np.random.Generator) -> np.ndarray:
    """
    Sample from the von Mises-Fisher distribution by inverse transform.

    Draws xi ~ U(0, 1) and sets
    W = 1 + (log(xi) + log(1 - (xi - 1) exp(-2 kappa) / xi)) / kappa,
    computed as 1 + log1p((1 - xi) expm1(-2 kappa)) / kappa, which keeps full
    precision for tiny kappa. There is no rejection loop and no exp(kappa)
    overflow.

    Parameters
    ----------
    kappa : float
        Concentration parameter (kappa >= 0).
    mean_direction : array-like, shape=(3,)
        Mean direction (unit vector).
    generator : np.random.Generator
        Random number generator.

    Returns
    -------
    array-like, shape=(3,)
        Unit vector, in the container type of mean_direction.
    """
    check_mean_direction(mean_direction)
    check_concentration(kappa)
    if kappa == 0:
        return sample_uniform_on_sphere(generator)

    xi = sample_uniform(0.0, 1.0, generator)
    with np.errstate(divide="ignore"):
        w = 1.0 + np.log1p((1.0 - xi) * np.expm1(-2.0 * kappa)) / kappa
    # xi == 0 with expm1(-2 kappa) rounding to -1 gives -inf
    w = max(-1.0, float(w))
    return _place_on_sphere(w, mean_direction, generator)
