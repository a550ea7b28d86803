"""
Watson distribution sampling on the 2-sphere.

Follows Fisher, Lewis & Embleton, Statistical Analysis of Spherical Data
(1993), p. 59. The cosine S to the canonical axis is drawn according to the
regime of kappa, the point is completed with a uniform azimuth and rotated
about the axis orthogonal to (0, 0, 1) and the mean direction.

The bipolar and girdle steps of Fisher et al. only produce S in [0, 1], i.e.
samples on the hemisphere around the mean axis. Here the sign of S is then
drawn with a fair Bernoulli variate (one extra generator draw), so the
samples cover both hemispheres as the axially symmetric Watson density
requires.
"""

from __future__ import annotations

import logging
from math import atan, exp, log, pi, sqrt, tan

import numpy as np

from .adapters import directional
from .errors import NumericalConsistencyError
from .geometry import (CANONICAL_AXIS, cartesian_to_spherical, compute_norm,
                       normalize, normalized_cross, rotate_around_axis)
from .scalar import sample_bernoulli, sample_uniform
from .vmf import check_concentration, check_mean_direction

logger = logging.getLogger(__name__)

KAPPA_THRESHOLD = 1e-6
OUTPUT_NORM_TOLERANCE = 1e-4


def _sample_bipolar(kappa: float, generator: np.random.Generator) -> float:
    n_trials = 0
    while True:
        n_trials += 1
        u = sample_uniform(0.0, 1.0, generator)
        s = 1.0 + log(u + (1.0 - u) * exp(-kappa)) / kappa
        v = sample_uniform(0.0, 1.0, generator)
        # log(v) diverges near 0
        if v < KAPPA_THRESHOLD or log(v) <= kappa * s * (s - 1.0):
            break
    logger.debug(f"Watson bipolar sampler accepted after {n_trials} trials (kappa={kappa})")
    return s


def _sample_girdle(kappa: float, generator: np.random.Generator) -> float:
    c1 = sqrt(abs(kappa))
    c2 = atan(c1)
    n_trials = 0
    while True:
        n_trials += 1
        u = sample_uniform(0.0, 1.0, generator)
        v = sample_uniform(0.0, 1.0, generator)
        s = tan(c2 * u) / c1
        t = kappa * s * s
        if v <= (1.0 - t) * exp(t):
            break
    logger.debug(f"Watson girdle sampler accepted after {n_trials} trials (kappa={kappa})")
    return s


def _rotation_axis(mean_direction: np.ndarray) -> np.ndarray:
    axis = normalized_cross(CANONICAL_AXIS, mean_direction)
    if compute_norm(axis) == 0:
        # mean direction on the z axis, any horizontal axis works
        axis = np.array([1.0, 0.0, 0.0])
    return axis


@directional
def sample_watson(kappa: float, mean_direction: np.ndarray,
                  generator: np.random.Generator) -> np.ndarray:
    """
    Sample from the Watson distribution.

    Parameters
    ----------
    kappa : float
        Concentration parameter. kappa > 1e-6 gives a bipolar distribution
        concentrated around +/- mean_direction, kappa < -1e-6 a girdle
        around the great circle orthogonal to it, anything in between the
        uniform distribution.
    mean_direction : array-like, shape=(3,)
        Mean axis (unit vector).
    generator : np.random.Generator
        Random number generator.

    Returns
    -------
    array-like, shape=(3,)
        Unit vector, in the container type of mean_direction.

    Raises
    ------
    InvalidInputError
        If mean_direction is not a unit 3-vector or kappa is not finite.
    NumericalConsistencyError
        If the rotated sample is not on the unit sphere.
    """
    check_mean_direction(mean_direction)
    check_concentration(kappa, non_negative=False)
    rotation_axis = _rotation_axis(mean_direction)
    rotation_angle, _, _ = cartesian_to_spherical(mean_direction)

    if abs(kappa) > KAPPA_THRESHOLD:
        if kappa > 0:
            s = _sample_bipolar(kappa, generator)
        else:
            s = _sample_girdle(kappa, generator)
        # both envelopes only cover S in [0, 1], the density is even in S
        if sample_bernoulli(0.5, generator):
            s = -s
    else:
        s = np.cos(sample_uniform(0.0, pi, generator))

    phi = sample_uniform(0.0, 2.0 * pi, generator)
    radius = sqrt(max(0.0, 1.0 - s * s))
    canonical = np.array([radius * np.cos(phi), radius * np.sin(phi), s])

    result = rotate_around_axis(canonical, rotation_angle, rotation_axis)

    result_norm = compute_norm(result)
    if abs(result_norm - 1.0) > OUTPUT_NORM_TOLERANCE:
        logger.error(
            f"Watson sample off the unit sphere: norm={result_norm}, "
            f"mean direction={mean_direction}, kappa={kappa}"
        )
        raise NumericalConsistencyError(
            f"Watson sampler should generate points on the 2-sphere, got norm {result_norm}"
        )

    return normalize(result)
