"""
Directional sampler front end.

This module contains the batch sampling class used by the Monte-Carlo code:
it owns a random generator, a mean direction and a concentration and draws
any number of samples from one of the directional distributions.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

import numpy as np
import torch
from tqdm import tqdm

from .adapters import as_vector, restore_type
from .geometry import CANONICAL_AXIS
from .scalar import check_random_state, sample_uniform_on_sphere
from .vmf import check_mean_direction, sample_vmf, sample_vmf_stable
from .watson import sample_watson


class Distribution(Enum):
    """Enum for the available directional distributions."""
    VMF = "vmf"
    VMF_STABLE = "vmf_stable"
    WATSON = "watson"
    UNIFORM = "uniform"


def _uniform(kappa: float, mean_direction: np.ndarray,
             generator: np.random.Generator) -> np.ndarray:
    return sample_uniform_on_sphere(generator)


SAMPLERS: dict[Distribution, Callable[[float, np.ndarray, np.random.Generator], np.ndarray]] = {
    Distribution.VMF: sample_vmf,
    Distribution.VMF_STABLE: sample_vmf_stable,
    Distribution.WATSON: sample_watson,
    Distribution.UNIFORM: _uniform,
}


def sample_directions(distribution: Distribution | str, kappa: float, mu: np.ndarray,
                      num_samples: int, generator: np.random.Generator,
                      progress: bool = False) -> np.ndarray:
    """
    Draw num_samples unit vectors from a directional distribution.

    Parameters
    ----------
    distribution : Distribution or str
        Distribution to sample from.
    kappa : float
        Concentration parameter.
    mu : np.ndarray, shape=(3,)
        Mean direction (unit vector).
    num_samples : int
        Number of samples.
    generator : np.random.Generator
        Random number generator, advanced by every draw.
    progress : bool, optional
        Show a tqdm progress bar.

    Returns
    -------
    np.ndarray, shape=(num_samples, 3)
        Samples, one per row.
    """
    sampler = SAMPLERS[Distribution(distribution)]
    mu = as_vector(mu)
    check_mean_direction(mu)

    samples = np.empty((num_samples, 3))
    for i in tqdm(range(num_samples), desc="Sampling", disable=not progress):
        samples[i] = sampler(kappa, mu, generator)
    return samples


class DirectionalSampler:
    """
    Sampler for directional distributions on the 2-sphere.

    Parameters
    ----------
    distribution : Distribution or str
        Distribution to sample from.
    kappa : float, optional
        Concentration parameter. Must be non-negative for the VMF variants;
        any real value is accepted for Watson.
    mu : array-like or None, optional
        Mean direction (unit vector). Defaults to (0, 0, 1).
    seed : int, np.random.Generator or None, optional
        Random seed for reproducibility. A Generator is used as is.

    Attributes
    ----------
    mu : np.ndarray or torch.Tensor
        Mean direction, in the type it was given.
    random_state : np.random.Generator
        Generator advanced by every draw.

    Examples
    --------
    >>> sampler = DirectionalSampler("watson", kappa=-20.0, seed=42)
    >>> samples = sampler.sample(1000, mu=np.array([1.0, 0.0, 0.0]))
    >>> samples.shape
    (1000, 3)
    """

    def __init__(self, distribution: Distribution | str, kappa: float = 10.0,
                 mu: Any | None = None, seed: int | np.random.Generator | None = None):
        self.distribution = Distribution(distribution)
        self.kappa = kappa
        self.mu = None
        self.set_mu(CANONICAL_AXIS.copy() if mu is None else mu)
        self.random_state = check_random_state(seed)

    def set_seed(self, seed: int | np.random.Generator | None):
        """Reset the random generator."""
        self.random_state = check_random_state(seed)

    def set_mu(self, mu: Any):
        """Set and validate the mean direction."""
        check_mean_direction(as_vector(mu))
        self.mu = mu

    def set_kappa(self, kappa: float):
        """Set the concentration parameter."""
        self.kappa = kappa

    def sample(self, num_samples: int, mu: Any | None = None, kappa: float | None = None,
               progress: bool = False) -> np.ndarray | torch.Tensor:
        """
        Draw samples from the distribution.

        Parameters
        ----------
        num_samples : int
            Number of samples to generate.
        mu : array-like or None, optional
            If provided, overrides the current mean direction.
        kappa : float or None, optional
            If provided, overrides the current concentration.
        progress : bool, optional
            Show a progress bar.

        Returns
        -------
        np.ndarray or torch.Tensor, shape=(num_samples, 3)
            A tensor if the mean direction is a tensor, an array otherwise.
        """
        if mu is not None:
            self.set_mu(mu)
        if kappa is not None:
            self.set_kappa(kappa)

        samples = sample_directions(self.distribution, self.kappa, as_vector(self.mu),
                                    num_samples, self.random_state, progress=progress)
        if isinstance(self.mu, torch.Tensor):
            return restore_type(samples, self.mu)
        return samples
